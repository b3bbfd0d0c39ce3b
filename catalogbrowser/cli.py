#!/usr/bin/env python3
"""catalogbrowser CLI: search a catalog and show facet availability."""

from __future__ import annotations

import argparse
import sys

from . import settings
from .engine.catalog import CatalogError, describe_item, load_catalog
from .engine.config import load_config
from .engine.index import BrowseSession


def cmd_search(args) -> int:
    """Print the visible items and the enabled facets for a query."""
    try:
        config = load_config(args.config)
        catalog = load_catalog(args.catalog, config.allowed_tags)
    except (CatalogError, ValueError, OSError) as e:
        print(f"  x {e}", file=sys.stderr)
        return 1

    session = BrowseSession(catalog, config=config)
    session.set_search(" ".join(args.query))
    if args.brand:
        session.toggle_brand(args.brand)
    if args.tag:
        session.toggle_tag(args.tag)
    result = session.result

    print(f"-- {result.labels['items']}:\n")
    if not result.items:
        print("  No matches.")
    for item in result.items:
        publisher = catalog.publisher_of(item)
        lines = describe_item(publisher, item).split("\n")
        print(f"  {lines[0]}  [{item.publisher_slug}/{item.slug}]")
        for line in lines[1:]:
            print(f"    {line}")
    print()

    for name, options in (("brands", result.facets.brands), ("tags", result.facets.tags)):
        enabled = [option for option in options if option.enabled]
        print(f"-- {result.labels[name]}:")
        for option in enabled:
            marker = "*" if option.active else " "
            print(f"  {marker} {option.value}")
        print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalogbrowser", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Search the catalog")
    p_search.add_argument("--catalog", default=settings.CATALOG_PATH, help="Catalog YAML file")
    p_search.add_argument("query", nargs="*", help="Search text")
    p_search.add_argument("--brand", default="", help="Brand filter")
    p_search.add_argument("--tag", default="", help="Tag filter")
    p_search.add_argument("--config", default=settings.CONFIG_PATH, help="Engine config YAML")
    p_search.set_defaults(func=cmd_search)
    return parser


def main(argv=None) -> int:
    settings.configure_logging()
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
