"""Catalog loading and item descriptions.

Catalogs are plain mappings (usually read from YAML) of the form::

    publishers:
      - slug: acme
        name: Acme Audio
        brand: Acme
        items:
          - slug: acme-filter
            name: Filter
            description: Resonant low-pass filter
            tags: [Filter]

Loading validates the invariants the engine relies on and raises
``CatalogError`` for anything it cannot accept.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from .types import Catalog, Item, Publisher

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data violates the catalog invariants."""


def _required(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise CatalogError(f"{where}: missing required field '{key}'")
    return value


def _optional(data: Dict[str, Any], key: str, where: str, default: str = "") -> str:
    value = data.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise CatalogError(f"{where}: field '{key}' must be a string")
    return value


def _tags(raw: Any, allowed: Optional[set[str]], where: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise CatalogError(f"{where}: tags must be a list")
    tags: List[str] = []
    for tag in raw:
        if not isinstance(tag, str):
            raise CatalogError(f"{where}: tag {tag!r} must be a string")
        if allowed is not None and tag not in allowed:
            raise CatalogError(f"{where}: tag '{tag}' is not an allowed tag")
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


def catalog_from_dict(data: Dict[str, Any], allowed_tags: Iterable[str] | None = None) -> Catalog:
    """Build a validated ``Catalog`` from a mapping."""

    allowed = set(allowed_tags) if allowed_tags is not None else None
    publishers: List[Publisher] = []
    items: List[Item] = []
    publisher_slugs: set[str] = set()

    for index, raw_publisher in enumerate(data.get("publishers") or []):
        where = f"publisher #{index}"
        if not isinstance(raw_publisher, dict):
            raise CatalogError(f"{where}: expected a mapping")
        slug = _required(raw_publisher, "slug", where)
        if slug in publisher_slugs:
            raise CatalogError(f"{where}: duplicate publisher slug '{slug}'")
        publisher_slugs.add(slug)
        name = _required(raw_publisher, "name", where)
        publisher = Publisher(slug=slug, name=name, brand=_optional(raw_publisher, "brand", where, name))
        publishers.append(publisher)

        item_slugs: set[str] = set()
        for position, raw_item in enumerate(raw_publisher.get("items") or []):
            if not isinstance(raw_item, dict):
                raise CatalogError(f"item {slug} #{position}: expected a mapping")
            item_slug = _required(raw_item, "slug", f"{where} ({slug})")
            item_where = f"item {slug}/{item_slug}"
            if item_slug in item_slugs:
                raise CatalogError(f"{item_where}: duplicate item slug")
            item_slugs.add(item_slug)
            items.append(
                Item(
                    publisher_slug=slug,
                    slug=item_slug,
                    name=_required(raw_item, "name", item_where),
                    description=_optional(raw_item, "description", item_where),
                    tags=_tags(raw_item.get("tags"), allowed, item_where),
                )
            )

    return Catalog(publishers=tuple(publishers), items=tuple(items))


def load_catalog(path: str | Path, allowed_tags: Iterable[str] | None = None) -> Catalog:
    """Load a catalog from a YAML file."""

    with Path(path).open("r", encoding="utf-8") as stream:
        try:
            data = yaml.safe_load(stream) or {}
        except yaml.YAMLError as exc:
            raise CatalogError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogError(f"{path}: expected a mapping at the top level")
    catalog = catalog_from_dict(data, allowed_tags)
    logger.info("Loaded %d items from %d publishers in %s", len(catalog.items), len(catalog.publishers), path)
    return catalog


def describe_item(publisher: Publisher, item: Item) -> str:
    """Tooltip text: brand and name, then the description on its own line."""

    text = f"{publisher.brand} {item.name}"
    if item.description:
        text += "\n" + item.description
    return text
