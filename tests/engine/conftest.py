"""Shared fixtures for engine tests."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import pytest

from catalogbrowser.engine.catalog import catalog_from_dict
from catalogbrowser.engine.config import load_config
from catalogbrowser.engine.types import Catalog

# (brand, item name, item slug, tags)
ItemSpec = Tuple[str, str, str, Sequence[str]]


def build_catalog(specs: Iterable[ItemSpec], names: dict | None = None) -> Catalog:
    """Group item specs by brand into publishers, keeping first-seen order."""

    publishers: dict = {}
    for brand, name, slug, tags in specs:
        publisher = publishers.setdefault(
            brand,
            {
                "slug": brand.lower(),
                "name": (names or {}).get(brand, brand),
                "brand": brand,
                "items": [],
            },
        )
        publisher["items"].append({"slug": slug, "name": name, "tags": list(tags)})
    return catalog_from_dict({"publishers": list(publishers.values())})


@pytest.fixture()
def engine_config():
    """Provide a mutable copy of the default engine configuration."""

    return load_config(None)


@pytest.fixture()
def make_catalog():
    return build_catalog


@pytest.fixture()
def scenario_catalog() -> Catalog:
    return build_catalog(
        [
            ("Acme", "Filter", "acme-filter", ["filter"]),
            ("Acme", "VCO", "acme-vco", ["oscillator"]),
            ("Beta", "Filter2", "beta-filter2", ["filter"]),
        ]
    )


@pytest.fixture()
def scenario_tags():
    return ["filter", "oscillator"]
