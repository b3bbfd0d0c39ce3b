"""Visibility filtering for catalog items."""

from __future__ import annotations

from . import text as text_module
from .types import Item, Publisher


def matches_search(publisher: Publisher, item: Item, search: str) -> bool:
    if not search:
        return True
    return text_module.score(publisher, item, search) > 0.0


def matches_brand(publisher: Publisher, brand: str) -> bool:
    return not brand or publisher.brand == brand


def matches_tag(item: Item, tag: str) -> bool:
    return not tag or tag in item.tags


def is_visible(publisher: Publisher, item: Item, search: str, brand: str, tag: str) -> bool:
    """Return True when the item satisfies every active constraint."""

    if not matches_search(publisher, item, search):
        return False
    if not matches_brand(publisher, brand):
        return False
    if not matches_tag(item, tag):
        return False
    return True
