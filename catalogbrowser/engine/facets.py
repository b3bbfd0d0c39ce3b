"""Facet availability for the brand and tag lists."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .filters import matches_brand, matches_search, matches_tag
from .types import Entry, FacetOption, FacetSummary, Publisher


def filter_by_search(entries: Iterable[Entry], search: str) -> List[Entry]:
    """Return the entries that pass the search constraint alone."""

    return [(publisher, item) for publisher, item in entries if matches_search(publisher, item, search)]


def has_entry(entries: Sequence[Entry], brand: str, tag: str) -> bool:
    """Return True when some entry matches both brand and tag filters."""

    for publisher, item in entries:
        if matches_brand(publisher, brand) and matches_tag(item, tag):
            return True
    return False


def brand_options(
    filtered: Sequence[Entry],
    candidates: Iterable[str],
    brand: str,
    tag: str,
) -> Tuple[FacetOption, ...]:
    # A brand stays enabled if it has an entry under the current tag filter.
    return tuple(
        FacetOption(value=value, enabled=has_entry(filtered, value, tag), active=value == brand)
        for value in candidates
    )


def tag_options(
    filtered: Sequence[Entry],
    candidates: Iterable[str],
    brand: str,
    tag: str,
) -> Tuple[FacetOption, ...]:
    return tuple(
        FacetOption(value=value, enabled=has_entry(filtered, brand, value), active=value == tag)
        for value in candidates
    )


def summarize(
    entries: Sequence[Entry],
    publishers: Sequence[Publisher],
    brands: Iterable[str],
    tags: Iterable[str],
    search: str,
    brand: str,
    tag: str,
) -> FacetSummary:
    """Compute facet enablement plus the display counters."""

    filtered = filter_by_search(entries, search)
    item_count = sum(
        1 for publisher, item in filtered if matches_brand(publisher, brand) and matches_tag(item, tag)
    )
    return FacetSummary(
        brands=brand_options(filtered, brands, brand, tag),
        tags=tag_options(filtered, tags, brand, tag),
        publisher_count=len(publishers),
        item_count=item_count,
    )
