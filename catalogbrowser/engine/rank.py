"""Ordering logic for catalog entries."""

from __future__ import annotations

from typing import Callable, List, Mapping, Sequence, Tuple

from . import text as text_module
from .favorites import favorite_score
from .types import Entry, FavoriteKey

SortKey = Tuple[float, str, str]


def sort_key(entry: Entry, favorites: Mapping[FavoriteKey, float]) -> SortKey:
    """Favorite score descending, then publisher name, then item name."""

    publisher, item = entry
    return (-favorite_score(favorites, item.key), publisher.name, item.name)


def sort_entries(
    entries: Sequence[Entry],
    favorites: Mapping[FavoriteKey, float],
) -> List[Entry]:
    """Return entries ordered by popularity and name.

    The sort is stable, so entries equal on every key keep their input order.
    """

    return sorted(entries, key=lambda entry: sort_key(entry, favorites))


def sort_by_relevance(
    entries: Sequence[Entry],
    favorites: Mapping[FavoriteKey, float],
    search: str,
) -> List[Entry]:
    """Order entries by fuzzy match quality, falling back to ``sort_key``.

    Only used when ``sort_by_relevance`` is enabled in the engine config.
    """

    def relevance(entry: Entry) -> Tuple[float, SortKey]:
        publisher, item = entry
        return (-text_module.score(publisher, item, search), sort_key(entry, favorites))

    return sorted(entries, key=relevance)


def choose_sorter(
    search: str,
    relevance_enabled: bool,
) -> Callable[[Sequence[Entry], Mapping[FavoriteKey, float]], List[Entry]]:
    if search and relevance_enabled:
        return lambda entries, favorites: sort_by_relevance(entries, favorites, search)
    return sort_entries
