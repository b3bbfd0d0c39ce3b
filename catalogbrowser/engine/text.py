"""Fuzzy text matching for catalog search."""

from __future__ import annotations

from typing import List, Optional

from .types import Item, Publisher

# Substring matches land in [SUBSTRING_BASE, SUBSTRING_BASE + 1), scattered
# subsequence matches in (0, 1], so any substring outranks any subsequence.
SUBSTRING_BASE = 2.0


def searchable_text(publisher: Publisher, item: Item) -> str:
    """Return the text a query is matched against."""

    parts = [publisher.brand, item.name, item.slug]
    parts.extend(item.tags)
    return " ".join(parts)


def subsequence_positions(query: str, text: str) -> Optional[List[int]]:
    """Greedy leftmost positions of each query character in text, or None."""

    positions: List[int] = []
    start = 0
    for char in query:
        index = text.find(char, start)
        if index < 0:
            return None
        positions.append(index)
        start = index + 1
    return positions


def fuzzy_score(text: str, query: str) -> float:
    """Score query against text. Both are expected lower-cased.

    Returns 0.0 when some query character cannot be matched in order.
    """

    if not query:
        return 1.0
    if not text:
        return 0.0

    length = len(text)
    coverage = min(len(query) / length, 1.0)

    index = text.find(query)
    if index >= 0:
        earliness = 1.0 - index / length
        return SUBSTRING_BASE + 0.5 * earliness + 0.49 * coverage

    positions = subsequence_positions(query, text)
    if positions is None:
        return 0.0

    adjacent = sum(1 for a, b in zip(positions, positions[1:]) if b == a + 1)
    contiguity = adjacent / (len(positions) - 1) if len(positions) > 1 else 1.0
    earliness = 1.0 - positions[0] / length
    return 0.1 + 0.5 * contiguity + 0.25 * earliness + 0.15 * coverage


def score(publisher: Publisher, item: Item, query: str) -> float:
    """Return how well query matches the item; 1.0 for an empty query."""

    if not query:
        return 1.0
    return fuzzy_score(searchable_text(publisher, item).lower(), query.lower())
