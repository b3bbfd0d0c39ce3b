"""Typed data structures used by the catalog browsing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple


class FavoriteKey(NamedTuple):
    """Identifies a popularity counter: ``(publisher_slug, item_slug)``."""

    publisher_slug: str
    item_slug: str


FavoriteScoreTable = Dict[FavoriteKey, float]


@dataclass(frozen=True)
class Publisher:
    """Publisher of catalog items. The brand may differ from the display name."""

    slug: str
    name: str
    brand: str


@dataclass(frozen=True)
class Item:
    """Catalog item, related to its publisher by slug only."""

    publisher_slug: str
    slug: str
    name: str
    description: str = ""
    tags: Tuple[str, ...] = ()

    @property
    def key(self) -> FavoriteKey:
        return FavoriteKey(self.publisher_slug, self.slug)


Entry = Tuple[Publisher, Item]


@dataclass(frozen=True)
class Catalog:
    """Read-only catalog of publishers and their items, in load order."""

    publishers: Tuple[Publisher, ...]
    items: Tuple[Item, ...]
    _publisher_map: Dict[str, Publisher] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_publisher_map",
            {publisher.slug: publisher for publisher in self.publishers},
        )

    def publisher_of(self, item: Item) -> Publisher:
        return self._publisher_map[item.publisher_slug]

    def entries(self) -> List[Entry]:
        """Return ``(publisher, item)`` pairs in catalog order."""

        return [(self.publisher_of(item), item) for item in self.items]

    def brands(self) -> List[str]:
        """Return distinct brands ordered case-insensitively."""

        seen: Dict[str, str] = {}
        for publisher in self.publishers:
            # Brands differing only by case collapse onto the first one loaded.
            seen.setdefault(publisher.brand.lower(), publisher.brand)
        return [seen[key] for key in sorted(seen)]

    def find(self, publisher_slug: str, item_slug: str) -> Optional[Item]:
        for item in self.items:
            if item.publisher_slug == publisher_slug and item.slug == item_slug:
                return item
        return None


@dataclass
class BrowseState:
    """Current query and facet selection. Empty strings mean "no filter"."""

    search: str = ""
    brand: str = ""
    tag: str = ""


@dataclass(frozen=True)
class FacetOption:
    """A selectable brand or tag value in a facet list."""

    value: str
    enabled: bool
    active: bool = False


@dataclass(frozen=True)
class FacetSummary:
    """Facet enablement and display counters for one recompute."""

    brands: Tuple[FacetOption, ...]
    tags: Tuple[FacetOption, ...]
    publisher_count: int
    item_count: int

    @property
    def brand_count(self) -> int:
        return sum(1 for option in self.brands if option.enabled)

    @property
    def tag_count(self) -> int:
        return sum(1 for option in self.tags if option.enabled)


@dataclass(frozen=True)
class BrowseResult:
    """Render-ready snapshot handed to the presentation layer."""

    state: Tuple[str, str, str]
    items: Tuple[Item, ...]
    facets: FacetSummary
    labels: Dict[str, str] = field(default_factory=dict)

    @property
    def slugs(self) -> List[str]:
        return [item.slug for item in self.items]


@dataclass(frozen=True)
class SelectionEvent:
    """Emitted when an item is chosen, for instantiation and history."""

    publisher: Publisher
    item: Item
    score: float
