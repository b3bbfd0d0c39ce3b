"""Coordinator for a catalog browsing session."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from . import facets as facets_module
from . import favorites as favorites_module
from . import filters as filters_module
from . import rank as rank_module
from .config import EngineConfig, load_config
from .types import (
    BrowseResult,
    BrowseState,
    Catalog,
    FavoriteScoreTable,
    Item,
    SelectionEvent,
)

logger = logging.getLogger(__name__)

ResultListener = Callable[[BrowseResult], None]
SelectionListener = Callable[[SelectionEvent], None]
FavoritesListener = Callable[[FavoriteScoreTable], None]


class BrowseSession:
    """Owns the browse state and favorite table for one browser.

    Every transition recomputes the full result synchronously and publishes
    it to the result listeners. Sessions are not thread-safe; callers that
    share one must serialize access themselves.
    """

    def __init__(
        self,
        catalog: Catalog,
        favorites: Optional[FavoriteScoreTable] = None,
        *,
        allowed_tags: Optional[Iterable[str]] = None,
        config: EngineConfig | None = None,
        on_result: Sequence[ResultListener] = (),
        on_select: Sequence[SelectionListener] = (),
        favorites_changed: Optional[FavoritesListener] = None,
    ) -> None:
        self.catalog = catalog
        self.favorites: FavoriteScoreTable = favorites if favorites is not None else {}
        self.config = config or load_config(None)
        tags = allowed_tags if allowed_tags is not None else self.config.allowed_tags
        self.allowed_tags: List[str] = list(tags)
        self.brands: List[str] = catalog.brands()
        self.state = BrowseState()
        self.result_listeners: List[ResultListener] = list(on_result)
        self.selection_listeners: List[SelectionListener] = list(on_select)
        self.favorites_changed = favorites_changed
        self.result = self.refresh()

    def set_search(self, text: str) -> BrowseResult:
        self.state.search = text.strip()
        return self.refresh()

    def toggle_brand(self, brand: str) -> BrowseResult:
        self.state.brand = "" if self.state.brand == brand else brand
        return self.refresh()

    def toggle_tag(self, tag: str) -> BrowseResult:
        self.state.tag = "" if self.state.tag == tag else tag
        return self.refresh()

    def clear_all(self) -> BrowseResult:
        self.state = BrowseState()
        return self.refresh()

    def escape(self) -> bool:
        """Clear a non-empty search. Returns False when there was nothing to clear."""

        if not self.state.search:
            return False
        self.set_search("")
        return True

    def select_item(self, item: Item) -> SelectionEvent:
        """Reinforce the item's favorite score and notify selection listeners."""

        publisher = self.catalog.publisher_of(item)
        score = favorites_module.record_selection(
            self.favorites,
            item.key,
            decay=self.config.decay_lambda,
            increment=self.config.selection_increment,
        )
        logger.info("Selected %s/%s (favorite score %.3f)", publisher.slug, item.slug, score)
        if self.favorites_changed is not None:
            self.favorites_changed(self.favorites)

        event = SelectionEvent(publisher=publisher, item=item, score=score)
        for listener in self.selection_listeners:
            listener(event)
        return event

    def refresh(self) -> BrowseResult:
        """Recompute visibility, order and facets for the current state."""

        state = self.state
        entries = self.catalog.entries()
        sorter = rank_module.choose_sorter(state.search, self.config.sort_by_relevance)
        ordered = sorter(entries, self.favorites)
        visible = tuple(
            item
            for publisher, item in ordered
            if filters_module.is_visible(publisher, item, state.search, state.brand, state.tag)
        )

        summary = facets_module.summarize(
            entries,
            self.catalog.publishers,
            self.brands,
            self.allowed_tags,
            state.search,
            state.brand,
            state.tag,
        )
        result = BrowseResult(
            state=(state.search, state.brand, state.tag),
            items=visible,
            facets=summary,
            labels={
                "items": self.config.label("items", len(visible)),
                "brands": self.config.label("brands", summary.brand_count),
                "tags": self.config.label("tags", summary.tag_count),
            },
        )
        logger.debug(
            "Refreshed search=%r brand=%r tag=%r: %d visible",
            state.search,
            state.brand,
            state.tag,
            len(visible),
        )

        self.result = result
        for listener in self.result_listeners:
            listener(result)
        return result
