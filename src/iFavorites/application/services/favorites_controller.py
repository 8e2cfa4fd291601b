"""Translate favorites gestures into store operations."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from iFavorites.application.dtos import (
    ActivationResult,
    FavoriteItem,
    NavigateAction,
    PageDirection,
    SelectAction,
    UnavailableAction,
)
from iFavorites.config import PAGE_LABEL_FORMAT
from iFavorites.domain.models import AssetRef
from iFavorites.domain.repositories import IAssetResolver
from iFavorites.domain.services import FavoritesStore
from iFavorites.events.bus import EventBus
from iFavorites.events.favorites_events import FavoritesChangedEvent, PageChangedEvent


class FavoritesController:
    """Policy layer between a gesture source and :class:`FavoritesStore`.

    The controller keeps no state of its own beyond the store it wraps. Errors
    raised by the store propagate unchanged; callers decide how to recover.
    """

    def __init__(
        self,
        store: FavoritesStore,
        resolver: IAssetResolver,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    @property
    def store(self) -> FavoritesStore:
        return self._store

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------
    def handle_drop(self, items: Iterable[AssetRef]) -> int:
        """Add every dropped item to the current page, skipping known ones."""

        added = 0
        for item in items:
            if self._store.add_to_current_page(item):
                added += 1
                self._logger.info("Added favorite %s", item)
            elif not item.is_valid():
                self._logger.warning("Ignored invalid favorite %r", item.path)
            else:
                self._logger.debug("Skipped duplicate favorite %s", item)
        if added:
            self._publish_changed("added")
        return added

    def handle_activate(self, index: int) -> ActivationResult:
        ref = self._store.item_at(index)
        if not self._resolver.is_valid(ref):
            self._logger.warning("Favorite %s no longer resolves", ref)
            return UnavailableAction(ref)
        if self._resolver.is_folder(ref):
            return NavigateAction(self._resolver.path_of(ref))
        return SelectAction(ref)

    def handle_remove_request(self, index: int) -> AssetRef:
        removed = self._store.remove_from_current_page(index)
        self._logger.info("Removed favorite %s", removed)
        self._publish_changed("removed")
        return removed

    def handle_reorder(self, from_index: int, to_index: int) -> None:
        self._store.move_within_current_page(from_index, to_index)
        self._logger.debug("List reordered: %d -> %d", from_index, to_index)
        self._publish_changed("reordered")

    def handle_page_nav(self, direction: PageDirection) -> None:
        direction = PageDirection(direction)
        if direction is PageDirection.NEXT:
            before = self._store.page_count()
            self._store.next_page()
            if self._store.page_count() > before:
                self._logger.info("Created page %d", self._store.page_count())
        else:
            self._store.previous_page()
        self._publish_page()

    def handle_go_to_page(self, index: int) -> None:
        self._store.go_to_page(index)
        self._publish_page()

    def handle_delete_page(self) -> None:
        deleted = self._store.cursor
        self._store.delete_current_page()
        self._logger.info("Deleted page %d", deleted + 1)
        self._publish_page()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def cursor(self) -> int:
        return self._store.cursor

    def current_page(self) -> Tuple[AssetRef, ...]:
        return self._store.current_page()

    def page_count(self) -> int:
        return self._store.page_count()

    def can_delete_page(self) -> bool:
        return self._store.page_count() > 1

    def page_label(self) -> str:
        return PAGE_LABEL_FORMAT.format(
            current=self._store.cursor + 1, total=self._store.page_count()
        )

    def describe_current_page(self) -> List[FavoriteItem]:
        items: List[FavoriteItem] = []
        for ref in self._store.current_page():
            valid = self._resolver.is_valid(ref)
            items.append(
                FavoriteItem(
                    ref=ref,
                    display_name=self._resolver.display_name(ref),
                    path=self._resolver.path_of(ref),
                    is_folder=valid and self._resolver.is_folder(ref),
                    is_valid=valid,
                )
            )
        return items

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _publish_changed(self, reason: str) -> None:
        if self._event_bus is None:
            return
        self._event_bus.publish(
            FavoritesChangedEvent(
                source=type(self).__name__,
                reason=reason,
                page_index=self._store.cursor,
                item_count=len(self._store.current_page()),
            )
        )

    def _publish_page(self) -> None:
        if self._event_bus is None:
            return
        self._event_bus.publish(
            PageChangedEvent(
                source=type(self).__name__,
                page_index=self._store.cursor,
                page_count=self._store.page_count(),
            )
        )


__all__ = ["FavoritesController"]
