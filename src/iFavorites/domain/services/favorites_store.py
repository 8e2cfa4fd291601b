"""Paged favorites data model and its primitive mutations."""

from __future__ import annotations

from typing import Optional, Tuple

from iFavorites.domain.models import AssetRef, FavoritePage, FavoritesCollection
from iFavorites.errors import IndexOutOfRangeError, InvalidOperationError


class FavoritesStore:
    """Own a :class:`FavoritesCollection` and the current-page cursor.

    Every index-taking operation checks its bounds before touching state, so
    a failed call leaves pages, cursor and dirty flag exactly as they were.
    Negative indices are rejected rather than wrapping around.
    """

    def __init__(self, collection: Optional[FavoritesCollection] = None) -> None:
        self._collection = collection if collection is not None else FavoritesCollection.create()
        self._cursor = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def cursor(self) -> int:
        return self._cursor

    def page_count(self) -> int:
        return len(self._collection.pages)

    def current_page(self) -> Tuple[AssetRef, ...]:
        """Return a read-only snapshot of the current page."""

        return self._page().as_tuple()

    def item_at(self, index: int) -> AssetRef:
        page = self._page()
        self._check_index(index, len(page), "item")
        return page.favorites[index]

    def snapshot(self) -> FavoritesCollection:
        """Return a deep copy of the collection for the persistence layer."""

        return self._collection.copy()

    # ------------------------------------------------------------------
    # Item mutations
    # ------------------------------------------------------------------
    def add_to_current_page(self, item: AssetRef) -> bool:
        """Append *item* unless it is invalid or already on the current page."""

        page = self._page()
        if not item.is_valid() or item in page:
            return False
        page.favorites.append(item)
        self._collection.mark_dirty()
        return True

    def remove_from_current_page(self, index: int) -> AssetRef:
        page = self._page()
        self._check_index(index, len(page), "item")
        removed = page.favorites.pop(index)
        self._collection.mark_dirty()
        return removed

    def move_within_current_page(self, from_index: int, to_index: int) -> None:
        page = self._page()
        self._check_index(from_index, len(page), "item")
        self._check_index(to_index, len(page), "item")
        item = page.favorites.pop(from_index)
        page.favorites.insert(to_index, item)
        self._collection.mark_dirty()

    # ------------------------------------------------------------------
    # Page navigation
    # ------------------------------------------------------------------
    def go_to_page(self, index: int) -> None:
        self._check_index(index, self.page_count(), "page")
        self._cursor = index

    def next_page(self) -> None:
        """Advance the cursor, growing the collection when already on the last page."""

        if self._cursor >= self.page_count() - 1:
            self._collection.pages.append(FavoritePage())
            self._collection.mark_dirty()
        self._cursor += 1

    def previous_page(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def delete_current_page(self) -> None:
        if self.page_count() == 1:
            raise InvalidOperationError("The last remaining page cannot be deleted")
        del self._collection.pages[self._cursor]
        self._cursor = min(self._cursor, self.page_count() - 1)
        self._collection.mark_dirty()

    # ------------------------------------------------------------------
    # Dirty tracking
    # ------------------------------------------------------------------
    def is_dirty(self) -> bool:
        return self._collection.dirty

    def clear_dirty(self) -> None:
        self._collection.dirty = False

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _page(self) -> FavoritePage:
        return self._collection.pages[self._cursor]

    @staticmethod
    def _check_index(index: int, length: int, kind: str) -> None:
        if not 0 <= index < length:
            raise IndexOutOfRangeError(
                f"{kind.capitalize()} index {index} is out of range (0..{length - 1})"
                if length
                else f"{kind.capitalize()} index {index} is out of range (empty)"
            )


__all__ = ["FavoritesStore"]
