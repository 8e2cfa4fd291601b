"""Qt list model exposing the current favorites page to views and QML."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    QObject,
    Qt,
    Signal,
    Slot,
)

from ...viewmodels.favorites_viewmodel import FavoritesViewModel


class FavoriteRoles(IntEnum):
    """Custom roles for the favorites model exposed to QML."""

    DisplayNameRole = Qt.ItemDataRole.UserRole + 1
    PathRole = Qt.ItemDataRole.UserRole + 2
    IsFolderRole = Qt.ItemDataRole.UserRole + 3
    IsValidRole = Qt.ItemDataRole.UserRole + 4
    RefRole = Qt.ItemDataRole.UserRole + 5


class FavoritesListModel(QAbstractListModel):
    """Mirror :attr:`FavoritesViewModel.items` as a flat Qt list model."""

    # Qt Signals use camelCase by convention (noqa: N815)
    pageLabelChanged = Signal(str)  # noqa: N815
    canDeletePageChanged = Signal(bool)  # noqa: N815

    def __init__(self, view_model: FavoritesViewModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._items = list(view_model.items.value)

        self._view_model.items.changed.connect(self._on_items_changed)
        self._view_model.page_label.changed.connect(
            lambda new, _old: self.pageLabelChanged.emit(new)
        )
        self._view_model.can_delete_page.changed.connect(
            lambda new, _old: self.canDeletePageChanged.emit(new)
        )

    def roleNames(self) -> dict[int, bytes]:  # noqa: N802  # Qt override
        return {
            FavoriteRoles.DisplayNameRole: b"displayName",
            FavoriteRoles.PathRole: b"path",
            FavoriteRoles.IsFolderRole: b"isFolder",
            FavoriteRoles.IsValidRole: b"isValid",
            FavoriteRoles.RefRole: b"ref",
        }

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        row = index.row()
        if not index.isValid() or row < 0 or row >= len(self._items):
            return None

        item = self._items[row]
        if role == Qt.ItemDataRole.DisplayRole:
            # Deleted assets keep their row so the user can remove them
            return item.display_name if item.is_valid else "Null"
        if role == FavoriteRoles.DisplayNameRole:
            return item.display_name
        if role == Qt.ItemDataRole.ToolTipRole or role == FavoriteRoles.PathRole:
            return item.path
        if role == FavoriteRoles.IsFolderRole:
            return item.is_folder
        if role == FavoriteRoles.IsValidRole:
            return item.is_valid
        if role == FavoriteRoles.RefRole:
            return item.ref.path
        return None

    @Slot(result=str)
    def pageLabel(self) -> str:  # noqa: N802
        return self._view_model.page_label.value

    @Slot(result=bool)
    def canDeletePage(self) -> bool:  # noqa: N802
        return self._view_model.can_delete_page.value

    @Slot(result=bool)
    def confirmPageDelete(self) -> bool:  # noqa: N802
        return self._view_model.confirm_page_delete.value

    @Slot(int)
    def activate(self, row: int) -> None:
        self._view_model.activate(row)

    @Slot(int)
    def remove(self, row: int) -> None:
        self._view_model.remove(row)

    @Slot(int, int)
    def move(self, from_row: int, to_row: int) -> None:
        self._view_model.reorder(from_row, to_row)

    @Slot()
    def nextPage(self) -> None:  # noqa: N802
        self._view_model.next_page()

    @Slot()
    def previousPage(self) -> None:  # noqa: N802
        self._view_model.previous_page()

    @Slot()
    def deletePage(self) -> None:  # noqa: N802
        self._view_model.delete_page()

    def _on_items_changed(self, new_items, _old_items) -> None:
        self.beginResetModel()
        self._items = list(new_items)
        self.endResetModel()


__all__ = ["FavoriteRoles", "FavoritesListModel"]
