"""Pure Python FavoritesViewModel: no Qt dependency.

Holds what a favorites panel shows (rows of the current page, the page
label, whether "Delete Page" is offered and whether it asks first) and
turns panel gestures into controller calls. Failures are reported here,
never inside the controller.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from iFavorites.application.dtos import (
    NavigateAction,
    PageDirection,
    SelectAction,
    UnavailableAction,
)
from iFavorites.application.interfaces import IFolderRevealer
from iFavorites.application.services.favorites_controller import FavoritesController
from iFavorites.application.services.favorites_session import FavoritesSession
from iFavorites.domain.models import AssetRef
from iFavorites.errors import FavoritesError, InvalidOperationError
from iFavorites.errors.handler import ErrorHandler, ErrorSeverity
from iFavorites.events.bus import EventBus
from iFavorites.events.favorites_events import FavoritesChangedEvent, PageChangedEvent
from iFavorites.gui.viewmodels.base import BaseViewModel
from iFavorites.gui.viewmodels.signal import ObservableProperty, Signal


class FavoritesViewModel(BaseViewModel):
    """ViewModel for the favorites panel, free of Qt."""

    def __init__(
        self,
        controller: FavoritesController,
        event_bus: Optional[EventBus] = None,
        *,
        error_handler: Optional[ErrorHandler] = None,
        revealer: Optional[IFolderRevealer] = None,
        session: Optional[FavoritesSession] = None,
        confirm_page_delete: bool = True,
    ) -> None:
        super().__init__(event_bus)
        self._controller = controller
        self._error_handler = error_handler
        self._revealer = revealer
        self._session = session
        self._logger = logging.getLogger(__name__)

        self.items = ObservableProperty([], "items")
        self.page_label = ObservableProperty("", "page_label")
        self.can_delete_page = ObservableProperty(False, "can_delete_page")
        # Views ask before calling delete_page() while this is set
        self.confirm_page_delete = ObservableProperty(confirm_page_delete, "confirm_page_delete")

        self.selection_requested = Signal("selection_requested")
        self.folder_requested = Signal("folder_requested")
        self.error_occurred = Signal("error_occurred")

        self.listen(FavoritesChangedEvent, self._on_changed)
        self.listen(PageChangedEvent, self._on_changed)

        self.refresh()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def drop(self, refs: Iterable[AssetRef]) -> int:
        added = 0
        try:
            added = self._controller.handle_drop(refs)
        except FavoritesError as exc:
            self._report(exc)
        self.refresh()
        return added

    def activate(self, index: int) -> None:
        try:
            result = self._controller.handle_activate(index)
        except FavoritesError as exc:
            self._report(exc)
            self.refresh()
            return

        if isinstance(result, NavigateAction):
            self.folder_requested.emit(result.path)
            if self._revealer is not None:
                try:
                    self._revealer.reveal_folder(result.path)
                except FavoritesError as exc:
                    self._report(exc)
        elif isinstance(result, SelectAction):
            self.selection_requested.emit(result.ref)
        elif isinstance(result, UnavailableAction):
            self.error_occurred.emit(f"Favorite is no longer available: {result.ref}")

    def remove(self, index: int) -> Optional[AssetRef]:
        removed = None
        try:
            removed = self._controller.handle_remove_request(index)
        except FavoritesError as exc:
            self._report(exc)
        self.refresh()
        return removed

    def reorder(self, from_index: int, to_index: int) -> None:
        try:
            self._controller.handle_reorder(from_index, to_index)
        except FavoritesError as exc:
            self._report(exc)
        self.refresh()

    def next_page(self) -> None:
        self._controller.handle_page_nav(PageDirection.NEXT)
        self.refresh()

    def previous_page(self) -> None:
        self._controller.handle_page_nav(PageDirection.PREVIOUS)
        self.refresh()

    def delete_page(self) -> None:
        try:
            self._controller.handle_delete_page()
        except FavoritesError as exc:
            self._report(exc)
        self.refresh()

    def save(self) -> bool:
        if self._session is None:
            return False
        try:
            return self._session.flush()
        except FavoritesError as exc:
            self._report(exc, ErrorSeverity.ERROR)
            return False

    def refresh(self) -> None:
        self.items.value = self._controller.describe_current_page()
        self.page_label.value = self._controller.page_label()
        self.can_delete_page.value = self._controller.can_delete_page()

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _on_changed(self, _event) -> None:
        self.refresh()

    def _report(self, exc: FavoritesError, severity: Optional[ErrorSeverity] = None) -> None:
        if severity is None:
            # A refused page deletion is expected user input, bad indices are not
            severity = (
                ErrorSeverity.WARNING
                if isinstance(exc, InvalidOperationError)
                else ErrorSeverity.ERROR
            )
        if self._error_handler is not None:
            self._error_handler.handle(exc, severity, {"page": self._controller.cursor})
        else:
            self._logger.log(
                logging.WARNING if severity is ErrorSeverity.WARNING else logging.ERROR,
                "%s: %s",
                exc.__class__.__name__,
                exc,
            )
        self.error_occurred.emit(str(exc))
