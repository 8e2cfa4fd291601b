"""Session lifecycle: load once, flush when dirty, save on close."""

from __future__ import annotations

import logging
from typing import Optional

from iFavorites.application.services.favorites_controller import FavoritesController
from iFavorites.domain.repositories import IAssetResolver, IFavoritesRepository
from iFavorites.domain.services import FavoritesStore
from iFavorites.errors import SessionNotOpenError
from iFavorites.events.bus import EventBus
from iFavorites.events.favorites_events import FavoritesSavedEvent


class FavoritesSession:
    """Bind a repository to a store/controller pair for one editing session.

    The session can be used as a context manager; leaving the block flushes
    pending changes even when the block raised. With ``save_on_close=False``
    closing discards them and only an explicit :meth:`flush` writes.
    """

    def __init__(
        self,
        repository: IFavoritesRepository,
        resolver: IAssetResolver,
        event_bus: Optional[EventBus] = None,
        *,
        save_on_close: bool = True,
    ) -> None:
        self._repository = repository
        self._save_on_close = save_on_close
        self._resolver = resolver
        self._event_bus = event_bus
        self._controller: Optional[FavoritesController] = None
        self._logger = logging.getLogger(__name__)

    @property
    def is_open(self) -> bool:
        return self._controller is not None

    @property
    def controller(self) -> FavoritesController:
        if self._controller is None:
            raise SessionNotOpenError("Favorites session is not open")
        return self._controller

    @property
    def store(self) -> FavoritesStore:
        return self.controller.store

    def open(self) -> FavoritesController:
        if self._controller is None:
            collection = self._repository.load()
            store = FavoritesStore(collection)
            self._controller = FavoritesController(store, self._resolver, self._event_bus)
            self._logger.debug("Opened favorites session with %d page(s)", store.page_count())
        return self._controller

    def flush(self) -> bool:
        """Save a snapshot if there are unsaved changes; return whether it saved."""

        store = self.store
        if not store.is_dirty():
            return False
        snapshot = store.snapshot()
        self._repository.save(snapshot)
        # Dirty stays set when save() raises
        store.clear_dirty()
        self._logger.info("Saved %d favorites page(s)", len(snapshot.pages))
        if self._event_bus is not None:
            self._event_bus.publish(
                FavoritesSavedEvent(
                    source=type(self).__name__,
                    location=str(getattr(self._repository, "path", "")),
                    page_count=len(snapshot.pages),
                )
            )
        return True

    def close(self) -> None:
        if self._controller is None:
            return
        try:
            if self._save_on_close:
                self.flush()
        finally:
            self._controller = None

    def __enter__(self) -> FavoritesController:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["FavoritesSession"]
