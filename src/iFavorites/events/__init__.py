from .bus import Event, EventBus, Subscription
from .favorites_events import (
    FavoritesChangedEvent,
    FavoritesEvent,
    FavoritesSavedEvent,
    PageChangedEvent,
)

__all__ = [
    "Event",
    "EventBus",
    "FavoritesChangedEvent",
    "FavoritesEvent",
    "FavoritesSavedEvent",
    "PageChangedEvent",
    "Subscription",
]
