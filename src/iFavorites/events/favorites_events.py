"""Notifications published while a favorites collection is edited."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FavoritesEvent:
    """Base for favorites notifications.

    ``source`` names the publishing component. The timestamp is ignored by
    equality so tests and subscribers can compare events by content.
    """

    source: str = ""
    occurred_at: datetime = field(default_factory=_utcnow, compare=False)


@dataclass(frozen=True)
class FavoritesChangedEvent(FavoritesEvent):
    """Published after the favorites of a page were added, removed or reordered."""

    reason: str = ""
    page_index: int = 0
    item_count: int = 0


@dataclass(frozen=True)
class PageChangedEvent(FavoritesEvent):
    """Published after the cursor moved or the page list changed shape."""

    page_index: int = 0
    page_count: int = 1


@dataclass(frozen=True)
class FavoritesSavedEvent(FavoritesEvent):
    location: str = ""
    page_count: int = 0
