"""Event-bus plumbing shared by the favorites viewmodels."""

from __future__ import annotations

from typing import Callable, List, Optional, Type

from iFavorites.events.bus import EventBus, Subscription


class BaseViewModel:
    """Own the bus subscriptions of a viewmodel until :meth:`dispose`.

    Without a bus, :meth:`listen` is a no-op and the viewmodel only changes
    through its own commands.
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._event_bus = event_bus
        self._subscriptions: List[Subscription] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def listen(self, event_type: Type, handler: Callable) -> Optional[Subscription]:
        if self._event_bus is None or self._disposed:
            return None
        sub = self._event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def dispose(self) -> None:
        """Stop listening; safe to call more than once."""

        if self._event_bus is not None:
            for sub in self._subscriptions:
                self._event_bus.unsubscribe(sub)
        self._subscriptions.clear()
        self._disposed = True
