"""Toolkit-neutral notifications for the favorites viewmodels.

A Qt view adapts these to Qt signals (see ``FavoritesListModel``); the CLI
and the tests connect plain callables.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Named list of slots called in connection order.

    A slot that raises is logged and skipped, the remaining slots still run.
    """

    def __init__(self, name: str = "signal") -> None:
        self.name = name
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> Callable[[], None]:
        """Connect *slot* once and return a callable that disconnects it."""

        if slot not in self._slots:
            self._slots.append(slot)
        return lambda: self.disconnect(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        if slot not in self._slots:
            raise ValueError(f"{slot!r} is not connected to {self.name}")
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in tuple(self._slots):
            try:
                slot(*args)
            except Exception:
                _logger.exception("Slot %r of %s failed", slot, self.name)

    def __len__(self) -> int:
        return len(self._slots)


class ObservableProperty:
    """Current value of one piece of panel state.

    ``changed(new, old)`` fires only when an assignment changes the value by
    equality, so refreshing a page with identical rows is silent.
    """

    def __init__(self, initial: Any = None, name: str = "property") -> None:
        self._value = initial
        self.changed = Signal(f"{name}.changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new: Any) -> None:
        self.set(new)

    def set(self, new: Any) -> bool:
        """Assign *new* and return whether listeners were notified."""

        old = self._value
        if old == new:
            return False
        self._value = new
        self.changed.emit(new, old)
        return True
