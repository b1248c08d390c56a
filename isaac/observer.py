"""A minimal observer pattern."""

from __future__ import annotations

import sys
from typing import Generic, TypeVar

EventT = TypeVar("EventT")


class Observer(Generic[EventT]):
    """Receives events from the observables it is registered with."""

    def on_notify(self, subject: "Observable[EventT]", event: EventT) -> None:
        """Handle ``event`` sent by ``subject``; does nothing by default."""


class Observable(Generic[EventT]):
    """Keeps a list of observers and forwards events to them in order."""

    def __init__(self):
        super().__init__()
        self._observers: list[Observer[EventT]] = []

    def add_observer(self, observer: Observer[EventT]) -> None:
        """Register ``observer``; a second registration is reported and ignored."""
        if any(o is observer for o in self._observers):
            print("observer already registered", file=sys.stderr)
            return
        self._observers.append(observer)

    def remove_observer(self, observer: Observer[EventT]) -> None:
        """Unregister ``observer``; reports when it was not registered."""
        kept = [o for o in self._observers if o is not observer]
        if len(kept) == len(self._observers):
            print("observer not found", file=sys.stderr)
        self._observers = kept

    def notify(self, event: EventT) -> None:
        """Send ``event`` to every registered observer."""
        for observer in list(self._observers):
            observer.on_notify(self, event)