"""An iterator that walks a sequence round and round."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class CyclicIterator(Generic[T]):
    """Endless iterator over ``items`` that wraps at both ends."""

    def __init__(self, items: Sequence[T]):
        self._items = list(items)
        if not self._items:
            raise ValueError("cannot cycle over an empty sequence")
        self._head = 0

    def __iter__(self) -> CyclicIterator[T]:
        return self

    def __next__(self) -> T:
        """Return the current item and move forward, wrapping to the start."""
        item = self._items[self._head]
        self._head = (self._head + 1) % len(self._items)
        return item

    def previous(self) -> T:
        """Move back one position, wrapping to the end, and return that item."""
        self._head = (self._head - 1) % len(self._items)
        return self._items[self._head]

    @property
    def current(self) -> T:
        """The item at the current position."""
        return self._items[self._head]