"""Objects carrying a process-wide unique, increasing id."""

from __future__ import annotations

import itertools


class BaseObject:
    """Base of every engine object; each instance gets the next id."""

    _ids = itertools.count()

    def __init__(self):
        super().__init__()
        self._id = next(BaseObject._ids)

    @property
    def id(self) -> int:
        """The id assigned when the object was created."""
        return self._id