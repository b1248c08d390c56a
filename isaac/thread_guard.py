"""A thread that is always joined when its guard goes away."""

from __future__ import annotations

import threading
from typing import Any, Callable


class ThreadGuard:
    """Starts ``target`` on a thread at once and joins it on exit."""

    def __init__(self, target: Callable[..., Any], *args: Any, **kwargs: Any):
        self._thread = threading.Thread(target=target, args=args, kwargs=kwargs)
        self._thread.start()

    def join(self) -> None:
        """Wait for the thread; safe to call more than once."""
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> ThreadGuard:
        return self

    def __exit__(self, *args: Any) -> None:
        self.join()