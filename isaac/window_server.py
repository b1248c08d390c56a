"""The game window and its default settings."""

from __future__ import annotations

import time
from typing import Iterable

import pygame

from isaac.logger import Logger
from isaac.service_locator import ServiceLocator


class Defaults:
    """Engine-wide default settings."""

    WINDOW_TITLE = "Isaac"
    SCREEN_WIDTH = 1280
    SCREEN_HEIGHT = 900
    MAX_FPS = 60.0


class WindowServer:
    """Opens the display window and manages its frames and events."""

    def __init__(
        self,
        size: Iterable[float] = (Defaults.SCREEN_WIDTH, Defaults.SCREEN_HEIGHT),
        title: str = Defaults.WINDOW_TITLE,
    ):
        self._logger = ServiceLocator.get_service(Logger)
        width, height = (int(v) for v in size)
        pygame.display.init()
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        pygame.event.clear()
        self._open = True
        self._frame_period = 1.0 / Defaults.MAX_FPS
        self._last_frame = time.perf_counter()
        self._logger.debug("WindowServer initialized")

    @property
    def window(self) -> pygame.Surface:
        """The surface everything is drawn onto."""
        return self._surface

    @property
    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        """Close the window; later calls do nothing."""
        if not self._open:
            return
        self._open = False
        pygame.display.quit()
        self._logger.debug("Shutdown WindowServer")

    def poll_events(self) -> list[pygame.event.Event]:
        """Return and consume the pending events; none once closed."""
        if not self._open:
            return []
        return pygame.event.get()

    def clear(self) -> None:
        """Fill the window with black."""
        if self._open:
            self._surface.fill((0, 0, 0))

    def display(self) -> None:
        """Show the drawn frame, then wait to keep within the frame limit."""
        if not self._open:
            return
        pygame.display.flip()
        elapsed = time.perf_counter() - self._last_frame
        if elapsed < self._frame_period:
            time.sleep(self._frame_period - elapsed)
        self._last_frame = time.perf_counter()