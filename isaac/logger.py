"""Levelled logging to a text stream."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TextIO

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Level(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


class LoggerService(ABC):
    """Interface of a logger: one abstract ``log`` plus per-level helpers."""

    def __init__(self, level: Level = Level.INFO, fmt: str = DEFAULT_TIME_FORMAT):
        self.level = Level(level)
        self.fmt = fmt

    def current_time(self) -> str:
        """Return the local time formatted with ``fmt``."""
        return time.strftime(self.fmt, time.localtime())

    @abstractmethod
    def log(self, msg: str, level: Level) -> None:
        """Emit ``msg`` at ``level``."""

    def debug(self, msg: str) -> None:
        self.log(msg, Level.DEBUG)

    def info(self, msg: str) -> None:
        self.log(msg, Level.INFO)

    def warn(self, msg: str) -> None:
        self.log(msg, Level.WARN)

    def error(self, msg: str) -> None:
        self.log(msg, Level.ERROR)


class LoggerNull(LoggerService):
    """A logger that discards every message."""

    def log(self, msg: str, level: Level) -> None:
        pass


class Logger(LoggerService):
    """Writes timestamped messages at or above its level to a stream."""

    def __init__(
        self,
        level: Level = Level.INFO,
        fmt: str = DEFAULT_TIME_FORMAT,
        stream: TextIO | None = None,
    ):
        super().__init__(level, fmt)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def format_message(self, msg: str, level: Level) -> str:
        """Build the line that ``log`` writes for ``msg``."""
        return f"[{self.current_time()}] - {Level(level).name:<5} - {msg}"

    def log(self, msg: str, level: Level) -> None:
        if level < self.level:
            return
        self.stream.write(self.format_message(msg, level) + "\n")