"""A small level-filtered logger writing to a text stream."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, TextIO


class LogLevel(IntEnum):
    """Verbosity levels; a higher level lets more messages through."""

    ERROR = 0
    WARNING = 1
    INFO = 2


class Logger:
    """Writes tagged messages whose severity the current level admits."""

    def __init__(
        self, level: int = LogLevel.INFO, stream: Optional[TextIO] = None
    ) -> None:
        self.level = level
        self.stream = stream

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        self._level = LogLevel(value)

    def _emit(self, threshold: LogLevel, tag: str, message: str) -> None:
        if self._level >= threshold:
            print(f"[{tag}]: {message}", file=self.stream)

    def warn(self, message: str) -> None:
        self._emit(LogLevel.WARNING, "WARNING", message)

    def error(self, message: str) -> None:
        self._emit(LogLevel.ERROR, "ERROR", message)

    def info(self, message: str) -> None:
        self._emit(LogLevel.INFO, "INFO", message)


def log(message: str, stream: Optional[TextIO] = None) -> None:
    """Write ``message`` followed by a newline."""
    print(message, file=stream)