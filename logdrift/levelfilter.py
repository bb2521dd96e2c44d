"""Filter log lines by a minimum severity level.

Four levels are known, in ascending order: debug, info, warn, error. The
level of a line is found by looking (case-insensitively) for ERROR, WARN and
INFO in its text; a line with none of them is debug.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum

from logdrift.stream import LogLine


class Level(IntEnum):
    """Log severity, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


_LEVEL_NAMES = {level.name.lower(): level for level in Level}


def detect_level(text: str) -> Level:
    """Return the severity found in text, defaulting to debug."""
    upper = text.upper()
    if "ERROR" in upper:
        return Level.ERROR
    if "WARN" in upper:
        return Level.WARN
    if "INFO" in upper:
        return Level.INFO
    return Level.DEBUG


class LevelFilter:
    """Passes only lines at or above a minimum level."""

    def __init__(self, min_level: str) -> None:
        level = _LEVEL_NAMES.get(min_level.lower())
        if level is None:
            raise ValueError(f"levelfilter: unknown level {min_level!r}")
        self.min_level = level

    def allow(self, text: str) -> bool:
        """Report whether text meets the minimum level."""
        return detect_level(text) >= self.min_level

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield the lines that meet the minimum level."""
        for line in lines:
            if self.allow(line.text):
                yield line