"""Wrap every log line's text in an opening and a closing delimiter.

Useful when output is piped into tools that expect delimited records.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from logdrift.stream import LogLine


class Bracketer:
    """Prepends and appends fixed strings to every line."""

    def __init__(self, opening: str, closing: str) -> None:
        if not opening and not closing:
            raise ValueError("bracket: at least one of open or close must be non-empty")
        self.opening = opening
        self.closing = closing

    def stamp(self, line: LogLine) -> LogLine:
        """Return line with its text wrapped in the delimiters."""
        return replace(line, text=f"{self.opening}{line.text}{self.closing}")

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line of the stream, wrapped."""
        for line in lines:
            yield self.stamp(line)