"""Prepend a fixed prefix to every log line, e.g. to nest child services."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from logdrift.stream import LogLine


class Indenter:
    """Prepends a prefix string to each line's text."""

    def __init__(self, prefix: str) -> None:
        if not prefix:
            raise ValueError("indent: prefix must not be empty")
        self.prefix = prefix

    def stamp(self, line: LogLine) -> LogLine:
        """Return line with the prefix put in front of its text."""
        return replace(line, text=f"{self.prefix}{line.text}")

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line, indented."""
        for line in lines:
            yield self.stamp(line)