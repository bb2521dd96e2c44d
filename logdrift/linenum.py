"""Prefix every log line with a per-service line number.

Each service keeps its own counter, starting at 1 the first time its name is
seen. The number is zero-padded to a minimum width.
"""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import replace

from logdrift.stream import LogLine

DEFAULT_PADDING = 4


class LineNumberer:
    """Tracks per-service counters and stamps lines with them."""

    def __init__(self, padding: int = 0) -> None:
        self.padding = padding if padding >= 1 else DEFAULT_PADDING
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def stamp(self, line: LogLine) -> LogLine:
        """Count line for its service and return it prefixed with the number."""
        with self._lock:
            self._counts[line.service] += 1
            number = self._counts[line.service]
        return replace(line, text=f"{number:0{self.padding}d} {line.text}")

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line, numbered."""
        for line in lines:
            yield self.stamp(line)