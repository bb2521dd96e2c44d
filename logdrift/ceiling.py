"""A per-service line ceiling: once a service reaches it, its lines are dropped."""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Iterable, Iterator

from logdrift.stream import LogLine


class Ceiling:
    """Allows at most ``max_lines`` lines from each service."""

    def __init__(self, max_lines: int) -> None:
        if max_lines < 1:
            raise ValueError("ceiling: max must be >= 1")
        self.max_lines = max_lines
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def allow(self, line: LogLine) -> bool:
        """Count line and report whether its service is still under the ceiling."""
        with self._lock:
            self._counts[line.service] += 1
            return self._counts[line.service] <= self.max_lines


def apply(ceiling: Ceiling, lines: Iterable[LogLine]) -> Iterator[LogLine]:
    """Yield the lines that are still under the ceiling."""
    for line in lines:
        if ceiling.allow(line):
            yield line