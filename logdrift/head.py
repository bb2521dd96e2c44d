"""Limit a stream to the first N lines of each service."""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Iterable, Iterator

from logdrift.stream import LogLine


class HeadLimiter:
    """Passes at most ``n`` lines per service."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("head: n must be >= 1")
        self.n = n
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def allow(self, line: LogLine) -> bool:
        """Count line and report whether it is within its service's limit."""
        with self._lock:
            self._counts[line.service] += 1
            return self._counts[line.service] <= self.n

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield only the first n lines of each service."""
        for line in lines:
            if self.allow(line):
                yield line