"""Count the lines emitted by each service."""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Iterable, Iterator

from logdrift.stream import LogLine


class LineCounter:
    """Per-service line counts; safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def add(self, service: str) -> None:
        """Increase the count of service by one."""
        if not service:
            raise ValueError("linecount: service name must not be empty")
        with self._lock:
            self._counts[service] += 1

    def get(self, service: str) -> int:
        """Return the current count of service."""
        with self._lock:
            return self._counts[service]

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all counts."""
        with self._lock:
            return dict(self._counts)

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Count every line by service and yield it unchanged.

        Lines without a service are forwarded but not counted.
        """
        for line in lines:
            if line.service:
                self.add(line.service)
            yield line