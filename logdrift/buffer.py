"""A ring buffer that keeps the most recent log lines of each service."""

from __future__ import annotations

import threading
from collections import deque

from logdrift.stream import LogLine

DEFAULT_CAPACITY = 100


class LineBuffer:
    """Holds at most ``capacity`` recent lines per service."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"buffer: capacity must be >= 0, got {capacity}")
        self.capacity = capacity or DEFAULT_CAPACITY
        self._lock = threading.Lock()
        self._lines: dict[str, deque[LogLine]] = {}

    def add(self, line: LogLine) -> None:
        """Store line, evicting the oldest line of its service when full."""
        with self._lock:
            ring = self._lines.get(line.service)
            if ring is None:
                ring = self._lines[line.service] = deque(maxlen=self.capacity)
            ring.append(line)

    def get(self, service: str) -> list[LogLine]:
        """Return a copy of the buffered lines for service, oldest first."""
        with self._lock:
            return list(self._lines.get(service, ()))

    def services(self) -> list[str]:
        """Return every service that has at least one buffered line."""
        with self._lock:
            return list(self._lines)

    def count(self, service: str) -> int:
        """Return how many lines are buffered for service."""
        with self._lock:
            return len(self._lines.get(service, ()))