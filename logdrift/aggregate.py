"""Per-service line counts emitted as a summary at the end of every window.

The aggregator tallies lines by service name and yields a Summary for each
service at every window boundary, and once more when the input ends.
"""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from logdrift.stream import LogLine

_LINE = "line"
_END = "end"
_ERROR = "error"


class InvalidWindowError(ValueError):
    """Raised when a non-positive window duration is supplied."""

    def __init__(self) -> None:
        super().__init__("aggregate: window duration must be positive")


@dataclass(frozen=True)
class Summary:
    """Lines seen for one key within a window."""

    key: str
    count: int
    window_end: datetime


class Aggregator:
    """Counts lines per service over a rolling window."""

    def __init__(self, window: float | timedelta) -> None:
        seconds = window.total_seconds() if isinstance(window, timedelta) else float(window)
        if seconds <= 0:
            raise InvalidWindowError()
        self.window = seconds
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {}

    def _flush(self) -> Iterator[Summary]:
        with self._lock:
            snapshot, self._counts = self._counts, {}
        end = datetime.now(timezone.utc)
        for key, count in snapshot.items():
            yield Summary(key=key, count=count, window_end=end)

    def apply(self, lines: Iterable[LogLine]) -> Iterator[Summary]:
        """Tally lines by service, yielding summaries at each window boundary."""
        inbox: queue.SimpleQueue = queue.SimpleQueue()

        def read() -> None:
            try:
                for line in lines:
                    inbox.put((_LINE, line))
            except Exception as exc:
                inbox.put((_ERROR, exc))
            else:
                inbox.put((_END, None))

        threading.Thread(target=read, daemon=True).start()
        next_tick = time.monotonic() + self.window
        while True:
            remaining = next_tick - time.monotonic()
            if remaining <= 0:
                yield from self._flush()
                now = time.monotonic()
                while next_tick <= now:
                    next_tick += self.window
                continue
            try:
                kind, payload = inbox.get(timeout=remaining)
            except queue.Empty:
                continue
            if kind == _LINE:
                with self._lock:
                    self._counts[payload.service] = self._counts.get(payload.service, 0) + 1
            elif kind == _ERROR:
                raise payload
            else:
                yield from self._flush()
                return