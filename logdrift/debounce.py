"""Suppress rapid bursts of identical lines from the same service.

The first occurrence of a text is forwarded. Repeats within the quiet window
are dropped, and each repeat restarts the window. Once the window passes
without a repeat, the next occurrence is forwarded again.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import timedelta

from logdrift.stream import LogLine


@dataclass
class _State:
    last_text: str
    quiet_until: float


class Debouncer:
    """Tracks the last text of each service and when its window ends."""

    def __init__(
        self, window: float | timedelta, clock: Callable[[], float] = time.monotonic
    ) -> None:
        seconds = window.total_seconds() if isinstance(window, timedelta) else float(window)
        if seconds <= 0:
            raise ValueError(f"debounce: window must be positive, got {seconds}s")
        self.window = seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._state: dict[str, _State] = {}

    def allow(self, line: LogLine) -> bool:
        """Report whether line should be forwarded downstream."""
        with self._lock:
            now = self._clock()
            state = self._state.get(line.service)
            if state is None or state.last_text != line.text:
                self._state[line.service] = _State(line.text, now + self.window)
                return True
            suppressed = now < state.quiet_until
            state.quiet_until = now + self.window
            return not suppressed


def apply(debouncer: Debouncer, lines: Iterable[LogLine]) -> Iterator[LogLine]:
    """Yield the lines the debouncer lets through."""
    for line in lines:
        if debouncer.allow(line):
            yield line