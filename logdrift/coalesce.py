"""Merge bursts of lines from one service into a single line.

Lines are held per service until the service has been quiet for ``window``
seconds. The held texts are then joined with `` | `` and emitted as one line.
Anything still held when the input ends is emitted straight away.
"""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable, Iterator
from datetime import timedelta

from logdrift.stream import LogLine

SEPARATOR = " | "
_LINE = "line"
_END = "end"
_ERROR = "error"


class Coalescer:
    """Buffers lines per service and flushes them after a quiet period."""

    def __init__(self, window: float | timedelta) -> None:
        seconds = window.total_seconds() if isinstance(window, timedelta) else float(window)
        if seconds <= 0:
            raise ValueError(f"coalesce: window must be positive, got {seconds}s")
        self.window = seconds

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield one merged line per burst of each service."""
        inbox: queue.SimpleQueue = queue.SimpleQueue()
        stop = threading.Event()

        def read() -> None:
            try:
                for line in lines:
                    if stop.is_set():
                        return
                    inbox.put((_LINE, line))
            except Exception as exc:
                inbox.put((_ERROR, exc))
            else:
                inbox.put((_END, None))

        threading.Thread(target=read, daemon=True).start()
        held: dict[str, list[str]] = {}
        deadlines: dict[str, float] = {}

        def emit(service: str) -> LogLine:
            deadlines.pop(service, None)
            return LogLine(service=service, text=SEPARATOR.join(held.pop(service)))

        try:
            while True:
                if deadlines:
                    timeout = max(0.0, min(deadlines.values()) - time.monotonic())
                    try:
                        kind, payload = inbox.get(timeout=timeout)
                    except queue.Empty:
                        now = time.monotonic()
                        due = [svc for svc, when in deadlines.items() if when <= now]
                        for service in due:
                            yield emit(service)
                        continue
                else:
                    kind, payload = inbox.get()
                if kind == _LINE:
                    held.setdefault(payload.service, []).append(payload.text)
                    deadlines[payload.service] = time.monotonic() + self.window
                elif kind == _ERROR:
                    raise payload
                else:
                    for service in list(held):
                        yield emit(service)
                    return
        finally:
            stop.set()