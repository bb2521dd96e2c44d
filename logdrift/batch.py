"""Group log lines into fixed-size or time-bounded batches.

A batch is emitted as soon as it holds ``size`` lines, or once ``interval``
seconds have passed since its first line, whichever comes first. Lines left
over when the input ends are emitted as a final batch.
"""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable, Iterator
from datetime import timedelta

from logdrift.stream import LogLine

_LINE = "line"
_END = "end"
_ERROR = "error"


class Batch:
    """Batching configuration and the stage that applies it."""

    def __init__(self, size: int, interval: float | timedelta) -> None:
        if size < 1:
            raise ValueError("batch: size must be at least 1")
        seconds = interval.total_seconds() if isinstance(interval, timedelta) else float(interval)
        if seconds <= 0:
            raise ValueError("batch: interval must be positive")
        self.size = size
        self.interval = seconds

    def apply(self, lines: Iterable[LogLine]) -> Iterator[list[LogLine]]:
        """Yield lists of lines, flushed by size or by elapsed interval."""
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
        pending: list[LogLine] = []
        deadline: float | None = None
        try:
            while True:
                if deadline is None:
                    kind, payload = inbox.get()
                else:
                    try:
                        kind, payload = inbox.get(timeout=max(0.0, deadline - time.monotonic()))
                    except queue.Empty:
                        batch, pending, deadline = pending, [], None
                        yield batch
                        continue
                if kind == _LINE:
                    if not pending:
                        deadline = time.monotonic() + self.interval
                    pending.append(payload)
                    if len(pending) >= self.size:
                        batch, pending, deadline = pending, [], None
                        yield batch
                elif kind == _ERROR:
                    raise payload
                else:
                    if pending:
                        yield pending
                    return
        finally:
            stop.set()