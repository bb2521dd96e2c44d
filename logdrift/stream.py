"""Log line record plus helpers that merge several line streams or fork one."""

from __future__ import annotations

import queue
import threading
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_POLL_SECONDS = 0.05
_ITEM = "item"
_DONE = "done"
_ERROR = "error"


@dataclass(frozen=True)
class LogLine:
    """A single line of output attributed to a service."""

    service: str = ""
    text: str = ""


class NoSourcesError(ValueError):
    """Raised when a merge is requested without any sources."""

    def __init__(self, message: str = "merge: no sources provided") -> None:
        super().__init__(message)


def merge(*sources: Iterable[LogLine]) -> Iterator[LogLine]:
    """Fan several line streams into one, yielding lines in arrival order.

    Each source is read on its own thread, so a slow or blocking source does
    not hold up the others. Closing the returned iterator stops the merge.
    """
    if not sources:
        raise NoSourcesError()
    return _merged(sources)


def merge_two(a: Iterable[LogLine] | None, b: Iterable[LogLine] | None) -> Iterator[LogLine]:
    """Merge exactly two streams; both must be given."""
    if a is None or b is None:
        raise NoSourcesError()
    return merge(a, b)


def _merged(sources: tuple[Iterable[LogLine], ...]) -> Iterator[LogLine]:
    out: queue.Queue = queue.Queue(maxsize=len(sources) * 8)
    stop = threading.Event()

    def offer(message: tuple) -> bool:
        while not stop.is_set():
            try:
                out.put(message, timeout=_POLL_SECONDS)
                return True
            except queue.Full:
                continue
        return False

    def pump(source: Iterable[LogLine]) -> None:
        try:
            for item in source:
                if not offer((_ITEM, item)):
                    return
        except Exception as exc:  # handed to the consumer
            offer((_ERROR, exc))
        else:
            offer((_DONE, None))

    for source in sources:
        threading.Thread(target=pump, args=(source,), daemon=True).start()

    remaining = len(sources)
    try:
        while remaining:
            kind, payload = out.get()
            if kind == _DONE:
                remaining -= 1
            elif kind == _ERROR:
                raise payload
            else:
                yield payload
    finally:
        stop.set()


class _ForkHub:
    """Reads one source on a thread and hands every line to each branch."""

    def __init__(self, source: Iterable[LogLine], n: int, capacity: int) -> None:
        self._queues: list[deque] = [deque() for _ in range(n)]
        self._capacity = capacity
        self._cond = threading.Condition()
        self._finished = False
        self._error: BaseException | None = None
        threading.Thread(target=self._pump, args=(source,), daemon=True).start()

    def _pump(self, source: Iterable[LogLine]) -> None:
        try:
            for line in source:
                self._deliver(line)
        except Exception as exc:
            with self._cond:
                self._error = exc
        finally:
            with self._cond:
                self._finished = True
                self._cond.notify_all()

    def _deliver(self, line: LogLine) -> None:
        with self._cond:
            pending = list(self._queues)
            while pending:
                waiting = []
                for branch in pending:
                    if len(branch) < self._capacity:
                        branch.append(line)
                    else:
                        waiting.append(branch)
                self._cond.notify_all()
                pending = waiting
                if pending:
                    self._cond.wait()

    def branch(self, index: int) -> Iterator[LogLine]:
        pending = self._queues[index]
        while True:
            with self._cond:
                while not pending and not self._finished:
                    self._cond.wait()
                if not pending:
                    if self._error is not None:
                        raise self._error
                    return
                line = pending.popleft()
                self._cond.notify_all()
            yield line


def fork(source: Iterable[LogLine], n: int, buffer: int = 0) -> list[Iterator[LogLine]]:
    """Replicate every line of source into n independent iterators.

    Each branch holds at most ``buffer`` undelivered lines (at least one); the
    next source line is read only once every branch has accepted the current one.
    """
    if n < 0:
        raise ValueError(f"fork: n must be >= 0, got {n}")
    hub = _ForkHub(source, n, max(buffer, 1))
    return [hub.branch(i) for i in range(n)]