"""Drop consecutive duplicate lines from the same service."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator

from logdrift.stream import LogLine


class Deduper:
    """Remembers the last line seen for each service label."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: dict[str, str] = {}

    def is_duplicate(self, label: str, text: str) -> bool:
        """Report whether text repeats the previous line of label; record it if not."""
        with self._lock:
            if self._last.get(label) == text and label in self._last:
                return True
            self._last[label] = text
            return False

    def reset(self) -> None:
        """Forget the history of every label."""
        with self._lock:
            self._last.clear()


def apply(deduper: Deduper, lines: Iterable[LogLine]) -> Iterator[LogLine]:
    """Yield lines that do not repeat their service's previous line."""
    for line in lines:
        if not deduper.is_duplicate(line.service, line.text):
            yield line