"""A pass-through that opens and closes on trigger patterns.

While the gate is closed lines are dropped; while it is open they pass. A
line matching the open pattern opens the gate and is itself passed; a line
matching the close pattern closes it and is still passed.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from logdrift.stream import LogLine


@dataclass(frozen=True)
class GateConfig:
    """Trigger patterns and initial state of a Gate."""

    open_pattern: str
    close_pattern: str = ""
    initially_open: bool = False


class Gate:
    """Holds the trigger patterns and the current open or closed state."""

    def __init__(self, config: GateConfig) -> None:
        if not config.open_pattern:
            raise ValueError("gate: OpenPattern must not be empty")
        try:
            self._open_re = re.compile(config.open_pattern)
        except re.error as exc:
            raise ValueError(f"gate: invalid OpenPattern: {exc}") from exc
        self._close_re: re.Pattern | None = None
        if config.close_pattern:
            try:
                self._close_re = re.compile(config.close_pattern)
            except re.error as exc:
                raise ValueError(f"gate: invalid ClosePattern: {exc}") from exc
        self._lock = threading.Lock()
        self._is_open = config.initially_open

    @property
    def is_open(self) -> bool:
        """Whether lines currently pass."""
        with self._lock:
            return self._is_open

    def allow(self, line: LogLine) -> bool:
        """Update the state from line and report whether it should pass."""
        with self._lock:
            if not self._is_open and self._open_re.search(line.text):
                self._is_open = True
            if not self._is_open:
                return False
            if self._close_re is not None and self._close_re.search(line.text):
                self._is_open = False
            return True

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield the lines that pass the gate."""
        for line in lines:
            if self.allow(line):
                yield line