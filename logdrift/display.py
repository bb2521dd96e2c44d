"""Terminal output of drift events."""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import TextIO

from logdrift.differ import Event

_PALETTE = ("36", "32", "35", "33", "34", "96", "92")
_DRIFT_CODE = "91;1"
_RESET = "\x1b[0m"


def _auto_color(out: TextIO) -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def _rfc3339(moment: datetime) -> str:
    moment = moment.replace(microsecond=0)
    if moment.tzinfo is None:
        moment = moment.astimezone()
    if moment.utcoffset() == timedelta(0):
        return moment.strftime("%Y-%m-%dT%H:%M:%S") + "Z"
    return moment.isoformat(timespec="seconds")


class Printer:
    """Writes formatted events, one per line, with a stable colour per service."""

    def __init__(self, out: TextIO | None = None, color: bool | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._color = _auto_color(self._out) if color is None else color
        self._lock = threading.Lock()
        self._assigned: dict[str, str] = {}

    def _paint(self, code: str, text: str) -> str:
        return f"\x1b[{code}m{text}{_RESET}" if self._color else text

    def _code_for(self, service: str) -> str:
        code = self._assigned.get(service)
        if code is None:
            code = _PALETTE[len(self._assigned) % len(_PALETTE)]
            self._assigned[service] = code
        return code

    def print(self, event: Event) -> None:
        """Write a single event."""
        line = event.line
        with self._lock:
            label = self._paint(self._code_for(line.service), f"{line.service:<15}")
            tag = self._paint(_DRIFT_CODE, " [DRIFT]") if event.drift else ""
            text = line.text.rstrip("\r\n")
            self._out.write(f"{_rfc3339(line.timestamp)} {label} {text}{tag}\n")

    def run(self, events: Iterable[Event]) -> None:
        """Write every event until the stream ends."""
        for event in events:
            self.print(event)