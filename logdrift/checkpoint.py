"""Per-service offsets saved to disk so tailing can resume after a restart."""

from __future__ import annotations

import json
import re
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from os import PathLike
from pathlib import Path
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|z|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class Entry:
    """The saved state of one service."""

    service: str
    offset: int
    updated_at: datetime


def _format_time(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if offset is None or offset == timedelta(0):
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(value: Any) -> datetime:
    if value is None:
        return _ZERO_TIME
    if not isinstance(value, str):
        raise ValueError(f"checkpoint: invalid updated_at {value!r}")
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"checkpoint: invalid updated_at {value!r}")
    base, fraction, zone = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    zone = "+00:00" if zone in ("Z", "z") else zone
    moment = datetime.fromisoformat(f"{base.replace(' ', 'T').replace('t', 'T')}{zone}")
    return moment.replace(microsecond=micro)


class Checkpoint:
    """Tracks per-service byte offsets; safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Entry] = {}

    def set(self, service: str, offset: int) -> None:
        """Record offset for service, replacing any earlier value."""
        if not service:
            raise ValueError("checkpoint: service name must not be empty")
        if offset < 0:
            raise ValueError("checkpoint: offset must be non-negative")
        entry = Entry(service=service, offset=offset, updated_at=datetime.now(timezone.utc))
        with self._lock:
            self._entries[service] = entry

    def get(self, service: str) -> int:
        """Return the stored offset for service, or 0 if there is none."""
        with self._lock:
            entry = self._entries.get(service)
        return entry.offset if entry is not None else 0

    def entries(self) -> list[Entry]:
        """Return a snapshot of all stored entries."""
        with self._lock:
            return list(self._entries.values())

    def save(self, path: str | PathLike[str]) -> None:
        """Write the state to path as indented JSON, replacing any old file."""
        payload = [
            {
                "service": entry.service,
                "offset": entry.offset,
                "updated_at": _format_time(entry.updated_at),
            }
            for entry in self.entries()
        ]
        Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")


def load(path: str | PathLike[str]) -> Checkpoint:
    """Read a saved checkpoint; a missing file gives an empty one."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return Checkpoint()
    data = json.loads(raw)
    if data is None:
        data = []
    if not isinstance(data, list):
        raise ValueError("checkpoint: expected a JSON array of entries")
    checkpoint = Checkpoint()
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("checkpoint: each entry must be a JSON object")
        service = item.get("service") or ""
        if not service:
            continue
        offset = item.get("offset") or 0
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise ValueError(f"checkpoint: invalid offset {offset!r}")
        checkpoint._entries[service] = Entry(
            service=service, offset=offset, updated_at=_parse_time(item.get("updated_at"))
        )
    return checkpoint