"""Pull named fields out of key=value or JSON log lines."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Any

from logdrift.stream import LogLine

_KV_RE = re.compile(r'(\w+)=("[^"]*"|\S+)', re.ASCII)


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        number = float(value)
        if number.is_integer() and abs(number) < 1e21:
            return str(int(number))
        return repr(number)
    if isinstance(value, dict):
        inner = " ".join(f"{key}:{_format_value(value[key])}" for key in sorted(value))
        return f"map[{inner}]"
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


class Extractor:
    """Extracts the requested fields from line text."""

    def __init__(self, fields: Sequence[str] | None, use_json: bool = False) -> None:
        if not fields:
            raise ValueError("fieldextract: at least one field required")
        self.fields = tuple(fields)
        self.use_json = use_json

    def extract(self, text: str) -> dict[str, str]:
        """Return the requested fields found in text, in requested order."""
        found = self._extract_json(text) if self.use_json else self._extract_kv(text)
        return {name: found[name] for name in self.fields if name in found}

    def _extract_kv(self, text: str) -> dict[str, str]:
        wanted = set(self.fields)
        return {
            key: value.strip('"')
            for key, value in _KV_RE.findall(text)
            if key in wanted
        }

    def _extract_json(self, text: str) -> dict[str, str]:
        try:
            obj = json.loads(text)
        except ValueError:
            return {}
        if not isinstance(obj, dict):
            return {}
        return {name: _format_value(obj[name]) for name in self.fields if name in obj}

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield lines with their extracted fields prepended as key=value."""
        for line in lines:
            fields = self.extract(line.text)
            if fields:
                prefix = " ".join(f"{key}={value}" for key, value in fields.items())
                line = replace(line, text=f"{prefix} {line.text}")
            yield line