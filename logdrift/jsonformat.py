"""Pretty-print JSON log lines for display.

Lines that are not JSON pass through unchanged, so the stage is safe in any
pipeline whether or not the upstream service writes structured logs.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import replace

from logdrift.stream import LogLine

DEFAULT_INDENT = "  "
_WHITESPACE = " \t\r\n"


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON constant {name}")


def _reindent(document: str, indent: str) -> str:
    """Re-lay out a valid JSON document, keeping its tokens exactly as written."""
    out: list[str] = []
    depth = 0
    i = 0
    size = len(document)
    while i < size:
        char = document[i]
        if char == '"':
            j = i + 1
            while document[j] != '"':
                j += 2 if document[j] == "\\" else 1
            out.append(document[i : j + 1])
            i = j + 1
            continue
        if char in _WHITESPACE:
            i += 1
            continue
        if char in "{[":
            k = i + 1
            while document[k] in _WHITESPACE:
                k += 1
            if document[k] in "}]":
                out.append(char + document[k])
                i = k + 1
                continue
            depth += 1
            out.append(char + "\n" + indent * depth)
        elif char in "}]":
            depth -= 1
            out.append("\n" + indent * depth + char)
        elif char == ",":
            out.append(",\n" + indent * depth)
        elif char == ":":
            out.append(": ")
        else:
            out.append(char)
        i += 1
    return "".join(out)


class JsonFormatter:
    """Pretty-prints lines holding a JSON object or array."""

    def __init__(self, indent: str = "") -> None:
        self.indent = indent or DEFAULT_INDENT

    def format(self, line: LogLine) -> LogLine:
        """Return line with its JSON text indented, or unchanged if not JSON."""
        trimmed = line.text.strip()
        if not trimmed or trimmed[0] not in "{[":
            return line
        try:
            json.loads(trimmed, parse_constant=_reject_constant)
        except ValueError:
            return line
        return replace(line, text=_reindent(trimmed, self.indent))

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line, formatted."""
        for line in lines:
            yield self.format(line)