"""Align log lines into fixed-width columns.

Each line is split on a delimiter; the fields that have a configured width
are left-aligned and padded to it, and any further fields are appended as
they are, joined by the delimiter.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace

from logdrift.stream import LogLine


class ColumnFormatter:
    """Pads delimited fields of each line to fixed widths."""

    def __init__(self, delimiter: str, widths: Sequence[int] | None) -> None:
        if not delimiter:
            raise ValueError("columns: delimiter must not be empty")
        if not widths:
            raise ValueError("columns: at least one column width required")
        for index, width in enumerate(widths):
            if width <= 0:
                raise ValueError(f"columns: width[{index}] must be positive, got {width}")
        self.delimiter = delimiter
        self.widths = tuple(widths)

    def format(self, line: LogLine) -> LogLine:
        """Return line with its fields aligned."""
        parts = []
        for index, field in enumerate(line.text.split(self.delimiter)):
            if index < len(self.widths):
                parts.append(f"{field:<{self.widths[index]}}")
            else:
                if index > 0:
                    parts.append(self.delimiter)
                parts.append(field)
        return replace(line, text="".join(parts))

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line, aligned."""
        for line in lines:
            yield self.format(line)