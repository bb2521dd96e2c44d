"""Join consecutive log lines from the same service into one line."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from logdrift.stream import LogLine


class Joiner:
    """Joins runs of consecutive lines from one service with a separator.

    A joined line is emitted when the service changes, when ``max_lines``
    lines have been gathered, or when the input ends. It keeps the fields of
    the last line in the run.
    """

    def __init__(self, separator: str, max_lines: int) -> None:
        if not separator:
            raise ValueError("join: separator must not be empty")
        if max_lines < 2:
            raise ValueError(f"join: maxLines must be >= 2, got {max_lines}")
        self.separator = separator
        self.max_lines = max_lines

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield one joined line per run of consecutive same-service lines."""
        current_service = ""
        texts: list[str] = []
        last: LogLine | None = None

        def flush() -> LogLine:
            joined = replace(last, text=self.separator.join(texts))
            texts.clear()
            return joined

        for line in lines:
            if line.service != current_service and current_service != "" and texts:
                yield flush()
            current_service = line.service
            last = line
            texts.append(line.text)
            if len(texts) >= self.max_lines:
                yield flush()
        if texts:
            yield flush()