"""Real-time filtering of log lines by regular expressions.

In normal mode only lines matching at least one pattern pass; in invert mode
(like ``grep -v``) only lines matching none of them pass. Patterns are
compiled once, when the Grep is built.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

from logdrift.stream import LogLine


class Grep:
    """Filters lines by compiled patterns, optionally inverted."""

    def __init__(self, patterns: Sequence[str] | None, invert: bool = False) -> None:
        if not patterns:
            raise ValueError("grep: at least one pattern required")
        compiled = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as exc:
                raise ValueError(f"grep: invalid pattern {pattern!r}: {exc}") from exc
        self.patterns = tuple(compiled)
        self.invert = invert

    def match(self, text: str) -> bool:
        """Report whether text passes, taking invert mode into account."""
        found = any(pattern.search(text) for pattern in self.patterns)
        return found != self.invert

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield the lines whose text passes ``match``."""
        for line in lines:
            if self.match(line.text):
                yield line