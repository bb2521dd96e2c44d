"""Include/exclude filtering of log lines by regular expression.

When include patterns are given, only lines matching at least one of them
pass. Exclude patterns are checked as well and drop any line they match.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from logdrift.stream import LogLine


@dataclass
class FilterConfig:
    """Raw pattern strings for building a Filter."""

    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)


def _compile_all(patterns: Sequence[str]) -> tuple[re.Pattern, ...]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ValueError(f"filter: invalid pattern {pattern!r}: {exc}") from exc
    return tuple(compiled)


class Filter:
    """Compiled include and exclude patterns."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        config = config if config is not None else FilterConfig()
        self.include = _compile_all(config.include or ())
        self.exclude = _compile_all(config.exclude or ())

    def allow(self, text: str) -> bool:
        """Report whether text passes the filter."""
        if any(pattern.search(text) for pattern in self.exclude):
            return False
        if not self.include:
            return True
        return any(pattern.search(text) for pattern in self.include)


def apply(line_filter: Filter, lines: Iterable[LogLine]) -> Iterator[LogLine]:
    """Yield the lines whose text the filter allows."""
    for line in lines:
        if line_filter.allow(line.text):
            yield line