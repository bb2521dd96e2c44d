"""Replace pattern matches in log text with a placeholder.

Useful for hiding secrets or personal data before lines are displayed or
stored. Every match of every pattern is replaced with the same placeholder,
``[MASKED]`` unless another is given.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace

from logdrift.stream import LogLine

DEFAULT_PLACEHOLDER = "[MASKED]"


class Masker:
    """Holds compiled masking patterns and their placeholder."""

    def __init__(self, patterns: Sequence[str] | None, placeholder: str = "") -> None:
        if not patterns:
            raise ValueError("mask: at least one pattern required")
        self.placeholder = placeholder or DEFAULT_PLACEHOLDER
        compiled = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as exc:
                raise ValueError(f"mask: invalid pattern {pattern!r}: {exc}") from exc
        self.patterns: tuple[re.Pattern, ...] = tuple(compiled)

    def apply(self, text: str) -> str:
        """Return text with every match of every pattern replaced."""
        for pattern in self.patterns:
            text = pattern.sub(lambda _match: self.placeholder, text)
        return text

    def transform(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line with its text masked."""
        for line in lines:
            yield replace(line, text=self.apply(line.text))