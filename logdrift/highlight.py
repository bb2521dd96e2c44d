"""Keyword-based ANSI colour highlighting of log text."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

ANSI_RESET = "\x1b[0m"
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class _Rule:
    pattern: re.Pattern
    code: str


class Highlighter:
    """Wraps matches of each pattern in its ANSI colour, rules applied in order."""

    def __init__(self, keywords: Mapping[str, str]) -> None:
        rules = []
        for pattern, colour in keywords.items():
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"highlight: invalid pattern {pattern!r}: {exc}") from exc
            rules.append(_Rule(pattern=compiled, code=f"\x1b[{colour}m"))
        self._rules: tuple[_Rule, ...] = tuple(rules)

    def apply(self, text: str) -> str:
        """Return text with every match wrapped in its colour and a reset."""
        for rule in self._rules:
            text = rule.pattern.sub(
                lambda match, code=rule.code: f"{code}{match.group(0)}{ANSI_RESET}", text
            )
        return text

    def summary(self) -> str:
        """Describe the active rules."""
        if not self._rules:
            return "no highlight rules"
        patterns = ", ".join(rule.pattern.pattern for rule in self._rules)
        return f"{len(self._rules)} rule(s): {patterns}"


def apply_to_line(highlighter: Highlighter | None, text: str) -> str:
    """Highlight text when a highlighter is given; otherwise return it as is."""
    if highlighter is None:
        return text
    return highlighter.apply(text)


def strip_ansi(text: str) -> str:
    """Remove ANSI colour escape sequences from text."""
    return _ANSI_RE.sub("", text)