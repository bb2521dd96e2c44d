"""Pattern-based alerting for log streams.

An Alerter holds named regular expressions. Every line passed through
``apply`` is tested against each rule, and each match yields an Event that
carries the rule name, the service and the original line text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from logdrift.stream import LogLine


@dataclass(frozen=True)
class Rule:
    """A named alert trigger."""

    name: str
    pattern: re.Pattern


@dataclass(frozen=True)
class Event:
    """Emitted when a rule matches a log line."""

    rule: str
    service: str
    line: str


class Alerter:
    """Checks log lines against a set of named patterns."""

    def __init__(self, patterns: Mapping[str, str]) -> None:
        if not patterns:
            raise ValueError("alert: at least one pattern required")
        rules = []
        for name, pattern in patterns.items():
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"alert: pattern {name!r}: {exc}") from exc
            rules.append(Rule(name=name, pattern=compiled))
        self.rules: tuple[Rule, ...] = tuple(rules)

    def check(self, service: str, text: str) -> list[Event]:
        """Return an Event for every rule that matches text."""
        return [
            Event(rule=rule.name, service=service, line=text)
            for rule in self.rules
            if rule.pattern.search(text)
        ]


def apply(alerter: Alerter, lines: Iterable[LogLine]) -> Iterator[Event]:
    """Yield the events raised by each line of the stream."""
    for line in lines:
        yield from alerter.check(line.service, line.text)