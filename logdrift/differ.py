"""Drift detection: classify log lines as novel or already seen.

Modes:
  none  - detection disabled; no line is drift.
  uniq  - exact match after whitespace and case normalisation.
  fuzzy - bigram Dice-coefficient similarity against a threshold.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

DEFAULT_THRESHOLD = 0.8


class DiffMode(str, Enum):
    """How lines are compared across services."""

    NONE = "none"
    UNIQ = "uniq"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class Line:
    """A log line from a named service."""

    service: str
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class Event:
    """A line annotated with whether it counts as drift."""

    line: Line
    drift: bool


def _normalise(text: str) -> str:
    return text.lower().strip()


def _bigrams(text: str) -> Counter:
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """Dice coefficient over the distinct bigrams of a and b."""
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0
    grams_a = _bigrams(a)
    grams_b = _bigrams(b)
    shared = sum((grams_a & grams_b).values())
    return 2 * shared / (len(grams_a) + len(grams_b))


class Differ:
    """Remembers lines seen so far and reports those that diverge."""

    def __init__(self, mode: DiffMode | str = DiffMode.UNIQ, threshold: float = 0.0) -> None:
        self.mode = DiffMode(mode)
        self.threshold = threshold if threshold > 0 else DEFAULT_THRESHOLD
        self._seen: set[str] = set()

    def is_drift(self, line: Line) -> bool:
        """Report whether line differs from everything recorded so far."""
        if self.mode is DiffMode.NONE:
            return False
        norm = _normalise(line.text)
        if self.mode is DiffMode.FUZZY:
            return all(similarity(norm, seen) < self.threshold for seen in self._seen)
        return norm not in self._seen

    def record(self, line: Line) -> None:
        """Remember the normalised text of line."""
        self._seen.add(_normalise(line.text))


class Pipeline:
    """Runs a stream of lines through a Differ."""

    def __init__(self, differ: Differ) -> None:
        self.differ = differ

    def run(self, lines: Iterable[Line]) -> Iterator[Event]:
        """Yield an Event for every line, recording each after it is judged."""
        for line in lines:
            drift = self.differ.is_drift(line)
            self.differ.record(line)
            yield Event(line=line, drift=drift)