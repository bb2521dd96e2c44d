"""Stamp a fixed service label onto every line of a stream."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

from logdrift.stream import LogLine


class Labeler:
    """Sets the service of every line to a fixed name."""

    def __init__(self, service: str) -> None:
        if not service:
            raise ValueError("label: service name must not be empty")
        self.service = service

    def apply(self, lines: Iterable[LogLine]) -> Iterator[LogLine]:
        """Yield every line with its service overwritten."""
        for line in lines:
            yield replace(line, service=self.service)


@dataclass(frozen=True)
class ServiceStream:
    """A service name paired with its stream of lines."""

    service: str
    lines: Iterable[LogLine]


def label_all(sources: Sequence[ServiceStream] | None) -> list[Iterator[LogLine]]:
    """Label each stream with its service, ready to be merged."""
    if not sources:
        raise ValueError("label: no sources provided")
    labelers = []
    for source in sources:
        try:
            labelers.append((Labeler(source.service), source.lines))
        except ValueError as exc:
            raise ValueError(f"label: {exc}") from exc
    return [labeler.apply(lines) for labeler, lines in labelers]