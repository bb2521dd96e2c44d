"""Per-service ANSI colours so interleaved lines are easy to tell apart.

Colours come from a fixed palette, handed out in order of first appearance,
and stay the same for a service for the lifetime of the Colorizer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from logdrift.stream import LogLine

PALETTE = (36, 32, 33, 35, 34, 31, 37)
RESET = "\x1b[0m"


class Colorizer:
    """Maps service names to stable ANSI colour codes."""

    def __init__(self) -> None:
        self._assigned: dict[str, int] = {}

    def _code_for(self, service: str) -> int:
        code = self._assigned.get(service)
        if code is None:
            code = PALETTE[len(self._assigned) % len(PALETTE)]
            self._assigned[service] = code
        return code

    def wrap(self, service: str, text: str) -> str:
        """Return text wrapped in the colour of service and a reset."""
        return f"{self.service_color(service)}{text}{RESET}"

    def service_color(self, service: str) -> str:
        """Return the escape sequence that starts the colour of service."""
        return f"\x1b[{self._code_for(service)}m"

    def services(self) -> list[str]:
        """Return the services given a colour so far, in order first seen."""
        return list(self._assigned)


def apply(colorizer: Colorizer, lines: Iterable[LogLine]) -> Iterator[LogLine]:
    """Yield every line with its text wrapped in its service colour."""
    for line in lines:
        yield replace(line, text=colorizer.wrap(line.service, line.text))