"""Format log lines with a template.

Recognised placeholders: ``{service}`` (the service name), ``{text}`` (the
line text) and ``{time}`` (the current UTC time in RFC 3339 form).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from datetime import datetime, timezone

from logdrift.stream import LogLine

PLACEHOLDERS = ("{service}", "{text}", "{time}")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TemplateFormatter:
    """Replaces the placeholders of a template with the fields of a line."""

    def __init__(self, template: str, clock: Callable[[], datetime] = _utc_now) -> None:
        if not template:
            raise ValueError("lineformat: template must not be empty")
        if not any(placeholder in template for placeholder in PLACEHOLDERS):
            raise ValueError(
                f"lineformat: template must contain at least one of {list(PLACEHOLDERS)}"
            )
        self.template = template
        self._clock = clock

    def format(self, line: LogLine) -> str:
        """Return the template filled in from line."""
        moment = self._clock().astimezone(timezone.utc)
        stamp = moment.strftime("%Y-%m-%dT%H:%M:%SZ")
        out = self.template.replace("{service}", line.service)
        out = out.replace("{text}", line.text)
        return out.replace("{time}", stamp)


def apply(formatter: TemplateFormatter, lines: Iterable[LogLine]) -> Iterator[LogLine]:
    """Yield every line with its text replaced by the formatted template."""
    for line in lines:
        yield replace(line, text=formatter.format(line))