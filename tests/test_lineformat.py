from datetime import datetime, timedelta, timezone

import pytest

from logdrift.lineformat import TemplateFormatter, apply
from logdrift.stream import LogLine


def fixed_clock():
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_empty_template_raises():
    with pytest.raises(ValueError):
        TemplateFormatter("")


def test_no_placeholder_raises():
    with pytest.raises(ValueError):
        TemplateFormatter("hello world")


def test_valid_template():
    assert TemplateFormatter("[{service}] {text}").template == "[{service}] {text}"


def test_format_service_and_text():
    formatter = TemplateFormatter("[{service}] {text}")
    assert formatter.format(LogLine("api", "started")) == "[api] started"


def test_format_time_replaced():
    formatter = TemplateFormatter("{time} {text}", clock=fixed_clock)
    assert formatter.format(LogLine("svc", "msg")) == "2024-01-02T03:04:05Z msg"


def test_format_time_converted_to_utc():
    zone = timezone(timedelta(hours=2))
    formatter = TemplateFormatter(
        "{time}", clock=lambda: datetime(2024, 1, 2, 5, 4, 5, tzinfo=zone)
    )
    assert formatter.format(LogLine("svc", "msg")) == "2024-01-02T03:04:05Z"


def test_format_default_clock_fills_time():
    result = TemplateFormatter("{time} {text}").format(LogLine("svc", "msg"))
    assert "{time}" not in result
    assert result.endswith("Z msg")


def test_apply_formats_all_lines():
    formatter = TemplateFormatter(">> [{service}] {text}")
    results = list(apply(formatter, [LogLine("web", "req1"), LogLine("db", "query")]))
    assert results == [
        LogLine("web", ">> [web] req1"),
        LogLine("db", ">> [db] query"),
    ]