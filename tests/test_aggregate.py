import time
from datetime import datetime, timedelta, timezone

import pytest

from logdrift.aggregate import Aggregator, InvalidWindowError, Summary
from logdrift.stream import LogLine


def _slow_source():
    yield LogLine("svc", "first")
    time.sleep(0.3)
    yield LogLine("svc", "second")


def _broken_source():
    yield LogLine("svc", "ok")
    raise RuntimeError("boom")


def test_negative_window_raises():
    with pytest.raises(InvalidWindowError):
        Aggregator(-1)


def test_zero_window_raises():
    with pytest.raises(InvalidWindowError):
        Aggregator(0)


def test_timedelta_window_accepted():
    assert Aggregator(timedelta(milliseconds=100)).window == 0.1


def test_apply_counts_per_service():
    lines = [LogLine("api", "GET /"), LogLine("api", "POST /login"), LogLine("worker", "job started")]
    summaries = list(Aggregator(10).apply(lines))
    assert sorted((s.key, s.count) for s in summaries) == [("api", 2), ("worker", 1)]


def test_apply_empty_input_no_summaries():
    assert list(Aggregator(10).apply([])) == []


def test_apply_window_end_set():
    before = datetime.now(timezone.utc)
    summaries = list(Aggregator(10).apply([LogLine("svc", "msg")]))
    after = datetime.now(timezone.utc)
    assert len(summaries) == 1
    assert before <= summaries[0].window_end <= after


def test_apply_flushes_on_each_window():
    summaries = list(Aggregator(0.05).apply(_slow_source()))
    assert [(s.key, s.count) for s in summaries] == [("svc", 1), ("svc", 1)]
    assert all(isinstance(s, Summary) for s in summaries)


def test_apply_propagates_source_error():
    with pytest.raises(RuntimeError, match="boom"):
        list(Aggregator(10).apply(_broken_source()))