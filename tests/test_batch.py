import threading
import time

import pytest

from logdrift.batch import Batch
from logdrift.stream import LogLine


def _paused_source(release):
    yield LogLine("api", "line1")
    yield LogLine("api", "line2")
    release.wait(timeout=5)


def _broken_source():
    yield LogLine("svc", "a")
    raise RuntimeError("boom")


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Batch(0, 0.1)


def test_invalid_interval_raises():
    with pytest.raises(ValueError):
        Batch(5, 0)


def test_valid_args_kept():
    b = Batch(5, 0.05)
    assert b.size == 5
    assert b.interval == pytest.approx(0.05)


def test_batches_by_size():
    lines = [LogLine("svc", t) for t in "abcd"]
    batches = list(Batch(2, 0.5).apply(lines))
    assert len(batches) == 2
    assert [len(b) for b in batches] == [2, 2]
    assert [l.text for l in batches[0]] == ["a", "b"]
    assert [l.text for l in batches[1]] == ["c", "d"]


def test_flushes_remainder():
    lines = [LogLine("svc", t) for t in "xyz"]
    batches = list(Batch(10, 0.5).apply(lines))
    assert len(batches) == 1
    assert [l.text for l in batches[0]] == ["x", "y", "z"]


def test_empty_input_yields_nothing():
    assert list(Batch(3, 0.1).apply([])) == []


def test_interval_flushes_partial_batch():
    release = threading.Event()
    out = Batch(100, 0.06).apply(_paused_source(release))
    start = time.monotonic()
    first = next(out)
    elapsed = time.monotonic() - start
    release.set()
    assert [l.text for l in first] == ["line1", "line2"]
    assert elapsed < 2
    assert list(out) == []


def test_source_error_propagates():
    with pytest.raises(RuntimeError, match="boom"):
        list(Batch(10, 5).apply(_broken_source()))