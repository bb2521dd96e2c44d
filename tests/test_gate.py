import pytest

from logdrift.gate import Gate, GateConfig
from logdrift.stream import LogLine


def texts(lines):
    return [line.text for line in lines]


def make(*texts_):
    return [LogLine("svc", t) for t in texts_]


def test_empty_open_pattern_raises():
    with pytest.raises(ValueError):
        Gate(GateConfig(open_pattern=""))


def test_invalid_open_pattern_raises():
    with pytest.raises(ValueError):
        Gate(GateConfig(open_pattern="[bad"))


def test_invalid_close_pattern_raises():
    with pytest.raises(ValueError):
        Gate(GateConfig(open_pattern="BEGIN", close_pattern="[bad"))


def test_closed_gate_drops_until_open_then_passes_through_close():
    g = Gate(GateConfig(open_pattern="BEGIN", close_pattern="END"))
    got = list(g.apply(make("noise", "BEGIN x", "work", "END x", "after")))
    assert texts(got) == ["BEGIN x", "work", "END x"]
    assert g.is_open is False


def test_initially_open_passes_until_close():
    g = Gate(GateConfig(open_pattern="BEGIN", close_pattern="END", initially_open=True))
    got = list(g.apply(make("first", "END", "dropped")))
    assert texts(got) == ["first", "END"]


def test_without_close_pattern_stays_open():
    g = Gate(GateConfig(open_pattern="BEGIN"))
    got = list(g.apply(make("skip", "BEGIN", "a", "END", "b")))
    assert texts(got) == ["BEGIN", "a", "END", "b"]
    assert g.is_open is True


def test_line_matching_both_opens_and_closes():
    g = Gate(GateConfig(open_pattern="BEGIN", close_pattern="END"))
    assert g.allow(LogLine("svc", "BEGIN and END")) is True
    assert g.allow(LogLine("svc", "later")) is False


def test_reopens_after_close():
    g = Gate(GateConfig(open_pattern="BEGIN", close_pattern="END"))
    got = list(g.apply(make("BEGIN", "END", "x", "BEGIN", "y")))
    assert texts(got) == ["BEGIN", "END", "BEGIN", "y"]


def test_apply_preserves_service():
    g = Gate(GateConfig(open_pattern=".", initially_open=False))
    got = list(g.apply([LogLine("web", "hello")]))
    assert got == [LogLine("web", "hello")]


def test_apply_empty_input_yields_nothing():
    g = Gate(GateConfig(open_pattern="BEGIN", initially_open=True))
    assert list(g.apply([])) == []