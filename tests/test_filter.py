import pytest

from logdrift.filter import Filter, FilterConfig, apply
from logdrift.stream import LogLine


def test_invalid_include_pattern_raises():
    with pytest.raises(ValueError):
        Filter(FilterConfig(include=["[invalid"]))


def test_invalid_exclude_pattern_raises():
    with pytest.raises(ValueError):
        Filter(FilterConfig(exclude=["[bad"]))


@pytest.mark.parametrize("text", ["", "hello", "ERROR: boom"])
def test_no_patterns_allows_all(text):
    assert Filter(FilterConfig()).allow(text) is True


def test_default_config_allows_all():
    assert Filter().allow("anything") is True


def test_include_only():
    f = Filter(FilterConfig(include=["ERROR", "WARN"]))
    assert f.allow("ERROR: something") is True
    assert f.allow("WARN: heads up") is True
    assert f.allow("INFO: boring") is False


def test_exclude_only():
    f = Filter(FilterConfig(exclude=["DEBUG"]))
    assert f.allow("DEBUG: noisy") is False
    assert f.allow("INFO: useful") is True


def test_include_and_exclude():
    f = Filter(FilterConfig(include=["ERROR"], exclude=["transient"]))
    assert f.allow("ERROR: real problem") is True
    assert f.allow("ERROR: transient blip") is False
    assert f.allow("INFO: unrelated") is False


def test_apply_filters_lines():
    f = Filter(FilterConfig(include=["ERROR"]))
    lines = [
        LogLine("svc", "ERROR: bad thing"),
        LogLine("svc", "INFO: all good"),
        LogLine("svc", "ERROR: another bad"),
    ]
    got = list(apply(f, lines))
    assert [line.text for line in got] == ["ERROR: bad thing", "ERROR: another bad"]


def test_apply_empty_input_yields_nothing():
    assert list(apply(Filter(FilterConfig()), [])) == []