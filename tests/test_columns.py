import pytest

from logdrift.columns import ColumnFormatter
from logdrift.stream import LogLine


def make(text):
    return LogLine("svc", text)


def test_empty_delimiter_raises():
    with pytest.raises(ValueError):
        ColumnFormatter("", [10])


def test_no_widths_raises():
    with pytest.raises(ValueError):
        ColumnFormatter(" ", None)


def test_zero_width_raises():
    with pytest.raises(ValueError, match=r"width\[1\]"):
        ColumnFormatter(" ", [10, 0])


def test_valid_keeps_widths():
    assert ColumnFormatter(" ", [10, 20]).widths == (10, 20)


def test_format_pads_fields():
    f = ColumnFormatter(" ", [10, 15])
    assert f.format(make("INFO starting")).text == "INFO      " + "starting       "


def test_format_extra_fields_appended():
    f = ColumnFormatter("|", [5])
    assert f.format(make("A|B|C")).text == "A    |B|C"


def test_format_long_field_not_truncated():
    f = ColumnFormatter(" ", [3])
    assert f.format(make("LONGFIELD")).text == "LONGFIELD"


def test_format_preserves_service():
    f = ColumnFormatter(" ", [4])
    assert f.format(LogLine("api", "x")).service == "api"


def test_apply_formats_all_lines():
    f = ColumnFormatter(" ", [8])
    got = list(f.apply([make("INFO msg"), make("WARN other")]))
    assert [line.text for line in got] == ["INFO     msg", "WARN     other"]


def test_apply_empty_input():
    assert list(ColumnFormatter(" ", [5]).apply([])) == []