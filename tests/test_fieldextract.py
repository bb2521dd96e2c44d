import pytest

from logdrift.fieldextract import Extractor
from logdrift.stream import LogLine


def test_no_fields_raises():
    with pytest.raises(ValueError):
        Extractor(None, False)


def test_valid_fields_kept():
    assert Extractor(["level"], False).fields == ("level",)


def test_kv_returns_requested_fields():
    e = Extractor(["level", "msg"], False)
    got = e.extract('level=info msg="hello world" ignored=yes')
    assert got == {"level": "info", "msg": "hello world"}


def test_kv_missing_field_not_in_map():
    assert Extractor(["level"], False).extract("no fields here") == {}


def test_kv_later_match_wins():
    assert Extractor(["a"], False).extract("a=1 a=2") == {"a": "2"}


def test_json_returns_requested_fields():
    e = Extractor(["level", "service"], True)
    got = e.extract('{"level":"warn","service":"api","other":"x"}')
    assert got == {"level": "warn", "service": "api"}


def test_json_values_formatted():
    e = Extractor(["n", "f", "b", "z", "l"], True)
    got = e.extract('{"n": 3, "f": 1.5, "b": true, "z": null, "l": [1, 2]}')
    assert got == {"n": "3", "f": "1.5", "b": "true", "z": "<nil>", "l": "[1 2]"}


def test_json_invalid_returns_empty():
    assert Extractor(["level"], True).extract("not json") == {}


def test_json_non_object_returns_empty():
    assert Extractor(["level"], True).extract("[1, 2]") == {}


def test_apply_annotates_lines():
    e = Extractor(["level"], False)
    got = list(
        e.apply([LogLine("svc", "level=error something happened"), LogLine("svc", "no fields")])
    )
    assert [l.text for l in got] == [
        "level=error level=error something happened",
        "no fields",
    ]
    assert all(l.service == "svc" for l in got)


def test_apply_empty_input():
    assert list(Extractor(["level"]).apply([])) == []