from logdrift.jsonformat import JsonFormatter
from logdrift.stream import LogLine


def line(text):
    return LogLine("svc", text)


def test_default_indent():
    assert JsonFormatter("").indent == "  "


def test_non_json_unchanged():
    assert JsonFormatter().format(line("plain log line")).text == "plain log line"


def test_valid_json_pretty_printed():
    source = line('{"level":"info","msg":"hello"}')
    got = JsonFormatter("  ").format(source)
    assert got.text == '{\n  "level": "info",\n  "msg": "hello"\n}'
    assert len(got.text) > len(source.text)


def test_invalid_json_unchanged():
    assert JsonFormatter().format(line("{bad json")).text == "{bad json"


def test_json_array_pretty_printed():
    got = JsonFormatter("\t").format(line("[1,2,3]"))
    assert got.text == "[\n\t1,\n\t2,\n\t3\n]"


def test_nested_and_empty_containers():
    got = JsonFormatter("  ").format(line('  {"a":{},"b":[ ],"c":{"d":1.50}}  '))
    assert got.text == '{\n  "a": {},\n  "b": [],\n  "c": {\n    "d": 1.50\n  }\n}'


def test_string_with_delimiters_kept_verbatim():
    got = JsonFormatter("  ").format(line('{"k":"a, b: {c}"}'))
    assert got.text == '{\n  "k": "a, b: {c}"\n}'


def test_nan_is_not_json():
    assert JsonFormatter().format(line("[NaN]")).text == "[NaN]"


def test_preserves_service():
    got = JsonFormatter().format(LogLine("api", '{"x":1}'))
    assert got.service == "api"


def test_apply_formats_all_lines():
    results = list(JsonFormatter().apply([line('{"a":1}'), line("not json")]))
    assert [r.text for r in results] == ['{\n  "a": 1\n}', "not json"]