import pytest

from dockapi.filters import (
    Args,
    BadFormatError,
    InvalidFilterError,
    KeyValuePair,
    arg,
    from_json,
    from_param,
    new_args,
    parse_flag,
    to_json,
    to_param,
    to_param_with_version,
)


def _sample():
    return Args(
        {
            "created": {"today": True},
            "image.name": {"ubuntu*": True, "*untu": True},
        }
    )


def test_parse_args():
    args = new_args()
    for flag in ["created=today", "image.name=ubuntu*", "image.name=*untu"]:
        args = parse_flag(flag, args)
    assert len(args.get("created")) == 1
    assert len(args.get("image.name")) == 2


def test_parse_args_edge_case():
    args = parse_flag("", Args())
    assert len(args) == 0
    with pytest.raises(BadFormatError):
        parse_flag("anything", args)


def test_parse_flag_trims_and_lowers_name():
    args = parse_flag(" Status = running ", new_args())
    assert args.fields == {"status": {"running": True}}


def test_to_json():
    assert to_json(_sample()) == '{"created":{"today":true},"image.name":{"*untu":true,"ubuntu*":true}}'


def test_to_param_with_version():
    str1 = to_param_with_version("1.21", _sample())
    str2 = to_param_with_version("1.22", _sample())
    assert str1 in (
        '{"created":["today"],"image.name":["*untu","ubuntu*"]}',
        '{"created":["today"],"image.name":["ubuntu*","*untu"]}',
    )
    assert str2 in (
        '{"created":{"today":true},"image.name":{"*untu":true,"ubuntu*":true}}',
        '{"created":{"today":true},"image.name":{"ubuntu*":true,"*untu":true}}',
    )


def test_to_param_matches_to_json():
    assert to_param(_sample()) == to_json(_sample())


@pytest.mark.parametrize(
    "invalid",
    ["anything", "['a','list']", "{'key': 'value'}", '{"key": "value"}'],
)
def test_from_json_invalid(invalid):
    with pytest.raises(ValueError):
        from_json(invalid)


@pytest.mark.parametrize(
    "expected, text",
    [
        ({"key": {"value": True}}, '{"key": ["value"]}'),
        ({"key": {"value": True}}, '{"key": {"value": true}}'),
        ({"key": {"value1": True, "value2": True}}, '{"key": ["value1", "value2"]}'),
        ({"key": {"value1": True, "value2": True}}, '{"key": {"value1": true, "value2": true}}'),
        ({"key1": {"value1": True}, "key2": {"value2": True}}, '{"key1": ["value1"], "key2": ["value2"]}'),
        (
            {"key1": {"value1": True}, "key2": {"value2": True}},
            '{"key1": {"value1": true}, "key2": {"value2": true}}',
        ),
    ],
)
def test_from_json_valid(expected, text):
    args = from_json(text)
    assert len(args) == len(expected)
    for key, expected_values in expected.items():
        values = args.get(key)
        assert len(values) == len(expected_values)
        assert all(expected_values.get(v) for v in values)


def test_from_param_matches_from_json():
    assert from_param('{"key": ["value"]}') == from_json('{"key": ["value"]}')


def test_json_roundtrip():
    assert from_json(to_json(_sample())) == _sample()


def test_empty():
    a = Args()
    v = to_json(a)
    assert v == ""
    v1 = from_json(v)
    assert len(a) == len(v1) == 0


def test_match_kv_list_empty_sources():
    assert new_args().match_kv_list("created", {}) is True
    args = Args({"created": {"today": True}})
    assert args.match_kv_list("created", {}) is False


SOURCES = {"key1": "value1", "key2": "value2", "key3": "value3"}


@pytest.mark.parametrize(
    "fields, field",
    [
        ({}, "field"),
        ({"created": {"today": True}, "labels": {"key1": True}}, "labels"),
        ({"created": {"today": True}, "labels": {"key1=value1": True}}, "labels"),
    ],
)
def test_match_kv_list_matches(fields, field):
    assert Args(fields).match_kv_list(field, SOURCES) is True


@pytest.mark.parametrize(
    "fields, field",
    [
        ({"created": {"today": True}}, "created"),
        ({"created": {"today": True}, "labels": {"key4": True}}, "labels"),
        ({"created": {"today": True}, "labels": {"key1=value3": True}}, "labels"),
    ],
)
def test_match_kv_list_differs(fields, field):
    assert Args(fields).match_kv_list(field, SOURCES) is False


def test_match_kv_list_example():
    args = new_args(arg("label", "image=foo"), arg("label", "state=running"))
    assert args.match_kv_list("bogus", None) is True
    assert args.match_kv_list("label", None) is False
    assert args.match_kv_list("label", {"image": "foo", "state": "running"}) is True
    assert args.match_kv_list("label", {"image": "other"}) is False


@pytest.mark.parametrize(
    "fields, field",
    [
        ({}, "field"),
        ({"created": {"today": True}}, "today"),
        ({"created": {"to*": True}}, "created"),
        ({"created": {"to(.*)": True}}, "created"),
        ({"created": {"tod": True}}, "created"),
        ({"created": {"anything": True, "to*": True}}, "created"),
    ],
)
def test_match_matches(fields, field):
    assert Args(fields).match(field, "today") is True


@pytest.mark.parametrize(
    "fields, field",
    [
        ({"created": {"tomorrow": True}}, "created"),
        ({"created": {"to(day": True}}, "created"),
        ({"created": {"tom(.*)": True}}, "created"),
        ({"created": {"tom": True}}, "created"),
        ({"created": {"today1": True}, "labels": {"today": True}}, "created"),
    ],
)
def test_match_differs(fields, field):
    assert Args(fields).match(field, "today") is False


def test_add():
    f = new_args()
    f.add("status", "running")
    v = f.fields["status"]
    assert len(v) == 1 and v["running"]
    f.add("status", "paused")
    assert len(v) == 2 and v["paused"]


def test_del():
    f = new_args()
    f.add("status", "running")
    f.delete("status", "running")
    assert not f.fields.get("status", {}).get("running", False)
    assert f.contains("status") is False


def test_len():
    f = new_args()
    assert len(f) == 0
    f.add("status", "running")
    assert len(f) == 1


def test_exact_match():
    f = new_args()
    assert f.exact_match("status", "running") is True
    f.add("status", "running")
    f.add("status", "pause*")
    assert f.exact_match("status", "running") is True
    assert f.exact_match("status", "paused") is False


def test_only_one_exact_match():
    f = new_args()
    assert f.unique_exact_match("status", "running") is True
    f.add("status", "running")
    assert f.unique_exact_match("status", "running") is True
    assert f.unique_exact_match("status", "paused") is False
    f.add("status", "pause")
    assert f.unique_exact_match("status", "running") is False


def test_contains():
    f = new_args()
    assert f.contains("status") is False
    f.add("status", "running")
    assert f.contains("status") is True


def test_include():
    f = new_args()
    assert f.include("status") is False
    f.add("status", "running")
    assert f.include("status") is True


def test_validate():
    f = new_args()
    f.add("status", "running")
    valid = {"status": True, "dangling": True}
    f.validate(valid)
    f.add("bogus", "running")
    with pytest.raises(InvalidFilterError) as info:
        f.validate(valid)
    assert info.value.name == "bogus"
    assert str(info.value) == "Invalid filter 'bogus'"


def test_walk_values():
    f = new_args()
    f.add("status", "running")
    f.add("status", "paused")
    seen = []
    f.walk_values("status", seen.append)
    assert sorted(seen) == ["paused", "running"]

    def fail(value):
        raise RuntimeError("return")

    with pytest.raises(RuntimeError):
        f.walk_values("status", fail)

    calls = []
    f.walk_values("foo", calls.append)
    assert calls == []


@pytest.mark.parametrize(
    "source, expected",
    [("foo", True), ("foobar", True), ("barfoo", False), ("bar", False)],
)
def test_fuzzy_match(source, expected):
    f = new_args()
    f.add("container", "foo")
    assert f.fuzzy_match("container", source) is expected


def test_new_args_from_pairs():
    args = new_args(KeyValuePair("status", "running"), arg("status", "paused"))
    assert sorted(args.get("status")) == ["paused", "running"]
    assert args.get("missing") == []