import json

import pytest

from dockapi.strslice import StrSlice, marshal_str_slice, parse_str_slice


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (StrSlice(), "[]"),
        (StrSlice(["/bin/sh", "-c", "echo"]), '["/bin/sh","-c","echo"]'),
    ],
)
def test_marshal(value, expected):
    assert marshal_str_slice(value) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        ("", ["default", "values"]),
        ("[]", []),
        ('["/bin/sh","-c","echo"]', ["/bin/sh", "-c", "echo"]),
    ],
)
def test_unmarshal(data, expected):
    strs = StrSlice(["default", "values"])
    strs.unmarshal_json(data.encode())
    assert list(strs) == expected


def test_unmarshal_string():
    e = StrSlice()
    e.unmarshal_json(json.dumps("echo"))
    assert len(e) == 1
    assert e[0] == "echo"


def test_unmarshal_slice():
    e = StrSlice()
    e.unmarshal_json(json.dumps(["echo"]))
    assert len(e) == 1
    assert e[0] == "echo"


def test_parse_str_slice_roundtrip():
    original = ["sh", "-c", "ls -l"]
    parsed = parse_str_slice(marshal_str_slice(original))
    assert parsed == original
    assert isinstance(parsed, StrSlice)


@pytest.mark.parametrize("data", ["123", "[1, 2]", '{"a": "b"}', "not json"])
def test_unmarshal_rejects_other_values(data):
    strs = StrSlice(["kept"])
    with pytest.raises(ValueError):
        strs.unmarshal_json(data)
    assert strs == ["kept"]