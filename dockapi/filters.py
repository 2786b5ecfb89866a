"""A mapping of filter keys to sets of values, with its JSON encodings."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .versions import less_than


class BadFormatError(ValueError):
    """A filter flag was not of the form ``name=value``."""

    def __init__(self, message: str = "bad format of filter (expected name=value)") -> None:
        super().__init__(message)


class InvalidFilterError(ValueError):
    """A filter key is not among the accepted ones."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid filter '{name}'")


@dataclass(frozen=True)
class KeyValuePair:
    """A key and a value used to seed :class:`Args`."""

    key: str
    value: str


def _load(raw: str | bytes) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8")
    return json.loads(raw)


def _decode_sets(raw: str | bytes) -> dict[str, dict[str, bool]]:
    data = _load(raw)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("filters must be a JSON object")
    result: dict[str, dict[str, bool]] = {}
    for key, values in data.items():
        if values is None:
            result[key] = {}
            continue
        if not isinstance(values, dict):
            raise ValueError(f"filter {key!r} must map values to booleans")
        inner: dict[str, bool] = {}
        for value, flag in values.items():
            if flag is None:
                flag = False
            elif not isinstance(flag, bool):
                raise ValueError(f"filter {key!r} value {value!r} must be a boolean")
            inner[value] = flag
        result[key] = inner
    return result


def _decode_legacy(raw: str | bytes) -> dict[str, dict[str, bool]]:
    data = _load(raw)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("filters must be a JSON object")
    result: dict[str, dict[str, bool]] = {}
    for key, values in data.items():
        if values is None:
            result[key] = {}
            continue
        if not isinstance(values, list):
            raise ValueError(f"filter {key!r} must be a list of strings")
        inner: dict[str, bool] = {}
        for value in values:
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ValueError(f"filter {key!r} must be a list of strings")
            inner[value] = True
        result[key] = inner
    return result


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass
class Args:
    """A mapping of keys to sets of values."""

    fields: dict[str, dict[str, bool]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.fields)

    def marshal_json(self) -> str:
        """Encode as JSON; an empty mapping encodes as the empty string."""
        if not self.fields:
            return ""
        return _dumps(self.fields)

    def unmarshal_json(self, raw: str | bytes) -> None:
        """Merge keys decoded from a JSON object of value sets."""
        if not raw:
            return
        self.fields.update(_decode_sets(raw))

    def get(self, key: str) -> list[str]:
        """Return the values stored under ``key``."""
        return list(self.fields.get(key, {}))

    def add(self, key: str, value: str) -> None:
        """Add ``value`` to the set under ``key``."""
        self.fields.setdefault(key, {})[value] = True

    def delete(self, key: str, value: str) -> None:
        """Remove ``value`` from the set under ``key``, dropping the key when empty."""
        values = self.fields.get(key)
        if values is None:
            return
        values.pop(value, None)
        if not values:
            del self.fields[key]

    def match_kv_list(self, key: str, sources: Mapping[str, str] | None) -> bool:
        """Whether every ``k`` or ``k=v`` under ``key`` is present in ``sources``."""
        field_values = self.fields.get(key)
        if not field_values:
            return True
        if not sources:
            return False
        for value in field_values:
            name, sep, expected = value.partition("=")
            if name not in sources:
                return False
            if sep and sources[name] != expected:
                return False
        return True

    def match(self, field: str, source: str) -> bool:
        """Whether any value under ``field`` equals or, as a pattern, matches ``source``."""
        if self.exact_match(field, source):
            return True
        for pattern in self.fields.get(field, {}):
            try:
                if re.search(pattern, source):
                    return True
            except re.error:
                continue
        return False

    def exact_match(self, key: str, source: str) -> bool:
        """Whether ``source`` is one of the values; true when there are none."""
        values = self.fields.get(key)
        if not values:
            return True
        return bool(values.get(source, False))

    def unique_exact_match(self, key: str, source: str) -> bool:
        """Whether there is exactly one value and it equals ``source``; true when there are none."""
        values = self.fields.get(key)
        if not values:
            return True
        if len(values) != 1:
            return False
        return bool(values.get(source, False))

    def fuzzy_match(self, key: str, source: str) -> bool:
        """Whether ``source`` equals a value or starts with one."""
        if self.exact_match(key, source):
            return True
        return any(source.startswith(prefix) for prefix in self.fields.get(key, {}))

    def include(self, field: str) -> bool:
        """Whether ``field`` is a key; same as :meth:`contains`."""
        return field in self.fields

    def contains(self, field: str) -> bool:
        """Whether ``field`` is a key."""
        return field in self.fields

    def validate(self, accepted: Mapping[str, bool] | Iterable[str]) -> None:
        """Raise :class:`InvalidFilterError` for the first key not accepted."""
        for name in self.fields:
            if isinstance(accepted, Mapping):
                allowed = bool(accepted.get(name, False))
            else:
                allowed = name in accepted
            if not allowed:
                raise InvalidFilterError(name)

    def walk_values(self, field: str, op: Callable[[str], Any]) -> None:
        """Call ``op`` for each value under ``field``; an exception from ``op`` stops the walk."""
        for value in list(self.fields.get(field, {})):
            op(value)


def arg(key: str, value: str) -> KeyValuePair:
    """Build a :class:`KeyValuePair`."""
    return KeyValuePair(key, value)


def new_args(*args: KeyValuePair) -> Args:
    """Build :class:`Args` holding the given pairs."""
    result = Args()
    for pair in args:
        result.add(pair.key, pair.value)
    return result


def parse_flag(arg: str, prev: Args | None) -> Args:
    """Parse ``key=value`` and add it to ``prev``, which is returned."""
    filters = prev if prev is not None else Args()
    if not arg:
        return filters
    if "=" not in arg:
        raise BadFormatError()
    name, value = arg.split("=", 1)
    filters.add(name.strip().lower(), value.strip())
    return filters


def to_json(a: Args) -> str:
    """Encode as JSON; an empty mapping encodes as the empty string."""
    if len(a) == 0:
        return ""
    return a.marshal_json()


def to_param(a: Args) -> str:
    """Encode as JSON; same as :func:`to_json`."""
    return to_json(a)


def to_param_with_version(version: str, a: Args) -> str:
    """Encode as JSON, using lists of values for API versions below 1.22."""
    if len(a) == 0:
        return ""
    if version and less_than(version, "1.22"):
        legacy = {
            key: sorted(value for value, flag in values.items() if flag)
            for key, values in a.fields.items()
        }
        return _dumps(legacy)
    return to_json(a)


def from_json(p: str | bytes) -> Args:
    """Decode JSON holding value sets, or the older form holding value lists."""
    args = Args()
    if not p:
        return args
    try:
        args.unmarshal_json(p)
    except ValueError as exc:
        try:
            args.fields = _decode_legacy(p)
        except ValueError:
            raise exc from None
    return args


def from_param(p: str | bytes) -> Args:
    """Decode JSON filters; same as :func:`from_json`."""
    return from_json(p)