"""A list of strings whose JSON form may also be a single string."""

from __future__ import annotations

import json
from typing import Iterable


def _decode(data: str) -> list[str]:
    try:
        value = json.loads(data)
    except ValueError as exc:
        raise ValueError(f"invalid string slice: {exc}") from exc
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(item is None or isinstance(item, str) for item in value):
        return ["" if item is None else item for item in value]
    raise ValueError(f"invalid string slice: {data!r}")


class StrSlice(list):
    """A list of strings decoded from either a JSON string or a JSON array."""

    def unmarshal_json(self, data: str | bytes) -> None:
        """Replace the contents with the decoded value; empty input keeps them."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        if not data:
            return
        self[:] = _decode(data)


def marshal_str_slice(value: Iterable[str] | None) -> str:
    """Encode a string slice as a compact JSON array, or ``null`` for ``None``."""
    if value is None:
        return "null"
    return json.dumps(list(value), separators=(",", ":"), ensure_ascii=False)


def parse_str_slice(data: str | bytes) -> StrSlice:
    """Decode a JSON string or array of strings into a new :class:`StrSlice`."""
    result = StrSlice()
    result.unmarshal_json(data)
    return result