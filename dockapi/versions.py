"""Comparison of dotted API version strings such as ``"1.22"``."""

from __future__ import annotations

import re
from itertools import zip_longest

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _component(text: str) -> int:
    """Read one version component; anything that is not an integer counts as 0."""
    if not _INTEGER.fullmatch(text):
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(text)))


def compare(v1: str, v2: str) -> int:
    """Return -1 if ``v1 < v2``, 1 if ``v1 > v2`` and 0 otherwise."""
    for mine, theirs in zip_longest(v1.split("."), v2.split("."), fillvalue=""):
        left, right = _component(mine), _component(theirs)
        if left > right:
            return 1
        if right > left:
            return -1
    return 0


def less_than(v: str, other: str) -> bool:
    """Whether ``v`` is lower than ``other``."""
    return compare(v, other) == -1


def less_than_or_equal_to(v: str, other: str) -> bool:
    """Whether ``v`` is lower than or equal to ``other``."""
    return compare(v, other) <= 0


def greater_than(v: str, other: str) -> bool:
    """Whether ``v`` is higher than ``other``."""
    return compare(v, other) == 1


def greater_than_or_equal_to(v: str, other: str) -> bool:
    """Whether ``v`` is higher than or equal to ``other``."""
    return compare(v, other) >= 0


def equal(v: str, other: str) -> bool:
    """Whether ``v`` and ``other`` denote the same version."""
    return compare(v, other) == 0