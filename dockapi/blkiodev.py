"""Block I/O device weight and throttle settings."""

from __future__ import annotations

from dataclasses import dataclass

_UINT16_MAX = 0xFFFF
_UINT64_MAX = 2**64 - 1


@dataclass
class WeightDevice:
    """A device path and its block I/O weight."""

    path: str
    weight: int

    def __post_init__(self) -> None:
        if not 0 <= self.weight <= _UINT16_MAX:
            raise ValueError(f"weight out of range: {self.weight}")

    def __str__(self) -> str:
        return f"{self.path}:{self.weight}"


@dataclass
class ThrottleDevice:
    """A device path and its rate limit per second."""

    path: str
    rate: int

    def __post_init__(self) -> None:
        if not 0 <= self.rate <= _UINT64_MAX:
            raise ValueError(f"rate out of range: {self.rate}")

    def __str__(self) -> str:
        return f"{self.path}:{self.rate}"