"""Seccomp profiles that restrict the system calls of a container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_UINT64_MAX = 2**64 - 1


class Arch(str, Enum):
    """An architecture permitted for system calls."""

    X86 = "SCMP_ARCH_X86"
    X86_64 = "SCMP_ARCH_X86_64"
    X32 = "SCMP_ARCH_X32"
    ARM = "SCMP_ARCH_ARM"
    AARCH64 = "SCMP_ARCH_AARCH64"
    MIPS = "SCMP_ARCH_MIPS"
    MIPS64 = "SCMP_ARCH_MIPS64"
    MIPS64N32 = "SCMP_ARCH_MIPS64N32"
    MIPSEL = "SCMP_ARCH_MIPSEL"
    MIPSEL64 = "SCMP_ARCH_MIPSEL64"
    MIPSEL64N32 = "SCMP_ARCH_MIPSEL64N32"
    PPC = "SCMP_ARCH_PPC"
    PPC64 = "SCMP_ARCH_PPC64"
    PPC64LE = "SCMP_ARCH_PPC64LE"
    S390 = "SCMP_ARCH_S390"
    S390X = "SCMP_ARCH_S390X"


class Action(str, Enum):
    """Action taken when a seccomp rule matches."""

    KILL = "SCMP_ACT_KILL"
    TRAP = "SCMP_ACT_TRAP"
    ERRNO = "SCMP_ACT_ERRNO"
    TRACE = "SCMP_ACT_TRACE"
    ALLOW = "SCMP_ACT_ALLOW"


class Operator(str, Enum):
    """Comparison applied to a system call argument."""

    NOT_EQUAL = "SCMP_CMP_NE"
    LESS_THAN = "SCMP_CMP_LT"
    LESS_EQUAL = "SCMP_CMP_LE"
    EQUAL_TO = "SCMP_CMP_EQ"
    GREATER_EQUAL = "SCMP_CMP_GE"
    GREATER_THAN = "SCMP_CMP_GT"
    MASKED_EQUAL = "SCMP_CMP_MASKED_EQ"


@dataclass
class Architecture:
    """An architecture and its sub-architectures."""

    arch: Arch = Arch.X86_64
    sub_arches: list[Arch] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.arch = Arch(self.arch)
        self.sub_arches = [Arch(item) for item in self.sub_arches]

    def _to_dict(self) -> dict[str, Any]:
        return {
            "architecture": self.arch.value,
            "subArchitectures": [item.value for item in self.sub_arches],
        }


@dataclass
class Arg:
    """A condition on one system call argument."""

    index: int = 0
    value: int = 0
    value_two: int = 0
    op: Operator = Operator.EQUAL_TO

    def __post_init__(self) -> None:
        self.op = Operator(self.op)
        for name in ("index", "value", "value_two"):
            number = getattr(self, name)
            if not 0 <= number <= _UINT64_MAX:
                raise ValueError(f"{name} out of range: {number}")

    def _to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "value": self.value,
            "valueTwo": self.value_two,
            "op": self.op.value,
        }


@dataclass
class Filter:
    """Capabilities and architectures a rule is conditional on."""

    caps: list[str] = field(default_factory=list)
    arches: list[str] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.caps:
            out["caps"] = list(self.caps)
        if self.arches:
            out["arches"] = list(self.arches)
        return out


@dataclass
class Syscall:
    """A rule for a group of system calls."""

    name: str = ""
    names: list[str] = field(default_factory=list)
    action: Action = Action.ALLOW
    args: list[Arg] = field(default_factory=list)
    comment: str = ""
    includes: Filter = field(default_factory=Filter)
    excludes: Filter = field(default_factory=Filter)

    def __post_init__(self) -> None:
        self.action = Action(self.action)

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.names:
            out["names"] = list(self.names)
        out["action"] = self.action.value
        out["args"] = [item._to_dict() for item in self.args]
        out["comment"] = self.comment
        out["includes"] = self.includes._to_dict()
        out["excludes"] = self.excludes._to_dict()
        return out


@dataclass
class Seccomp:
    """A seccomp profile."""

    default_action: Action = Action.ERRNO
    architectures: list[Arch] = field(default_factory=list)
    arch_map: list[Architecture] = field(default_factory=list)
    syscalls: list[Syscall] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.default_action = Action(self.default_action)
        self.architectures = [Arch(item) for item in self.architectures]

    def to_dict(self) -> dict[str, Any]:
        """Return the profile's JSON form, leaving out empty architecture lists."""
        out: dict[str, Any] = {"defaultAction": self.default_action.value}
        if self.architectures:
            out["architectures"] = [item.value for item in self.architectures]
        if self.arch_map:
            out["archMap"] = [item._to_dict() for item in self.arch_map]
        out["syscalls"] = [item._to_dict() for item in self.syscalls]
        return out