"""Mount specifications for containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MountType(str, Enum):
    """Kind of mount."""

    BIND = "bind"
    VOLUME = "volume"
    TMPFS = "tmpfs"
    NAMED_PIPE = "npipe"


class Propagation(str, Enum):
    """Mount propagation mode."""

    RPRIVATE = "rprivate"
    PRIVATE = "private"
    RSHARED = "rshared"
    SHARED = "shared"
    RSLAVE = "rslave"
    SLAVE = "slave"


PROPAGATIONS = [
    Propagation.RPRIVATE,
    Propagation.PRIVATE,
    Propagation.RSHARED,
    Propagation.SHARED,
    Propagation.RSLAVE,
    Propagation.SLAVE,
]


class Consistency(str, Enum):
    """Consistency requirement of a mount."""

    FULL = "consistent"
    CACHED = "cached"
    DELEGATED = "delegated"
    DEFAULT = "default"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class BindOptions:
    """Options for bind mounts."""

    propagation: Propagation | str = ""

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.propagation:
            out["Propagation"] = _plain(self.propagation)
        return out


@dataclass
class Driver:
    """A volume driver and its options."""

    name: str = ""
    options: dict[str, str] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["Name"] = self.name
        if self.options:
            out["Options"] = dict(self.options)
        return out


@dataclass
class VolumeOptions:
    """Options for volume mounts."""

    no_copy: bool = False
    labels: dict[str, str] = field(default_factory=dict)
    driver_config: Driver | None = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.no_copy:
            out["NoCopy"] = True
        if self.labels:
            out["Labels"] = dict(self.labels)
        if self.driver_config is not None:
            out["DriverConfig"] = self.driver_config._to_dict()
        return out


@dataclass
class TmpfsOptions:
    """Options for tmpfs mounts: size in bytes and file mode."""

    size_bytes: int = 0
    mode: int = 0

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.size_bytes:
            out["SizeBytes"] = self.size_bytes
        if self.mode:
            out["Mode"] = self.mode
        return out


@dataclass
class Mount:
    """A mount (volume) attached to a container."""

    type: MountType | str = ""
    source: str = ""
    target: str = ""
    read_only: bool = False
    consistency: Consistency | str = ""
    bind_options: BindOptions | None = None
    volume_options: VolumeOptions | None = None
    tmpfs_options: TmpfsOptions | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, leaving out empty fields."""
        out: dict[str, Any] = {}
        if self.type:
            out["Type"] = _plain(self.type)
        if self.source:
            out["Source"] = self.source
        if self.target:
            out["Target"] = self.target
        if self.read_only:
            out["ReadOnly"] = True
        if self.consistency:
            out["Consistency"] = _plain(self.consistency)
        if self.bind_options is not None:
            out["BindOptions"] = self.bind_options._to_dict()
        if self.volume_options is not None:
            out["VolumeOptions"] = self.volume_options._to_dict()
        if self.tmpfs_options is not None:
            out["TmpfsOptions"] = self.tmpfs_options._to_dict()
        return out