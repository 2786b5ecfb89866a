"""Container and statistics shapes of older engine API versions (1.19 and 1.20)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .container_config import Config
from .containers import (
    ContainerJSONBase,
    DefaultNetworkSettings,
    MountPoint,
    NetworkSettingsBase,
)
from .stats import NetworkStats, Stats


def _exposed(ports: list[str]) -> dict[str, dict] | None:
    if not ports:
        return None
    return {port: {} for port in sorted(ports)}


@dataclass
class V120ContainerConfig(Config):
    """Container configuration as reported by API version 1.20."""

    volume_driver: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the API form; the legacy fields are always present."""
        out = super().to_dict()
        out["MacAddress"] = self.mac_address
        out["NetworkDisabled"] = self.network_disabled
        out["ExposedPorts"] = _exposed(self.exposed_ports)
        out["VolumeDriver"] = self.volume_driver
        return out


@dataclass
class V119ContainerConfig(V120ContainerConfig):
    """Container configuration as reported by API versions before 1.20."""

    memory: int = 0
    memory_swap: int = 0
    cpu_shares: int = 0
    cpu_set: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, with resource settings that now live elsewhere."""
        out = super().to_dict()
        out["Memory"] = self.memory
        out["MemorySwap"] = self.memory_swap
        out["CpuShares"] = self.cpu_shares
        out["Cpuset"] = self.cpu_set
        return out


@dataclass
class V120NetworkSettings(DefaultNetworkSettings, NetworkSettingsBase):
    """Network settings as reported before API version 1.21."""


@dataclass
class V119ContainerJSON(ContainerJSONBase):
    """Container details as reported by API versions before 1.20."""

    volumes: dict[str, str] = field(default_factory=dict)
    volumes_rw: dict[str, bool] = field(default_factory=dict)
    config: V119ContainerConfig | None = None
    network_settings: V120NetworkSettings | None = None


@dataclass
class V120ContainerJSON(ContainerJSONBase):
    """Container details as reported by API version 1.20."""

    mounts: list[MountPoint] = field(default_factory=list)
    config: V120ContainerConfig | None = None
    network_settings: V120NetworkSettings | None = None


@dataclass
class V120StatsJSON(Stats):
    """Statistics with a single network, as reported before API version 1.21."""

    network: NetworkStats = field(default_factory=NetworkStats)