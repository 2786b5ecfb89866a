"""Containers, their state and network settings, and network requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .filters import Args, new_args
from .host_config import HostConfig
from .container_config import Config
from .models import GraphDriverData, ImageSummary, Port, Volume
from .mount import MountType, Propagation
from .network import (
    IPAM,
    Address,
    ConfigReference,
    EndpointSettings,
    PeerInfo,
    ServiceInfo,
)

NO_HEALTHCHECK = "none"
STARTING = "starting"
HEALTHY = "healthy"
UNHEALTHY = "unhealthy"


def _port_key(port: str) -> str:
    """Normalise a port spec; a bare number is taken as a TCP port."""
    return port if "/" in port else f"{port}/tcp"


@dataclass
class HealthcheckResult:
    """One run of a health check probe.

    Exit codes: 0 healthy, 1 unhealthy, 2 reserved (unhealthy), else an error.
    """

    start: datetime | None = None
    end: datetime | None = None
    exit_code: int = 0
    output: str = ""


@dataclass
class Health:
    """Health check results of a container, oldest log entry first."""

    status: str = ""
    failing_streak: int = 0
    log: list[HealthcheckResult] = field(default_factory=list)


@dataclass
class ContainerState:
    """Running state of a container."""

    status: str = ""
    running: bool = False
    paused: bool = False
    restarting: bool = False
    oom_killed: bool = False
    dead: bool = False
    pid: int = 0
    exit_code: int = 0
    error: str = ""
    started_at: str = ""
    finished_at: str = ""
    health: Health | None = None


@dataclass
class ContainerNode:
    """The swarm node a container runs on."""

    id: str = ""
    ip_address: str = ""
    addr: str = ""
    name: str = ""
    cpus: int = 0
    memory: int = 0
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class MountPoint:
    """A mount point in use by a container."""

    type: MountType | str = ""
    name: str = ""
    source: str = ""
    destination: str = ""
    driver: str = ""
    mode: str = ""
    rw: bool = False
    propagation: Propagation | str = ""


@dataclass
class SummaryNetworkSettings:
    """The networks of a container as shown in a container listing."""

    networks: dict[str, EndpointSettings] = field(default_factory=dict)


@dataclass
class NetworkSettingsBase:
    """Basic network information of a container.

    ``ports`` maps a port such as ``"80/tcp"`` to its host bindings, each a
    ``(host_ip, host_port)`` pair.
    """

    bridge: str = ""
    sandbox_id: str = ""
    hairpin_mode: bool = False
    link_local_ipv6_address: str = ""
    link_local_ipv6_prefix_len: int = 0
    ports: dict[str, list[tuple[str, str]]] = field(default_factory=dict)
    sandbox_key: str = ""
    secondary_ip_addresses: list[Address] = field(default_factory=list)
    secondary_ipv6_addresses: list[Address] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ports = {
            _port_key(port): [tuple(binding) for binding in bindings or []]
            for port, bindings in self.ports.items()
        }

    def host_bindings(self, port: str) -> list[tuple[str, str]]:
        """Return the ``(host_ip, host_port)`` bindings of a container port."""
        return list(self.ports.get(_port_key(port), []))


@dataclass
class DefaultNetworkSettings:
    """Network information of the default network."""

    endpoint_id: str = ""
    gateway: str = ""
    global_ipv6_address: str = ""
    global_ipv6_prefix_len: int = 0
    ip_address: str = ""
    ip_prefix_len: int = 0
    ipv6_gateway: str = ""
    mac_address: str = ""


@dataclass
class NetworkSettings(DefaultNetworkSettings, NetworkSettingsBase):
    """Full network settings of a container, including every network it joined."""

    networks: dict[str, EndpointSettings] = field(default_factory=dict)


@dataclass
class Container:
    """A container as shown in a container listing."""

    id: str = ""
    names: list[str] = field(default_factory=list)
    image: str = ""
    image_id: str = ""
    command: str = ""
    created: int = 0
    ports: list[Port] = field(default_factory=list)
    size_rw: int = 0
    size_root_fs: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    state: str = ""
    status: str = ""
    network_mode: str = ""
    network_settings: SummaryNetworkSettings | None = None
    mounts: list[MountPoint] = field(default_factory=list)


@dataclass
class ContainerJSONBase:
    """Details of a container common to every API version."""

    id: str = ""
    created: str = ""
    path: str = ""
    args: list[str] = field(default_factory=list)
    state: ContainerState | None = None
    image: str = ""
    resolv_conf_path: str = ""
    hostname_path: str = ""
    hosts_path: str = ""
    log_path: str = ""
    node: ContainerNode | None = None
    name: str = ""
    restart_count: int = 0
    driver: str = ""
    platform: str = ""
    mount_label: str = ""
    process_label: str = ""
    app_armor_profile: str = ""
    exec_ids: list[str] = field(default_factory=list)
    host_config: HostConfig | None = None
    graph_driver: GraphDriverData = field(default_factory=GraphDriverData)
    size_rw: int | None = None
    size_root_fs: int | None = None


@dataclass
class ContainerJSON(ContainerJSONBase):
    """Details of a container with its mounts, configuration and networks."""

    mounts: list[MountPoint] = field(default_factory=list)
    config: Config | None = None
    network_settings: NetworkSettings | None = None


@dataclass
class EndpointResource:
    """Addresses a container holds in a network."""

    name: str = ""
    endpoint_id: str = ""
    mac_address: str = ""
    ipv4_address: str = ""
    ipv6_address: str = ""


@dataclass
class NetworkResource:
    """A network as described by the engine."""

    name: str = ""
    id: str = ""
    created: datetime | None = None
    scope: str = ""
    driver: str = ""
    enable_ipv6: bool = False
    ipam: IPAM = field(default_factory=IPAM)
    internal: bool = False
    attachable: bool = False
    ingress: bool = False
    config_from: ConfigReference = field(default_factory=ConfigReference)
    config_only: bool = False
    containers: dict[str, EndpointResource] = field(default_factory=dict)
    options: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    peers: list[PeerInfo] = field(default_factory=list)
    services: dict[str, ServiceInfo] = field(default_factory=dict)


@dataclass
class NetworkCreate:
    """Settings of a network to create."""

    check_duplicate: bool = False
    driver: str = ""
    scope: str = ""
    enable_ipv6: bool = False
    ipam: IPAM | None = None
    internal: bool = False
    attachable: bool = False
    ingress: bool = False
    config_only: bool = False
    config_from: ConfigReference | None = None
    options: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)


def _ipam_dict(ipam: IPAM) -> dict[str, Any]:
    return {
        "Driver": ipam.driver,
        "Options": dict(ipam.options),
        "Config": [item.to_dict() for item in ipam.config],
    }


@dataclass
class NetworkCreateRequest(NetworkCreate):
    """The request sent to create a network: its settings and its name."""

    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the request body."""
        return {
            "CheckDuplicate": self.check_duplicate,
            "Driver": self.driver,
            "Scope": self.scope,
            "EnableIPv6": self.enable_ipv6,
            "IPAM": None if self.ipam is None else _ipam_dict(self.ipam),
            "Internal": self.internal,
            "Attachable": self.attachable,
            "Ingress": self.ingress,
            "ConfigOnly": self.config_only,
            "ConfigFrom": None
            if self.config_from is None
            else {"Network": self.config_from.network},
            "Options": dict(self.options),
            "Labels": dict(self.labels),
            "Name": self.name,
        }


@dataclass
class NetworkCreateResponse:
    """Reply to creating a network."""

    id: str = ""
    warning: str = ""


@dataclass
class NetworkConnect:
    """A container to connect to a network and its endpoint settings."""

    container: str = ""
    endpoint_config: EndpointSettings | None = None


@dataclass
class NetworkDisconnect:
    """A container to disconnect from a network."""

    container: str = ""
    force: bool = False


@dataclass
class NetworkInspectOptions:
    """Options for inspecting a network."""

    scope: str = ""
    verbose: bool = False


@dataclass
class SecretListOptions:
    """Filters for listing secrets."""

    filters: Args = field(default_factory=new_args)


@dataclass
class ConfigListOptions:
    """Filters for listing configs."""

    filters: Args = field(default_factory=new_args)


@dataclass
class DiskUsage:
    """Disk space used by images, containers, volumes and the build cache."""

    layers_size: int = 0
    images: list[ImageSummary] = field(default_factory=list)
    containers: list[Container] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    builder_size: int = 0