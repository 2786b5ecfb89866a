"""Engine system information, image inspection and assorted replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .container_config import Config
from .host_config import Isolation
from .models import GraphDriverData, ImageDeleteResponseItem
from .registry import ServiceConfig


@dataclass
class RootFS:
    """Root filesystem description of an image, with its layer ids."""

    type: str = ""
    layers: list[str] = field(default_factory=list)
    base_layer: str = ""


@dataclass
class ImageMetadata:
    """Engine-local data about an image."""

    last_tag_time: datetime | None = None


@dataclass
class ImageInspect:
    """Detailed information about an image."""

    id: str = ""
    repo_tags: list[str] = field(default_factory=list)
    repo_digests: list[str] = field(default_factory=list)
    parent: str = ""
    comment: str = ""
    created: str = ""
    container: str = ""
    container_config: Config | None = None
    docker_version: str = ""
    author: str = ""
    config: Config | None = None
    architecture: str = ""
    os: str = ""
    os_version: str = ""
    size: int = 0
    virtual_size: int = 0
    graph_driver: GraphDriverData = field(default_factory=GraphDriverData)
    root_fs: RootFS = field(default_factory=RootFS)
    metadata: ImageMetadata = field(default_factory=ImageMetadata)


@dataclass
class Ping:
    """Reply to a ping of the engine."""

    api_version: str = ""
    os_type: str = ""
    experimental: bool = False


@dataclass
class ComponentVersion:
    """Version information of one component of the engine."""

    name: str = ""
    version: str = ""
    details: dict[str, str] = field(default_factory=dict)


@dataclass
class Version:
    """Version information of the engine."""

    platform_name: str = ""
    components: list[ComponentVersion] = field(default_factory=list)
    version: str = ""
    api_version: str = ""
    min_api_version: str = ""
    git_commit: str = ""
    go_version: str = ""
    os: str = ""
    arch: str = ""
    kernel_version: str = ""
    experimental: bool = False
    build_time: str = ""


@dataclass
class Commit:
    """Commit an external tool was built from and the one the engine expects."""

    id: str = ""
    expected: str = ""


@dataclass
class PluginsInfo:
    """Names of the plugins registered with the engine, by kind."""

    volume: list[str] = field(default_factory=list)
    network: list[str] = field(default_factory=list)
    authorization: list[str] = field(default_factory=list)
    log: list[str] = field(default_factory=list)


@dataclass
class Runtime:
    """An OCI runtime and its arguments."""

    path: str = ""
    args: list[str] = field(default_factory=list)


@dataclass
class Info:
    """System-wide information reported by the engine."""

    id: str = ""
    containers: int = 0
    containers_running: int = 0
    containers_paused: int = 0
    containers_stopped: int = 0
    images: int = 0
    driver: str = ""
    driver_status: list[tuple[str, str]] = field(default_factory=list)
    system_status: list[tuple[str, str]] = field(default_factory=list)
    plugins: PluginsInfo = field(default_factory=PluginsInfo)
    memory_limit: bool = False
    swap_limit: bool = False
    kernel_memory: bool = False
    cpu_cfs_period: bool = False
    cpu_cfs_quota: bool = False
    cpu_shares: bool = False
    cpu_set: bool = False
    ipv4_forwarding: bool = False
    bridge_nf_iptables: bool = False
    bridge_nf_ip6tables: bool = False
    debug: bool = False
    n_fd: int = 0
    oom_kill_disable: bool = False
    n_goroutines: int = 0
    system_time: str = ""
    logging_driver: str = ""
    cgroup_driver: str = ""
    n_events_listener: int = 0
    kernel_version: str = ""
    operating_system: str = ""
    os_type: str = ""
    architecture: str = ""
    index_server_address: str = ""
    registry_config: ServiceConfig | None = None
    ncpu: int = 0
    mem_total: int = 0
    docker_root_dir: str = ""
    http_proxy: str = ""
    https_proxy: str = ""
    no_proxy: str = ""
    name: str = ""
    labels: list[str] = field(default_factory=list)
    experimental_build: bool = False
    server_version: str = ""
    cluster_store: str = ""
    cluster_advertise: str = ""
    runtimes: dict[str, Runtime] = field(default_factory=dict)
    default_runtime: str = ""
    live_restore_enabled: bool = False
    isolation: Isolation = Isolation("")
    init_binary: str = ""
    containerd_commit: Commit = field(default_factory=Commit)
    runc_commit: Commit = field(default_factory=Commit)
    init_commit: Commit = field(default_factory=Commit)
    security_options: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.isolation, Isolation):
            self.isolation = Isolation(self.isolation)
        self.driver_status = [tuple(pair) for pair in self.driver_status]
        self.system_status = [tuple(pair) for pair in self.system_status]


@dataclass
class KeyValue:
    """A key and its value."""

    key: str = ""
    value: str = ""


@dataclass
class SecurityOpt:
    """A security option and its settings."""

    name: str = ""
    options: list[KeyValue] = field(default_factory=list)


def decode_security_options(opts: list[str]) -> list[SecurityOpt]:
    """Decode ``name=...,key=value`` strings; a string without ``=`` is a bare name."""
    result: list[SecurityOpt] = []
    for opt in opts:
        if "=" not in opt:
            result.append(SecurityOpt(name=opt))
            continue
        secopt = SecurityOpt()
        for part in opt.split(","):
            key, sep, value = part.partition("=")
            if not sep:
                raise ValueError(f"invalid security option {part!r}")
            if not key or not value:
                raise ValueError("invalid empty security option")
            if key == "name":
                secopt.name = value
            else:
                secopt.options.append(KeyValue(key, value))
        result.append(secopt)
    return result


@dataclass
class ExecStartCheck:
    """Whether an exec starts detached and with a TTY."""

    detach: bool = False
    tty: bool = False


@dataclass
class CopyConfig:
    """Path of a resource to copy out of a container."""

    resource: str = ""


@dataclass
class ContainerPathStat:
    """Information about a file or directory inside a container."""

    name: str = ""
    size: int = 0
    mode: int = 0
    mtime: datetime | None = None
    link_target: str = ""


@dataclass
class Checkpoint:
    """A container checkpoint."""

    name: str = ""


@dataclass
class ContainersPruneReport:
    """Containers deleted by a prune and the space reclaimed."""

    containers_deleted: list[str] = field(default_factory=list)
    space_reclaimed: int = 0


@dataclass
class VolumesPruneReport:
    """Volumes deleted by a prune and the space reclaimed."""

    volumes_deleted: list[str] = field(default_factory=list)
    space_reclaimed: int = 0


@dataclass
class ImagesPruneReport:
    """Images deleted or untagged by a prune and the space reclaimed."""

    images_deleted: list[ImageDeleteResponseItem] = field(default_factory=list)
    space_reclaimed: int = 0


@dataclass
class BuildCachePruneReport:
    """Space reclaimed by pruning the build cache."""

    space_reclaimed: int = 0


@dataclass
class NetworksPruneReport:
    """Networks deleted by a prune."""

    networks_deleted: list[str] = field(default_factory=list)


@dataclass
class SecretCreateResponse:
    """Reply to creating a secret."""

    id: str = ""


@dataclass
class ConfigCreateResponse:
    """Reply to creating a config."""

    id: str = ""


@dataclass
class PushResult:
    """Tag, manifest digest and manifest size of a push."""

    tag: str = ""
    digest: str = ""
    size: int = 0


@dataclass
class BuildResult:
    """Image id of a successful build."""

    id: str = ""