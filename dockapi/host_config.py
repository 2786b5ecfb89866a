"""Host-dependent container settings and the namespace modes they use."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .blkiodev import ThrottleDevice, WeightDevice
from .mount import Mount
from .strslice import StrSlice


def _container_ref(text: str) -> str | None:
    """Return the name after ``container:``, or ``None`` if not of that form."""
    head, sep, tail = text.partition(":")
    if sep and head == "container":
        return tail
    return None


def _after_colon(text: str) -> str:
    _, sep, tail = text.partition(":")
    return tail if sep else ""


class Isolation(str):
    """Isolation technology of a container, with Linux validity rules."""

    def is_default(self) -> bool:
        """Whether this is the daemon's default isolation."""
        return self.lower() == "default" or self == ""

    def is_hyperv(self) -> bool:
        """Whether a Hyper-V partition is used."""
        return self.lower() == "hyperv"

    def is_process(self) -> bool:
        """Whether process isolation is used."""
        return self.lower() == "process"

    def is_valid(self) -> bool:
        """Whether the isolation is supported; only the default on Linux."""
        return self.is_default()


class WindowsIsolation(Isolation):
    """Isolation technology with Windows validity rules."""

    def is_valid(self) -> bool:
        """Whether the isolation is default, Hyper-V or process."""
        return self.is_default() or self.is_hyperv() or self.is_process()


ISOLATION_EMPTY = Isolation("")
ISOLATION_DEFAULT = Isolation("default")
ISOLATION_PROCESS = Isolation("process")
ISOLATION_HYPERV = Isolation("hyperv")


class IpcMode(str):
    """IPC namespace of a container."""

    def is_private(self) -> bool:
        """Whether the container has its own unshareable IPC namespace."""
        return self == "private"

    def is_host(self) -> bool:
        """Whether the host's IPC namespace is shared."""
        return self == "host"

    def is_shareable(self) -> bool:
        """Whether the namespace may be shared with other containers."""
        return self == "shareable"

    def is_container(self) -> bool:
        """Whether another container's IPC namespace is used."""
        return _container_ref(self) is not None

    def is_none(self) -> bool:
        """Whether the mode is ``none``."""
        return self == "none"

    def is_empty(self) -> bool:
        """Whether no mode is set."""
        return self == ""

    def valid(self) -> bool:
        """Whether the mode is one of the known forms."""
        return (
            self.is_empty()
            or self.is_none()
            or self.is_private()
            or self.is_host()
            or self.is_shareable()
            or self.is_container()
        )

    def container(self) -> str:
        """Name of the container whose IPC namespace is used, or ``""``."""
        return _container_ref(self) or ""


class NetworkMode(str):
    """Network stack of a container, with Linux naming rules."""

    def is_none(self) -> bool:
        """Whether no network stack is used."""
        return self == "none"

    def is_default(self) -> bool:
        """Whether the default network stack is used."""
        return self == "default"

    def is_private(self) -> bool:
        """Whether the container has a network stack of its own."""
        return not (self.is_host() or self.is_container())

    def is_container(self) -> bool:
        """Whether another container's network stack is used."""
        return _container_ref(self) is not None

    def connected_container(self) -> str:
        """Id of the container whose network is joined, or ``""``."""
        return _after_colon(self)

    def user_defined(self) -> str:
        """The mode itself if it names a user-created network, else ``""``."""
        return str(self) if self.is_user_defined() else ""

    def is_bridge(self) -> bool:
        """Whether the bridge network stack is used."""
        return self == "bridge"

    def is_host(self) -> bool:
        """Whether the host network stack is used."""
        return self == "host"

    def is_user_defined(self) -> bool:
        """Whether the mode names a user-created network."""
        return not (
            self.is_default()
            or self.is_bridge()
            or self.is_host()
            or self.is_none()
            or self.is_container()
        )

    def network_name(self) -> str:
        """Name of the network stack."""
        if self.is_bridge():
            return "bridge"
        if self.is_host():
            return "host"
        if self.is_container():
            return "container"
        if self.is_none():
            return "none"
        if self.is_default():
            return "default"
        if self.is_user_defined():
            return self.user_defined()
        return ""


class WindowsNetworkMode(NetworkMode):
    """Network stack of a container, with Windows naming rules."""

    def is_bridge(self) -> bool:
        """Whether the NAT network, the Windows bridge, is used."""
        return self == "nat"

    def is_host(self) -> bool:
        """Always false: Windows has no host networking."""
        return False

    def is_user_defined(self) -> bool:
        """Whether the mode names a user-created network."""
        return not (
            self.is_default() or self.is_none() or self.is_bridge() or self.is_container()
        )

    def network_name(self) -> str:
        """Name of the network stack."""
        if self.is_default():
            return "default"
        if self.is_bridge():
            return "nat"
        if self.is_none():
            return "none"
        if self.is_container():
            return "container"
        if self.is_user_defined():
            return self.user_defined()
        return ""


class UsernsMode(str):
    """User namespace mode of a container."""

    def is_host(self) -> bool:
        """Whether the host's user namespace is used."""
        return self == "host"

    def is_private(self) -> bool:
        """Whether a private user namespace is used."""
        return not self.is_host()

    def valid(self) -> bool:
        """Whether the mode is empty or ``host``."""
        return self.split(":")[0] in ("", "host")


class CgroupSpec(str):
    """Cgroup used by a container."""

    def is_container(self) -> bool:
        """Whether another container's cgroup is used."""
        return _container_ref(self) is not None

    def valid(self) -> bool:
        """Whether the spec is empty or refers to a container."""
        return self.is_container() or self == ""

    def container(self) -> str:
        """Name of the container whose cgroup is used, or ``""``."""
        return _after_colon(self)


class UTSMode(str):
    """UTS namespace of a container."""

    def is_private(self) -> bool:
        """Whether a private UTS namespace is used."""
        return not self.is_host()

    def is_host(self) -> bool:
        """Whether the host's UTS namespace is used."""
        return self == "host"

    def valid(self) -> bool:
        """Whether the mode is empty or ``host``."""
        return self.split(":")[0] in ("", "host")


class PidMode(str):
    """PID namespace of a container."""

    def is_private(self) -> bool:
        """Whether a new PID namespace of its own is used."""
        return not (self.is_host() or self.is_container())

    def is_host(self) -> bool:
        """Whether the host's PID namespace is used."""
        return self == "host"

    def is_container(self) -> bool:
        """Whether another container's PID namespace is used."""
        return _container_ref(self) is not None

    def valid(self) -> bool:
        """Whether the mode is empty, ``host`` or ``container:<name>``."""
        parts = self.split(":")
        mode = parts[0]
        if mode in ("", "host"):
            return True
        if mode == "container":
            return len(parts) == 2 and parts[1] != ""
        return False

    def container(self) -> str:
        """Name of the container whose PID namespace is used, or ``""``."""
        return _after_colon(self)


@dataclass
class DeviceMapping:
    """A host device made available inside the container."""

    path_on_host: str = ""
    path_in_container: str = ""
    cgroup_permissions: str = ""


@dataclass
class RestartPolicy:
    """When and how often a container is restarted."""

    name: str = ""
    maximum_retry_count: int = 0

    def is_none(self) -> bool:
        """Whether the container is never restarted automatically."""
        return self.name in ("no", "")

    def is_always(self) -> bool:
        """Whether the container is always restarted."""
        return self.name == "always"

    def is_on_failure(self) -> bool:
        """Whether the container is restarted on a non-zero exit."""
        return self.name == "on-failure"

    def is_unless_stopped(self) -> bool:
        """Whether the container is restarted unless stopped by the user."""
        return self.name == "unless-stopped"

    def is_same(self, other: RestartPolicy) -> bool:
        """Whether both policies have the same name and retry count."""
        return self.name == other.name and self.maximum_retry_count == other.maximum_retry_count


class LogMode(str, Enum):
    """How log messages are handled when they pile up."""

    UNSET = ""
    BLOCKING = "blocking"
    NON_BLOCK = "non-blocking"


@dataclass
class LogConfig:
    """Logging driver and its options."""

    type: str = ""
    config: dict[str, str] = field(default_factory=dict)


@dataclass
class Resources:
    """Resource limits of a container (cgroups, ulimits and the like)."""

    cpu_shares: int = 0
    memory: int = 0
    nano_cpus: int = 0

    cgroup_parent: str = ""
    blkio_weight: int = 0
    blkio_weight_device: list[WeightDevice] = field(default_factory=list)
    blkio_device_read_bps: list[ThrottleDevice] = field(default_factory=list)
    blkio_device_write_bps: list[ThrottleDevice] = field(default_factory=list)
    blkio_device_read_iops: list[ThrottleDevice] = field(default_factory=list)
    blkio_device_write_iops: list[ThrottleDevice] = field(default_factory=list)
    cpu_period: int = 0
    cpu_quota: int = 0
    cpu_realtime_period: int = 0
    cpu_realtime_runtime: int = 0
    cpuset_cpus: str = ""
    cpuset_mems: str = ""
    devices: list[DeviceMapping] = field(default_factory=list)
    device_cgroup_rules: list[str] = field(default_factory=list)
    disk_quota: int = 0
    kernel_memory: int = 0
    memory_reservation: int = 0
    memory_swap: int = 0
    memory_swappiness: int | None = None
    oom_kill_disable: bool | None = None
    pids_limit: int = 0
    ulimits: list[Any] = field(default_factory=list)

    cpu_count: int = 0
    cpu_percent: int = 0
    io_maximum_iops: int = 0
    io_maximum_bandwidth: int = 0


@dataclass
class UpdateConfig(Resources):
    """Attributes of a container that can change while it runs."""

    restart_policy: RestartPolicy = field(default_factory=RestartPolicy)


def _coerce(value: Any, kind: type) -> Any:
    return value if isinstance(value, kind) else kind(value)


@dataclass
class HostConfig(Resources):
    """Settings of a container that depend on the host it runs on."""

    binds: list[str] = field(default_factory=list)
    container_id_file: str = ""
    log_config: LogConfig = field(default_factory=LogConfig)
    network_mode: NetworkMode = NetworkMode("")
    port_bindings: dict[str, list[Any]] = field(default_factory=dict)
    restart_policy: RestartPolicy = field(default_factory=RestartPolicy)
    auto_remove: bool = False
    volume_driver: str = ""
    volumes_from: list[str] = field(default_factory=list)

    cap_add: StrSlice = field(default_factory=StrSlice)
    cap_drop: StrSlice = field(default_factory=StrSlice)
    dns: list[str] = field(default_factory=list)
    dns_options: list[str] = field(default_factory=list)
    dns_search: list[str] = field(default_factory=list)
    extra_hosts: list[str] = field(default_factory=list)
    group_add: list[str] = field(default_factory=list)
    ipc_mode: IpcMode = IpcMode("")
    cgroup: CgroupSpec = CgroupSpec("")
    links: list[str] = field(default_factory=list)
    oom_score_adj: int = 0
    pid_mode: PidMode = PidMode("")
    privileged: bool = False
    publish_all_ports: bool = False
    readonly_rootfs: bool = False
    security_opt: list[str] = field(default_factory=list)
    storage_opt: dict[str, str] = field(default_factory=dict)
    tmpfs: dict[str, str] = field(default_factory=dict)
    uts_mode: UTSMode = UTSMode("")
    userns_mode: UsernsMode = UsernsMode("")
    shm_size: int = 0
    sysctls: dict[str, str] = field(default_factory=dict)
    runtime: str = ""

    console_size: tuple[int, int] = (0, 0)
    isolation: Isolation = Isolation("")

    mounts: list[Mount] = field(default_factory=list)
    init: bool | None = None

    def __post_init__(self) -> None:
        self.network_mode = _coerce(self.network_mode, NetworkMode)
        self.ipc_mode = _coerce(self.ipc_mode, IpcMode)
        self.cgroup = _coerce(self.cgroup, CgroupSpec)
        self.pid_mode = _coerce(self.pid_mode, PidMode)
        self.uts_mode = _coerce(self.uts_mode, UTSMode)
        self.userns_mode = _coerce(self.userns_mode, UsernsMode)
        self.isolation = _coerce(self.isolation, Isolation)
        self.cap_add = _coerce(self.cap_add, StrSlice)
        self.cap_drop = _coerce(self.cap_drop, StrSlice)
        self.console_size = tuple(self.console_size)