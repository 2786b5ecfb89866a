"""Resource usage statistics reported for a running container."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_UINT64_MAX = 2**64 - 1
_UINT32_MAX = 2**32 - 1

_TIME = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


def _obj(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _uint(data: Mapping[str, Any], key: str, limit: int = _UINT64_MAX) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an unsigned integer, got {value!r}")
    if not 0 <= value <= limit:
        raise ValueError(f"{key} out of range: {value}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _time(data: Mapping[str, Any], key: str) -> datetime | None:
    """Read an RFC 3339 timestamp; the zero time and absence read as ``None``."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a timestamp string, got {value!r}")
    match = _TIME.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid timestamp for {key}: {value!r}")
    year, month, day, hour, minute, second = (int(match.group(i)) for i in range(1, 7))
    micro = int((match.group(7) or "").ljust(6, "0")[:6])
    zone = match.group(8)
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    try:
        moment = datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp for {key}: {value!r}") from exc
    if (year, month, day, hour, minute, second, micro) == (1, 1, 1, 0, 0, 0, 0) and zone == "Z":
        return None
    return moment


def _uint_list(data: Mapping[str, Any], key: str) -> list[int]:
    values = data.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise ValueError(f"{key} must be a list")
    return [_uint({key: item}, key) for item in values]


@dataclass
class ThrottlingData:
    """CPU throttling counters of a container (not used on Windows)."""

    periods: int = 0
    throttled_periods: int = 0
    throttled_time: int = 0

    @classmethod
    def _from_dict(cls, data: Any) -> ThrottlingData:
        data = _obj(data)
        return cls(
            periods=_uint(data, "periods"),
            throttled_periods=_uint(data, "throttled_periods"),
            throttled_time=_uint(data, "throttled_time"),
        )


@dataclass
class CPUUsage:
    """CPU time consumed since the container started."""

    total_usage: int = 0
    percpu_usage: list[int] = field(default_factory=list)
    usage_in_kernelmode: int = 0
    usage_in_usermode: int = 0

    @classmethod
    def _from_dict(cls, data: Any) -> CPUUsage:
        data = _obj(data)
        return cls(
            total_usage=_uint(data, "total_usage"),
            percpu_usage=_uint_list(data, "percpu_usage"),
            usage_in_kernelmode=_uint(data, "usage_in_kernelmode"),
            usage_in_usermode=_uint(data, "usage_in_usermode"),
        )


@dataclass
class CPUStats:
    """All CPU related figures of a container."""

    cpu_usage: CPUUsage = field(default_factory=CPUUsage)
    system_usage: int = 0
    online_cpus: int = 0
    throttling_data: ThrottlingData = field(default_factory=ThrottlingData)

    @classmethod
    def _from_dict(cls, data: Any) -> CPUStats:
        data = _obj(data)
        return cls(
            cpu_usage=CPUUsage._from_dict(data.get("cpu_usage")),
            system_usage=_uint(data, "system_cpu_usage"),
            online_cpus=_uint(data, "online_cpus", _UINT32_MAX),
            throttling_data=ThrottlingData._from_dict(data.get("throttling_data")),
        )


@dataclass
class MemoryStats:
    """Memory figures; Windows fills only the commit and working-set fields."""

    usage: int = 0
    max_usage: int = 0
    stats: dict[str, int] = field(default_factory=dict)
    failcnt: int = 0
    limit: int = 0
    commit: int = 0
    commit_peak: int = 0
    private_working_set: int = 0

    @classmethod
    def _from_dict(cls, data: Any) -> MemoryStats:
        data = _obj(data)
        raw_stats = _obj(data.get("stats"))
        return cls(
            usage=_uint(data, "usage"),
            max_usage=_uint(data, "max_usage"),
            stats={name: _uint(raw_stats, name) for name in raw_stats},
            failcnt=_uint(data, "failcnt"),
            limit=_uint(data, "limit"),
            commit=_uint(data, "commitbytes"),
            commit_peak=_uint(data, "commitpeakbytes"),
            private_working_set=_uint(data, "privateworkingset"),
        )


@dataclass
class BlkioStatEntry:
    """One block I/O figure for a device and operation."""

    major: int = 0
    minor: int = 0
    op: str = ""
    value: int = 0

    @classmethod
    def _from_dict(cls, data: Any) -> BlkioStatEntry:
        data = _obj(data)
        return cls(
            major=_uint(data, "major"),
            minor=_uint(data, "minor"),
            op=_str(data, "op"),
            value=_uint(data, "value"),
        )


def _entries(data: Mapping[str, Any], key: str) -> list[BlkioStatEntry]:
    values = data.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise ValueError(f"{key} must be a list")
    return [BlkioStatEntry._from_dict(item) for item in values]


@dataclass
class BlkioStats:
    """Block I/O service figures (Linux only)."""

    io_service_bytes_recursive: list[BlkioStatEntry] = field(default_factory=list)
    io_serviced_recursive: list[BlkioStatEntry] = field(default_factory=list)
    io_queued_recursive: list[BlkioStatEntry] = field(default_factory=list)
    io_service_time_recursive: list[BlkioStatEntry] = field(default_factory=list)
    io_wait_time_recursive: list[BlkioStatEntry] = field(default_factory=list)
    io_merged_recursive: list[BlkioStatEntry] = field(default_factory=list)
    io_time_recursive: list[BlkioStatEntry] = field(default_factory=list)
    sectors_recursive: list[BlkioStatEntry] = field(default_factory=list)

    @classmethod
    def _from_dict(cls, data: Any) -> BlkioStats:
        data = _obj(data)
        return cls(
            io_service_bytes_recursive=_entries(data, "io_service_bytes_recursive"),
            io_serviced_recursive=_entries(data, "io_serviced_recursive"),
            io_queued_recursive=_entries(data, "io_queue_recursive"),
            io_service_time_recursive=_entries(data, "io_service_time_recursive"),
            io_wait_time_recursive=_entries(data, "io_wait_time_recursive"),
            io_merged_recursive=_entries(data, "io_merged_recursive"),
            io_time_recursive=_entries(data, "io_time_recursive"),
            sectors_recursive=_entries(data, "sectors_recursive"),
        )


@dataclass
class StorageStats:
    """Disk read and write figures on Windows."""

    read_count_normalized: int = 0
    read_size_bytes: int = 0
    write_count_normalized: int = 0
    write_size_bytes: int = 0

    @classmethod
    def _from_dict(cls, data: Any) -> StorageStats:
        data = _obj(data)
        return cls(
            read_count_normalized=_uint(data, "read_count_normalized"),
            read_size_bytes=_uint(data, "read_size_bytes"),
            write_count_normalized=_uint(data, "write_count_normalized"),
            write_size_bytes=_uint(data, "write_size_bytes"),
        )


@dataclass
class NetworkStats:
    """Traffic figures of one network interface of a container."""

    rx_bytes: int = 0
    rx_packets: int = 0
    rx_errors: int = 0
    rx_dropped: int = 0
    tx_bytes: int = 0
    tx_packets: int = 0
    tx_errors: int = 0
    tx_dropped: int = 0
    endpoint_id: str = ""
    instance_id: str = ""

    @classmethod
    def _from_dict(cls, data: Any) -> NetworkStats:
        data = _obj(data)
        return cls(
            rx_bytes=_uint(data, "rx_bytes"),
            rx_packets=_uint(data, "rx_packets"),
            rx_errors=_uint(data, "rx_errors"),
            rx_dropped=_uint(data, "rx_dropped"),
            tx_bytes=_uint(data, "tx_bytes"),
            tx_packets=_uint(data, "tx_packets"),
            tx_errors=_uint(data, "tx_errors"),
            tx_dropped=_uint(data, "tx_dropped"),
            endpoint_id=_str(data, "endpoint_id"),
            instance_id=_str(data, "instance_id"),
        )


@dataclass
class PidsStats:
    """Number of processes in the cgroup and its limit; a limit of 0 means none."""

    current: int = 0
    limit: int = 0

    @classmethod
    def _from_dict(cls, data: Any) -> PidsStats:
        data = _obj(data)
        return cls(current=_uint(data, "current"), limit=_uint(data, "limit"))


@dataclass
class Stats:
    """All statistics of one container at one moment."""

    read: datetime | None = None
    pre_read: datetime | None = None
    pids_stats: PidsStats = field(default_factory=PidsStats)
    blkio_stats: BlkioStats = field(default_factory=BlkioStats)
    num_procs: int = 0
    storage_stats: StorageStats = field(default_factory=StorageStats)
    cpu_stats: CPUStats = field(default_factory=CPUStats)
    pre_cpu_stats: CPUStats = field(default_factory=CPUStats)
    memory_stats: MemoryStats = field(default_factory=MemoryStats)

    @classmethod
    def _kwargs(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "read": _time(data, "read"),
            "pre_read": _time(data, "preread"),
            "pids_stats": PidsStats._from_dict(data.get("pids_stats")),
            "blkio_stats": BlkioStats._from_dict(data.get("blkio_stats")),
            "num_procs": _uint(data, "num_procs", _UINT32_MAX),
            "storage_stats": StorageStats._from_dict(data.get("storage_stats")),
            "cpu_stats": CPUStats._from_dict(data.get("cpu_stats")),
            "pre_cpu_stats": CPUStats._from_dict(data.get("precpu_stats")),
            "memory_stats": MemoryStats._from_dict(data.get("memory_stats")),
        }

    @classmethod
    def _from_dict(cls, data: Any) -> Stats:
        return cls(**cls._kwargs(_obj(data)))


@dataclass
class StatsJSON(Stats):
    """Statistics together with the container's name, id and per-network figures."""

    name: str = ""
    id: str = ""
    networks: dict[str, NetworkStats] = field(default_factory=dict)

    @classmethod
    def _kwargs(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        kwargs = super()._kwargs(data)
        networks = _obj(data.get("networks"))
        kwargs.update(
            name=_str(data, "name"),
            id=_str(data, "id"),
            networks={key: NetworkStats._from_dict(value) for key, value in networks.items()},
        )
        return kwargs


def parse_stats(data: str | bytes | Mapping[str, Any]) -> StatsJSON:
    """Decode a stats document given as JSON text or as an already decoded object."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise ValueError(f"invalid stats document: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError("stats document must be a JSON object")
    return StatsJSON._from_dict(data)