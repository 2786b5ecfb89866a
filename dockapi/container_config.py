"""Portable container configuration and container operation responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .strslice import StrSlice

# Durations are integer nanoseconds; this is the smallest a user may configure.
MINIMUM_DURATION = 1_000_000


def _as_slice(value: Any) -> StrSlice | None:
    if value is None or isinstance(value, StrSlice):
        return value
    return StrSlice(value)


@dataclass
class HealthConfig:
    """Settings for the container health check.

    ``test`` is empty to inherit, ``["NONE"]`` to disable, ``["CMD", ...]`` to
    run arguments directly or ``["CMD-SHELL", command]`` to use the shell.
    Durations are integer nanoseconds; zero means inherit.
    """

    test: list[str] = field(default_factory=list)
    interval: int = 0
    timeout: int = 0
    start_period: int = 0
    retries: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, leaving out empty fields."""
        out: dict[str, Any] = {}
        if self.test:
            out["Test"] = list(self.test)
        if self.interval:
            out["Interval"] = self.interval
        if self.timeout:
            out["Timeout"] = self.timeout
        if self.start_period:
            out["StartPeriod"] = self.start_period
        if self.retries:
            out["Retries"] = self.retries
        return out


@dataclass
class Config:
    """Configuration of a container that does not depend on the host."""

    hostname: str = ""
    domainname: str = ""
    user: str = ""
    attach_stdin: bool = False
    attach_stdout: bool = False
    attach_stderr: bool = False
    exposed_ports: list[str] = field(default_factory=list)
    tty: bool = False
    open_stdin: bool = False
    stdin_once: bool = False
    env: list[str] = field(default_factory=list)
    cmd: StrSlice | None = None
    healthcheck: HealthConfig | None = None
    args_escaped: bool = False
    image: str = ""
    volumes: list[str] = field(default_factory=list)
    working_dir: str = ""
    entrypoint: StrSlice | None = None
    network_disabled: bool = False
    mac_address: str = ""
    on_build: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    stop_signal: str = ""
    stop_timeout: int | None = None
    shell: StrSlice | None = None

    def __post_init__(self) -> None:
        self.cmd = _as_slice(self.cmd)
        self.entrypoint = _as_slice(self.entrypoint)
        self.shell = _as_slice(self.shell)
        self.exposed_ports = list(dict.fromkeys(self.exposed_ports))
        self.volumes = list(dict.fromkeys(self.volumes))

    def to_dict(self) -> dict[str, Any]:
        """Return the API form; optional fields are left out when empty."""
        out: dict[str, Any] = {
            "Hostname": self.hostname,
            "Domainname": self.domainname,
            "User": self.user,
            "AttachStdin": self.attach_stdin,
            "AttachStdout": self.attach_stdout,
            "AttachStderr": self.attach_stderr,
        }
        if self.exposed_ports:
            out["ExposedPorts"] = {port: {} for port in sorted(self.exposed_ports)}
        out["Tty"] = self.tty
        out["OpenStdin"] = self.open_stdin
        out["StdinOnce"] = self.stdin_once
        out["Env"] = list(self.env)
        out["Cmd"] = None if self.cmd is None else list(self.cmd)
        if self.healthcheck is not None:
            out["Healthcheck"] = self.healthcheck.to_dict()
        if self.args_escaped:
            out["ArgsEscaped"] = True
        out["Image"] = self.image
        out["Volumes"] = {path: {} for path in sorted(self.volumes)}
        out["WorkingDir"] = self.working_dir
        out["Entrypoint"] = None if self.entrypoint is None else list(self.entrypoint)
        if self.network_disabled:
            out["NetworkDisabled"] = True
        if self.mac_address:
            out["MacAddress"] = self.mac_address
        out["OnBuild"] = list(self.on_build)
        out["Labels"] = dict(self.labels)
        if self.stop_signal:
            out["StopSignal"] = self.stop_signal
        if self.stop_timeout is not None:
            out["StopTimeout"] = self.stop_timeout
        if self.shell:
            out["Shell"] = list(self.shell)
        return out


@dataclass
class ContainerChangeResponseItem:
    """One filesystem change reported for a container."""

    kind: int = 0
    path: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.kind <= 0xFF:
            raise ValueError(f"kind out of range: {self.kind}")


@dataclass
class ContainerCreateCreatedBody:
    """Reply to creating a container."""

    id: str = ""
    warnings: list[str] = field(default_factory=list)


@dataclass
class ContainerTopOKBody:
    """Processes running in a container and the column titles."""

    processes: list[list[str]] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)


@dataclass
class ContainerUpdateOKBody:
    """Reply to updating a container."""

    warnings: list[str] = field(default_factory=list)


@dataclass
class ContainerWaitOKBodyError:
    """Error met while waiting for a container."""

    message: str = ""


@dataclass
class ContainerWaitOKBody:
    """Reply to waiting for a container: its exit code and any error."""

    error: ContainerWaitOKBodyError | None = None
    status_code: int = 0


class WaitCondition(str, Enum):
    """Container state to wait for."""

    NOT_RUNNING = "not-running"
    NEXT_EXIT = "next-exit"
    REMOVED = "removed"