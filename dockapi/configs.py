"""Parameters passed to the engine backend and registry credentials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .container_config import Config
from .host_config import HostConfig
from .network import NetworkingConfig


@dataclass
class ContainerCreateConfig:
    """Everything needed to create a container."""

    name: str = ""
    config: Config | None = None
    host_config: HostConfig | None = None
    networking_config: NetworkingConfig | None = None
    adjust_cpu_shares: bool = False


@dataclass
class ContainerRmConfig:
    """What to do when removing a container."""

    force_remove: bool = False
    remove_volume: bool = False
    remove_link: bool = False


@dataclass
class ExecConfig:
    """Configuration of a command executed in a running container."""

    user: str = ""
    privileged: bool = False
    tty: bool = False
    attach_stdin: bool = False
    attach_stderr: bool = False
    attach_stdout: bool = False
    detach: bool = False
    detach_keys: str = ""
    env: list[str] = field(default_factory=list)
    working_dir: str = ""
    cmd: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.env = list(self.env)
        self.cmd = list(self.cmd)


@dataclass
class PluginRmConfig:
    """How to remove a plugin."""

    force_remove: bool = False


@dataclass
class PluginEnableConfig:
    """How to enable a plugin."""

    timeout: int = 0


@dataclass
class PluginDisableConfig:
    """How to disable a plugin."""

    force_disable: bool = False


@dataclass
class AuthConfig:
    """Credentials for a registry."""

    username: str = ""
    password: str = ""
    auth: str = ""
    email: str = ""
    server_address: str = ""
    identity_token: str = ""
    registry_token: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        pairs = (
            ("username", self.username),
            ("password", self.password),
            ("auth", self.auth),
            ("email", self.email),
            ("serveraddress", self.server_address),
            ("identitytoken", self.identity_token),
            ("registrytoken", self.registry_token),
        )
        return {key: value for key, value in pairs if value}