"""Engine plugins: their configuration, settings and requested privileges."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable

_UINT32_MAX = 2**32 - 1


@dataclass
class PluginInterfaceType:
    """An interface a plugin implements, written ``prefix.capability/version``."""

    prefix: str = ""
    capability: str = ""
    version: str = ""

    def __str__(self) -> str:
        return f"{self.prefix}.{self.capability}/{self.version}"

    def to_json(self) -> str:
        """Encode as a JSON string."""
        return json.dumps(str(self), ensure_ascii=False)


def parse_plugin_interface_type(data: str | bytes) -> PluginInterfaceType:
    """Decode a quoted ``prefix.capability/version`` JSON value."""
    text = bytes(data).decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        raise ValueError(f"{text!r} is not a plugin interface type")
    body = text[1:-1]
    slash = body.find("/")
    version_index = len(body) if slash < 0 else slash
    prefix_index = max(body.rfind(".", 0, version_index), 0)
    if prefix_index + 1 > version_index:
        raise ValueError(f"{text!r} is not a plugin interface type")
    version = body[version_index + 1 :] if version_index < len(body) else ""
    return PluginInterfaceType(
        prefix=body[:prefix_index],
        capability=body[prefix_index + 1 : version_index],
        version=version,
    )


def _interface_type(value: PluginInterfaceType | str) -> PluginInterfaceType:
    if isinstance(value, PluginInterfaceType):
        return value
    return parse_plugin_interface_type(json.dumps(value, ensure_ascii=False))


@dataclass
class PluginDevice:
    """A device a plugin uses."""

    description: str = ""
    name: str = ""
    path: str | None = None
    settable: list[str] = field(default_factory=list)


@dataclass
class PluginEnv:
    """An environment variable of a plugin."""

    description: str = ""
    name: str = ""
    settable: list[str] = field(default_factory=list)
    value: str | None = None


@dataclass
class PluginMount:
    """A mount a plugin uses."""

    description: str = ""
    destination: str = ""
    name: str = ""
    options: list[str] = field(default_factory=list)
    settable: list[str] = field(default_factory=list)
    source: str | None = None
    type: str = ""


@dataclass
class PluginConfigArgs:
    """Arguments passed to a plugin."""

    description: str = ""
    name: str = ""
    settable: list[str] = field(default_factory=list)
    value: list[str] = field(default_factory=list)


@dataclass
class PluginConfigInterface:
    """The socket and interface types between the engine and a plugin."""

    socket: str = ""
    types: list[PluginInterfaceType] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.types = [_interface_type(item) for item in self.types]


@dataclass
class PluginConfigLinux:
    """Linux specific settings of a plugin."""

    allow_all_devices: bool = False
    capabilities: list[str] = field(default_factory=list)
    devices: list[PluginDevice] = field(default_factory=list)


@dataclass
class PluginConfigNetwork:
    """Network type of a plugin."""

    type: str = ""


@dataclass
class PluginConfigRootfs:
    """Root filesystem of a plugin."""

    diff_ids: list[str] = field(default_factory=list)
    type: str = ""


@dataclass
class PluginConfigUser:
    """User and group ids a plugin runs as."""

    gid: int = 0
    uid: int = 0

    def __post_init__(self) -> None:
        for name in ("gid", "uid"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT32_MAX:
                raise ValueError(f"{name} out of range: {value}")


@dataclass
class PluginConfig:
    """The configuration of a plugin."""

    args: PluginConfigArgs = field(default_factory=PluginConfigArgs)
    description: str = ""
    docker_version: str = ""
    documentation: str = ""
    entrypoint: list[str] = field(default_factory=list)
    env: list[PluginEnv] = field(default_factory=list)
    interface: PluginConfigInterface = field(default_factory=PluginConfigInterface)
    ipc_host: bool = False
    linux: PluginConfigLinux = field(default_factory=PluginConfigLinux)
    mounts: list[PluginMount] = field(default_factory=list)
    network: PluginConfigNetwork = field(default_factory=PluginConfigNetwork)
    pid_host: bool = False
    propagated_mount: str = ""
    user: PluginConfigUser = field(default_factory=PluginConfigUser)
    work_dir: str = ""
    rootfs: PluginConfigRootfs | None = None


@dataclass
class PluginSettings:
    """Settings of a plugin that users can change."""

    args: list[str] = field(default_factory=list)
    devices: list[PluginDevice] = field(default_factory=list)
    env: list[str] = field(default_factory=list)
    mounts: list[PluginMount] = field(default_factory=list)


@dataclass
class Plugin:
    """A plugin installed in the engine."""

    config: PluginConfig = field(default_factory=PluginConfig)
    enabled: bool = False
    id: str = ""
    name: str = ""
    plugin_reference: str = ""
    settings: PluginSettings = field(default_factory=PluginSettings)


@dataclass
class PluginPrivilege:
    """A permission the user has to accept when installing a plugin."""

    name: str = ""
    description: str = ""
    value: list[str] = field(default_factory=list)


def sort_plugin_privileges(privileges: Iterable[PluginPrivilege]) -> list[PluginPrivilege]:
    """Sort privileges by name, sorting each one's values; lists are sorted in place."""
    result = privileges if isinstance(privileges, list) else list(privileges)
    for privilege in result:
        privilege.value.sort()
    result.sort(key=lambda privilege: privilege.name)
    return result