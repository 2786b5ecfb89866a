"""Registry settings of the daemon, search results and login replies."""

from __future__ import annotations

import ipaddress
import json
from dataclasses import dataclass, field
from typing import Any, Union

_Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


@dataclass(frozen=True)
class NetIPNet:
    """An IP network in CIDR notation; host bits of the address are cleared."""

    network: _Network

    def __post_init__(self) -> None:
        value = self.network
        if isinstance(value, (ipaddress.IPv4Network, ipaddress.IPv6Network)):
            return
        if not isinstance(value, str):
            raise ValueError(f"invalid CIDR address: {value!r}")
        try:
            parsed = ipaddress.ip_network(value, strict=False)
        except ValueError as exc:
            raise ValueError(f"invalid CIDR address: {value}") from exc
        if "/" not in value:
            raise ValueError(f"invalid CIDR address: {value}")
        object.__setattr__(self, "network", parsed)

    def __str__(self) -> str:
        return str(self.network)

    def to_json(self) -> str:
        """Encode as a JSON string in CIDR notation."""
        return json.dumps(str(self))


def parse_net_ip_net(data: str | bytes) -> NetIPNet:
    """Decode a JSON string holding a network in CIDR notation."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    try:
        text = json.loads(data)
    except ValueError as exc:
        raise ValueError(f"invalid network JSON: {exc}") from exc
    if not isinstance(text, str):
        raise ValueError(f"network must be a JSON string, got {data!r}")
    return NetIPNet(text)


def _as_net(value: NetIPNet | str) -> NetIPNet:
    return value if isinstance(value, NetIPNet) else NetIPNet(value)


@dataclass
class IndexInfo:
    """Information about a registry such as ``docker.io``."""

    name: str = ""
    mirrors: list[str] = field(default_factory=list)
    secure: bool = False
    official: bool = False


@dataclass
class ServiceConfig:
    """Registry configuration of the daemon."""

    allow_nondistributable_artifacts_cidrs: list[NetIPNet] = field(default_factory=list)
    allow_nondistributable_artifacts_hostnames: list[str] = field(default_factory=list)
    insecure_registry_cidrs: list[NetIPNet] = field(default_factory=list)
    index_configs: dict[str, IndexInfo] = field(default_factory=dict)
    mirrors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.allow_nondistributable_artifacts_cidrs = [
            _as_net(item) for item in self.allow_nondistributable_artifacts_cidrs
        ]
        self.insecure_registry_cidrs = [_as_net(item) for item in self.insecure_registry_cidrs]


@dataclass
class SearchResult:
    """One repository found by a registry search."""

    star_count: int = 0
    is_official: bool = False
    name: str = ""
    is_automated: bool = False
    description: str = ""


@dataclass
class SearchResults:
    """The results of a registry search and the query that produced them."""

    query: str = ""
    num_results: int = 0
    results: list[SearchResult] = field(default_factory=list)


@dataclass
class DistributionInspect:
    """Image metadata obtained from a registry: manifest descriptor and platforms."""

    descriptor: dict[str, Any] = field(default_factory=dict)
    platforms: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class AuthenticateOKBody:
    """Reply to a successful login."""

    identity_token: str = ""
    status: str = ""