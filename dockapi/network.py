"""Network configuration of containers and their endpoints."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Address:
    """An IP address and its prefix length."""

    addr: str = ""
    prefix_len: int = 0


@dataclass
class IPAMConfig:
    """One IP address management configuration."""

    subnet: str = ""
    ip_range: str = ""
    gateway: str = ""
    aux_address: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, leaving out empty fields."""
        out: dict[str, Any] = {}
        if self.subnet:
            out["Subnet"] = self.subnet
        if self.ip_range:
            out["IPRange"] = self.ip_range
        if self.gateway:
            out["Gateway"] = self.gateway
        if self.aux_address:
            out["AuxiliaryAddresses"] = dict(self.aux_address)
        return out


@dataclass
class IPAM:
    """IP address management of a network."""

    driver: str = ""
    options: dict[str, str] = field(default_factory=dict)
    config: list[IPAMConfig] = field(default_factory=list)


@dataclass
class EndpointIPAMConfig:
    """IP address management settings of one endpoint."""

    ipv4_address: str = ""
    ipv6_address: str = ""
    link_local_ips: list[str] = field(default_factory=list)

    def copy(self) -> EndpointIPAMConfig:
        """Return a copy that shares no list with this one."""
        return EndpointIPAMConfig(
            ipv4_address=self.ipv4_address,
            ipv6_address=self.ipv6_address,
            link_local_ips=list(self.link_local_ips),
        )


@dataclass
class PeerInfo:
    """One peer of an overlay network."""

    name: str = ""
    ip: str = ""


@dataclass
class EndpointSettings:
    """Configuration and operational data of a network endpoint."""

    ipam_config: EndpointIPAMConfig | None = None
    links: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    network_id: str = ""
    endpoint_id: str = ""
    gateway: str = ""
    ip_address: str = ""
    ip_prefix_len: int = 0
    ipv6_gateway: str = ""
    global_ipv6_address: str = ""
    global_ipv6_prefix_len: int = 0
    mac_address: str = ""
    driver_opts: dict[str, str] = field(default_factory=dict)

    def copy(self) -> EndpointSettings:
        """Return a copy with its own IPAM config, links and aliases."""
        duplicate = _copy.copy(self)
        if self.ipam_config is not None:
            duplicate.ipam_config = self.ipam_config.copy()
        duplicate.links = list(self.links)
        duplicate.aliases = list(self.aliases)
        return duplicate


@dataclass
class Task:
    """One backend task of a service."""

    name: str = ""
    endpoint_id: str = ""
    endpoint_ip: str = ""
    info: dict[str, str] = field(default_factory=dict)


@dataclass
class ServiceInfo:
    """Service parameters and the tasks behind the service."""

    vip: str = ""
    ports: list[str] = field(default_factory=list)
    local_lb_index: int = 0
    tasks: list[Task] = field(default_factory=list)


@dataclass
class NetworkingConfig:
    """Endpoint settings for each network a container joins, keyed by network."""

    endpoints_config: dict[str, EndpointSettings] = field(default_factory=dict)


@dataclass
class ConfigReference:
    """The network that provides another network's configuration."""

    network: str = ""