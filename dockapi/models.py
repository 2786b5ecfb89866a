"""Small response models of the engine API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_UINT16_MAX = 0xFFFF


@dataclass
class ErrorResponse:
    """An error reported by the engine."""

    message: str = ""


@dataclass
class GraphDriverData:
    """A container's graph driver and its data."""

    data: dict[str, str] = field(default_factory=dict)
    name: str = ""


@dataclass
class IDResponse:
    """Reply carrying only the id of a new object."""

    id: str = ""


@dataclass
class ImageDeleteResponseItem:
    """An image that was deleted or untagged."""

    deleted: str = ""
    untagged: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, leaving out empty fields."""
        out: dict[str, Any] = {}
        if self.deleted:
            out["Deleted"] = self.deleted
        if self.untagged:
            out["Untagged"] = self.untagged
        return out


@dataclass
class ImageSummary:
    """Summary of an image as listed by the engine."""

    containers: int = 0
    created: int = 0
    id: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    parent_id: str = ""
    repo_digests: list[str] = field(default_factory=list)
    repo_tags: list[str] = field(default_factory=list)
    shared_size: int = 0
    size: int = 0
    virtual_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the API form."""
        return {
            "Containers": self.containers,
            "Created": self.created,
            "Id": self.id,
            "Labels": dict(self.labels),
            "ParentId": self.parent_id,
            "RepoDigests": list(self.repo_digests),
            "RepoTags": list(self.repo_tags),
            "SharedSize": self.shared_size,
            "Size": self.size,
            "VirtualSize": self.virtual_size,
        }


@dataclass
class Port:
    """An open port of a container and where it is published."""

    ip: str = ""
    private_port: int = 0
    public_port: int = 0
    type: str = ""

    def __post_init__(self) -> None:
        for name in ("private_port", "public_port"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT16_MAX:
                raise ValueError(f"{name} out of range: {value}")

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, leaving out an empty IP and public port."""
        out: dict[str, Any] = {}
        if self.ip:
            out["IP"] = self.ip
        out["PrivatePort"] = self.private_port
        if self.public_port:
            out["PublicPort"] = self.public_port
        out["Type"] = self.type
        return out


@dataclass
class ServiceUpdateResponse:
    """Reply to updating a service."""

    warnings: list[str] = field(default_factory=list)


@dataclass
class VolumeUsageData:
    """Reference count and size of a volume; -1 where not available."""

    ref_count: int = -1
    size: int = -1


@dataclass
class Volume:
    """A volume as described by the engine."""

    name: str = ""
    driver: str = ""
    mountpoint: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    options: dict[str, str] = field(default_factory=dict)
    scope: str = ""
    created_at: str = ""
    status: dict[str, Any] = field(default_factory=dict)
    usage_data: VolumeUsageData | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the API form, leaving out empty optional fields."""
        out: dict[str, Any] = {}
        if self.created_at:
            out["CreatedAt"] = self.created_at
        out["Driver"] = self.driver
        out["Labels"] = dict(self.labels)
        out["Mountpoint"] = self.mountpoint
        out["Name"] = self.name
        out["Options"] = dict(self.options)
        out["Scope"] = self.scope
        if self.status:
            out["Status"] = dict(self.status)
        if self.usage_data is not None:
            out["UsageData"] = {
                "RefCount": self.usage_data.ref_count,
                "Size": self.usage_data.size,
            }
        return out