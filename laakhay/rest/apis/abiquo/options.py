"""Options objects accepted by the infrastructure operations."""

from __future__ import annotations

from ...core.options import RequestOptions
from .models import NetworkType


class DatacenterOptions(RequestOptions):
    """Options of datacenter actions (hypervisor detection)."""

    ip: str | None = None


class MachineOptions(RequestOptions):
    """Options of machine discovery and listing.

    ``port`` overrides the hypervisor port used for discovery; ``sync``
    asks the server to refresh state before answering.
    """

    port: int | None = None
    sync: bool | None = None


class IpmiOptions(RequestOptions):
    port: int | None = None


class StoragePoolOptions(RequestOptions):
    sync: bool | None = None


class NetworkOptions(RequestOptions):
    type: NetworkType | None = None
