"""Abiquo infrastructure DTOs.

Pydantic models for the JSON documents exchanged with the Abiquo admin
API. Field names are snake_case and serialize to the camelCase names the
API uses. Each resource declares its vendor media type in ``MEDIA_TYPE``.

Identifiers of parent resources (``datacenter_id``, ``rack_id``, ...) are
needed to resolve request paths but are not part of the documents, so they
are excluded from serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _media_type(name: str) -> str:
    return f"application/vnd.abiquo.{name}+json"


class AbiquoDto(BaseModel):
    """Base class of Abiquo documents."""

    MEDIA_TYPE: ClassVar[str]

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


def _parent_id() -> Any:
    return Field(None, exclude=True)


# --- Enumerations -----------------------------------------------------------


class HypervisorType(str, Enum):
    VMX_04 = "VMX_04"
    KVM = "KVM"
    XENSERVER = "XENSERVER"
    XEN_3 = "XEN_3"
    HYPERV_301 = "HYPERV_301"
    VBOX = "VBOX"


class RemoteServiceType(str, Enum):
    NODE_COLLECTOR = "NODE_COLLECTOR"
    VIRTUAL_SYSTEM_MONITOR = "VIRTUAL_SYSTEM_MONITOR"
    VIRTUAL_FACTORY = "VIRTUAL_FACTORY"
    STORAGE_SYSTEM_MONITOR = "STORAGE_SYSTEM_MONITOR"
    APPLIANCE_MANAGER = "APPLIANCE_MANAGER"
    BPM_SERVICE = "BPM_SERVICE"
    DHCP_SERVICE = "DHCP_SERVICE"

    @property
    def path_name(self) -> str:
        """Name used in remote service URIs (``nodecollector``)."""
        return self.value.replace("_", "").lower()


class NetworkType(str, Enum):
    INTERNAL = "INTERNAL"
    EXTERNAL = "EXTERNAL"
    UNMANAGED = "UNMANAGED"
    PUBLIC = "PUBLIC"


class VlanTagAvailability(str, Enum):
    AVAILABLE = "AVAILABLE"
    USED = "USED"
    INVALID = "INVALID"


# --- Datacenters ------------------------------------------------------------


class DatacenterDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("datacenter")

    id: int | None = None
    name: str
    location: str | None = None


class DatacentersDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("datacenters")

    collection: list[DatacenterDto] = Field(default_factory=list)
    total_size: int | None = None


class DatacenterLimitsDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("limit")

    id: int | None = None
    cpu_counter_soft_limit: int = 0
    cpu_counter_hard_limit: int = 0
    ram_soft_limit_in_mb: int = 0
    ram_hard_limit_in_mb: int = 0


class DatacentersLimitsDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("limits")

    collection: list[DatacenterLimitsDto] = Field(default_factory=list)


class HypervisorTypesDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("hypervisortypes")

    collection: list[HypervisorType] = Field(default_factory=list)


class EnterpriseDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("enterprise")

    id: int | None = None
    name: str


# --- Racks and machines -----------------------------------------------------


class RackDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("rack")

    id: int | None = None
    name: str
    short_description: str | None = None
    vlan_id_min: int | None = None
    vlan_id_max: int | None = None
    datacenter_id: int | None = _parent_id()


class RacksDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("racks")

    collection: list[RackDto] = Field(default_factory=list)


class MachineDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("machine")

    id: int | None = None
    name: str
    ip: str | None = None
    ip_service: str | None = None
    type: HypervisorType | None = None
    user: str | None = None
    password: str | None = None
    port: int | None = None
    state: str | None = None
    datacenter_id: int | None = _parent_id()
    rack_id: int | None = _parent_id()


class MachinesDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("machines")

    collection: list[MachineDto] = Field(default_factory=list)


class MachineStateDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("machinestate")

    state: str


class MachineIpmiStateDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("machineipmistate")

    state: str


class VirtualMachineWithNodeExtendedDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("virtualmachinewithnodeextended")

    id: int | None = None
    name: str
    state: str | None = None
    cpu: int | None = None
    ram: int | None = None


class VirtualMachinesWithNodeExtendedDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("virtualmachineswithnodeextended")

    collection: list[VirtualMachineWithNodeExtendedDto] = Field(default_factory=list)


# --- Remote services --------------------------------------------------------


class RemoteServiceDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("remoteservice")

    id: int | None = None
    type: RemoteServiceType
    uri: str
    status: int = 0
    datacenter_id: int | None = _parent_id()


class RemoteServicesDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("remoteservices")

    collection: list[RemoteServiceDto] = Field(default_factory=list)


# --- Storage ----------------------------------------------------------------


class StorageDeviceDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("storagedevice")

    id: int | None = None
    name: str
    storage_technology: str | None = None
    management_ip: str | None = None
    management_port: int | None = None
    service_ip: str | None = None
    service_port: int | None = None
    datacenter_id: int | None = _parent_id()


class StorageDevicesDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("storagedevices")

    collection: list[StorageDeviceDto] = Field(default_factory=list)


class StorageDeviceMetadataDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("storagedevicemetadata")

    type: str
    default_management_port: int | None = None
    default_service_port: int | None = None


class StorageDevicesMetadataDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("storagedevicesmetadata")

    collection: list[StorageDeviceMetadataDto] = Field(default_factory=list)


class TierDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("tier")

    id: int | None = None
    name: str
    description: str | None = None
    enabled: bool = True
    datacenter_id: int | None = _parent_id()


class TiersDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("tiers")

    collection: list[TierDto] = Field(default_factory=list)


class StoragePoolDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("storagepool")

    id_storage: str | None = None
    name: str
    total_size_in_mb: int | None = None
    datacenter_id: int | None = _parent_id()
    device_id: int | None = _parent_id()


class StoragePoolsDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("storagepools")

    collection: list[StoragePoolDto] = Field(default_factory=list)


# --- Networks ---------------------------------------------------------------


class VLANNetworkDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("vlan")

    id: int | None = None
    name: str
    address: str | None = None
    mask: int | None = None
    gateway: str | None = None
    tag: int | None = None
    type: NetworkType | None = None
    datacenter_id: int | None = _parent_id()
    enterprise_id: int | None = _parent_id()
    limit_id: int | None = _parent_id()


class VLANNetworksDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("vlans")

    collection: list[VLANNetworkDto] = Field(default_factory=list)


class VlanTagAvailabilityDto(AbiquoDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("vlantagavailability")

    available: VlanTagAvailability
    message: str | None = None


class IpDto(AbiquoDto):
    """Fields shared by every IP flavour."""

    id: int | None = None
    ip: str
    mac: str | None = None
    network_name: str | None = None
    available: bool = True


class PublicIpDto(IpDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("publicip")


class ExternalIpDto(IpDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("externalip")


class UnmanagedIpDto(IpDto):
    MEDIA_TYPE: ClassVar[str] = _media_type("unmanagedip")
