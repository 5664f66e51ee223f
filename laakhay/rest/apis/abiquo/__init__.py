"""Abiquo infrastructure API catalog."""

from .api import InfrastructureApi
from .infrastructure import SIGNATURES
from .models import (
    DatacenterDto,
    DatacentersDto,
    DatacentersLimitsDto,
    EnterpriseDto,
    ExternalIpDto,
    HypervisorType,
    HypervisorTypesDto,
    MachineDto,
    MachineIpmiStateDto,
    MachinesDto,
    MachineStateDto,
    NetworkType,
    PublicIpDto,
    RackDto,
    RacksDto,
    RemoteServiceDto,
    RemoteServicesDto,
    RemoteServiceType,
    StorageDeviceDto,
    StorageDevicesDto,
    StorageDevicesMetadataDto,
    StoragePoolDto,
    StoragePoolsDto,
    TierDto,
    TiersDto,
    UnmanagedIpDto,
    VirtualMachinesWithNodeExtendedDto,
    VirtualMachineWithNodeExtendedDto,
    VlanTagAvailability,
    VlanTagAvailabilityDto,
    VLANNetworkDto,
    VLANNetworksDto,
)
from .options import (
    DatacenterOptions,
    IpmiOptions,
    MachineOptions,
    NetworkOptions,
    StoragePoolOptions,
)

__all__ = [
    "InfrastructureApi",
    "SIGNATURES",
    # Options
    "DatacenterOptions",
    "IpmiOptions",
    "MachineOptions",
    "NetworkOptions",
    "StoragePoolOptions",
    # Enums
    "HypervisorType",
    "NetworkType",
    "RemoteServiceType",
    "VlanTagAvailability",
    # Documents
    "DatacenterDto",
    "DatacentersDto",
    "DatacentersLimitsDto",
    "EnterpriseDto",
    "ExternalIpDto",
    "HypervisorTypesDto",
    "MachineDto",
    "MachineIpmiStateDto",
    "MachinesDto",
    "MachineStateDto",
    "PublicIpDto",
    "RackDto",
    "RacksDto",
    "RemoteServiceDto",
    "RemoteServicesDto",
    "StorageDeviceDto",
    "StorageDevicesDto",
    "StorageDevicesMetadataDto",
    "StoragePoolDto",
    "StoragePoolsDto",
    "TierDto",
    "TiersDto",
    "UnmanagedIpDto",
    "VirtualMachinesWithNodeExtendedDto",
    "VirtualMachineWithNodeExtendedDto",
    "VlanTagAvailabilityDto",
    "VLANNetworkDto",
    "VLANNetworksDto",
]
