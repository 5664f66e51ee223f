"""Abiquo infrastructure API operation table.

Every operation of the admin infrastructure API is declared here once, as
data. Resource arguments feed path placeholders from their ids; creation
and update operations send the resource as the body in its own media type.

Conventions:
    - Reads decode the resource document (``STRUCTURED_DECODE``)
    - Single-resource reads by id answer None on 404
    - Deletes send no Accept header and discard the body (``RELEASE_ONLY``)
    - Machine discovery surfaces the server's error document on 4xx
"""

from __future__ import annotations

from typing import Any

from ...core.enums import FallbackPolicy, HttpMethod, ParserVariant
from ...core.signature import (
    Binding,
    OperationSignature,
    body,
    operation,
    options,
    path,
    path_from,
    query,
)
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
    VLANNetworkDto,
    VLANNetworksDto,
    VlanTagAvailabilityDto,
)
from .options import (
    DatacenterOptions,
    IpmiOptions,
    MachineOptions,
    NetworkOptions,
    StoragePoolOptions,
)

DATACENTERS = "/admin/datacenters"
DATACENTER = DATACENTERS + "/{datacenter}"
RACK = DATACENTER + "/racks/{rack}"
MACHINE = RACK + "/machines/{machine}"
REMOTE_SERVICE = DATACENTER + "/remoteservices/{remoteservice}"
STORAGE_DEVICE = DATACENTER + "/storage/devices/{device}"
STORAGE_POOL = STORAGE_DEVICE + "/pools/{pool}"
TIER = DATACENTER + "/storage/tiers/{tier}"
NETWORK = DATACENTER + "/network/{network}"
RESERVED_MACHINES = "/admin/enterprises/{enterprise}/reservedmachines"
EXTERNAL_NETWORK = "/admin/enterprises/{enterprise}/limits/{limit}/externalnetworks/{network}"

# Path bindings of resource arguments, keyed by what they address
IN_DATACENTER = path_from(DatacenterDto, datacenter="id")
IN_RACK = path_from(RackDto, datacenter="datacenter_id", rack="id")
IN_MACHINE = path_from(MachineDto, datacenter="datacenter_id", rack="rack_id", machine="id")
IN_STORAGE_DEVICE = path_from(StorageDeviceDto, datacenter="datacenter_id", device="id")
IN_TIER = path_from(TierDto, datacenter="datacenter_id", tier="id")
IN_NETWORK = path_from(VLANNetworkDto, datacenter="datacenter_id", network="id")
IN_EXTERNAL_NETWORK = path_from(
    VLANNetworkDto, enterprise="enterprise_id", limit="limit_id", network="id"
)
IN_ENTERPRISE = path_from(EnterpriseDto, enterprise="id")


def _read(
    name: str,
    template: str,
    *bindings: Binding,
    result: Any,
    fallback: FallbackPolicy = FallbackPolicy.DEFAULT,
) -> OperationSignature:
    return operation(
        name,
        HttpMethod.GET,
        template,
        *bindings,
        consumes=result.MEDIA_TYPE,
        result_type=result,
        fallback=fallback,
    )


def _write(
    name: str,
    method: HttpMethod,
    template: str,
    *bindings: Binding,
    resource: Any,
) -> OperationSignature:
    return operation(
        name,
        method,
        template,
        *bindings,
        produces=resource.MEDIA_TYPE,
        consumes=resource.MEDIA_TYPE,
        result_type=resource,
    )


def _delete(name: str, template: str, *bindings: Binding) -> OperationSignature:
    return operation(
        name,
        HttpMethod.DELETE,
        template,
        *bindings,
        parser=ParserVariant.RELEASE_ONLY,
    )


def _with_and_without(
    declare: Any, *bindings: Binding, extra: Binding
) -> tuple[OperationSignature, OperationSignature]:
    """Declare an operation both without and with a trailing options argument."""
    return declare(*bindings), declare(*bindings, extra)


# --- Datacenters ------------------------------------------------------------

DATACENTER_OPERATIONS = (
    _read("list_datacenters", DATACENTERS, result=DatacentersDto),
    _write(
        "create_datacenter",
        HttpMethod.POST,
        DATACENTERS,
        body(DatacenterDto),
        resource=DatacenterDto,
    ),
    _read(
        "get_datacenter",
        DATACENTER,
        path(int, "datacenter"),
        result=DatacenterDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _write(
        "update_datacenter",
        HttpMethod.PUT,
        DATACENTER,
        body(DatacenterDto, datacenter="id"),
        resource=DatacenterDto,
    ),
    _delete("delete_datacenter", DATACENTER, IN_DATACENTER),
    _read(
        "list_limits",
        DATACENTER + "/action/getLimits",
        IN_DATACENTER,
        result=DatacentersLimitsDto,
    ),
    operation(
        "get_hypervisor_type_from_machine",
        HttpMethod.GET,
        DATACENTER + "/action/hypervisor",
        IN_DATACENTER,
        options(DatacenterOptions),
        parser=ParserVariant.PLAIN_TEXT,
        result_type=str,
    ),
    _read(
        "get_hypervisor_types",
        DATACENTER + "/hypervisors",
        IN_DATACENTER,
        result=HypervisorTypesDto,
    ),
)

# --- Racks ------------------------------------------------------------------

RACK_OPERATIONS = (
    _read("list_racks", DATACENTER + "/racks", IN_DATACENTER, result=RacksDto),
    _write(
        "create_rack",
        HttpMethod.POST,
        DATACENTER + "/racks",
        IN_DATACENTER,
        body(RackDto),
        resource=RackDto,
    ),
    _read(
        "get_rack",
        RACK,
        IN_DATACENTER,
        path(int, "rack"),
        result=RackDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _write(
        "update_rack",
        HttpMethod.PUT,
        RACK,
        body(RackDto, datacenter="datacenter_id", rack="id"),
        resource=RackDto,
    ),
    _delete("delete_rack", RACK, IN_RACK),
)

# --- Remote services --------------------------------------------------------

REMOTE_SERVICE_OPERATIONS = (
    _read(
        "list_remote_services",
        DATACENTER + "/remoteservices",
        IN_DATACENTER,
        result=RemoteServicesDto,
    ),
    _write(
        "create_remote_service",
        HttpMethod.POST,
        DATACENTER + "/remoteservices",
        IN_DATACENTER,
        body(RemoteServiceDto),
        resource=RemoteServiceDto,
    ),
    _read(
        "get_remote_service",
        REMOTE_SERVICE,
        IN_DATACENTER,
        path_from(RemoteServiceType, remoteservice="path_name"),
        result=RemoteServiceDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _write(
        "update_remote_service",
        HttpMethod.PUT,
        REMOTE_SERVICE,
        body(RemoteServiceDto, datacenter="datacenter_id", remoteservice="type.path_name"),
        resource=RemoteServiceDto,
    ),
    _delete(
        "delete_remote_service",
        REMOTE_SERVICE,
        path_from(RemoteServiceDto, datacenter="datacenter_id", remoteservice="type.path_name"),
    ),
    operation(
        "is_available",
        HttpMethod.GET,
        REMOTE_SERVICE + "/action/check",
        path_from(RemoteServiceDto, datacenter="datacenter_id", remoteservice="type.path_name"),
        parser=ParserVariant.BOOLEAN_ON_2XX,
        fallback=FallbackPolicy.FALSE_IF_UNAVAILABLE,
        result_type=bool,
    ),
)

# --- Machine discovery ------------------------------------------------------


def _discovery(
    name: str, action: str, *bindings: Binding, result: Any
) -> OperationSignature:
    return _read(
        name,
        DATACENTER + "/action/" + action,
        IN_DATACENTER,
        *bindings,
        result=result,
        fallback=FallbackPolicy.PROPAGATE_DOMAIN_EXCEPTION_ON_CLIENT_OR_NOT_FOUND,
    )


_CREDENTIALS = (query(str, "user"), query(str, "password"))

DISCOVERY_OPERATIONS = (
    *_with_and_without(
        lambda *b: _discovery("discover_single_machine", "discoversingle", *b, result=MachineDto),
        query(str, "ip"),
        query(HypervisorType, "hypervisor"),
        *_CREDENTIALS,
        extra=options(MachineOptions),
    ),
    *_with_and_without(
        lambda *b: _discovery(
            "discover_multiple_machines", "discovermultiple", *b, result=MachinesDto
        ),
        query(str, "ipFrom"),
        query(str, "ipTo"),
        query(HypervisorType, "hypervisor"),
        *_CREDENTIALS,
        extra=options(MachineOptions),
    ),
    *_with_and_without(
        lambda *b: _discovery(
            "check_machine_state", "checkmachinestate", *b, result=MachineStateDto
        ),
        query(str, "ip"),
        query(HypervisorType, "hypervisor"),
        *_CREDENTIALS,
        extra=options(MachineOptions),
    ),
    *_with_and_without(
        lambda *b: _discovery(
            "check_machine_ipmi_state", "checkmachineipmistate", *b, result=MachineIpmiStateDto
        ),
        query(str, "ip"),
        *_CREDENTIALS,
        extra=options(IpmiOptions),
    ),
)

# --- Machines ---------------------------------------------------------------

MACHINE_OPERATIONS = (
    _read("list_machines", RACK + "/machines", IN_RACK, result=MachinesDto),
    _read(
        "get_machine",
        MACHINE,
        IN_RACK,
        path(int, "machine"),
        result=MachineDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _read(
        "check_machine_state",
        MACHINE + "/action/checkstate",
        IN_MACHINE,
        query(bool, "sync"),
        result=MachineStateDto,
    ),
    _read(
        "check_machine_ipmi_state",
        MACHINE + "/action/checkipmistate",
        IN_MACHINE,
        result=MachineIpmiStateDto,
    ),
    _write(
        "create_machine",
        HttpMethod.POST,
        RACK + "/machines",
        IN_RACK,
        body(MachineDto),
        resource=MachineDto,
    ),
    _write(
        "update_machine",
        HttpMethod.PUT,
        MACHINE,
        body(MachineDto, datacenter="datacenter_id", rack="rack_id", machine="id"),
        resource=MachineDto,
    ),
    _delete("delete_machine", MACHINE, IN_MACHINE),
    _write(
        "reserve_machine",
        HttpMethod.POST,
        RESERVED_MACHINES,
        IN_ENTERPRISE,
        body(MachineDto),
        resource=MachineDto,
    ),
    _delete(
        "cancel_reservation",
        RESERVED_MACHINES + "/{machine}",
        IN_ENTERPRISE,
        path_from(MachineDto, machine="id"),
    ),
    *_with_and_without(
        lambda *b: _read(
            "list_virtual_machines_by_machine",
            MACHINE + "/virtualmachines",
            *b,
            result=VirtualMachinesWithNodeExtendedDto,
        ),
        IN_MACHINE,
        extra=options(MachineOptions),
    ),
    _read(
        "get_virtual_machine",
        MACHINE + "/virtualmachines/{virtualmachine}",
        IN_MACHINE,
        path(int, "virtualmachine"),
        result=VirtualMachineWithNodeExtendedDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
)

# --- Storage ----------------------------------------------------------------

STORAGE_OPERATIONS = (
    _read(
        "list_storage_devices",
        DATACENTER + "/storage/devices",
        IN_DATACENTER,
        result=StorageDevicesDto,
    ),
    _read(
        "list_supported_storage_devices",
        DATACENTER + "/storage/devices/action/supported",
        IN_DATACENTER,
        result=StorageDevicesMetadataDto,
    ),
    _write(
        "create_storage_device",
        HttpMethod.POST,
        DATACENTER + "/storage/devices",
        IN_DATACENTER,
        body(StorageDeviceDto),
        resource=StorageDeviceDto,
    ),
    _delete("delete_storage_device", STORAGE_DEVICE, IN_STORAGE_DEVICE),
    _write(
        "update_storage_device",
        HttpMethod.PUT,
        STORAGE_DEVICE,
        body(StorageDeviceDto, datacenter="datacenter_id", device="id"),
        resource=StorageDeviceDto,
    ),
    _read(
        "get_storage_device",
        STORAGE_DEVICE,
        IN_DATACENTER,
        path(int, "device"),
        result=StorageDeviceDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _read("list_tiers", DATACENTER + "/storage/tiers", IN_DATACENTER, result=TiersDto),
    _write(
        "update_tier",
        HttpMethod.PUT,
        TIER,
        body(TierDto, datacenter="datacenter_id", tier="id"),
        resource=TierDto,
    ),
    _read(
        "get_tier",
        TIER,
        IN_DATACENTER,
        path(int, "tier"),
        result=TierDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    *_with_and_without(
        lambda *b: _read(
            "list_storage_pools", STORAGE_DEVICE + "/pools", *b, result=StoragePoolsDto
        ),
        IN_STORAGE_DEVICE,
        extra=options(StoragePoolOptions),
    ),
    _read("list_storage_pools", TIER + "/pools", IN_TIER, result=StoragePoolsDto),
    _write(
        "create_storage_pool",
        HttpMethod.POST,
        STORAGE_DEVICE + "/pools",
        IN_STORAGE_DEVICE,
        body(StoragePoolDto),
        resource=StoragePoolDto,
    ),
    _write(
        "update_storage_pool",
        HttpMethod.PUT,
        STORAGE_POOL,
        body(StoragePoolDto, datacenter="datacenter_id", device="device_id", pool="id_storage"),
        resource=StoragePoolDto,
    ),
    _delete(
        "delete_storage_pool",
        STORAGE_POOL,
        path_from(StoragePoolDto, datacenter="datacenter_id", device="device_id", pool="id_storage"),
    ),
    _read(
        "get_storage_pool",
        STORAGE_POOL,
        IN_STORAGE_DEVICE,
        path(str, "pool"),
        result=StoragePoolDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _read(
        "refresh_storage_pool",
        STORAGE_POOL,
        path_from(StoragePoolDto, datacenter="datacenter_id", device="device_id", pool="id_storage"),
        options(StoragePoolOptions),
        result=StoragePoolDto,
        fallback=FallbackPolicy.MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS,
    ),
)

# --- Networks ---------------------------------------------------------------

NETWORK_OPERATIONS = (
    *_with_and_without(
        lambda *b: _read("list_networks", DATACENTER + "/network", *b, result=VLANNetworksDto),
        IN_DATACENTER,
        extra=options(NetworkOptions),
    ),
    _read(
        "get_network",
        NETWORK,
        IN_DATACENTER,
        path(int, "network"),
        result=VLANNetworkDto,
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    _write(
        "create_network",
        HttpMethod.POST,
        DATACENTER + "/network",
        IN_DATACENTER,
        body(VLANNetworkDto),
        resource=VLANNetworkDto,
    ),
    _write(
        "update_network",
        HttpMethod.PUT,
        NETWORK,
        body(VLANNetworkDto, datacenter="datacenter_id", network="id"),
        resource=VLANNetworkDto,
    ),
    _delete("delete_network", NETWORK, IN_NETWORK),
    _read(
        "check_tag_availability",
        DATACENTER + "/network/action/checkavailability",
        IN_DATACENTER,
        query(int, "tag"),
        result=VlanTagAvailabilityDto,
        fallback=FallbackPolicy.MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS,
    ),
    _read("get_public_ip", NETWORK + "/ips/{ip}", IN_NETWORK, path(int, "ip"), result=PublicIpDto),
    _read(
        "get_external_ip",
        EXTERNAL_NETWORK + "/ips/{ip}",
        IN_EXTERNAL_NETWORK,
        path(int, "ip"),
        result=ExternalIpDto,
    ),
    _read(
        "get_unmanaged_ip",
        EXTERNAL_NETWORK + "/ips/{ip}",
        IN_EXTERNAL_NETWORK,
        path(int, "ip"),
        result=UnmanagedIpDto,
    ),
)

SIGNATURES: tuple[OperationSignature, ...] = (
    *DATACENTER_OPERATIONS,
    *RACK_OPERATIONS,
    *REMOTE_SERVICE_OPERATIONS,
    *DISCOVERY_OPERATIONS,
    *MACHINE_OPERATIONS,
    *STORAGE_OPERATIONS,
    *NETWORK_OPERATIONS,
)
