"""Typed facade over the infrastructure operation table.

Each method forwards to ``RestClient.invoke`` with the declared operation
name. Operations declared with and without a trailing options argument are
exposed as one method whose ``options`` parameter selects the overload.

Example:
    >>> async with AiohttpTransport() as transport:
    ...     client = RestClient(build_default_registry(), transport)
    ...     api = InfrastructureApi(client)
    ...     datacenter = await api.get_datacenter(1)
"""

from __future__ import annotations

from typing import Any

from ...runtime.client import RestClient
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


def _with_options(args: tuple[Any, ...], options: Any) -> tuple[Any, ...]:
    return args if options is None else (*args, options)


class InfrastructureApi:
    """Abiquo admin infrastructure API."""

    def __init__(self, client: RestClient) -> None:
        self._client = client

    # --- Datacenters ---------------------------------------------------------

    async def list_datacenters(self) -> DatacentersDto:
        return await self._client.invoke("list_datacenters")

    async def create_datacenter(self, datacenter: DatacenterDto) -> DatacenterDto:
        return await self._client.invoke("create_datacenter", datacenter)

    async def get_datacenter(self, datacenter_id: int) -> DatacenterDto | None:
        """Datacenter by id, or None if it does not exist."""
        return await self._client.invoke("get_datacenter", datacenter_id)

    async def update_datacenter(self, datacenter: DatacenterDto) -> DatacenterDto:
        return await self._client.invoke("update_datacenter", datacenter)

    async def delete_datacenter(self, datacenter: DatacenterDto) -> None:
        await self._client.invoke("delete_datacenter", datacenter)

    async def list_limits(self, datacenter: DatacenterDto) -> DatacentersLimitsDto:
        return await self._client.invoke("list_limits", datacenter)

    async def get_hypervisor_type_from_machine(
        self, datacenter: DatacenterDto, options: DatacenterOptions
    ) -> str:
        """Hypervisor type detected on the machine at ``options.ip``, as plain text."""
        return await self._client.invoke("get_hypervisor_type_from_machine", datacenter, options)

    async def get_hypervisor_types(self, datacenter: DatacenterDto) -> HypervisorTypesDto:
        return await self._client.invoke("get_hypervisor_types", datacenter)

    # --- Racks ---------------------------------------------------------------

    async def list_racks(self, datacenter: DatacenterDto) -> RacksDto:
        return await self._client.invoke("list_racks", datacenter)

    async def create_rack(self, datacenter: DatacenterDto, rack: RackDto) -> RackDto:
        return await self._client.invoke("create_rack", datacenter, rack)

    async def get_rack(self, datacenter: DatacenterDto, rack_id: int) -> RackDto | None:
        return await self._client.invoke("get_rack", datacenter, rack_id)

    async def update_rack(self, rack: RackDto) -> RackDto:
        return await self._client.invoke("update_rack", rack)

    async def delete_rack(self, rack: RackDto) -> None:
        await self._client.invoke("delete_rack", rack)

    # --- Remote services -----------------------------------------------------

    async def list_remote_services(self, datacenter: DatacenterDto) -> RemoteServicesDto:
        return await self._client.invoke("list_remote_services", datacenter)

    async def create_remote_service(
        self, datacenter: DatacenterDto, remote_service: RemoteServiceDto
    ) -> RemoteServiceDto:
        return await self._client.invoke("create_remote_service", datacenter, remote_service)

    async def get_remote_service(
        self, datacenter: DatacenterDto, service_type: RemoteServiceType
    ) -> RemoteServiceDto | None:
        return await self._client.invoke("get_remote_service", datacenter, service_type)

    async def update_remote_service(self, remote_service: RemoteServiceDto) -> RemoteServiceDto:
        return await self._client.invoke("update_remote_service", remote_service)

    async def delete_remote_service(self, remote_service: RemoteServiceDto) -> None:
        await self._client.invoke("delete_remote_service", remote_service)

    async def is_available(self, remote_service: RemoteServiceDto) -> bool:
        """Whether the remote service answers its health check.

        Connection failures, 404 and server errors all report False.
        """
        return await self._client.invoke("is_available", remote_service)

    # --- Machine discovery ---------------------------------------------------

    async def discover_single_machine(
        self,
        datacenter: DatacenterDto,
        ip: str,
        hypervisor: HypervisorType,
        user: str,
        password: str,
        options: MachineOptions | None = None,
    ) -> MachineDto:
        """Discover the hypervisor at ``ip``.

        Raises:
            DomainError: The server rejected the discovery; its error codes
                are available through ``errors``
        """
        args = _with_options((datacenter, ip, hypervisor, user, password), options)
        return await self._client.invoke("discover_single_machine", *args)

    async def discover_multiple_machines(
        self,
        datacenter: DatacenterDto,
        ip_from: str,
        ip_to: str,
        hypervisor: HypervisorType,
        user: str,
        password: str,
        options: MachineOptions | None = None,
    ) -> MachinesDto:
        args = _with_options((datacenter, ip_from, ip_to, hypervisor, user, password), options)
        return await self._client.invoke("discover_multiple_machines", *args)

    async def check_machine_state_by_ip(
        self,
        datacenter: DatacenterDto,
        ip: str,
        hypervisor: HypervisorType,
        user: str,
        password: str,
        options: MachineOptions | None = None,
    ) -> MachineStateDto:
        args = _with_options((datacenter, ip, hypervisor, user, password), options)
        return await self._client.invoke("check_machine_state", *args)

    async def check_machine_ipmi_state_by_ip(
        self,
        datacenter: DatacenterDto,
        ip: str,
        user: str,
        password: str,
        options: IpmiOptions | None = None,
    ) -> MachineIpmiStateDto:
        args = _with_options((datacenter, ip, user, password), options)
        return await self._client.invoke("check_machine_ipmi_state", *args)

    # --- Machines ------------------------------------------------------------

    async def list_machines(self, rack: RackDto) -> MachinesDto:
        return await self._client.invoke("list_machines", rack)

    async def get_machine(self, rack: RackDto, machine_id: int) -> MachineDto | None:
        return await self._client.invoke("get_machine", rack, machine_id)

    async def check_machine_state(self, machine: MachineDto, sync: bool) -> MachineStateDto:
        return await self._client.invoke("check_machine_state", machine, sync)

    async def check_machine_ipmi_state(self, machine: MachineDto) -> MachineIpmiStateDto:
        return await self._client.invoke("check_machine_ipmi_state", machine)

    async def create_machine(self, rack: RackDto, machine: MachineDto) -> MachineDto:
        return await self._client.invoke("create_machine", rack, machine)

    async def update_machine(self, machine: MachineDto) -> MachineDto:
        return await self._client.invoke("update_machine", machine)

    async def delete_machine(self, machine: MachineDto) -> None:
        await self._client.invoke("delete_machine", machine)

    async def reserve_machine(self, enterprise: EnterpriseDto, machine: MachineDto) -> MachineDto:
        return await self._client.invoke("reserve_machine", enterprise, machine)

    async def cancel_reservation(self, enterprise: EnterpriseDto, machine: MachineDto) -> None:
        await self._client.invoke("cancel_reservation", enterprise, machine)

    async def list_virtual_machines_by_machine(
        self, machine: MachineDto, options: MachineOptions | None = None
    ) -> VirtualMachinesWithNodeExtendedDto:
        args = _with_options((machine,), options)
        return await self._client.invoke("list_virtual_machines_by_machine", *args)

    async def get_virtual_machine(
        self, machine: MachineDto, virtual_machine_id: int
    ) -> VirtualMachineWithNodeExtendedDto | None:
        return await self._client.invoke("get_virtual_machine", machine, virtual_machine_id)

    # --- Storage -------------------------------------------------------------

    async def list_storage_devices(self, datacenter: DatacenterDto) -> StorageDevicesDto:
        return await self._client.invoke("list_storage_devices", datacenter)

    async def list_supported_storage_devices(
        self, datacenter: DatacenterDto
    ) -> StorageDevicesMetadataDto:
        return await self._client.invoke("list_supported_storage_devices", datacenter)

    async def create_storage_device(
        self, datacenter: DatacenterDto, device: StorageDeviceDto
    ) -> StorageDeviceDto:
        return await self._client.invoke("create_storage_device", datacenter, device)

    async def delete_storage_device(self, device: StorageDeviceDto) -> None:
        await self._client.invoke("delete_storage_device", device)

    async def update_storage_device(self, device: StorageDeviceDto) -> StorageDeviceDto:
        return await self._client.invoke("update_storage_device", device)

    async def get_storage_device(
        self, datacenter: DatacenterDto, device_id: int
    ) -> StorageDeviceDto | None:
        return await self._client.invoke("get_storage_device", datacenter, device_id)

    async def list_tiers(self, datacenter: DatacenterDto) -> TiersDto:
        return await self._client.invoke("list_tiers", datacenter)

    async def update_tier(self, tier: TierDto) -> TierDto:
        return await self._client.invoke("update_tier", tier)

    async def get_tier(self, datacenter: DatacenterDto, tier_id: int) -> TierDto | None:
        return await self._client.invoke("get_tier", datacenter, tier_id)

    async def list_storage_pools(
        self,
        owner: StorageDeviceDto | TierDto,
        options: StoragePoolOptions | None = None,
    ) -> StoragePoolsDto:
        """Pools of a storage device, or the pools assigned to a tier."""
        args = _with_options((owner,), options)
        return await self._client.invoke("list_storage_pools", *args)

    async def create_storage_pool(
        self, device: StorageDeviceDto, pool: StoragePoolDto
    ) -> StoragePoolDto:
        return await self._client.invoke("create_storage_pool", device, pool)

    async def update_storage_pool(self, pool: StoragePoolDto) -> StoragePoolDto:
        return await self._client.invoke("update_storage_pool", pool)

    async def delete_storage_pool(self, pool: StoragePoolDto) -> None:
        await self._client.invoke("delete_storage_pool", pool)

    async def get_storage_pool(
        self, device: StorageDeviceDto, pool_id: str
    ) -> StoragePoolDto | None:
        return await self._client.invoke("get_storage_pool", device, pool_id)

    async def refresh_storage_pool(
        self, pool: StoragePoolDto, options: StoragePoolOptions
    ) -> StoragePoolDto:
        return await self._client.invoke("refresh_storage_pool", pool, options)

    # --- Networks ------------------------------------------------------------

    async def list_networks(
        self, datacenter: DatacenterDto, options: NetworkOptions | None = None
    ) -> VLANNetworksDto:
        args = _with_options((datacenter,), options)
        return await self._client.invoke("list_networks", *args)

    async def get_network(self, datacenter: DatacenterDto, network_id: int) -> VLANNetworkDto | None:
        return await self._client.invoke("get_network", datacenter, network_id)

    async def create_network(
        self, datacenter: DatacenterDto, network: VLANNetworkDto
    ) -> VLANNetworkDto:
        return await self._client.invoke("create_network", datacenter, network)

    async def update_network(self, network: VLANNetworkDto) -> VLANNetworkDto:
        return await self._client.invoke("update_network", network)

    async def delete_network(self, network: VLANNetworkDto) -> None:
        await self._client.invoke("delete_network", network)

    async def check_tag_availability(
        self, datacenter: DatacenterDto, tag: int
    ) -> VlanTagAvailabilityDto:
        return await self._client.invoke("check_tag_availability", datacenter, tag)

    async def get_public_ip(self, network: VLANNetworkDto, ip_id: int) -> PublicIpDto:
        return await self._client.invoke("get_public_ip", network, ip_id)

    async def get_external_ip(self, network: VLANNetworkDto, ip_id: int) -> ExternalIpDto:
        return await self._client.invoke("get_external_ip", network, ip_id)

    async def get_unmanaged_ip(self, network: VLANNetworkDto, ip_id: int) -> UnmanagedIpDto:
        return await self._client.invoke("get_unmanaged_ip", network, ip_id)
