"""Typed facade over the Nova flavor operations."""

from __future__ import annotations

from ...runtime.client import RestClient
from .models import Flavor


class FlavorApi:
    """Nova flavors of one tenant.

    The client's endpoint is the tenant's compute URI and its filters carry
    the ``X-Auth-Token`` of the session.
    """

    def __init__(self, client: RestClient) -> None:
        self._client = client

    async def list_flavors(self) -> list[Flavor]:
        """All flavors; empty when the tenant exposes none."""
        return await self._client.invoke("list_flavors")

    async def get_flavor(self, flavor_id: str) -> Flavor | None:
        return await self._client.invoke("get_flavor", flavor_id)
