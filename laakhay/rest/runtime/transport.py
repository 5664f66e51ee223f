"""Transport collaborator interface and its aiohttp adapter."""

from __future__ import annotations

import asyncio
from typing import Protocol

import aiohttp

from ..config import ClientConfig
from ..core.exceptions import TransportFailure
from ..core.wire import WireRequest, WireResponse


class Transport(Protocol):
    """Executes a WireRequest.

    Implementations raise TransportFailure for connection level problems
    and return any HTTP status, including non-2xx ones, as a WireResponse.
    """

    async def execute(self, request: WireRequest) -> WireResponse: ...


class AiohttpTransport:
    """Async transport backed by an aiohttp session."""

    def __init__(self, timeout: float = 30.0, user_agent: str | None = None) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self._session: aiohttp.ClientSession | None = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> AiohttpTransport:
        return cls(timeout=config.timeout, user_agent=config.user_agent)

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=headers)
        return self._session

    async def execute(self, request: WireRequest) -> WireResponse:
        data = request.payload.data if request.payload is not None else None
        try:
            async with self.session.request(
                request.method,
                request.uri,
                headers=list(request.headers),
                data=data,
                skip_auto_headers=("Accept", "Content-Type"),
            ) as response:
                body = await response.read()
                return WireResponse(
                    status=response.status,
                    headers=tuple(response.headers.items()),
                    body=body or None,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportFailure(f"{request.request_line} failed: {exc}") from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
