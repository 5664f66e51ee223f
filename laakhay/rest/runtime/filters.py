"""Request filters applied between building and dispatch.

Filters are configured once per client and run in declaration order on
every request. Each one returns a new WireRequest and replaces, rather
than appends, the header it owns, so applying a filter twice yields the
same request as applying it once.
"""

from __future__ import annotations

import base64
from collections.abc import Iterable
from typing import Protocol

from ..core.wire import WireRequest

AUTH_TOKEN_HEADER = "X-Auth-Token"


class RequestFilter(Protocol):
    def filter(self, request: WireRequest) -> WireRequest: ...


class TokenProvider(Protocol):
    """Session collaborator supplying the current authentication token."""

    def token(self) -> str: ...


class StaticTokenProvider:
    """Token provider returning a fixed token."""

    def __init__(self, token: str) -> None:
        self._token = token

    def token(self) -> str:
        return self._token


class HeaderFilter:
    """Sets a static header."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value

    def filter(self, request: WireRequest) -> WireRequest:
        return request.with_replaced_header(self.name, self.value)


class TokenAuthFilter:
    """Sets the session token header from a token provider."""

    def __init__(self, provider: TokenProvider, header: str = AUTH_TOKEN_HEADER) -> None:
        self._provider = provider
        self.header = header

    def filter(self, request: WireRequest) -> WireRequest:
        return request.with_replaced_header(self.header, self._provider.token())


class BasicAuthFilter:
    """Sets HTTP basic credentials."""

    def __init__(self, user: str, password: str) -> None:
        credentials = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
        self._value = f"Basic {credentials}"

    def filter(self, request: WireRequest) -> WireRequest:
        return request.with_replaced_header("Authorization", self._value)


class FilterPipeline:
    """Ordered sequence of request filters."""

    def __init__(self, filters: Iterable[RequestFilter] = ()) -> None:
        self._filters: tuple[RequestFilter, ...] = tuple(filters)

    @property
    def filters(self) -> tuple[RequestFilter, ...]:
        return self._filters

    def apply(self, request: WireRequest) -> WireRequest:
        for request_filter in self._filters:
            request = request_filter.filter(request)
        return request

    def __len__(self) -> int:
        return len(self._filters)
