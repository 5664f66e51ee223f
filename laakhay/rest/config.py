"""Client configuration.

Defaults live in module constants; ``ClientConfig.from_env()`` lets
deployments override them through environment variables.

Environment:
    LAAKHAY_REST_ENDPOINT: Base URI every path template is appended to
    LAAKHAY_REST_TIMEOUT: Total request timeout in seconds
    LAAKHAY_REST_USER_AGENT: User-Agent sent by the aiohttp transport
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_ENDPOINT = "http://localhost/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "laakhay-rest"

ENV_ENDPOINT = "LAAKHAY_REST_ENDPOINT"
ENV_TIMEOUT = "LAAKHAY_REST_TIMEOUT"
ENV_USER_AGENT = "LAAKHAY_REST_USER_AGENT"


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every call of one client instance."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.endpoint.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an absolute http(s) URI, got '{self.endpoint}'")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        env = os.environ if environ is None else environ
        timeout = env.get(ENV_TIMEOUT)
        return cls(
            endpoint=env.get(ENV_ENDPOINT, DEFAULT_ENDPOINT),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            user_agent=env.get(ENV_USER_AGENT, DEFAULT_USER_AGENT),
        )
