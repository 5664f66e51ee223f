"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import DomainErrorKind

if TYPE_CHECKING:
    from ..models.errors import ErrorEntry


class RestError(Exception):
    """Base exception for all library errors."""

    pass


class UnknownOperation(RestError):
    """No signature is registered under the requested operation key."""

    def __init__(self, name: str, param_types: tuple[type, ...] | None = None) -> None:
        if param_types is None:
            message = f"Unknown operation '{name}'"
        else:
            rendered = ", ".join(t.__name__ for t in param_types)
            message = f"Unknown operation '{name}({rendered})'"
        super().__init__(message)
        self.name = name
        self.param_types = param_types


class ArgumentBindingError(RestError):
    """Arguments do not match the bindings of the signature.

    Raised by the request builder on arity or type mismatch and on missing
    path values. Indicates a contract violation by the caller.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class DecodeFailure(RestError):
    """Response body could not be decoded per the declared media type."""

    def __init__(self, message: str, media_type: str | None = None) -> None:
        super().__init__(message)
        self.media_type = media_type


class TransportFailure(RestError):
    """Network or connection level failure reported by the transport."""

    pass


class HttpResponseError(RestError):
    """Response arrived with a status outside the 2xx class."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: bytes | None = None,
        request_line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.request_line = request_line

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


class DomainError(RestError):
    """Client error reclassified by a fallback policy.

    Carries the original status and body so callers can inspect what the
    service answered, plus any error entries parsed from the body.
    """

    def __init__(
        self,
        message: str,
        kind: DomainErrorKind,
        status_code: int,
        body: bytes | None = None,
        errors: list[ErrorEntry] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.body = body
        self.errors = errors or []

    def has_error(self, code: str) -> bool:
        """Check whether the service reported the given error code."""
        return any(entry.code == code for entry in self.errors)


class UnsupportedMediaType(RestError):
    """No codec is registered for a media type."""

    def __init__(self, media_type: str) -> None:
        super().__init__(f"No codec registered for media type '{media_type}'")
        self.media_type = media_type
