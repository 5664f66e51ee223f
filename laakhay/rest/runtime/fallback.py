"""Fallback resolution.

Architecture:
    ``resolve()`` is called only when a call failed: the transport raised,
    the parser could not decode a 2xx body, or the status was outside 2xx.
    It dispatches on the policy bound to the signature and returns a
    FallbackOutcome; it never raises and never looks at anything but the
    failure it is given.

Policies:
    - DEFAULT: propagate
    - NULL_ON_NOT_FOUND: 404 becomes Empty
    - FALSE_IF_UNAVAILABLE: unavailable service becomes Value(False)
    - MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS: 4xx reclassified by status code
    - PROPAGATE_DOMAIN_EXCEPTION_ON_CLIENT_OR_NOT_FOUND: 4xx surfaced as the
      service's own error document
    - RELEASE_AND_DISCARD: propagate; only valid with the release-only parser,
      which drops the body on success
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import ValidationError

from ..core.enums import DomainErrorKind, FallbackPolicy
from ..core.exceptions import DomainError, HttpResponseError, TransportFailure
from ..core.outcome import Empty, FallbackOutcome, Propagate, Reclassified, Value
from ..core.signature import OperationSignature
from ..models.errors import ErrorEntry, ErrorsDocument

logger = logging.getLogger(__name__)

UNAVAILABLE_STATUSES = frozenset({404})


def _status(failure: Exception) -> int | None:
    if isinstance(failure, (HttpResponseError, DomainError)):
        return failure.status_code
    return None


def _is_not_found(failure: Exception) -> bool:
    if isinstance(failure, DomainError):
        return failure.kind is DomainErrorKind.NOT_FOUND
    return _status(failure) == 404


def _propagate(signature: OperationSignature, failure: Exception) -> FallbackOutcome:
    return Propagate(failure)


def _null_on_not_found(signature: OperationSignature, failure: Exception) -> FallbackOutcome:
    if _is_not_found(failure):
        return Empty()
    return Propagate(failure)


def _false_if_unavailable(signature: OperationSignature, failure: Exception) -> FallbackOutcome:
    if isinstance(failure, TransportFailure):
        return Value(False)
    status = _status(failure)
    if status is not None and (status in UNAVAILABLE_STATUSES or 500 <= status < 600):
        return Value(False)
    return Propagate(failure)


def _map_client_errors(signature: OperationSignature, failure: Exception) -> FallbackOutcome:
    if not isinstance(failure, HttpResponseError) or not failure.is_client_error:
        return Propagate(failure)
    kind = DomainErrorKind.from_status(failure.status_code)
    error = DomainError(
        f"{signature.name} failed with {failure.status_code} ({kind.value})",
        kind=kind,
        status_code=failure.status_code,
        body=failure.body,
    )
    return Reclassified(error)


def parse_errors(body: bytes | None) -> list[ErrorEntry]:
    """Error entries of a service error document; empty when the body is not one."""
    if not body:
        return []
    try:
        return list(ErrorsDocument.model_validate_json(body).errors)
    except ValidationError:
        return []


def _propagate_domain_exception(
    signature: OperationSignature, failure: Exception
) -> FallbackOutcome:
    if isinstance(failure, DomainError):
        return Reclassified(failure)
    if not isinstance(failure, HttpResponseError) or not failure.is_client_error:
        return Propagate(failure)
    errors = parse_errors(failure.body)
    if errors:
        message = "; ".join(f"{e.code}: {e.message}" for e in errors)
    else:
        message = f"{signature.name} failed with {failure.status_code}"
    error = DomainError(
        message,
        kind=DomainErrorKind.from_status(failure.status_code),
        status_code=failure.status_code,
        body=failure.body,
        errors=errors,
    )
    return Reclassified(error)


_POLICIES: dict[FallbackPolicy, Callable[[OperationSignature, Exception], FallbackOutcome]] = {
    FallbackPolicy.DEFAULT: _propagate,
    FallbackPolicy.NULL_ON_NOT_FOUND: _null_on_not_found,
    FallbackPolicy.FALSE_IF_UNAVAILABLE: _false_if_unavailable,
    FallbackPolicy.MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS: _map_client_errors,
    FallbackPolicy.PROPAGATE_DOMAIN_EXCEPTION_ON_CLIENT_OR_NOT_FOUND: _propagate_domain_exception,
    FallbackPolicy.RELEASE_AND_DISCARD: _propagate,
}


def resolve(signature: OperationSignature, failure: Exception) -> FallbackOutcome:
    """Decide the outcome of a failed call according to the signature's policy."""
    outcome = _POLICIES[signature.fallback](signature, failure)
    logger.debug(
        "Fallback resolved",
        extra={
            "operation": signature.name,
            "policy": signature.fallback.value,
            "failure": type(failure).__name__,
            "outcome": type(outcome).__name__,
        },
    )
    return outcome
