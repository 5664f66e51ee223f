"""Core enumerations shared by signatures, builders and resolvers.

Architecture:
    Every variant set in the engine is closed. Signatures pick exactly one
    member of each enum at declaration time, and the builder, selector and
    resolver dispatch on those members rather than on subclasses.

Key Types:
    - HttpMethod: HTTP verbs used by declared operations
    - BindingKind: Where an argument lands in the wire request
    - ParserVariant: How a successful response body becomes a result
    - FallbackPolicy: How a failed call is recovered or classified
    - DomainErrorKind: Classification attached to reclassified errors
    - OptionTarget: Where an options field contributes its value
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs supported by declared operations."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


class BindingKind(str, Enum):
    """Target of a single argument position."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    OPTIONS = "options"


class OptionTarget(str, Enum):
    """Target of a single options-object field."""

    QUERY = "query"
    HEADER = "header"


class ParserVariant(str, Enum):
    """Strategy used to turn a 2xx response into a caller-visible result."""

    STRUCTURED_DECODE = "structured_decode"
    STREAM_DECODE = "stream_decode"
    PLAIN_TEXT = "plain_text"
    BOOLEAN_ON_2XX = "boolean_on_2xx"
    RELEASE_ONLY = "release_only"

    @property
    def accepts_plain_text(self) -> bool:
        """True for variants that read the body as text rather than a document."""
        return self in (ParserVariant.PLAIN_TEXT, ParserVariant.BOOLEAN_ON_2XX)


class FallbackPolicy(str, Enum):
    """Recovery strategy bound to an operation.

    ``RELEASE_AND_DISCARD`` recovers nothing, like ``DEFAULT``. It pairs with
    the ``RELEASE_ONLY`` parser and marks fire-and-forget calls whose body is
    released unread on success; signatures reject it with any other parser.
    """

    DEFAULT = "default"
    NULL_ON_NOT_FOUND = "null_on_not_found"
    FALSE_IF_UNAVAILABLE = "false_if_unavailable"
    MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS = "map_client_errors_to_domain_errors"
    PROPAGATE_DOMAIN_EXCEPTION_ON_CLIENT_OR_NOT_FOUND = (
        "propagate_domain_exception_on_client_or_not_found"
    )
    RELEASE_AND_DISCARD = "release_and_discard"


class DomainErrorKind(str, Enum):
    """Classification of a reclassified client error."""

    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    CLIENT_ERROR = "client_error"

    @classmethod
    def from_status(cls, status_code: int) -> "DomainErrorKind":
        """Map a 4xx status code to its error kind."""
        if status_code in (401, 403):
            return cls.AUTHORIZATION
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 409:
            return cls.CONFLICT
        return cls.CLIENT_ERROR


class MediaType:
    """Generic media types used across catalogs."""

    TEXT_PLAIN = "text/plain"
    APPLICATION_JSON = "application/json"
    NDJSON = "application/x-ndjson"
