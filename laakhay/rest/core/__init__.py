"""Core components."""

from .enums import (
    BindingKind,
    DomainErrorKind,
    FallbackPolicy,
    HttpMethod,
    MediaType,
    OptionTarget,
    ParserVariant,
)
from .exceptions import (
    ArgumentBindingError,
    DecodeFailure,
    DomainError,
    HttpResponseError,
    RestError,
    TransportFailure,
    UnknownOperation,
    UnsupportedMediaType,
)
from .options import OptionField, RequestOptions
from .outcome import Empty, FallbackOutcome, Propagate, Reclassified, Value
from .signature import (
    Binding,
    Invocation,
    OperationSignature,
    PathTemplate,
    body,
    header,
    operation,
    options,
    path,
    path_from,
    query,
)
from .wire import Payload, WireRequest, WireResponse

__all__ = [
    # Enums
    "BindingKind",
    "DomainErrorKind",
    "FallbackPolicy",
    "HttpMethod",
    "MediaType",
    "OptionTarget",
    "ParserVariant",
    # Exceptions
    "RestError",
    "UnknownOperation",
    "ArgumentBindingError",
    "DecodeFailure",
    "TransportFailure",
    "HttpResponseError",
    "DomainError",
    "UnsupportedMediaType",
    # Options
    "OptionField",
    "RequestOptions",
    # Outcomes
    "FallbackOutcome",
    "Value",
    "Empty",
    "Reclassified",
    "Propagate",
    # Signatures
    "Binding",
    "Invocation",
    "OperationSignature",
    "PathTemplate",
    "operation",
    "path",
    "path_from",
    "query",
    "header",
    "body",
    "options",
    # Wire
    "Payload",
    "WireRequest",
    "WireResponse",
]
