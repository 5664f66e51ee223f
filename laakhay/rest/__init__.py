"""Laakhay REST - declarative REST operations compiled to wire requests."""

from .codecs import Codec, CodecRegistry, PydanticJsonCodec, default_codecs
from .config import ClientConfig
from .core import (
    ArgumentBindingError,
    BindingKind,
    DecodeFailure,
    DomainError,
    DomainErrorKind,
    FallbackPolicy,
    HttpMethod,
    HttpResponseError,
    MediaType,
    OperationSignature,
    ParserVariant,
    RequestOptions,
    RestError,
    TransportFailure,
    UnknownOperation,
    UnsupportedMediaType,
    WireRequest,
    WireResponse,
)
from .registration import build_default_registry
from .runtime import (
    AiohttpTransport,
    BasicAuthFilter,
    FilterPipeline,
    HeaderFilter,
    RequestBuilder,
    ResponseStrategySelector,
    RestClient,
    SignatureRegistry,
    StaticTokenProvider,
    TokenAuthFilter,
    Transport,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "RestClient",
    "ClientConfig",
    "build_default_registry",
    # Components
    "SignatureRegistry",
    "RequestBuilder",
    "ResponseStrategySelector",
    "FilterPipeline",
    # Transport and filters
    "Transport",
    "AiohttpTransport",
    "BasicAuthFilter",
    "HeaderFilter",
    "StaticTokenProvider",
    "TokenAuthFilter",
    # Codecs
    "Codec",
    "CodecRegistry",
    "PydanticJsonCodec",
    "default_codecs",
    # Signatures
    "OperationSignature",
    "RequestOptions",
    "WireRequest",
    "WireResponse",
    # Enums
    "BindingKind",
    "DomainErrorKind",
    "FallbackPolicy",
    "HttpMethod",
    "MediaType",
    "ParserVariant",
    # Exceptions
    "RestError",
    "ArgumentBindingError",
    "DecodeFailure",
    "DomainError",
    "HttpResponseError",
    "TransportFailure",
    "UnknownOperation",
    "UnsupportedMediaType",
]
