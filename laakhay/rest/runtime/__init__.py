"""Runtime: registry, builder, selector, fallback resolver, filters and client."""

from .builder import RequestBuilder, render_value
from .client import RestClient
from .fallback import parse_errors, resolve
from .filters import (
    AUTH_TOKEN_HEADER,
    BasicAuthFilter,
    FilterPipeline,
    HeaderFilter,
    RequestFilter,
    StaticTokenProvider,
    TokenAuthFilter,
    TokenProvider,
)
from .registry import SignatureRegistry
from .selector import (
    BooleanOn2xxParser,
    PlainTextParser,
    ReleaseOnlyParser,
    ResponseParser,
    ResponseStrategySelector,
    StreamDecodeParser,
    StructuredDecodeParser,
    select,
)
from .transport import AiohttpTransport, Transport

__all__ = [
    "RequestBuilder",
    "render_value",
    "RestClient",
    "resolve",
    "parse_errors",
    "AUTH_TOKEN_HEADER",
    "BasicAuthFilter",
    "FilterPipeline",
    "HeaderFilter",
    "RequestFilter",
    "StaticTokenProvider",
    "TokenAuthFilter",
    "TokenProvider",
    "SignatureRegistry",
    "ResponseParser",
    "ResponseStrategySelector",
    "StructuredDecodeParser",
    "StreamDecodeParser",
    "PlainTextParser",
    "BooleanOn2xxParser",
    "ReleaseOnlyParser",
    "select",
    "AiohttpTransport",
    "Transport",
]
