"""REST client driving signatures through build, filter, transport and parse.

Request Flow:
    1. Registry lookup → overload of the operation accepting the arguments
    2. RequestBuilder → WireRequest
    3. FilterPipeline → WireRequest with auth and static headers
    4. Transport → WireResponse, or TransportFailure
    5. 2xx → parser selected for the signature
    6. Transport failure, decode failure or non-2xx → fallback resolver

The client is the only place that awaits. Everything it delegates to is
synchronous and holds no per-call state, so one client can serve
concurrent calls.
"""

from __future__ import annotations

import logging
from typing import Any

from ..codecs import CodecRegistry, default_codecs
from ..config import ClientConfig
from ..core.exceptions import DecodeFailure, HttpResponseError, TransportFailure
from ..core.outcome import Empty, FallbackOutcome, Propagate, Reclassified, Value
from ..core.signature import OperationSignature
from ..core.wire import WireRequest, WireResponse
from .builder import RequestBuilder
from .fallback import resolve
from .filters import FilterPipeline, RequestFilter
from .registry import SignatureRegistry
from .selector import ResponseStrategySelector
from .transport import Transport

logger = logging.getLogger(__name__)


class RestClient:
    """Invokes declared operations against one endpoint."""

    def __init__(
        self,
        registry: SignatureRegistry,
        transport: Transport,
        *,
        config: ClientConfig | None = None,
        codecs: CodecRegistry | None = None,
        filters: list[RequestFilter] | tuple[RequestFilter, ...] = (),
    ) -> None:
        self.config = config or ClientConfig()
        self.registry = registry
        self._transport = transport
        self._codecs = codecs or default_codecs()
        self._builder = RequestBuilder(self.config.endpoint, self._codecs)
        self._selector = ResponseStrategySelector(self._codecs)
        self._pipeline = FilterPipeline(filters)

    def prepare(self, name: str, *args: Any) -> tuple[OperationSignature, WireRequest]:
        """Build and filter the request for a call without sending it."""
        signature = self.registry.resolve(name, args)
        request = self._pipeline.apply(self._builder.build(signature, args))
        return signature, request

    async def invoke(self, name: str, *args: Any) -> Any:
        """Call an operation and return its result.

        Raises:
            UnknownOperation: No overload of ``name`` accepts the arguments
            ArgumentBindingError: Arguments cannot be bound to the request
            RestError: Any failure the operation's fallback policy does not recover
        """
        signature, request = self.prepare(name, *args)
        logger.debug(
            "Dispatching request",
            extra={"operation": signature.name, "request_line": request.request_line},
        )
        try:
            response = await self._transport.execute(request)
            result = self._handle(signature, request, response)
        except (TransportFailure, DecodeFailure, HttpResponseError) as failure:
            return self._recover(signature, resolve(signature, failure), failure)
        logger.debug("Request completed successfully", extra={"operation": signature.name})
        return result

    def _handle(
        self, signature: OperationSignature, request: WireRequest, response: WireResponse
    ) -> Any:
        if not response.is_success:
            raise HttpResponseError(
                f"{request.request_line} returned {response.status}",
                status_code=response.status,
                body=response.body,
                request_line=request.request_line,
            )
        return self._selector.parser_for(signature).parse(response, signature)

    @staticmethod
    def _recover(
        signature: OperationSignature, outcome: FallbackOutcome, failure: Exception
    ) -> Any:
        if isinstance(outcome, Value):
            return outcome.result
        if isinstance(outcome, Empty):
            return signature.empty_result()
        if isinstance(outcome, Reclassified):
            raise outcome.error from failure
        if isinstance(outcome, Propagate):
            raise outcome.error
        raise TypeError(f"Unexpected fallback outcome {outcome!r}")
