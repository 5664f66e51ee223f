"""Request builder: compiles an invocation into a WireRequest.

Request Flow:
    1. Arity and type check of the arguments against the bindings
    2. Path resolution: placeholders replaced by percent-encoded values
    3. Query assembly: query bindings, then set options fields, in order
    4. Header assembly: Accept from the parser variant, then header bindings
    5. Payload: body binding encoded by the codec for ``produces``

The builder holds only its endpoint and codec registry and never performs
I/O, so equal inputs always produce equal requests.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import quote

from ..codecs import CodecRegistry
from ..core.enums import BindingKind, MediaType
from ..core.exceptions import ArgumentBindingError
from ..core.signature import Invocation, Literal, OperationSignature
from ..core.wire import Header, Payload, WireRequest


def render_value(value: Any) -> str:
    """Canonical string form of an argument value.

    Enums render their wire value, booleans render lowercase.
    """
    if isinstance(value, Enum):
        return render_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _read_attribute(value: Any, attr_path: str) -> Any:
    for attr in filter(None, attr_path.split(".")):
        value = getattr(value, attr, None)
        if value is None:
            return None
    return value


class RequestBuilder:
    """Builds WireRequests against a fixed endpoint."""

    def __init__(self, endpoint: str, codecs: CodecRegistry) -> None:
        self.endpoint = endpoint.rstrip("/")
        self._codecs = codecs

    def build(self, signature: OperationSignature, args: tuple[Any, ...] | list[Any]) -> WireRequest:
        """Build the request for one call.

        Raises:
            ArgumentBindingError: On arity or type mismatch, or a missing path value
        """
        args = tuple(args)
        self._check_arguments(signature, args)

        uri = self.endpoint + self._resolve_path(signature, args)
        query = self._encode_query(self._query_pairs(signature, args))
        if query:
            uri = f"{uri}?{query}"

        headers = self._headers(signature, args)
        payload = self._payload(signature, args)
        if payload is not None:
            headers.append(("Content-Type", payload.media_type))

        return WireRequest(
            method=signature.method.value,
            uri=uri,
            headers=tuple(headers),
            payload=payload,
        )

    def build_invocation(self, invocation: Invocation) -> WireRequest:
        return self.build(invocation.signature, invocation.args)

    # --- steps -------------------------------------------------------------

    def _check_arguments(self, signature: OperationSignature, args: tuple[Any, ...]) -> None:
        if len(args) != len(signature.bindings):
            raise ArgumentBindingError(
                f"{signature.describe()} takes {len(signature.bindings)} argument(s), "
                f"got {len(args)}",
                operation=signature.name,
            )
        for position, (binding, value) in enumerate(zip(signature.bindings, args)):
            if not binding.accepts(value):
                raise ArgumentBindingError(
                    f"{signature.describe()}: argument {position} must be "
                    f"{binding.type.__name__}, got {type(value).__name__}",
                    operation=signature.name,
                )

    def _resolve_path(self, signature: OperationSignature, args: tuple[Any, ...]) -> str:
        values: dict[str, Any] = {}
        for binding, arg in zip(signature.bindings, args):
            for placeholder, attr_path in binding.placeholders:
                values[placeholder] = _read_attribute(arg, attr_path)

        parts: list[str] = []
        for segment in signature.path_template.segments:
            if isinstance(segment, Literal):
                parts.append(segment.text)
                continue
            value = values.get(segment.name)
            if value is None:
                raise ArgumentBindingError(
                    f"{signature.describe()}: no value for path placeholder '{segment.name}'",
                    operation=signature.name,
                )
            parts.append(quote(render_value(value), safe=""))
        return "".join(parts)

    def _query_pairs(
        self, signature: OperationSignature, args: tuple[Any, ...]
    ) -> list[tuple[str, Any]]:
        pairs: list[tuple[str, Any]] = []
        for binding, arg in zip(signature.bindings, args):
            if binding.kind is BindingKind.QUERY:
                pairs.append((binding.name, arg))
            elif binding.kind is BindingKind.OPTIONS:
                pairs.extend(arg.query_pairs())
        return pairs

    @staticmethod
    def _encode_query(pairs: list[tuple[str, Any]]) -> str:
        return "&".join(
            f"{quote(name, safe='')}={quote(render_value(value), safe='')}"
            for name, value in pairs
        )

    def _headers(self, signature: OperationSignature, args: tuple[Any, ...]) -> list[Header]:
        headers: list[Header] = []
        accept = self._accept(signature)
        if accept is not None:
            headers.append(("Accept", accept))
        for binding, arg in zip(signature.bindings, args):
            if binding.kind is BindingKind.HEADER:
                headers.append((binding.name, render_value(arg)))
            elif binding.kind is BindingKind.OPTIONS:
                headers.extend(
                    (name, render_value(value))
                    for name, value in arg.header_pairs()
                )
        return headers

    @staticmethod
    def _accept(signature: OperationSignature) -> str | None:
        if signature.parser.accepts_plain_text:
            return MediaType.TEXT_PLAIN
        return signature.consumes

    def _payload(self, signature: OperationSignature, args: tuple[Any, ...]) -> Payload | None:
        for binding, arg in zip(signature.bindings, args):
            if binding.kind is BindingKind.BODY:
                media_type = signature.produces
                return Payload(data=self._codecs.encode(media_type, arg), media_type=media_type)
        return None
