"""Response strategy selection and the parsers behind each variant.

The variant is fixed on the signature when the operation is declared;
``select()`` never looks at the response. Every parser exposes
``parse(response, signature)``, which returns the caller-visible result or
raises DecodeFailure.
"""

from __future__ import annotations

from typing import Any

from ..codecs import CodecRegistry
from ..core.enums import ParserVariant
from ..core.exceptions import DecodeFailure
from ..core.signature import OperationSignature
from ..core.wire import WireResponse


def select(signature: OperationSignature) -> ParserVariant:
    """Parser variant declared for an operation."""
    return signature.parser


class ResponseParser:
    """Turns a 2xx response into a result."""

    variant: ParserVariant

    def parse(self, response: WireResponse, signature: OperationSignature) -> Any:
        raise NotImplementedError


class StructuredDecodeParser(ResponseParser):
    """Decodes the body per the consumed media type into the result type."""

    variant = ParserVariant.STRUCTURED_DECODE

    def __init__(self, codecs: CodecRegistry) -> None:
        self._codecs = codecs

    def parse(self, response: WireResponse, signature: OperationSignature) -> Any:
        if not response.body:
            raise DecodeFailure(
                f"{signature.name}: empty body, expected {signature.consumes}",
                media_type=signature.consumes,
            )
        return self._codecs.decode(
            signature.consumes,
            response.body,
            signature.result_type,
            envelope=signature.envelope,
        )


class StreamDecodeParser(ResponseParser):
    """Decodes line-delimited event bodies, one document per non-empty line.

    The result type of the signature is the list type; each line is decoded
    into its item type.
    """

    variant = ParserVariant.STREAM_DECODE

    def __init__(self, codecs: CodecRegistry) -> None:
        self._codecs = codecs

    def parse(self, response: WireResponse, signature: OperationSignature) -> list[Any]:
        item_type = _item_type(signature.result_type)
        events: list[Any] = []
        for line in (response.body or b"").splitlines():
            if not line.strip():
                continue
            events.append(
                self._codecs.decode(
                    signature.consumes, line, item_type, envelope=signature.envelope
                )
            )
        return events


class PlainTextParser(ResponseParser):
    """Returns the body as text."""

    variant = ParserVariant.PLAIN_TEXT

    def parse(self, response: WireResponse, signature: OperationSignature) -> str:
        try:
            return response.text()
        except UnicodeDecodeError as exc:
            raise DecodeFailure(f"{signature.name}: body is not valid text") from exc


class BooleanOn2xxParser(ResponseParser):
    """True when the status is 2xx; the body is ignored."""

    variant = ParserVariant.BOOLEAN_ON_2XX

    def parse(self, response: WireResponse, signature: OperationSignature) -> bool:
        return response.is_success


class ReleaseOnlyParser(ResponseParser):
    """Discards the body and returns nothing."""

    variant = ParserVariant.RELEASE_ONLY

    def parse(self, response: WireResponse, signature: OperationSignature) -> None:
        return None


def _item_type(result_type: Any) -> Any:
    args = getattr(result_type, "__args__", None)
    return args[0] if args else None


def build_parsers(codecs: CodecRegistry) -> dict[ParserVariant, ResponseParser]:
    """One parser per variant."""
    parsers: list[ResponseParser] = [
        StructuredDecodeParser(codecs),
        StreamDecodeParser(codecs),
        PlainTextParser(),
        BooleanOn2xxParser(),
        ReleaseOnlyParser(),
    ]
    return {parser.variant: parser for parser in parsers}


class ResponseStrategySelector:
    """Selects the parser for a signature."""

    def __init__(self, codecs: CodecRegistry) -> None:
        self._parsers = build_parsers(codecs)

    def select(self, signature: OperationSignature) -> ParserVariant:
        return select(signature)

    def parser_for(self, signature: OperationSignature) -> ResponseParser:
        return self._parsers[select(signature)]
