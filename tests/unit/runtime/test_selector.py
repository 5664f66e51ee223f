"""Unit tests for response strategy selection and parsers."""

import pytest
from pydantic import BaseModel

from laakhay.rest.codecs import default_codecs
from laakhay.rest.core.enums import HttpMethod, MediaType, ParserVariant
from laakhay.rest.core.exceptions import DecodeFailure
from laakhay.rest.core.signature import operation
from laakhay.rest.core.wire import WireResponse
from laakhay.rest.runtime.selector import (
    BooleanOn2xxParser,
    PlainTextParser,
    ReleaseOnlyParser,
    ResponseStrategySelector,
    StreamDecodeParser,
    StructuredDecodeParser,
    select,
)
from laakhay.rest.apis.abiquo.models import DatacenterDto


class Event(BaseModel):
    type: str
    id: int


def _sig(parser, consumes=None, result_type=None, envelope=None):
    return operation(
        "op",
        HttpMethod.GET,
        "/op",
        parser=parser,
        consumes=consumes,
        result_type=result_type,
        envelope=envelope,
    )


@pytest.fixture
def selector():
    """Selector over the default codecs."""
    return ResponseStrategySelector(default_codecs())


@pytest.mark.parametrize("variant", list(ParserVariant))
def test_select_returns_declared_variant(selector, variant):
    """Test that selection returns the declared parser variant."""
    consumes = MediaType.APPLICATION_JSON
    sig = _sig(variant, consumes=consumes)
    assert select(sig) is variant
    assert selector.select(sig) is variant
    assert selector.parser_for(sig).variant is variant


def test_parser_classes(selector):
    """Test the parser class of each variant."""
    expected = {
        ParserVariant.STRUCTURED_DECODE: StructuredDecodeParser,
        ParserVariant.STREAM_DECODE: StreamDecodeParser,
        ParserVariant.PLAIN_TEXT: PlainTextParser,
        ParserVariant.BOOLEAN_ON_2XX: BooleanOn2xxParser,
        ParserVariant.RELEASE_ONLY: ReleaseOnlyParser,
    }
    for variant, parser_class in expected.items():
        parser = selector.parser_for(_sig(variant, consumes=MediaType.APPLICATION_JSON))
        assert isinstance(parser, parser_class)


class TestStructuredDecode:
    """Test the structured decode parser."""

    def test_decodes_result_type(self, selector):
        """Test decoding a document into the result type."""
        sig = _sig(
            ParserVariant.STRUCTURED_DECODE,
            consumes=DatacenterDto.MEDIA_TYPE,
            result_type=DatacenterDto,
        )
        response = WireResponse(200, body=b'{"id": 1, "name": "DC", "location": "Honolulu"}')
        result = selector.parser_for(sig).parse(response, sig)
        assert result == DatacenterDto(id=1, name="DC", location="Honolulu")

    def test_empty_body_is_a_decode_failure(self, selector):
        """Test that an empty body cannot be decoded."""
        sig = _sig(
            ParserVariant.STRUCTURED_DECODE,
            consumes=DatacenterDto.MEDIA_TYPE,
            result_type=DatacenterDto,
        )
        with pytest.raises(DecodeFailure):
            selector.parser_for(sig).parse(WireResponse(200), sig)


class TestStreamDecode:
    """Test the NDJSON stream parser."""

    def test_one_event_per_line(self, selector):
        """Test one event per non-blank line."""
        sig = _sig(
            ParserVariant.STREAM_DECODE,
            consumes=MediaType.NDJSON,
            result_type=list[Event],
        )
        body = b'{"type": "created", "id": 1}\n\n{"type": "deleted", "id": 2}\n'
        events = selector.parser_for(sig).parse(WireResponse(200, body=body), sig)
        assert events == [Event(type="created", id=1), Event(type="deleted", id=2)]

    def test_empty_stream(self, selector):
        """Test that an empty stream yields no events."""
        sig = _sig(ParserVariant.STREAM_DECODE, consumes=MediaType.NDJSON, result_type=list[Event])
        assert selector.parser_for(sig).parse(WireResponse(200), sig) == []

    def test_bad_line(self, selector):
        """Test that an invalid line is a decode failure."""
        sig = _sig(ParserVariant.STREAM_DECODE, consumes=MediaType.NDJSON, result_type=list[Event])
        with pytest.raises(DecodeFailure):
            selector.parser_for(sig).parse(WireResponse(200, body=b'{"type": "x"}\n'), sig)


class TestPlainText:
    """Test the plain text parser."""

    def test_returns_text(self, selector):
        """Test that the body is returned as text."""
        sig = _sig(ParserVariant.PLAIN_TEXT)
        response = WireResponse(200, body=b"KVM")
        assert selector.parser_for(sig).parse(response, sig) == "KVM"

    def test_undecodable_body(self, selector):
        """Test that invalid UTF-8 is a decode failure."""
        sig = _sig(ParserVariant.PLAIN_TEXT)
        with pytest.raises(DecodeFailure):
            selector.parser_for(sig).parse(WireResponse(200, body=b"\xff\xfe\xfa"), sig)


def test_boolean_on_2xx_ignores_body(selector):
    """Test that any 2xx is True whatever the body."""
    sig = _sig(ParserVariant.BOOLEAN_ON_2XX)
    assert selector.parser_for(sig).parse(WireResponse(204), sig) is True
    assert selector.parser_for(sig).parse(WireResponse(200, body=b"not json"), sig) is True


def test_release_only_discards_body(selector):
    """Test that the body is released and None returned."""
    sig = _sig(ParserVariant.RELEASE_ONLY)
    assert selector.parser_for(sig).parse(WireResponse(200, body=b"{}"), sig) is None
