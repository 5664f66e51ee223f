"""Unit tests for fallback resolution."""

import pytest

from laakhay.rest.core.enums import DomainErrorKind, FallbackPolicy, HttpMethod, ParserVariant
from laakhay.rest.core.exceptions import (
    DecodeFailure,
    DomainError,
    HttpResponseError,
    TransportFailure,
)
from laakhay.rest.core.outcome import Empty, Propagate, Reclassified, Value
from laakhay.rest.core.signature import operation
from laakhay.rest.runtime.fallback import parse_errors, resolve


def _sig(policy, parser=ParserVariant.BOOLEAN_ON_2XX):
    return operation("op", HttpMethod.GET, "/op", parser=parser, fallback=policy)


def _http(status, body=None):
    return HttpResponseError(f"GET /op returned {status}", status_code=status, body=body)


OTHER_FAILURES = [
    _http(400),
    _http(401),
    _http(409),
    _http(500),
    _http(503),
    TransportFailure("connection refused"),
    DecodeFailure("bad body"),
]


class TestDefault:
    """Test the DEFAULT and RELEASE_AND_DISCARD policies."""

    @pytest.mark.parametrize("failure", [_http(404), *OTHER_FAILURES])
    def test_always_propagates(self, failure):
        """Test that every failure propagates unchanged."""
        assert resolve(_sig(FallbackPolicy.DEFAULT), failure) == Propagate(failure)

    @pytest.mark.parametrize("failure", [_http(404), *OTHER_FAILURES])
    def test_release_and_discard_propagates(self, failure):
        """Test that release-only calls recover from nothing."""
        sig = _sig(FallbackPolicy.RELEASE_AND_DISCARD, parser=ParserVariant.RELEASE_ONLY)
        assert resolve(sig, failure) == Propagate(failure)


class TestNullOnNotFound:
    """Test the NULL_ON_NOT_FOUND policy."""

    def test_404_is_empty(self):
        """Test that a 404 resolves to Empty."""
        assert resolve(_sig(FallbackPolicy.NULL_ON_NOT_FOUND), _http(404)) == Empty()

    def test_not_found_domain_error_is_empty(self):
        """Test that a NOT_FOUND domain error also resolves to Empty."""
        error = DomainError("gone", kind=DomainErrorKind.NOT_FOUND, status_code=404)
        assert resolve(_sig(FallbackPolicy.NULL_ON_NOT_FOUND), error) == Empty()

    @pytest.mark.parametrize("failure", OTHER_FAILURES)
    def test_other_failures_propagate(self, failure):
        """Test that anything but not-found propagates."""
        assert resolve(_sig(FallbackPolicy.NULL_ON_NOT_FOUND), failure) == Propagate(failure)


class TestFalseIfUnavailable:
    """Test the FALSE_IF_UNAVAILABLE policy."""

    @pytest.mark.parametrize(
        "failure",
        [_http(404), _http(500), _http(502), _http(503), TransportFailure("timeout")],
    )
    def test_unavailable_is_false(self, failure):
        """Test that 404, 5xx and transport failures resolve to False."""
        assert resolve(_sig(FallbackPolicy.FALSE_IF_UNAVAILABLE), failure) == Value(False)

    @pytest.mark.parametrize("failure", [_http(400), _http(401), DecodeFailure("x")])
    def test_other_failures_propagate(self, failure):
        """Test that other client errors and decode failures propagate."""
        assert resolve(_sig(FallbackPolicy.FALSE_IF_UNAVAILABLE), failure) == Propagate(failure)


class TestMapClientErrors:
    """Test the MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS policy."""

    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            (400, DomainErrorKind.CLIENT_ERROR),
            (401, DomainErrorKind.AUTHORIZATION),
            (403, DomainErrorKind.AUTHORIZATION),
            (404, DomainErrorKind.NOT_FOUND),
            (409, DomainErrorKind.CONFLICT),
            (422, DomainErrorKind.CLIENT_ERROR),
        ],
    )
    def test_client_errors_are_reclassified(self, status, kind):
        """Test that 4xx statuses map to domain error kinds."""
        outcome = resolve(_sig(FallbackPolicy.MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS), _http(status, b"raw"))
        assert isinstance(outcome, Reclassified)
        assert outcome.error.kind is kind
        assert outcome.error.status_code == status
        assert outcome.error.body == b"raw"

    @pytest.mark.parametrize("failure", [_http(500), TransportFailure("x"), DecodeFailure("x")])
    def test_other_failures_propagate(self, failure):
        """Test that 5xx, transport and decode failures propagate."""
        policy = FallbackPolicy.MAP_CLIENT_ERRORS_TO_DOMAIN_ERRORS
        assert resolve(_sig(policy), failure) == Propagate(failure)


class TestPropagateDomainException:
    """Test the PROPAGATE_DOMAIN_EXCEPTION_ON_CLIENT_OR_NOT_FOUND policy."""

    POLICY = FallbackPolicy.PROPAGATE_DOMAIN_EXCEPTION_ON_CLIENT_OR_NOT_FOUND

    def test_error_document_is_parsed(self):
        """Test that the service error document becomes the message."""
        body = b'{"collection": [{"code": "NC-3", "message": "Invalid hypervisor type"}]}'
        outcome = resolve(_sig(self.POLICY), _http(409, body))
        assert isinstance(outcome, Reclassified)
        error = outcome.error
        assert error.kind is DomainErrorKind.CONFLICT
        assert error.has_error("NC-3")
        assert str(error) == "NC-3: Invalid hypervisor type"

    def test_not_found(self):
        """Test a 404 without an error document."""
        outcome = resolve(_sig(self.POLICY), _http(404))
        assert isinstance(outcome, Reclassified)
        assert outcome.error.kind is DomainErrorKind.NOT_FOUND
        assert outcome.error.errors == []

    def test_unparseable_document_keeps_raw_body(self):
        """Test that an unreadable document keeps the raw body."""
        outcome = resolve(_sig(self.POLICY), _http(400, b"<html>bad</html>"))
        assert outcome.error.errors == []
        assert outcome.error.body == b"<html>bad</html>"

    def test_existing_domain_error_is_surfaced(self):
        """Test that a raised DomainError is surfaced as-is."""
        error = DomainError("denied", kind=DomainErrorKind.AUTHORIZATION, status_code=403)
        assert resolve(_sig(self.POLICY), error) == Reclassified(error)

    @pytest.mark.parametrize("failure", [_http(500), TransportFailure("x")])
    def test_server_and_transport_failures_propagate(self, failure):
        """Test that 5xx and transport failures propagate."""
        assert resolve(_sig(self.POLICY), failure) == Propagate(failure)


def test_parse_errors():
    """Test reading the error document from raw bodies."""
    assert parse_errors(None) == []
    assert parse_errors(b"[]") == []
    entries = parse_errors(b'{"collection": [{"code": "DC-0", "message": "Unknown"}]}')
    assert [e.code for e in entries] == ["DC-0"]
