"""Unit tests for RequestBuilder."""

import json
from typing import Annotated

import pytest

from laakhay.rest.codecs import default_codecs
from laakhay.rest.core.enums import FallbackPolicy, HttpMethod, OptionTarget, ParserVariant
from laakhay.rest.core.exceptions import ArgumentBindingError
from laakhay.rest.core.options import OptionField, RequestOptions
from laakhay.rest.core.signature import (
    Invocation,
    header,
    operation,
    options,
    path,
    query,
)
from laakhay.rest.runtime.builder import RequestBuilder, render_value
from laakhay.rest.apis.abiquo.infrastructure import SIGNATURES
from laakhay.rest.apis.abiquo.models import (
    DatacenterDto,
    HypervisorType,
    RackDto,
    RemoteServiceDto,
    RemoteServiceType,
)
from laakhay.rest.apis.abiquo.options import DatacenterOptions, MachineOptions
from laakhay.rest.runtime.registry import SignatureRegistry

ENDPOINT = "http://localhost/api"
DATACENTER = DatacenterDto(id=1, name="DC")


class TraceOptions(RequestOptions):
    limit: int | None = None
    trace: Annotated[str | None, OptionField("X-Trace", OptionTarget.HEADER)] = None
    start_with: Annotated[int | None, OptionField("startwith")] = None


@pytest.fixture
def builder():
    """Request builder rooted at the default endpoint."""
    return RequestBuilder(ENDPOINT, default_codecs())


@pytest.fixture
def registry():
    """Frozen registry of the infrastructure catalog."""
    return SignatureRegistry.from_signatures(SIGNATURES)


def _search(*extra):
    return operation(
        "search",
        HttpMethod.GET,
        "/search/{scope}",
        path(str, "scope"),
        *extra,
        consumes="application/json",
    )


class TestRenderValue:
    """Test rendering of path, query and header values."""

    def test_enum_renders_value(self):
        """Test that enums render their wire value."""
        assert render_value(HypervisorType.KVM) == "KVM"

    def test_bool_renders_lowercase(self):
        """Test that booleans render as true/false."""
        assert render_value(True) == "true"
        assert render_value(False) == "false"

    def test_other_values_use_str(self):
        """Test that other values fall back to str()."""
        assert render_value(8889) == "8889"
        assert render_value("x") == "x"


class TestPath:
    """Test path expansion."""

    def test_get_datacenter(self, builder, registry):
        """Test a single placeholder filled from an int argument."""
        sig = registry.get("get_datacenter", int)
        request = builder.build(sig, (1,))
        assert request.request_line == "GET http://localhost/api/admin/datacenters/1 HTTP/1.1"
        assert request.headers == (("Accept", DatacenterDto.MEDIA_TYPE),)
        assert request.payload is None
        assert sig.fallback is FallbackPolicy.NULL_ON_NOT_FOUND
        assert sig.parser is ParserVariant.STRUCTURED_DECODE

    def test_values_are_percent_encoded(self, builder):
        """Test that path values are percent-encoded."""
        request = builder.build(_search(), ("a b/c",))
        assert request.uri == "http://localhost/api/search/a%20b%2Fc"

    def test_dotted_attribute_path(self, builder, registry):
        """Test placeholders read through dotted attributes."""
        service = RemoteServiceDto(
            type=RemoteServiceType.NODE_COLLECTOR, uri="http://localhost", datacenter_id=1
        )
        request = builder.build(registry.get("is_available", RemoteServiceDto), (service,))
        assert request.uri == (
            "http://localhost/api/admin/datacenters/1/remoteservices/nodecollector/action/check"
        )

    def test_missing_path_value(self, builder, registry):
        """Test that a missing attribute value is a binding error."""
        rack = RackDto(name="rack", id=3)  # no datacenter_id
        with pytest.raises(ArgumentBindingError, match="datacenter"):
            builder.build(registry.get("delete_rack", RackDto), (rack,))

    def test_endpoint_trailing_slash(self):
        """Test that a trailing slash on the endpoint is ignored."""
        builder = RequestBuilder(ENDPOINT + "/", default_codecs())
        assert builder.build(_search(), ("x",)).uri == "http://localhost/api/search/x"


class TestArguments:
    """Test argument checks done before building."""

    def test_arity_mismatch(self, builder):
        """Test that a wrong argument count is rejected."""
        with pytest.raises(ArgumentBindingError, match="takes 1 argument"):
            builder.build(_search(), ())

    def test_type_mismatch(self, builder, registry):
        """Test that a wrong argument type is rejected."""
        with pytest.raises(ArgumentBindingError, match="must be int"):
            builder.build(registry.get("get_datacenter", int), ("1",))

    def test_bool_is_not_an_int(self, builder, registry):
        """Test that bool does not satisfy an int binding."""
        with pytest.raises(ArgumentBindingError):
            builder.build(registry.get("get_datacenter", int), (True,))


class TestQuery:
    """Test query string assembly."""

    def test_discover_single_machine_without_options(self, builder, registry):
        """Test query bindings in declared order."""
        sig = registry.get(
            "discover_single_machine", DatacenterDto, str, HypervisorType, str, str
        )
        request = builder.build(
            sig, (DATACENTER, "10.60.1.222", HypervisorType.XENSERVER, "user", "pass")
        )
        assert request.uri.endswith(
            "/action/discoversingle?ip=10.60.1.222&hypervisor=XENSERVER&user=user&password=pass"
        )
        assert "port=" not in request.uri

    def test_discover_single_machine_with_options(self, builder, registry):
        """Test that options follow the query bindings."""
        sig = registry.get(
            "discover_single_machine",
            DatacenterDto,
            str,
            HypervisorType,
            str,
            str,
            MachineOptions,
        )
        request = builder.build(
            sig,
            (
                DATACENTER,
                "10.60.1.222",
                HypervisorType.XENSERVER,
                "user",
                "pass",
                MachineOptions(port=8889),
            ),
        )
        assert request.uri.endswith(
            "?ip=10.60.1.222&hypervisor=XENSERVER&user=user&password=pass&port=8889"
        )

    def test_no_fields_set_means_no_query_string(self, builder):
        """Test that empty options add no query string."""
        request = builder.build(_search(options(TraceOptions)), ("x", TraceOptions()))
        assert "?" not in request.uri

    def test_one_pair_per_set_field_in_declared_order(self, builder):
        """Test one pair per set field in declared order."""
        sig = _search(options(TraceOptions))
        both = builder.build(sig, ("x", TraceOptions(start_with=5, limit=10)))
        assert both.uri.endswith("?limit=10&startwith=5")

        one = builder.build(sig, ("x", TraceOptions(start_with=5)))
        assert one.uri.endswith("?startwith=5")

    def test_query_values_are_encoded(self, builder):
        """Test that query values are percent-encoded."""
        request = builder.build(_search(query(str, "q")), ("x", "a&b=c"))
        assert request.uri.endswith("?q=a%26b%3Dc")

    def test_bool_query(self, builder):
        """Test boolean query values."""
        request = builder.build(_search(query(bool, "sync")), ("x", True))
        assert request.uri.endswith("?sync=true")


class TestHeaders:
    """Test Accept, header bindings and header options."""

    def test_plain_text_accept(self, builder, registry):
        """Test that plain-text parsers ask for text/plain."""
        sig = registry.get("get_hypervisor_type_from_machine", DatacenterDto, DatacenterOptions)
        request = builder.build(sig, (DATACENTER, DatacenterOptions(ip="10.60.1.4")))
        assert request.uri.endswith("/admin/datacenters/1/action/hypervisor?ip=10.60.1.4")
        assert request.headers == (("Accept", "text/plain"),)

    def test_boolean_accept(self, builder, registry):
        """Test that boolean parsers ask for text/plain."""
        service = RemoteServiceDto(
            type=RemoteServiceType.VIRTUAL_FACTORY, uri="http://localhost", datacenter_id=1
        )
        request = builder.build(registry.get("is_available", RemoteServiceDto), (service,))
        assert request.headers == (("Accept", "text/plain"),)

    def test_delete_has_no_headers(self, builder, registry):
        """Test that deletes send no headers and no body."""
        sig = registry.get("delete_datacenter", DatacenterDto)
        request = builder.build(sig, (DATACENTER,))
        assert request.request_line == "DELETE http://localhost/api/admin/datacenters/1 HTTP/1.1"
        assert request.headers == ()
        assert request.payload is None
        assert sig.parser is ParserVariant.RELEASE_ONLY
        assert sig.fallback is FallbackPolicy.DEFAULT

    def test_header_bindings_and_header_options(self, builder):
        """Test header bindings and header-targeted options."""
        sig = _search(header(str, "X-Tenant"), options(TraceOptions))
        request = builder.build(sig, ("x", "acme", TraceOptions(trace="t1")))
        assert request.headers == (
            ("Accept", "application/json"),
            ("X-Tenant", "acme"),
            ("X-Trace", "t1"),
        )
        assert "?" not in request.uri


class TestPayload:
    """Test request bodies."""

    def test_body_is_encoded_with_content_type(self, builder, registry):
        """Test body encoding and Content-Type."""
        sig = registry.get("create_rack", DatacenterDto, RackDto)
        request = builder.build(sig, (DATACENTER, RackDto(name="rack", vlan_id_min=2)))
        assert request.request_line == (
            "POST http://localhost/api/admin/datacenters/1/racks HTTP/1.1"
        )
        assert request.payload.media_type == RackDto.MEDIA_TYPE
        assert json.loads(request.payload.data) == {"name": "rack", "vlanIdMin": 2}
        assert request.headers == (
            ("Accept", RackDto.MEDIA_TYPE),
            ("Content-Type", RackDto.MEDIA_TYPE),
        )
        assert request.non_payload_headers == (("Accept", RackDto.MEDIA_TYPE),)

    def test_body_feeds_path(self, builder, registry):
        """Test that the body argument also fills the path."""
        rack = RackDto(id=3, name="rack", datacenter_id=1)
        request = builder.build(registry.get("update_rack", RackDto), (rack,))
        assert request.request_line == (
            "PUT http://localhost/api/admin/datacenters/1/racks/3 HTTP/1.1"
        )

    def test_no_body_binding_means_no_payload(self, builder, registry):
        """Test that reads carry no payload."""
        for sig in registry.overloads("list_racks") + registry.overloads("get_rack"):
            args = (DATACENTER,) if len(sig.bindings) == 1 else (DATACENTER, 1)
            request = builder.build(sig, args)
            assert request.payload is None
            assert request.first("Content-Type") is None


class TestDeterminism:
    """Test that building is deterministic."""

    def test_equal_inputs_give_equal_requests(self, builder, registry):
        """Test that equal inputs build equal requests."""
        sig = registry.get("create_rack", DatacenterDto, RackDto)
        args = (DATACENTER, RackDto(name="rack", short_description="d"))
        first = builder.build(sig, args)
        second = builder.build(sig, (DatacenterDto(id=1, name="DC"), RackDto(name="rack", short_description="d")))
        assert first == second
        assert first.payload.data == second.payload.data

    def test_two_builders_agree(self, registry):
        """Test that independent builders agree."""
        sig = registry.get("get_datacenter", int)
        first = RequestBuilder(ENDPOINT, default_codecs()).build(sig, (7,))
        second = RequestBuilder(ENDPOINT, default_codecs()).build(sig, [7])
        assert first == second

    def test_build_invocation(self, builder, registry):
        """Test building from an Invocation."""
        sig = registry.get("get_datacenter", int)
        assert builder.build_invocation(Invocation(sig, (1,))) == builder.build(sig, (1,))
