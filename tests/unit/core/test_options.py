"""Unit tests for request options objects."""

from typing import Annotated

import pytest
from pydantic import ValidationError

from laakhay.rest.core.enums import OptionTarget
from laakhay.rest.core.options import OptionField, RequestOptions
from laakhay.rest.apis.abiquo.models import NetworkType
from laakhay.rest.apis.abiquo.options import MachineOptions, NetworkOptions


class PagingOptions(RequestOptions):
    start_with: Annotated[int | None, OptionField("startwith")] = None
    limit: int | None = None
    trace: Annotated[str | None, OptionField("X-Trace", OptionTarget.HEADER)] = None


class TestOptionState:
    """Test the unset/set state and wire contributions."""

    def test_unset_fields_contribute_nothing(self):
        """Test that an empty options object adds no params or headers."""
        options = PagingOptions()
        assert options.query_pairs() == []
        assert options.header_pairs() == []
        assert options.limit is None
        assert not options.is_set("limit")

    def test_contributions_follow_declared_order_not_keyword_order(self):
        """Test that wire order is the field declaration order."""
        options = PagingOptions(limit=25, start_with=10)
        assert options.query_pairs() == [("startwith", 10), ("limit", 25)]
        assert options.set_values() == {"start_with": 10, "limit": 25}

    def test_header_target(self):
        """Test that header fields are kept out of the query."""
        options = PagingOptions(trace="abc", limit=1)
        assert options.query_pairs() == [("limit", 1)]
        assert options.header_pairs() == [("X-Trace", "abc")]

    def test_wire_field_defaults_to_attribute_name(self):
        """Test the wire placement of plain and annotated fields."""
        assert PagingOptions.wire_field("limit") == OptionField("limit")
        assert PagingOptions.wire_field("trace") == OptionField("X-Trace", OptionTarget.HEADER)


class TestOptionValidation:
    """Test that option values are checked against their declared types."""

    def test_none_is_rejected(self):
        """Test that an explicit None is refused."""
        with pytest.raises(ValidationError, match="cannot be None"):
            PagingOptions(limit=None)

    def test_unknown_field_is_rejected(self):
        """Test that undeclared fields are refused."""
        with pytest.raises(ValidationError, match="page"):
            PagingOptions(page=2)

    def test_badly_typed_port_is_rejected(self):
        """Test that a non-numeric port never reaches the wire."""
        with pytest.raises(ValidationError, match="port"):
            MachineOptions(port="eighty")

    def test_badly_typed_sync_is_rejected(self):
        """Test that sync only takes boolean values."""
        with pytest.raises(ValidationError, match="sync"):
            MachineOptions(sync="maybe")

    def test_unknown_network_type_is_rejected(self):
        """Test that the network type must be a NetworkType."""
        with pytest.raises(ValidationError, match="type"):
            NetworkOptions(type="not-a-network-type")

    def test_enum_value_is_coerced(self):
        """Test that a valid wire name becomes the enum member."""
        assert NetworkOptions(type="PUBLIC").type is NetworkType.PUBLIC

    def test_replace_validates(self):
        """Test that replace() checks the new values too."""
        with pytest.raises(ValidationError):
            MachineOptions(port=80).replace(sync="maybe")


class TestOptionValue:
    """Test immutability, equality and representation."""

    def test_immutable(self):
        """Test that fields cannot be assigned."""
        options = PagingOptions(limit=1)
        with pytest.raises(ValidationError):
            options.limit = 2

    def test_unknown_attribute(self):
        """Test that undeclared attributes raise AttributeError."""
        with pytest.raises(AttributeError):
            PagingOptions().page  # noqa: B018

    def test_replace_returns_copy(self):
        """Test that replace() leaves the original untouched."""
        options = PagingOptions(limit=1)
        changed = options.replace(start_with=5)
        assert changed == PagingOptions(limit=1, start_with=5)
        assert changed.query_pairs() == [("startwith", 5), ("limit", 1)]
        assert options == PagingOptions(limit=1)

    def test_equality_and_hash(self):
        """Test value equality and hashing."""
        assert PagingOptions(limit=1) == PagingOptions(limit=1)
        assert hash(PagingOptions(limit=1)) == hash(PagingOptions(limit=1))
        assert PagingOptions(limit=1) != PagingOptions(limit=2)

    def test_repr_lists_set_fields(self):
        """Test that repr shows only the fields that are set."""
        assert repr(PagingOptions(limit=3)) == "PagingOptions(limit=3)"
