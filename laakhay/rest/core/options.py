"""Request options objects.

An options object is an optional argument whose fields each contribute at
most one query parameter or header. A field is either unset, in which case
it contributes nothing, or set to a value of its declared type. There is no
third "default" state: callers leave a field out to leave it unset.

Fields are declared as typed pydantic fields defaulting to ``None``. The
declaration order is the order contributions appear on the wire. A field
whose wire name or target differs from the attribute carries an
``OptionField`` in its ``Annotated`` metadata.

Example:
    >>> class PagingOptions(RequestOptions):
    ...     start_with: Annotated[int | None, OptionField("startwith")] = None
    ...     limit: int | None = None
    >>> PagingOptions(limit=25).query_pairs()
    [('limit', 25)]
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from .enums import OptionTarget


@dataclass(frozen=True)
class OptionField:
    """Wire placement of one options field."""

    wire_name: str
    target: OptionTarget = OptionTarget.QUERY


class RequestOptions(BaseModel):
    """Base class for options objects.

    Values are validated against the declared field types; an unknown field,
    a badly typed value or an explicit ``None`` raises ``ValidationError``.
    Instances are immutable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def reject_none(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be None; omit it to leave it unset")
        return value

    @classmethod
    def wire_field(cls, name: str) -> OptionField:
        """Wire placement of field ``name``; defaults to a query param of the same name."""
        for meta in cls.model_fields[name].metadata:
            if isinstance(meta, OptionField):
                return meta
        return OptionField(name)

    def is_set(self, name: str) -> bool:
        return name in self.model_fields_set

    def set_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self._set_names()}

    def replace(self, **changes: Any) -> RequestOptions:
        """Return a validated copy with the given fields set."""
        return type(self)(**{**self.set_values(), **changes})

    def contributions(self) -> Iterator[tuple[OptionField, Any]]:
        """Yield set fields with their values, in declared field order."""
        for name in self._set_names():
            yield type(self).wire_field(name), getattr(self, name)

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            (f.wire_name, value)
            for f, value in self.contributions()
            if f.target is OptionTarget.QUERY
        ]

    def header_pairs(self) -> list[tuple[str, Any]]:
        return [
            (f.wire_name, value)
            for f, value in self.contributions()
            if f.target is OptionTarget.HEADER
        ]

    def _set_names(self) -> list[str]:
        return [name for name in type(self).model_fields if name in self.model_fields_set]

    def __repr_args__(self):
        return [(name, getattr(self, name)) for name in self._set_names()]
