"""Operation signatures.

Architecture:
    An OperationSignature is the immutable description of how one declared
    operation maps onto HTTP: verb, path template, per-argument bindings,
    media types, parser variant and fallback policy. Catalogs build them with
    the ``operation()`` factory and the binding helpers below, and the
    registry stores them keyed by name and parameter types.

Design Decisions:
    - Explicit tables: signatures are plain data built at import time,
      nothing is discovered by inspecting methods
    - One binding per argument position; a path or body binding may feed
      several placeholders from attributes of a single resource argument
    - Path templates are parsed once into literal and placeholder segments

Example:
    >>> sig = operation(
    ...     "get_rack",
    ...     HttpMethod.GET,
    ...     "/admin/datacenters/{datacenter}/racks/{rack}",
    ...     path_from(DatacenterDto, datacenter="id"),
    ...     path(int, "rack"),
    ...     consumes=RackDto.MEDIA_TYPE,
    ...     result_type=RackDto,
    ...     fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ... )
"""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass, field
from typing import Any

from .enums import BindingKind, FallbackPolicy, HttpMethod, ParserVariant
from .options import RequestOptions

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str


Segment = Literal | Placeholder


@dataclass(frozen=True)
class PathTemplate:
    """Ordered literal and placeholder segments of a path."""

    source: str
    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, source: str) -> PathTemplate:
        segments: list[Segment] = []
        position = 0
        for match in _PLACEHOLDER.finditer(source):
            if match.start() > position:
                segments.append(Literal(source[position : match.start()]))
            segments.append(Placeholder(match.group(1)))
            position = match.end()
        if position < len(source):
            segments.append(Literal(source[position:]))
        if any(isinstance(s, Literal) and ("{" in s.text or "}" in s.text) for s in segments):
            raise ValueError(f"Malformed path template '{source}'")
        return cls(source=source, segments=tuple(segments))

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(s.name for s in self.segments if isinstance(s, Placeholder))


@dataclass(frozen=True)
class Binding:
    """Mapping of one argument position onto the wire request.

    For PATH and BODY bindings ``placeholders`` pairs each placeholder name with a
    dotted attribute path read from the argument; an empty path means the
    argument value itself. For QUERY and HEADER bindings ``name`` is the
    wire name.
    """

    kind: BindingKind
    type: type
    name: str | None = None
    placeholders: tuple[tuple[str, str], ...] = ()

    def accepts(self, value: Any) -> bool:
        if isinstance(value, bool) and self.type is not bool and issubclass(self.type, int):
            return False
        return isinstance(value, self.type)


def path(type_: type, placeholder: str) -> Binding:
    """Bind a scalar argument to one placeholder."""
    return Binding(BindingKind.PATH, type_, placeholders=((placeholder, ""),))


def path_from(type_: type, **placeholders: str) -> Binding:
    """Bind attributes of a resource argument to placeholders."""
    if not placeholders:
        raise ValueError("path_from() needs at least one placeholder")
    return Binding(BindingKind.PATH, type_, placeholders=tuple(placeholders.items()))


def query(type_: type, name: str) -> Binding:
    return Binding(BindingKind.QUERY, type_, name=name)


def header(type_: type, name: str) -> Binding:
    return Binding(BindingKind.HEADER, type_, name=name)


def body(type_: type, **placeholders: str) -> Binding:
    """Bind the request body; a resource body may also feed path placeholders."""
    return Binding(BindingKind.BODY, type_, placeholders=tuple(placeholders.items()))


def options(type_: type[RequestOptions]) -> Binding:
    return Binding(BindingKind.OPTIONS, type_)


@dataclass(frozen=True)
class OperationSignature:
    """Immutable wire mapping of one declared operation."""

    name: str
    method: HttpMethod
    path_template: PathTemplate
    bindings: tuple[Binding, ...] = ()
    produces: str | None = None
    consumes: str | None = None
    parser: ParserVariant = ParserVariant.STRUCTURED_DECODE
    fallback: FallbackPolicy = FallbackPolicy.DEFAULT
    result_type: Any = None
    envelope: str | None = None

    def __post_init__(self) -> None:
        bodies = [b for b in self.bindings if b.kind is BindingKind.BODY]
        if len(bodies) > 1:
            raise ValueError(f"{self.name}: at most one body binding is allowed")
        if bodies and self.produces is None:
            raise ValueError(f"{self.name}: a body binding needs a 'produces' media type")
        bound = [name for b in self.bindings for name, _ in b.placeholders]
        if sorted(bound) != sorted(self.path_template.placeholders):
            raise ValueError(
                f"{self.name}: placeholders {list(self.path_template.placeholders)} "
                f"do not match path bindings {bound}"
            )
        if self.parser in (ParserVariant.STRUCTURED_DECODE, ParserVariant.STREAM_DECODE):
            if self.consumes is None:
                raise ValueError(f"{self.name}: decoding parsers need a 'consumes' media type")
        if (
            self.fallback is FallbackPolicy.RELEASE_AND_DISCARD
            and self.parser is not ParserVariant.RELEASE_ONLY
        ):
            raise ValueError(f"{self.name}: release_and_discard needs the release_only parser")

    @property
    def param_types(self) -> tuple[type, ...]:
        return tuple(b.type for b in self.bindings)

    @property
    def key(self) -> tuple[str, tuple[type, ...]]:
        return (self.name, self.param_types)

    @property
    def returns_collection(self) -> bool:
        return typing.get_origin(self.result_type) in (list, tuple, set, frozenset)

    def empty_result(self) -> Any:
        """Value handed to callers when a fallback resolves to Empty."""
        return [] if self.returns_collection else None

    def accepts(self, args: tuple[Any, ...]) -> bool:
        return len(args) == len(self.bindings) and all(
            b.accepts(a) for b, a in zip(self.bindings, args)
        )

    def describe(self) -> str:
        rendered = ", ".join(t.__name__ for t in self.param_types)
        return f"{self.name}({rendered})"


def operation(
    name: str,
    method: HttpMethod,
    template: str,
    *bindings: Binding,
    produces: str | None = None,
    consumes: str | None = None,
    parser: ParserVariant = ParserVariant.STRUCTURED_DECODE,
    fallback: FallbackPolicy = FallbackPolicy.DEFAULT,
    result_type: Any = None,
    envelope: str | None = None,
) -> OperationSignature:
    """Declare an operation signature."""
    return OperationSignature(
        name=name,
        method=method,
        path_template=PathTemplate.parse(template),
        bindings=tuple(bindings),
        produces=produces,
        consumes=consumes,
        parser=parser,
        fallback=fallback,
        result_type=result_type,
        envelope=envelope,
    )


@dataclass(frozen=True)
class Invocation:
    """A signature together with the concrete arguments of one call."""

    signature: OperationSignature
    args: tuple[Any, ...] = field(default_factory=tuple)
