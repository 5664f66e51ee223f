"""JSON codec backed by pydantic TypeAdapters."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import DecodeFailure

_DOCUMENT = TypeAdapter(dict[str, Any])


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class PydanticJsonCodec:
    """Encodes models with their field aliases and decodes into any pydantic-supported type."""

    def __init__(self, *, exclude_none: bool = True) -> None:
        self.exclude_none = exclude_none

    def encode(self, value: Any) -> bytes:
        return _adapter(type(value)).dump_json(
            value, by_alias=True, exclude_none=self.exclude_none
        )

    def decode(self, data: bytes, target: Any, *, envelope: str | None = None) -> Any:
        target = Any if target is None else target
        try:
            if envelope is None:
                return _adapter(target).validate_json(data)
            document = _DOCUMENT.validate_json(data)
            if envelope not in document:
                raise DecodeFailure(f"Response document has no '{envelope}' member")
            return _adapter(target).validate_python(document[envelope])
        except ValidationError as exc:
            raise DecodeFailure(f"Cannot decode response as {_name(target)}: {exc}") from exc


def _name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)
