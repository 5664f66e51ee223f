"""Codec registry keyed by media type.

Codecs are looked up by exact media type first, then by structured syntax
suffix (``application/vnd.abiquo.rack+json`` falls back to the ``+json``
codec). Media type parameters such as ``; version=2.0`` are ignored for the
lookup.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..core.exceptions import UnsupportedMediaType


class Codec(Protocol):
    """Serializer for one family of media types."""

    def encode(self, value: Any) -> bytes: ...

    def decode(self, data: bytes, target: Any, *, envelope: str | None = None) -> Any: ...


def _essence(media_type: str) -> str:
    return media_type.split(";", 1)[0].strip().lower()


class CodecRegistry:
    """Maps media types to codecs."""

    def __init__(self) -> None:
        self._exact: dict[str, Codec] = {}
        self._suffixes: dict[str, Codec] = {}

    def register(self, media_type: str, codec: Codec) -> None:
        """Register a codec for a media type or a ``+suffix``."""
        key = _essence(media_type)
        if key.startswith("+"):
            self._suffixes[key] = codec
        else:
            self._exact[key] = codec

    def codec_for(self, media_type: str) -> Codec:
        key = _essence(media_type)
        if key in self._exact:
            return self._exact[key]
        if "+" in key:
            suffix = "+" + key.rsplit("+", 1)[1]
            if suffix in self._suffixes:
                return self._suffixes[suffix]
        raise UnsupportedMediaType(media_type)

    def supports(self, media_type: str) -> bool:
        try:
            self.codec_for(media_type)
        except UnsupportedMediaType:
            return False
        return True

    def encode(self, media_type: str, value: Any) -> bytes:
        return self.codec_for(media_type).encode(value)

    def decode(
        self, media_type: str, data: bytes, target: Any, *, envelope: str | None = None
    ) -> Any:
        return self.codec_for(media_type).decode(data, target, envelope=envelope)
