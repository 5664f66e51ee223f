"""Codec registry and the shipped JSON codec."""

from ..core.enums import MediaType
from .pydantic_json import PydanticJsonCodec
from .registry import Codec, CodecRegistry


def default_codecs() -> CodecRegistry:
    """Registry with the JSON codec bound to plain, suffixed and line-delimited JSON."""
    registry = CodecRegistry()
    codec = PydanticJsonCodec()
    registry.register(MediaType.APPLICATION_JSON, codec)
    registry.register(MediaType.NDJSON, codec)
    registry.register("+json", codec)
    return registry


__all__ = [
    "Codec",
    "CodecRegistry",
    "PydanticJsonCodec",
    "default_codecs",
]
