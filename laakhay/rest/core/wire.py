"""Wire-level request and response values.

Architecture:
    WireRequest is what the builder produces and what the filter pipeline
    and transport consume. It is frozen: filters return modified copies via
    the ``with_*`` helpers instead of mutating a shared instance.

Design Decisions:
    - Headers are an ordered tuple of pairs so duplicates and insertion order
      survive, and so equality between two requests is byte-exact
    - Payload-related headers are kept apart by ``non_payload_headers`` to
      compare requests without caring about the encoded body
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

Header = tuple[str, str]

PAYLOAD_HEADERS = frozenset({"content-type", "content-length"})


@dataclass(frozen=True)
class Payload:
    """Encoded request body with its declared media type."""

    data: bytes
    media_type: str

    @property
    def content_length(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class WireRequest:
    """Concrete HTTP request ready to be handed to a transport."""

    method: str
    uri: str
    headers: tuple[Header, ...] = ()
    payload: Payload | None = None

    @property
    def request_line(self) -> str:
        """Render as ``METHOD <uri> HTTP/1.1``."""
        return f"{self.method} {self.uri} HTTP/1.1"

    @property
    def non_payload_headers(self) -> tuple[Header, ...]:
        return tuple(h for h in self.headers if h[0].lower() not in PAYLOAD_HEADERS)

    def get_all(self, name: str) -> list[str]:
        """All values of a header, in order. Names compare case-insensitively."""
        lowered = name.lower()
        return [value for key, value in self.headers if key.lower() == lowered]

    def first(self, name: str) -> str | None:
        values = self.get_all(name)
        return values[0] if values else None

    def with_header(self, name: str, value: str) -> WireRequest:
        """Append a header, keeping any existing values of the same name."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_replaced_header(self, name: str, value: str) -> WireRequest:
        """Set a header to a single value.

        The first existing occurrence keeps its position, later duplicates are
        dropped. When absent the header is appended.
        """
        lowered = name.lower()
        headers: list[Header] = []
        seen = False
        for key, current in self.headers:
            if key.lower() != lowered:
                headers.append((key, current))
            elif not seen:
                headers.append((key, value))
                seen = True
        if not seen:
            headers.append((name, value))
        return replace(self, headers=tuple(headers))

    def render(self) -> str:
        """Render request line and headers the way they appear on the wire."""
        lines = [self.request_line]
        lines.extend(f"{key}: {value}" for key, value in self.headers)
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class WireResponse:
    """HTTP response as returned by the transport."""

    status: int
    headers: tuple[Header, ...] = field(default_factory=tuple)
    body: bytes | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content_type(self) -> str | None:
        for key, value in self.headers:
            if key.lower() == "content-type":
                return value
        return None

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the body as text. An absent body reads as an empty string."""
        if self.body is None:
            return ""
        return self.body.decode(encoding)
