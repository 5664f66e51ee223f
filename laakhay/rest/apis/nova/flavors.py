"""Nova flavor API operation table.

Nova wraps every document in a single-key object (``{"flavors": [...]}``),
so each read declares the envelope key the result is unwrapped from.
"""

from __future__ import annotations

from ...core.enums import FallbackPolicy, HttpMethod, MediaType
from ...core.signature import OperationSignature, operation, path
from .models import Flavor

SIGNATURES: tuple[OperationSignature, ...] = (
    operation(
        "list_flavors",
        HttpMethod.GET,
        "/flavors",
        consumes=MediaType.APPLICATION_JSON,
        result_type=list[Flavor],
        envelope="flavors",
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
    operation(
        "get_flavor",
        HttpMethod.GET,
        "/flavors/{flavor}",
        path(str, "flavor"),
        consumes=MediaType.APPLICATION_JSON,
        result_type=Flavor,
        envelope="flavor",
        fallback=FallbackPolicy.NULL_ON_NOT_FOUND,
    ),
)
