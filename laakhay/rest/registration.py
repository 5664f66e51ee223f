"""Catalog registration utilities.

This module fills a SignatureRegistry with the static operation tables of
the shipped API catalogs. Registries are filled once and frozen before any
client uses them.
"""

from __future__ import annotations

from laakhay.rest.apis.abiquo import SIGNATURES as ABIQUO_SIGNATURES
from laakhay.rest.apis.nova import SIGNATURES as NOVA_SIGNATURES
from laakhay.rest.runtime.registry import SignatureRegistry

__all__ = [
    "register_abiquo",
    "register_nova",
    "register_all",
    "build_abiquo_registry",
    "build_nova_registry",
    "build_default_registry",
]


def register_abiquo(registry: SignatureRegistry) -> None:
    """Register the Abiquo infrastructure operations.

    Args:
        registry: Registry that has not been frozen yet
    """
    for signature in ABIQUO_SIGNATURES:
        registry.register(signature)


def register_nova(registry: SignatureRegistry) -> None:
    """Register the Nova flavor operations.

    Args:
        registry: Registry that has not been frozen yet
    """
    for signature in NOVA_SIGNATURES:
        registry.register(signature)


def register_all(registry: SignatureRegistry) -> None:
    """Register every shipped catalog."""
    register_abiquo(registry)
    register_nova(registry)


def build_abiquo_registry() -> SignatureRegistry:
    return SignatureRegistry.from_signatures(ABIQUO_SIGNATURES)


def build_nova_registry() -> SignatureRegistry:
    return SignatureRegistry.from_signatures(NOVA_SIGNATURES)


def build_default_registry() -> SignatureRegistry:
    """Frozen registry holding every shipped catalog."""
    registry = SignatureRegistry()
    register_all(registry)
    return registry.freeze()
