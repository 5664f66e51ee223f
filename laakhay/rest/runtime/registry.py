"""Signature registry.

Architecture:
    The registry maps an operation key, the operation name plus its ordered
    parameter types, to an OperationSignature. Catalogs contribute static
    tables; the registry is filled once and then frozen.

Design Decisions:
    - Overloads: one name may carry several signatures that differ by
      parameter types (``list_networks(dc)`` and
      ``list_networks(dc, NetworkOptions)``)
    - Frozen after build: lookups never lock, the mappings are never
      written again
    - ``resolve()`` picks the overload accepting a concrete argument tuple so
      the client can dispatch by name
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from ..core.exceptions import ArgumentBindingError, UnknownOperation
from ..core.signature import OperationSignature


class SignatureRegistry:
    """Read-only lookup of operation signatures."""

    def __init__(self, signatures: Iterable[OperationSignature] = ()) -> None:
        self._by_key: dict[tuple[str, tuple[type, ...]], OperationSignature] = {}
        self._by_name: dict[str, list[OperationSignature]] = {}
        self._frozen = False
        for signature in signatures:
            self.register(signature)

    @classmethod
    def from_signatures(cls, *tables: Iterable[OperationSignature]) -> SignatureRegistry:
        """Build a frozen registry from one or more signature tables."""
        registry = cls()
        for table in tables:
            for signature in table:
                registry.register(signature)
        return registry.freeze()

    def register(self, signature: OperationSignature) -> None:
        """Add a signature.

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If the same name and parameter types are already registered
        """
        if self._frozen:
            raise RuntimeError("Signature registry is frozen")
        if signature.key in self._by_key:
            raise ValueError(f"Operation '{signature.describe()}' is already registered")
        self._by_key[signature.key] = signature
        self._by_name.setdefault(signature.name, []).append(signature)

    def freeze(self) -> SignatureRegistry:
        self._by_key = MappingProxyType(self._by_key)  # type: ignore[assignment]
        self._by_name = MappingProxyType(  # type: ignore[assignment]
            {name: tuple(overloads) for name, overloads in self._by_name.items()}
        )
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str, *param_types: type) -> OperationSignature:
        """Look up a signature by name and exact parameter types."""
        try:
            return self._by_key[(name, tuple(param_types))]
        except KeyError:
            raise UnknownOperation(name, tuple(param_types)) from None

    def overloads(self, name: str) -> tuple[OperationSignature, ...]:
        if name not in self._by_name:
            raise UnknownOperation(name)
        return tuple(self._by_name[name])

    def resolve(self, name: str, args: tuple[Any, ...]) -> OperationSignature:
        """Pick the overload of ``name`` whose bindings accept ``args``.

        Raises:
            UnknownOperation: If no operation is registered under ``name``
            ArgumentBindingError: If the name is known but no overload accepts
                the arguments
        """
        candidates = self.overloads(name)
        for signature in candidates:
            if signature.accepts(args):
                return signature
        given = ", ".join(type(a).__name__ for a in args)
        raise ArgumentBindingError(
            f"No overload of '{name}' accepts ({given}); "
            f"candidates: {', '.join(s.describe() for s in candidates)}",
            operation=name,
        )

    def operations(self) -> list[str]:
        return sorted(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_key)
