"""Fallback outcomes.

The resolver answers every failure with exactly one of these variants. The
client turns them into a return value or a raised exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Value:
    """Recovered with a concrete result."""

    result: Any


@dataclass(frozen=True)
class Empty:
    """Recovered with an empty or absent result."""


@dataclass(frozen=True)
class Reclassified:
    """Failure replaced by a domain error."""

    error: Exception


@dataclass(frozen=True)
class Propagate:
    """No recovery; the original failure is surfaced unchanged."""

    error: Exception


FallbackOutcome = Value | Empty | Reclassified | Propagate
