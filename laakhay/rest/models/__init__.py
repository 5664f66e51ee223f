"""Shared Pydantic v2 models.

Catalog-specific DTOs live with their catalog under ``laakhay.rest.apis``.
Only documents understood by the engine itself are defined here.
"""

from .errors import ErrorEntry, ErrorsDocument

__all__ = [
    "ErrorEntry",
    "ErrorsDocument",
]
