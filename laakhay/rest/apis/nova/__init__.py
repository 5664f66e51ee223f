"""Nova compute flavor API catalog."""

from .api import FlavorApi
from .flavors import SIGNATURES
from .models import Flavor, Link

__all__ = ["FlavorApi", "SIGNATURES", "Flavor", "Link"]
