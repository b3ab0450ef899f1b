"""Entity package: Brand."""

from .repository import BrandRepository
from .table import BrandTable

__all__ = ["BrandRepository", "BrandTable"]
