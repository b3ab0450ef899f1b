"""Entity package: Category."""

from .repository import CategoryRepository
from .table import CategoryTable

__all__ = ["CategoryRepository", "CategoryTable"]
