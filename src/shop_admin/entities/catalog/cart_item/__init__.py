"""Entity package: CartItem."""

from .repository import CartItemRepository
from .table import CartItemTable

__all__ = ["CartItemRepository", "CartItemTable"]
