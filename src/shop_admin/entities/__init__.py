"""Entities organized by business concept.

Each entity has its own package containing:
- table.py: database persistence model
- repository.py: data access layer
- entity.py: domain model, where one is exposed directly

Importing this package registers every table with the SQLModel metadata.
"""

from .catalog.brand import BrandRepository, BrandTable
from .catalog.cart_item import CartItemRepository, CartItemTable
from .catalog.category import CategoryRepository, CategoryTable
from .catalog.product import (
    Product,
    ProductImage,
    ProductImageTable,
    ProductRepository,
    ProductTable,
)
from .catalog.slider import SliderRepository, SliderTable
from .core.role import RoleRepository, RoleTable, UserRoleLink
from .core.user import AddressTable, UserRepository, UserTable

__all__ = [
    "AddressTable",
    "BrandRepository",
    "BrandTable",
    "CartItemRepository",
    "CartItemTable",
    "CategoryRepository",
    "CategoryTable",
    "Product",
    "ProductImage",
    "ProductImageTable",
    "ProductRepository",
    "ProductTable",
    "RoleRepository",
    "RoleTable",
    "SliderRepository",
    "SliderTable",
    "UserRepository",
    "UserRoleLink",
    "UserTable",
]
