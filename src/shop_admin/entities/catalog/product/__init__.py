"""Entity package: Product."""

from .entity import Product, ProductImage
from .repository import ProductRepository
from .table import ProductImageTable, ProductTable

__all__ = [
    "Product",
    "ProductImage",
    "ProductImageTable",
    "ProductRepository",
    "ProductTable",
]
