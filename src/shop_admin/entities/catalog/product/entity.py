"""Entity: Product."""

from typing import Any

from pydantic import ConfigDict, Field

from src.shop_admin.entities._base import Entity
from src.shop_admin.entities.enums import ProductStatus


class ProductImage(Entity):
    """An image attached to a product."""

    model_config = ConfigDict(from_attributes=True)

    image_url: str
    public_id: str | None = None
    position: int = 0


class Product(Entity):
    """Product entity as exposed by keyword search.

    This is the domain model read back from ``ProductTable`` rows. Brand and
    category are carried as identifiers only.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(description="Product name")
    description: str | None = Field(default=None, description="Free-form description")
    price: float = Field(default=0.0, description="Unit price")
    quantity: int = Field(default=0, description="Units in stock")
    status: ProductStatus = Field(default=ProductStatus.ACTIVE)
    thumbnail_url: str | None = Field(default=None, description="Primary image URL")
    brand_id: str | None = None
    category_id: str | None = None
    images: list[ProductImage] = Field(default_factory=list)

    def __eq__(self, other: Any) -> bool:
        """Compare products by identity, ignoring timestamps."""
        if not isinstance(other, Product):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
