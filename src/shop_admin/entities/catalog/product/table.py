"""Product and product image database table models."""

from typing import Optional

from sqlmodel import Field, Relationship

from src.shop_admin.entities._base import EntityTable
from src.shop_admin.entities.catalog.brand.table import BrandTable
from src.shop_admin.entities.catalog.category.table import CategoryTable
from src.shop_admin.entities.enums import ProductStatus


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    Images are owned by the product: they are loaded in upload order and are
    deleted together with it.
    """

    __tablename__ = "products"

    name: str = Field(index=True, max_length=255)
    description: str | None = None
    price: float = Field(default=0.0, index=True)
    quantity: int = Field(default=0)
    status: ProductStatus = Field(default=ProductStatus.ACTIVE, index=True)
    thumbnail_url: str | None = None

    brand_id: str | None = Field(default=None, foreign_key="brands.id", index=True)
    category_id: str | None = Field(
        default=None, foreign_key="categories.id", index=True
    )

    brand: Optional[BrandTable] = Relationship()
    category: Optional[CategoryTable] = Relationship()
    images: list["ProductImageTable"] = Relationship(
        back_populates="product",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "ProductImageTable.position",
        },
    )


class ProductImageTable(EntityTable, table=True):
    """An uploaded product image and its handle in the external image store."""

    __tablename__ = "product_images"

    image_url: str
    public_id: str | None = None
    position: int = Field(default=0)
    product_id: str | None = Field(
        default=None, foreign_key="products.id", nullable=False, index=True
    )

    product: Optional[ProductTable] = Relationship(back_populates="images")
