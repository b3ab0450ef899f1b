"""Request and response models for products."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.shop_admin.entities.enums import ProductStatus


class ProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(ge=0)
    quantity: int = Field(default=0, ge=0)
    status: ProductStatus = ProductStatus.ACTIVE
    brand_name: str = Field(min_length=1)
    category_name: str = Field(min_length=1)


class ProductUpdateRequest(BaseModel):
    """Partial update: only fields that are not ``None`` are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0)
    status: ProductStatus | None = None
    brand_name: str | None = None
    category_name: str | None = None


class ProductFilterRequest(BaseModel):
    """Listing filters, sort directions and a zero-based page.

    Blank filter values are treated as absent. Sort values are ``ASC`` or
    ``DESC`` in any case.
    """

    category_name: str | None = None
    brand_name: str | None = None
    status: str | None = None
    sort_by_price: str | None = None
    sort_by_name: str | None = None
    sort_by_created_at: str | None = None
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)


class ProductImageResponse(BaseModel):
    id: str
    image_url: str
    public_id: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    quantity: int
    status: ProductStatus
    brand_name: str | None = None
    category_name: str | None = None
    thumbnail_url: str | None = None
    images: list[ProductImageResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProductStatistics(BaseModel):
    total_products: int
    active_products: int
    out_of_stock_products: int
    discontinued_products: int
