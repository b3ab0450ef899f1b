"""Category database table model."""

from sqlmodel import Field

from src.shop_admin.entities._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """A product category, referenced by name from product requests."""

    __tablename__ = "categories"

    name: str = Field(unique=True, index=True, max_length=255)
    description: str | None = None
