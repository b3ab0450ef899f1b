"""Brand database table model."""

from sqlmodel import Field

from src.shop_admin.entities._base import EntityTable


class BrandTable(EntityTable, table=True):
    """A product brand, referenced by name from product requests."""

    __tablename__ = "brands"

    name: str = Field(unique=True, index=True, max_length=255)
    description: str | None = None
