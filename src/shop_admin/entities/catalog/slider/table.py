"""Storefront slider table model."""

from sqlmodel import Field

from src.shop_admin.entities._base import EntityTable


class SliderTable(EntityTable, table=True):
    """A banner shown on the storefront home page."""

    __tablename__ = "sliders"

    title: str = Field(max_length=255)
    link_url: str | None = None
    image_url: str | None = None
    public_id: str | None = None
    position: int = Field(default=0, index=True)
    active: bool = Field(default=True)
