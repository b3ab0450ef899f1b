"""Cart line item table model."""

from sqlmodel import Field

from src.shop_admin.entities._base import EntityTable


class CartItemTable(EntityTable, table=True):
    """A line in a customer's cart pointing at a product."""

    __tablename__ = "cart_items"

    product_id: str = Field(foreign_key="products.id", index=True)
    user_id: str | None = Field(default=None, foreign_key="users.id", index=True)
    quantity: int = Field(default=1)
