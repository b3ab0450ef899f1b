from sqlmodel import Session, func, select

from .table import CartItemTable


class CartItemRepository:
    """Data-access layer for cart line items."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, item: CartItemTable) -> CartItemTable:
        self._session.add(item)
        return item

    def count_by_product(self, product_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(CartItemTable)
            .where(CartItemTable.product_id == product_id)
        )
        return self._session.exec(statement).one()

    def delete_by_product(self, product_id: str) -> int:
        """Delete every cart line referencing the product and return how many went."""
        statement = select(CartItemTable).where(CartItemTable.product_id == product_id)
        items = self._session.exec(statement).all()
        for item in items:
            self._session.delete(item)
        # Cart lines must be gone before the product row is deleted.
        self._session.flush()
        return len(items)

    def delete_by_user(self, user_id: str) -> int:
        """Delete every cart line owned by the user and return how many went."""
        statement = select(CartItemTable).where(CartItemTable.user_id == user_id)
        items = self._session.exec(statement).all()
        for item in items:
            self._session.delete(item)
        self._session.flush()
        return len(items)
