from collections.abc import Iterable, Sequence
from typing import Any

from sqlmodel import Session, col, func, select

from src.shop_admin.entities._base import contains_ignore_case, fetch_page
from src.shop_admin.entities.enums import ProductStatus

from .table import ProductImageTable, ProductTable


class ProductRepository:
    """Data-access layer for products and their images."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: str) -> ProductTable | None:
        return self._session.get(ProductTable, product_id)

    def add(self, product: ProductTable) -> ProductTable:
        self._session.add(product)
        return product

    def find_page(
        self,
        predicates: Iterable[Any],
        order_by: Iterable[Any],
        *,
        page: int,
        size: int,
    ) -> tuple[Sequence[ProductTable], int]:
        """Return one page of products matching every predicate, in the given order.

        The primary key is always appended as a final sort key so paging is
        stable across requests.
        """
        statement = select(ProductTable)
        predicates = list(predicates)
        if predicates:
            statement = statement.where(*predicates)
        statement = statement.order_by(*order_by, col(ProductTable.id).asc())
        return fetch_page(self._session, statement, page=page, size=size)

    def search_by_name(
        self, keyword: str, *, page: int, size: int
    ) -> tuple[Sequence[ProductTable], int]:
        statement = (
            select(ProductTable)
            .where(contains_ignore_case(ProductTable.name, keyword))
            .order_by(col(ProductTable.name).asc(), col(ProductTable.id).asc())
        )
        return fetch_page(self._session, statement, page=page, size=size)

    def find_related(self, product: ProductTable, limit: int = 5) -> Sequence[ProductTable]:
        """Other products of the same category, ordered by id."""
        if product.category_id is None:
            return []
        statement = (
            select(ProductTable)
            .where(ProductTable.category_id == product.category_id)
            .where(ProductTable.id != product.id)
            .order_by(col(ProductTable.id).asc())
            .limit(limit)
        )
        return self._session.exec(statement).all()

    def count(self, status: ProductStatus | None = None) -> int:
        statement = select(func.count()).select_from(ProductTable)
        if status is not None:
            statement = statement.where(ProductTable.status == status)
        return self._session.exec(statement).one()

    def count_by_brand(self, brand_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(ProductTable)
            .where(ProductTable.brand_id == brand_id)
        )
        return self._session.exec(statement).one()

    def count_by_category(self, category_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(ProductTable)
            .where(ProductTable.category_id == category_id)
        )
        return self._session.exec(statement).one()

    def delete_images(self, images: Iterable[ProductImageTable]) -> None:
        for image in list(images):
            self._session.delete(image)

    def delete(self, product: ProductTable) -> None:
        self._session.delete(product)
