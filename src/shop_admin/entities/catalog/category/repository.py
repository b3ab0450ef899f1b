from collections.abc import Sequence

from sqlmodel import Session, select

from .table import CategoryTable


class CategoryRepository:
    """Data-access layer for categories."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, category_id: str) -> CategoryTable | None:
        return self._session.get(CategoryTable, category_id)

    def get_by_name(self, name: str) -> CategoryTable | None:
        statement = select(CategoryTable).where(CategoryTable.name == name)
        return self._session.exec(statement).first()

    def list_all(self) -> Sequence[CategoryTable]:
        return self._session.exec(select(CategoryTable).order_by(CategoryTable.name)).all()

    def add(self, category: CategoryTable) -> CategoryTable:
        self._session.add(category)
        return category

    def delete(self, category: CategoryTable) -> None:
        self._session.delete(category)
