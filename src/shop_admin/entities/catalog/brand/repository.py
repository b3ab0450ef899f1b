from collections.abc import Sequence

from sqlmodel import Session, select

from .table import BrandTable


class BrandRepository:
    """Data-access layer for brands."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, brand_id: str) -> BrandTable | None:
        return self._session.get(BrandTable, brand_id)

    def get_by_name(self, name: str) -> BrandTable | None:
        statement = select(BrandTable).where(BrandTable.name == name)
        return self._session.exec(statement).first()

    def list_all(self) -> Sequence[BrandTable]:
        return self._session.exec(select(BrandTable).order_by(BrandTable.name)).all()

    def add(self, brand: BrandTable) -> BrandTable:
        self._session.add(brand)
        return brand

    def delete(self, brand: BrandTable) -> None:
        self._session.delete(brand)
