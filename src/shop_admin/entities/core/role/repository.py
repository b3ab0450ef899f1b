from collections.abc import Sequence

from sqlmodel import Session, select

from .table import RoleTable


class RoleRepository:
    """Data-access layer for roles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, name: str) -> RoleTable | None:
        return self._session.get(RoleTable, name)

    def list_all(self) -> Sequence[RoleTable]:
        return self._session.exec(select(RoleTable).order_by(RoleTable.name)).all()

    def add(self, role: RoleTable) -> RoleTable:
        self._session.add(role)
        return role
