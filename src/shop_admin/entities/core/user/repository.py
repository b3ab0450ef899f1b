from collections.abc import Sequence

from sqlmodel import Session, col, or_, select

from src.shop_admin.entities._base import contains_ignore_case, fetch_page

from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> UserTable | None:
        return self._session.get(UserTable, user_id)

    def get_by_username(self, username: str) -> UserTable | None:
        statement = select(UserTable).where(UserTable.username == username)
        return self._session.exec(statement).first()

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def exists_by_email(self, email: str) -> bool:
        statement = select(UserTable.id).where(UserTable.email == email)
        return self._session.exec(statement).first() is not None

    def list_page(self, *, page: int, size: int) -> tuple[Sequence[UserTable], int]:
        statement = select(UserTable).order_by(
            col(UserTable.created_at).asc(), col(UserTable.id).asc()
        )
        return fetch_page(self._session, statement, page=page, size=size)

    def search(
        self, keyword: str, *, page: int, size: int
    ) -> tuple[Sequence[UserTable], int]:
        """Case-insensitive substring match on first name, last name or username."""
        statement = (
            select(UserTable)
            .where(
                or_(
                    contains_ignore_case(UserTable.first_name, keyword),
                    contains_ignore_case(UserTable.last_name, keyword),
                    contains_ignore_case(UserTable.username, keyword),
                )
            )
            .order_by(col(UserTable.username).asc())
        )
        return fetch_page(self._session, statement, page=page, size=size)

    def add(self, user: UserTable) -> UserTable:
        self._session.add(user)
        return user

    def delete(self, user: UserTable) -> None:
        self._session.delete(user)
