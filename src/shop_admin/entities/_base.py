import math
import uuid
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, TypeVar

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, Session, SQLModel, func, select
from sqlmodel.sql.expression import SelectOfScalar

RowT = TypeVar("RowT")


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))


class EntityTable(SQLModel, table=False):
    """Base table with auto-generated UUID identifier and audit timestamps."""

    id: str = Field(
        primary_key=True,
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )


def fetch_page(
    session: Session,
    statement: SelectOfScalar[RowT],
    *,
    page: int,
    size: int,
) -> tuple[Sequence[RowT], int]:
    """Run ``statement`` for one zero-based page and return (rows, total count)."""
    count_statement = select(func.count()).select_from(
        statement.order_by(None).subquery()
    )
    total = session.exec(count_statement).one()
    rows = session.exec(statement.offset(page * size).limit(size)).all()
    return rows, total


def total_pages(total: int, size: int) -> int:
    return math.ceil(total / size) if size > 0 else 0


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally (escape char ``\\``)."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_ignore_case(column: Any, keyword: str) -> Any:
    """Case-insensitive substring predicate; an empty keyword matches every row."""
    pattern = f"%{escape_like(keyword.lower())}%"
    return func.lower(column).like(pattern, escape="\\")
