from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from src.shop_admin.entities._base import total_pages

T = TypeVar("T")
S = TypeVar("S")


class Page(BaseModel, Generic[T]):
    """One zero-based page of a listing."""

    content: list[T] = Field(default_factory=list)
    page: int = Field(ge=0, description="Zero-based page number")
    size: int = Field(ge=1, description="Requested page size")
    total_elements: int = Field(ge=0)
    total_pages: int = Field(ge=0)

    @classmethod
    def build(
        cls,
        rows: Sequence[S],
        total: int,
        *,
        page: int,
        size: int,
        mapper: Callable[[S], T],
    ) -> "Page[T]":
        return cls(
            content=[mapper(row) for row in rows],
            page=page,
            size=size,
            total_elements=total,
            total_pages=total_pages(total, size),
        )
