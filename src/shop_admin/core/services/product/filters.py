"""Builds listing predicates and ordering from a product filter request.

Only the filters that are present contribute a predicate; the predicates are
combined with AND. Sort keys are applied in the fixed priority
price, name, creation time, whichever of them are set.
"""

from typing import Any

from sqlmodel import col, select

from src.shop_admin.core.errors import ErrorCode, InvalidFilterError
from src.shop_admin.core.models.product import ProductFilterRequest
from src.shop_admin.entities.catalog.brand import BrandTable
from src.shop_admin.entities.catalog.category import CategoryTable
from src.shop_admin.entities.catalog.product import ProductTable
from src.shop_admin.entities.enums import ProductStatus

SORT_KEYS = (
    ("sort_by_price", ProductTable.price),
    ("sort_by_name", ProductTable.name),
    ("sort_by_created_at", ProductTable.created_at),
)


def _present(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_status(value: str | None) -> ProductStatus | None:
    """Case-insensitive status parsing; unknown text is an invalid filter."""
    value = _present(value)
    if value is None:
        return None
    try:
        return ProductStatus(value)
    except ValueError as e:
        raise InvalidFilterError(
            ErrorCode.INVALID_STATUS, f"Unknown product status: {value}"
        ) from e


def parse_direction(value: str | None) -> bool | None:
    """Return True for ascending, False for descending, None when unset."""
    value = _present(value)
    if value is None:
        return None
    direction = value.upper()
    if direction == "ASC":
        return True
    if direction == "DESC":
        return False
    raise InvalidFilterError(detail=f"Unknown sort direction: {value}")


def build_predicates(request: ProductFilterRequest) -> list[Any]:
    predicates: list[Any] = []

    category_name = _present(request.category_name)
    if category_name is not None:
        predicates.append(
            col(ProductTable.category_id).in_(
                select(CategoryTable.id).where(CategoryTable.name == category_name)
            )
        )

    brand_name = _present(request.brand_name)
    if brand_name is not None:
        predicates.append(
            col(ProductTable.brand_id).in_(
                select(BrandTable.id).where(BrandTable.name == brand_name)
            )
        )

    status = parse_status(request.status)
    if status is not None:
        predicates.append(ProductTable.status == status)

    return predicates


def build_ordering(request: ProductFilterRequest) -> list[Any]:
    ordering: list[Any] = []
    for attribute, column in SORT_KEYS:
        ascending = parse_direction(getattr(request, attribute))
        if ascending is None:
            continue
        ordering.append(col(column).asc() if ascending else col(column).desc())
    return ordering
