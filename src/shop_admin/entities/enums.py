"""Enumerations persisted with products and users."""

from enum import Enum


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None


class ProductStatus(_CaseInsensitiveEnum):
    ACTIVE = "ACTIVE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DISCONTINUED = "DISCONTINUED"


class UserStatus(_CaseInsensitiveEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    NONE = "NONE"


class PredefinedRole:
    """Role names the system seeds and relies on."""

    ADMIN = "ADMIN"
    USER = "USER"

    ALL = (ADMIN, USER)
