"""User and address database table models."""

from datetime import date
from typing import Optional

from sqlmodel import Field, Relationship

from src.shop_admin.entities._base import EntityTable
from src.shop_admin.entities.core.role.table import RoleTable, UserRoleLink
from src.shop_admin.entities.enums import UserStatus


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Username and email are unique; the database enforces both. Addresses are
    owned and go with the user, role links are removed with it.
    """

    __tablename__ = "users"

    username: str = Field(unique=True, index=True, max_length=150)
    email: str | None = Field(default=None, unique=True, index=True, max_length=255)
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    dob: date | None = None
    status: UserStatus = Field(default=UserStatus.ACTIVE)

    addresses: list["AddressTable"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
    roles: list[RoleTable] = Relationship(link_model=UserRoleLink)

    @property
    def role_names(self) -> list[str]:
        return sorted(role.name for role in self.roles)


class AddressTable(EntityTable, table=True):
    """A postal address owned by a user."""

    __tablename__ = "addresses"

    street: str | None = None
    city: str | None = None
    country: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    user_id: str | None = Field(
        default=None, foreign_key="users.id", nullable=False, index=True
    )

    user: Optional[UserTable] = Relationship(back_populates="addresses")
