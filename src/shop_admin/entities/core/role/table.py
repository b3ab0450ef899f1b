"""Role and user-role link table models."""

from sqlmodel import Field, SQLModel


class UserRoleLink(SQLModel, table=True):
    """Association between users and roles."""

    __tablename__ = "user_roles"

    user_id: str = Field(foreign_key="users.id", primary_key=True)
    role_name: str = Field(foreign_key="roles.name", primary_key=True)


class RoleTable(SQLModel, table=True):
    """A named role; the name is the identifier."""

    __tablename__ = "roles"

    name: str = Field(primary_key=True, max_length=64)
    description: str | None = None
