"""Authorization checks evaluated by the services.

Each service operation calls one of the ``require_*`` functions before doing
any work. The functions return the acting principal on success and raise
:class:`UnauthenticatedError` or :class:`ForbiddenError` otherwise.
"""

from dataclasses import dataclass, field

from src.shop_admin.core.errors import ForbiddenError, UnauthenticatedError
from src.shop_admin.entities.enums import PredefinedRole


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a service operation."""

    username: str
    roles: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_admin(self) -> bool:
        return PredefinedRole.ADMIN in self.roles

    def has_role(self, role: str) -> bool:
        return role in self.roles


def require_authenticated(principal: Principal | None) -> Principal:
    if principal is None:
        raise UnauthenticatedError()
    return principal


def require_role(principal: Principal | None, role: str) -> Principal:
    principal = require_authenticated(principal)
    if not principal.has_role(role):
        raise ForbiddenError()
    return principal


def require_admin(principal: Principal | None) -> Principal:
    return require_role(principal, PredefinedRole.ADMIN)


def is_admin_or_owner(principal: Principal, owner_username: str) -> bool:
    return principal.is_admin or principal.username == owner_username


def require_admin_or_owner(principal: Principal | None, owner_username: str) -> Principal:
    """Allow admins, or the principal whose username owns the target record."""
    principal = require_authenticated(principal)
    if not is_admin_or_owner(principal, owner_username):
        raise ForbiddenError()
    return principal
