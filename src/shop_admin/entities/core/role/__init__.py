"""Entity package: Role."""

from .repository import RoleRepository
from .table import RoleTable, UserRoleLink

__all__ = ["RoleRepository", "RoleTable", "UserRoleLink"]
