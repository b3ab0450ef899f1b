"""User entity module.

- UserTable / AddressTable: database persistence models
- UserRepository: data access layer
"""

from .repository import UserRepository
from .table import AddressTable, UserTable

__all__ = ["AddressTable", "UserRepository", "UserTable"]
