from .db_manage import DbManageService
from .db_session import DbSessionService
from .db_utils import enable_sqlite_foreign_keys, transactional

__all__ = [
    "DbManageService",
    "DbSessionService",
    "enable_sqlite_foreign_keys",
    "transactional",
]
