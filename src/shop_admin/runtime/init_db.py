"""Database initialization script."""

from sqlalchemy.engine import Engine

from src.shop_admin.core.services.database.db_manage import DbManageService
from src.shop_admin.core.services.database.db_session import DbSessionService


def init_db(engine: Engine | None = None) -> None:
    """Create all database tables and seed the predefined roles."""
    if engine is None:
        engine = DbSessionService().engine
    db_manage_service = DbManageService(engine)
    db_manage_service.create_all()
    db_manage_service.seed_roles()


if __name__ == "__main__":
    init_db()
