from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.shop_admin.core.security import Principal
from src.shop_admin.core.services.database.db_manage import DbManageService
from src.shop_admin.core.services.database.db_utils import enable_sqlite_foreign_keys
from src.shop_admin.entities.catalog.brand import BrandTable
from src.shop_admin.entities.catalog.category import CategoryTable
from src.shop_admin.entities.enums import PredefinedRole


@pytest.fixture
def engine() -> Generator[Engine]:
    """Fresh in-memory database with all tables and the predefined roles."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    db_manage = DbManageService(engine)
    db_manage.create_all()
    db_manage.seed_roles()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def catalog(session: Session) -> dict[str, object]:
    """Two brands and two categories, keyed by name."""
    rows = {
        "Apple": BrandTable(name="Apple"),
        "Samsung": BrandTable(name="Samsung"),
        "Phones": CategoryTable(name="Phones"),
        "Laptops": CategoryTable(name="Laptops"),
    }
    session.add_all(rows.values())
    session.commit()
    return rows


@pytest.fixture
def admin_principal() -> Principal:
    return Principal(username="admin", roles=frozenset({PredefinedRole.ADMIN}))


@pytest.fixture
def user_principal() -> Principal:
    return Principal(username="alice", roles=frozenset({PredefinedRole.USER}))
