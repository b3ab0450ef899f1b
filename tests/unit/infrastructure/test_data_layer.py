"""Tests for the database services, query helpers and repositories."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.shop_admin.core.services import DbSessionService
from src.shop_admin.core.services.database.db_manage import DbManageService
from src.shop_admin.core.services.database.db_utils import transactional
from src.shop_admin.entities._base import escape_like, fetch_page, total_pages
from src.shop_admin.entities.catalog.brand import BrandRepository, BrandTable
from src.shop_admin.entities.catalog.cart_item import CartItemRepository, CartItemTable
from src.shop_admin.entities.catalog.product import (
    ProductImageTable,
    ProductRepository,
    ProductTable,
)
from src.shop_admin.entities.core.role import RoleRepository
from src.shop_admin.entities.core.user import UserTable
from src.shop_admin.entities.enums import PredefinedRole
from src.shop_admin.runtime.config.config_data import DatabaseConfig
from src.shop_admin.runtime.init_db import init_db


@pytest.fixture
def database_service():
    service = DbSessionService(DatabaseConfig(url="sqlite:///:memory:"))
    DbManageService(service.engine).create_all()
    yield service
    service.dispose()


class TestDbSessionService:
    def test_health_check(self, database_service):
        assert database_service.health_check()

    def test_sqlite_enforces_foreign_keys(self, database_service):
        with database_service.session_scope() as db:
            assert db.connection().exec_driver_sql("PRAGMA foreign_keys").scalar() == 1

    def test_session_scope_commits(self, database_service):
        with database_service.session_scope() as db:
            db.add(BrandTable(name="Apple"))

        with database_service.session_scope() as db:
            assert BrandRepository(db).get_by_name("Apple") is not None

    def test_session_scope_rolls_back(self, database_service):
        with pytest.raises(RuntimeError):
            with database_service.session_scope() as db:
                db.add(BrandTable(name="Apple"))
                db.flush()
                raise RuntimeError("boom")

        with database_service.session_scope() as db:
            assert BrandRepository(db).get_by_name("Apple") is None


class TestDbManageService:
    def test_seed_roles_is_idempotent(self, engine):
        # The engine fixture has already seeded once
        assert DbManageService(engine).seed_roles() == 0

        with Session(engine) as db:
            names = [role.name for role in RoleRepository(db).list_all()]
        assert names == sorted(PredefinedRole.ALL)

    def test_init_db_creates_schema_and_roles(self, database_service):
        init_db(database_service.engine)

        with database_service.session_scope() as db:
            assert RoleRepository(db).get(PredefinedRole.ADMIN) is not None
            assert BrandRepository(db).list_all() == []


class TestTransactional:
    def test_rolls_back_on_error(self, session):
        with pytest.raises(ValueError):
            with transactional(session):
                session.add(BrandTable(name="Apple"))
                raise ValueError("boom")

        assert session.exec(select(BrandTable)).all() == []


class TestQueryHelpers:
    def test_total_pages(self):
        assert total_pages(0, 10) == 0
        assert total_pages(10, 10) == 1
        assert total_pages(11, 10) == 2

    def test_escape_like(self):
        assert escape_like("50%_off\\") == "50\\%\\_off\\\\"

    def test_fetch_page(self, session):
        session.add_all(BrandTable(name=f"Brand {i:02d}") for i in range(12))
        session.commit()
        statement = select(BrandTable).order_by(BrandTable.name)

        rows, total = fetch_page(session, statement, page=1, size=5)

        assert total == 12
        assert [row.name for row in rows] == [f"Brand {i:02d}" for i in range(5, 10)]

    def test_fetch_page_past_the_end(self, session):
        session.add(BrandTable(name="Only"))
        session.commit()

        rows, total = fetch_page(session, select(BrandTable), page=3, size=5)

        assert rows == []
        assert total == 1


class TestRepositories:
    def test_product_images_load_in_position_order(self, session):
        product = ProductTable(name="iPhone")
        product.images = [
            ProductImageTable(image_url="https://img/2.png", position=1),
            ProductImageTable(image_url="https://img/1.png", position=0),
        ]
        session.add(product)
        session.commit()
        session.expire_all()

        loaded = ProductRepository(session).get(product.id)

        assert [i.image_url for i in loaded.images] == ["https://img/1.png", "https://img/2.png"]

    def test_deleting_product_cascades_to_images(self, session):
        product = ProductTable(name="iPhone")
        product.images = [ProductImageTable(image_url="https://img/1.png")]
        session.add(product)
        session.commit()

        ProductRepository(session).delete(product)
        session.commit()

        assert session.exec(select(ProductImageTable)).all() == []

    def test_cart_items_deleted_by_product(self, session):
        keep = ProductTable(name="Keep")
        drop = ProductTable(name="Drop")
        session.add_all([keep, drop])
        session.commit()
        carts = CartItemRepository(session)
        carts.add(CartItemTable(product_id=drop.id, quantity=1))
        carts.add(CartItemTable(product_id=drop.id, quantity=3))
        carts.add(CartItemTable(product_id=keep.id, quantity=1))
        session.commit()

        assert carts.delete_by_product(drop.id) == 2
        session.commit()

        assert carts.count_by_product(drop.id) == 0
        assert carts.count_by_product(keep.id) == 1

    def test_cart_items_deleted_by_user(self, session):
        product = ProductTable(name="iPhone")
        session.add(product)
        session.commit()
        user_id = _user(session, "alice")
        carts = CartItemRepository(session)
        carts.add(CartItemTable(product_id=product.id, user_id=user_id))
        carts.add(CartItemTable(product_id=product.id))
        session.commit()

        assert carts.delete_by_user(user_id) == 1
        session.commit()

        assert carts.count_by_product(product.id) == 1

    def test_cart_item_needs_existing_product(self, session):
        session.add(CartItemTable(product_id="missing"))

        with pytest.raises(IntegrityError):
            session.commit()

    def test_product_with_cart_lines_cannot_be_deleted_directly(self, session):
        product = ProductTable(name="iPhone")
        session.add(product)
        session.commit()
        session.add(CartItemTable(product_id=product.id))
        session.commit()

        ProductRepository(session).delete(product)
        with pytest.raises(IntegrityError):
            session.commit()

    def test_product_counts(self, session, catalog):
        session.add_all(
            [
                ProductTable(name="iPhone", brand=catalog["Apple"], category=catalog["Phones"]),
                ProductTable(name="MacBook", brand=catalog["Apple"], category=catalog["Laptops"]),
            ]
        )
        session.commit()
        products = ProductRepository(session)

        assert products.count() == 2
        assert products.count_by_brand(catalog["Apple"].id) == 2
        assert products.count_by_brand(catalog["Samsung"].id) == 0
        assert products.count_by_category(catalog["Laptops"].id) == 1


def _user(session: Session, username: str) -> str:
    user = UserTable(username=username, password_hash="x")
    session.add(user)
    session.commit()
    return user.id
