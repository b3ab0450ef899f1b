"""Service fixtures for testing."""

from __future__ import annotations

import pytest
from sqlmodel import Session

from src.shop_admin.core.errors import RemoveFailedError, UploadFailedError
from src.shop_admin.core.security import Principal
from src.shop_admin.core.services import (
    CatalogService,
    ImageUploadResult,
    JwtService,
    PasswordHasher,
    ProductService,
    UploadedImage,
    UserService,
)
from src.shop_admin.runtime.config.config_data import JWTConfig

TEST_JWT_SECRET = "test-secret-for-shop-admin-tokens-0123456789"


class RecordingImageStore:
    """Image store double that records calls and fails on request."""

    def __init__(self) -> None:
        self.stored: list[ImageUploadResult] = []
        self.removed: list[str] = []
        self.fail_uploads: set[str] = set()
        self.fail_removals: set[str] = set()

    def store(self, image: UploadedImage) -> ImageUploadResult:
        if image.filename in self.fail_uploads:
            raise UploadFailedError(detail=f"Upload of {image.filename} failed")
        result = ImageUploadResult(
            url=f"https://img.test/{image.filename}",
            public_id=f"pid-{image.filename}",
        )
        self.stored.append(result)
        return result

    def remove(self, public_id: str) -> None:
        self.removed.append(public_id)
        if public_id in self.fail_removals:
            raise RemoveFailedError(detail=f"Removal of {public_id} failed")


def image(name: str) -> UploadedImage:
    return UploadedImage(filename=name, content=b"\x89PNG fake", content_type="image/png")


@pytest.fixture
def image_store() -> RecordingImageStore:
    return RecordingImageStore()


@pytest.fixture
def hasher() -> PasswordHasher:
    """Cheapest bcrypt cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def jwt_config() -> JWTConfig:
    return JWTConfig(secret=TEST_JWT_SECRET, issuer="shop-admin-test")


@pytest.fixture
def jwt_service(jwt_config: JWTConfig) -> JwtService:
    return JwtService(jwt_config)


@pytest.fixture
def product_service(
    session: Session, image_store: RecordingImageStore, admin_principal: Principal
) -> ProductService:
    return ProductService(session, image_store, admin_principal)


@pytest.fixture
def user_service(
    session: Session, hasher: PasswordHasher, admin_principal: Principal
) -> UserService:
    return UserService(session, hasher, admin_principal)


@pytest.fixture
def catalog_service(
    session: Session, image_store: RecordingImageStore, admin_principal: Principal
) -> CatalogService:
    return CatalogService(session, image_store, admin_principal)
