"""Core services exports."""

# Infrastructure
from .database.db_session import DbSessionService
from .image_store import (
    CloudinaryImageStore,
    ImageStore,
    ImageUploadResult,
    InMemoryImageStore,
    UploadedImage,
    build_image_store,
)
from .jwt.jwt_service import JwtService
from .password_hasher import PasswordHasher

# Domain services
from .catalog.catalog_service import CatalogService
from .product.product_service import ProductService
from .user.auth_service import AuthService
from .user.user_service import UserService

__all__ = [
    # Infrastructure
    "CloudinaryImageStore",
    "DbSessionService",
    "ImageStore",
    "ImageUploadResult",
    "InMemoryImageStore",
    "JwtService",
    "PasswordHasher",
    "UploadedImage",
    "build_image_store",
    # Domain services
    "AuthService",
    "CatalogService",
    "ProductService",
    "UserService",
]
