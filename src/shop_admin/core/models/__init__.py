"""Request and response models exchanged with the HTTP layer."""

from .auth import LoginRequest, TokenResponse
from .catalog import (
    BrandRequest,
    BrandResponse,
    CategoryRequest,
    CategoryResponse,
    SliderRequest,
    SliderResponse,
)
from .page import Page
from .product import (
    ProductFilterRequest,
    ProductImageResponse,
    ProductRequest,
    ProductResponse,
    ProductStatistics,
    ProductUpdateRequest,
)
from .user import (
    AddressRequest,
    AddressResponse,
    ChangePasswordRequest,
    ExistsResponse,
    UserCreationRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "AddressRequest",
    "AddressResponse",
    "BrandRequest",
    "BrandResponse",
    "CategoryRequest",
    "CategoryResponse",
    "ChangePasswordRequest",
    "ExistsResponse",
    "LoginRequest",
    "Page",
    "ProductFilterRequest",
    "ProductImageResponse",
    "ProductRequest",
    "ProductResponse",
    "ProductStatistics",
    "ProductUpdateRequest",
    "SliderRequest",
    "SliderResponse",
    "TokenResponse",
    "UserCreationRequest",
    "UserResponse",
    "UserUpdateRequest",
]
