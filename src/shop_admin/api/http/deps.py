"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from src.shop_admin.api.http.app_data import ApplicationDependencies
from src.shop_admin.core.security import Principal
from src.shop_admin.core.services import (
    AuthService,
    CatalogService,
    ImageStore,
    JwtService,
    PasswordHasher,
    ProductService,
    UserService,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Get a database session for the duration of the request."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_image_store(request: Request) -> ImageStore:
    """Get the image store instance."""
    return get_app_dependencies(request).image_store


def get_password_hasher(request: Request) -> PasswordHasher:
    """Get the password hasher instance."""
    return get_app_dependencies(request).password_hasher


def get_jwt_service(request: Request) -> JwtService:
    """Get the JWT service instance."""
    return get_app_dependencies(request).jwt_service


def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    jwt_service: JwtService = Depends(get_jwt_service),
) -> Principal | None:
    """Resolve the caller from an optional Bearer token.

    Anonymous requests get ``None``; a token that fails verification is
    rejected outright.

    Tokens are stateless: username and roles come from the claims alone, so a
    role change or deactivation takes effect once the caller's token expires
    (``jwt.expires_in_seconds``) and they log in again.
    """
    if credentials is None:
        return None
    return jwt_service.verify(credentials.credentials)


def get_product_service(
    db: Session = Depends(get_db_session),
    image_store: ImageStore = Depends(get_image_store),
    principal: Principal | None = Depends(get_principal),
) -> ProductService:
    return ProductService(db, image_store, principal)


def get_user_service(
    db: Session = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    principal: Principal | None = Depends(get_principal),
) -> UserService:
    return UserService(db, hasher, principal)


def get_catalog_service(
    db: Session = Depends(get_db_session),
    image_store: ImageStore = Depends(get_image_store),
    principal: Principal | None = Depends(get_principal),
) -> CatalogService:
    return CatalogService(db, image_store, principal)


def get_auth_service(
    db: Session = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JwtService = Depends(get_jwt_service),
) -> AuthService:
    return AuthService(db, hasher, jwt_service)


def to_zero_based(page: int) -> int:
    """Listing endpoints number pages from 1 on the wire."""
    return max(0, page - 1)
