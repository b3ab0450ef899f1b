from dataclasses import dataclass

from src.shop_admin.core.services import (
    DbSessionService,
    ImageStore,
    JwtService,
    PasswordHasher,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    image_store: ImageStore
    password_hasher: PasswordHasher
    jwt_service: JwtService
