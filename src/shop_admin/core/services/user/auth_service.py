from loguru import logger
from sqlmodel import Session

from src.shop_admin.core.errors import ErrorCode, InvalidCredentialsError
from src.shop_admin.core.models.auth import TokenResponse
from src.shop_admin.core.services.jwt.jwt_service import JwtService
from src.shop_admin.core.services.password_hasher import PasswordHasher
from src.shop_admin.entities.core.user import UserRepository
from src.shop_admin.entities.enums import UserStatus


class AuthService:
    """Exchange username and password for an access token."""

    def __init__(self, session: Session, hasher: PasswordHasher, jwt_service: JwtService) -> None:
        self._users = UserRepository(session)
        self._hasher = hasher
        self._jwt_service = jwt_service

    def authenticate(self, username: str, password: str) -> TokenResponse:
        user = self._users.get_by_username(username)
        if (
            user is None
            or user.status != UserStatus.ACTIVE
            or not self._hasher.verify(password, user.password_hash)
        ):
            logger.info("Failed login for {}", username)
            raise InvalidCredentialsError(ErrorCode.INVALID_CREDENTIALS)

        token = self._jwt_service.generate_access_token(user.username, user.role_names)
        return TokenResponse(
            access_token=token, expires_in=self._jwt_service.expires_in_seconds
        )
