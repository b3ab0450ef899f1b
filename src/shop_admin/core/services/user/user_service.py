"""User management operations."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.shop_admin.core.errors import (
    AlreadyExistsError,
    ErrorCode,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    ReferenceInUseError,
    RoleNotFoundError,
)
from src.shop_admin.core.mappers.user_mapper import (
    apply_user_update,
    to_user_response,
    to_user_table,
)
from src.shop_admin.core.models.page import Page
from src.shop_admin.core.models.user import (
    UserCreationRequest,
    UserResponse,
    UserUpdateRequest,
)
from src.shop_admin.core.security import (
    Principal,
    require_admin,
    require_admin_or_owner,
    require_authenticated,
)
from src.shop_admin.core.services.database.db_utils import transactional
from src.shop_admin.core.services.password_hasher import PasswordHasher
from src.shop_admin.entities.catalog.cart_item import CartItemRepository
from src.shop_admin.entities.core.role import RoleRepository, RoleTable
from src.shop_admin.entities.core.user import UserRepository, UserTable
from src.shop_admin.entities.enums import PredefinedRole, UserStatus
from src.shop_admin.runtime.context import get_config


class UserService:
    """User operations for one request.

    Passwords are hashed with ``hasher`` before they reach the session and are
    never logged.
    """

    def __init__(
        self,
        session: Session,
        hasher: PasswordHasher,
        principal: Principal | None = None,
    ) -> None:
        self._session = session
        self._hasher = hasher
        self._principal = principal
        self._users = UserRepository(session)
        self._roles = RoleRepository(session)
        self._cart_items = CartItemRepository(session)

    def create_user(self, request: UserCreationRequest) -> UserResponse:
        """Register a user holding exactly the predefined USER role.

        Raises:
            RoleNotFoundError: If the USER role has not been seeded
            AlreadyExistsError: If the username or email is taken
        """
        role = self._get_role(PredefinedRole.USER)
        user = to_user_table(request, self._hasher.hash(request.password))
        user.roles = [role]

        self._commit_unique(user)
        logger.info("Created user {}", user.username)
        return to_user_response(user)

    def update_user(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """Partially update a user; allowed for admins and for the user themself."""
        require_authenticated(self._principal)
        user = self._get(user_id)
        require_admin_or_owner(self._principal, user.username)

        apply_user_update(user, request)
        if request.password is not None:
            user.password_hash = self._hasher.hash(request.password)

        self._commit_unique(user)
        return to_user_response(user)

    def change_status(self, user_id: str, status: UserStatus) -> UserResponse:
        require_admin(self._principal)
        user = self._get(user_id)
        user.status = status
        with transactional(self._session):
            self._users.add(user)
        logger.info("User {} status changed to {}", user.username, status.value)
        return to_user_response(user)

    def get_my_info(self) -> UserResponse:
        principal = require_authenticated(self._principal)
        user = self._users.get_by_username(principal.username)
        if user is None:
            raise NotFoundError(ErrorCode.USER_NOT_EXISTED)
        return to_user_response(user)

    def get_users(self, page: int, size: int) -> Page[UserResponse]:
        require_admin(self._principal)
        page, size = _clamp_page(page, size)
        rows, total = self._users.list_page(page=page, size=size)
        return Page[UserResponse].build(
            rows, total, page=page, size=size, mapper=to_user_response
        )

    def search_users(self, keyword: str, page: int, size: int) -> Page[UserResponse]:
        require_admin(self._principal)
        page, size = _clamp_page(page, size)
        rows, total = self._users.search(keyword or "", page=page, size=size)
        return Page[UserResponse].build(
            rows, total, page=page, size=size, mapper=to_user_response
        )

    def get_user(self, user_id: str) -> UserResponse:
        require_admin(self._principal)
        return to_user_response(self._get(user_id))

    def delete_user(self, user_id: str) -> None:
        """Delete a user together with their addresses, role links and cart lines.

        Raises:
            ReferenceInUseError: If other rows still reference the user
        """
        require_admin(self._principal)
        user = self._get(user_id)
        username = user.username
        try:
            with transactional(self._session):
                removed = self._cart_items.delete_by_user(user.id)
                if removed:
                    logger.debug("Removed {} cart item(s) for user {}", removed, username)
                self._users.delete(user)
        except IntegrityError as e:
            raise ReferenceInUseError(detail=f"User {username} is still referenced") from e
        logger.info("Deleted user {}", username)

    def is_owner(self, acting_username: str, user_id: str) -> bool:
        return self._get(user_id).username == acting_username

    def change_password(
        self, user_id: str, old_password: str | None, new_password: str
    ) -> UserResponse:
        """Change a password.

        A user changing their own password must supply the current one. An
        admin changing someone else's password does not.
        """
        principal = require_authenticated(self._principal)
        user = self._get(user_id)

        if user.username == principal.username:
            if not old_password or not self._hasher.verify(old_password, user.password_hash):
                raise InvalidCredentialsError()
        elif not principal.is_admin:
            raise ForbiddenError()

        user.password_hash = self._hasher.hash(new_password)
        with transactional(self._session):
            self._users.add(user)
        logger.info("Password changed for user {}", user.username)
        return to_user_response(user)

    def update_role(self, user_id: str, role_name: str) -> UserResponse:
        """Replace the user's roles with exactly ``role_name``."""
        require_admin(self._principal)
        user = self._get(user_id)
        role = self._get_role(role_name)

        user.roles = [role]
        with transactional(self._session):
            self._users.add(user)
        logger.info("User {} now holds role {}", user.username, role.name)
        return to_user_response(user)

    def username_exists(self, username: str) -> bool:
        return self._users.exists_by_username(username)

    def email_exists(self, email: str) -> bool:
        return self._users.exists_by_email(email)

    def _get(self, user_id: str) -> UserTable:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(ErrorCode.USER_NOT_EXISTED)
        return user

    def _get_role(self, name: str) -> RoleTable:
        role = self._roles.get(name)
        if role is None:
            raise RoleNotFoundError(detail=f"Role not found: {name}")
        return role

    def _commit_unique(self, user: UserTable) -> None:
        try:
            with transactional(self._session):
                self._users.add(user)
        except IntegrityError as e:
            logger.info("Rejected user {}: username or email already taken", user.username)
            raise AlreadyExistsError(ErrorCode.USER_EXISTED) from e


def _clamp_page(page: int, size: int) -> tuple[int, int]:
    return max(0, page), max(1, min(size, get_config().pagination.max_size))
