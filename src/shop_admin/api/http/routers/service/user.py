"""User API router."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from src.shop_admin.api.http.deps import get_user_service, to_zero_based
from src.shop_admin.core.models.page import Page
from src.shop_admin.core.models.user import (
    ChangePasswordRequest,
    ExistsResponse,
    UserCreationRequest,
    UserResponse,
    UserUpdateRequest,
)
from src.shop_admin.core.services import UserService
from src.shop_admin.entities.enums import UserStatus

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=http_status.HTTP_201_CREATED)
def create_user(
    request: UserCreationRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a new user with the default USER role."""
    return service.create_user(request)


@router.get("", response_model=Page[UserResponse])
def list_users(
    page: int = Query(default=1, description="1-based page number"),
    size: int = Query(default=10, ge=1, le=100),
    service: UserService = Depends(get_user_service),
) -> Page[UserResponse]:
    return service.get_users(to_zero_based(page), size)


@router.get("/search", response_model=Page[UserResponse])
def search_users(
    keyword: str = Query(default=""),
    page: int = Query(default=1),
    size: int = Query(default=10, ge=1, le=100),
    service: UserService = Depends(get_user_service),
) -> Page[UserResponse]:
    return service.search_users(keyword, to_zero_based(page), size)


@router.get("/me", response_model=UserResponse)
def my_info(service: UserService = Depends(get_user_service)) -> UserResponse:
    return service.get_my_info()


@router.get("/exists/username", response_model=ExistsResponse)
def username_exists(
    username: str = Query(..., min_length=1),
    service: UserService = Depends(get_user_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.username_exists(username))


@router.get("/exists/email", response_model=ExistsResponse)
def email_exists(
    email: str = Query(..., min_length=1),
    service: UserService = Depends(get_user_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.email_exists(email))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return service.update_user(user_id, request)


@router.patch("/{user_id}/status", response_model=UserResponse)
def change_user_status(
    user_id: str,
    status: UserStatus = Query(...),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return service.change_status(user_id, status)


@router.put("/{user_id}/password", response_model=UserResponse)
def change_password(
    user_id: str,
    request: ChangePasswordRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return service.change_password(user_id, request.old_password, request.new_password)


@router.put("/{user_id}/role", response_model=UserResponse)
def update_role(
    user_id: str,
    role_name: str = Query(..., min_length=1),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Replace the user's roles with the single named role."""
    return service.update_role(user_id, role_name)


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> dict[str, str]:
    service.delete_user(user_id)
    return {"message": "User has been deleted"}
