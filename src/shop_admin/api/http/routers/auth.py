"""Token endpoint for username/password login."""

from fastapi import APIRouter, Depends

from src.shop_admin.api.http.deps import get_auth_service
from src.shop_admin.core.models.auth import LoginRequest, TokenResponse
from src.shop_admin.core.services import AuthService

router = APIRouter(tags=["auth"])


@router.post("/token", response_model=TokenResponse)
def issue_token(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange username and password for a Bearer access token."""
    return auth_service.authenticate(credentials.username, credentials.password)
