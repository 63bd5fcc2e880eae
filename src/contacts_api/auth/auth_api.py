"""Authentication API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from ..users.users_models import User
from .access_token_service import AccessTokenService
from .auth_dependencies import (
    bearer_token,
    get_access_token_service,
    get_auth_service,
    require_user,
)
from .auth_schemas import (
    LoginUserRequest,
    RegisterUserRequest,
    TokenResponse,
    UserProfile,
    UserResponse,
)
from .auth_service import AuthenticationService

router = APIRouter(prefix="/user", tags=["auth"])


@router.post("/register", response_model=TokenResponse)
def register(
    payload: RegisterUserRequest,
    service: AuthenticationService = Depends(get_auth_service),
) -> TokenResponse:
    token = service.register(payload.name, payload.email, payload.password)
    return TokenResponse(data=token)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginUserRequest,
    service: AuthenticationService = Depends(get_auth_service),
) -> TokenResponse:
    token = service.login(payload.name, payload.password)
    return TokenResponse(data=token)


@router.get("", response_model=UserResponse)
def current_user(user: User = Depends(require_user)) -> UserResponse:
    return UserResponse(data=UserProfile(**user.public_profile()))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    _: User = Depends(require_user),
    token: str = Depends(bearer_token),
    service: AccessTokenService = Depends(get_access_token_service),
) -> Response:
    service.revoke_token(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
