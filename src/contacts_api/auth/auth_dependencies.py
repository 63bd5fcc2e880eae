"""Common authentication dependencies for FastAPI routers."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from ..exceptions import UnauthorizedError
from ..users.users_models import User
from .access_token_service import AccessTokenService
from .auth_service import AuthenticationService

# Tokens arrive raw or with a ``Bearer`` prefix.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_auth_service(request: Request) -> AuthenticationService:
    try:
        return request.app.state.auth_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("AuthenticationService is not configured") from exc


def get_access_token_service(request: Request) -> AccessTokenService:
    try:
        return request.app.state.access_token_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("AccessTokenService is not configured") from exc


def bearer_token(header: str | None = Depends(authorization_header)) -> str:
    """Return the raw token from the ``Authorization`` header.

    Clients send the token as-is; a ``Bearer`` scheme prefix is accepted too.
    """
    header = (header or "").strip()
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer":
        header = credentials.strip()
    if not header:
        raise UnauthorizedError()
    return header


def require_user(
    request: Request,
    token: str = Depends(bearer_token),
    service: AccessTokenService = Depends(get_access_token_service),
) -> User:
    """Resolve the caller from its bearer token and bind it to the request."""
    user = service.get_token_user(token)
    request.state.user = user
    return user


__all__ = [
    "authorization_header",
    "bearer_token",
    "get_access_token_service",
    "get_auth_service",
    "require_user",
]
