"""Domain level exceptions shared by services and the HTTP layer."""

from __future__ import annotations

from typing import Mapping, Sequence

__all__ = [
    "AppError",
    "ValidationError",
    "UnauthorizedError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenRevokedError",
    "UserNotFoundError",
    "PasswordMismatchError",
    "ForbiddenError",
    "NotFoundError",
    "ContactNotFoundError",
    "ConflictError",
    "UserAlreadyExistsError",
]


class AppError(Exception):
    """Base class for application specific errors.

    Every error knows the HTTP status it maps to, so routers never need to
    translate individual exception types.
    """

    status_code: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when request data fails validation."""

    status_code = 422
    default_message = "The given data was invalid."

    def __init__(
        self,
        errors: Mapping[str, Sequence[str]],
        message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = {field: list(messages) for field, messages in errors.items()}


class UnauthorizedError(AppError):
    """Raised when the caller is not authenticated."""

    status_code = 401
    default_message = "Unauthenticated."


class InvalidTokenError(UnauthorizedError):
    default_message = "Access token is invalid."


class TokenExpiredError(UnauthorizedError):
    default_message = "Access token has expired."


class TokenRevokedError(UnauthorizedError):
    default_message = "Access token has been revoked."


class UserNotFoundError(UnauthorizedError):
    """Raised when no user matches the given credentials."""

    default_message = "Invalid credentials."


class PasswordMismatchError(UnauthorizedError):
    """Raised when the password does not match the stored hash."""

    default_message = "Invalid credentials."


class ForbiddenError(AppError):
    """Raised when an authenticated user touches a resource it does not own."""

    status_code = 403
    default_message = "This action is unauthorized."


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found."


class ContactNotFoundError(NotFoundError):
    default_message = "Contact not found."


class ConflictError(AppError):
    status_code = 409
    default_message = "Resource already exists."


class UserAlreadyExistsError(ConflictError):
    default_message = "A user with that name or email is already registered."
