"""User registration and credential checks."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from ..exceptions import PasswordMismatchError, UserAlreadyExistsError, UserNotFoundError
from ..security.passwords import PasswordHasher
from ..users.users_repository import UsersRepository
from .access_token_service import AccessTokenService

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class AuthenticationService:
    """Register users and exchange credentials for bearer tokens."""

    users: UsersRepository
    access_tokens: AccessTokenService
    hasher: PasswordHasher

    def register(self, name: str, email: str, password: str) -> str:
        """Create a user and return a fresh access token for it."""
        if self.users.exists(name=name, email=email):
            logger.warning("auth.register.failure", name=name, reason="conflict")
            raise UserAlreadyExistsError()

        user = self.users.create(
            name=name,
            email=email,
            password_hash=self.hasher.hash(password),
        )
        logger.info("auth.register.success", user_id=user.id)
        return self.access_tokens.create_token(user)

    def login(self, name: str, password: str) -> str:
        """Validate credentials and return a fresh access token."""
        try:
            user = self.users.get_by_name(name)
        except UserNotFoundError:
            logger.warning("auth.login.failure", name=name, reason="unknown_user")
            raise

        if not self.hasher.verify(password, user.password_hash):
            logger.warning("auth.login.failure", user_id=user.id, reason="password_mismatch")
            raise PasswordMismatchError()

        logger.info("auth.login.success", user_id=user.id)
        return self.access_tokens.create_token(user)


__all__ = ["AuthenticationService"]
