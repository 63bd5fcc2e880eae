"""Bearer token issuance, resolution and revocation."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import structlog

from ..exceptions import InvalidTokenError, TokenRevokedError
from ..security.tokens import decode_token, encode_token
from ..users.users_models import User
from ..users.users_repository import UsersRepository
from .access_token_repository import AccessTokenRepository
from .auth_models import AccessToken

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(tz=timezone.utc)


@dataclass(slots=True)
class AccessTokenService:
    """Issue JWT bearer tokens backed by a revocable ``access_tokens`` row.

    The JWT signature and ``exp`` claim are checked first; the ``jti`` claim
    then points at the stored row, which carries the revocation flag.
    """

    tokens: AccessTokenRepository
    users: UsersRepository
    signing_key: str
    token_ttl: timedelta

    def create_token(self, user: User) -> str:
        issued_at = _utcnow()
        expires_at = issued_at + self.token_ttl
        token_id = secrets.token_hex(32)
        self.tokens.create(
            token_id=token_id,
            user_id=user.id,
            created_at=issued_at.replace(tzinfo=None),
            expires_at=expires_at.replace(tzinfo=None),
        )
        logger.info("auth.token.issued", user_id=user.id, expires_at=expires_at.isoformat())
        return encode_token(
            subject=user.id,
            token_id=token_id,
            issued_at=issued_at,
            expires_at=expires_at,
            signing_key=self.signing_key,
        )

    def get_access_token(self, token: str) -> AccessToken:
        """Return the stored record for ``token`` without checking revocation."""
        claims = decode_token(token, self.signing_key)
        access_token = self.tokens.find(str(claims["jti"]))
        if access_token is None or str(access_token.user_id) != str(claims["sub"]):
            logger.warning("auth.token.rejected", reason="unknown_token")
            raise InvalidTokenError()
        return access_token

    def get_token_user(self, token: str) -> User:
        """Resolve a bearer token to its user, rejecting revoked tokens."""
        access_token = self.get_access_token(token)
        if access_token.revoked:
            logger.warning("auth.token.rejected", reason="revoked", user_id=access_token.user_id)
            raise TokenRevokedError()
        return self.users.get(access_token.user_id)

    def revoke_token(self, token: str) -> None:
        """Revoke ``token``. Revoking an already revoked token is a no-op."""
        access_token = self.get_access_token(token)
        if access_token.revoked:
            return
        self.tokens.revoke(access_token.id)
        logger.info("auth.token.revoked", user_id=access_token.user_id)


__all__ = ["AccessTokenService"]
