"""JWT helpers used for issuing and verifying bearer tokens."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import jwt
from jwt import ExpiredSignatureError
from jwt import InvalidTokenError as PyJWTInvalidTokenError

from ..exceptions import InvalidTokenError, TokenExpiredError

ALGORITHM = "HS256"


def encode_token(
    *,
    subject: int,
    token_id: str,
    issued_at: datetime,
    expires_at: datetime,
    signing_key: str,
) -> str:
    """Return a compact HS256 JWT for the user ``subject``."""
    payload: dict[str, Any] = {
        "sub": str(subject),
        "jti": token_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, signing_key, algorithm=ALGORITHM)


def decode_token(token: str, signing_key: str) -> dict[str, Any]:
    """Verify signature and expiry, returning the claims."""
    try:
        return jwt.decode(
            token,
            signing_key,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "iat", "sub", "jti"]},
        )
    except ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except PyJWTInvalidTokenError as exc:
        raise InvalidTokenError() from exc


__all__ = ["ALGORITHM", "decode_token", "encode_token"]
