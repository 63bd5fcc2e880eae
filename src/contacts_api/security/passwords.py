"""Utility helpers for hashing and verifying user passwords."""

from __future__ import annotations

import binascii
import hashlib
import hmac
import secrets
from dataclasses import dataclass

DEFAULT_ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 390_000


@dataclass(slots=True)
class PasswordHash:
    """Structured representation of a PBKDF2 hash entry."""

    algorithm: str
    iterations: int
    salt: bytes
    digest: bytes

    @classmethod
    def parse(cls, encoded: str) -> "PasswordHash":
        """Parse an encoded password hash string."""

        try:
            algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
            iterations_int = int(iterations)
            salt = binascii.unhexlify(salt_hex)
            digest = binascii.unhexlify(digest_hex)
        except (ValueError, binascii.Error) as exc:
            raise ValueError("invalid password hash format") from exc
        return cls(
            algorithm=algorithm,
            iterations=iterations_int,
            salt=salt,
            digest=digest,
        )

    def encode(self) -> str:
        return "$".join(
            (self.algorithm, str(self.iterations), self.salt.hex(), self.digest.hex())
        )

    def verify(self, password: str) -> bool:
        """Check ``password`` against the stored digest using constant time."""

        if self.algorithm != DEFAULT_ALGORITHM:
            raise ValueError(f"unsupported algorithm: {self.algorithm}")
        derived = hashlib.pbkdf2_hmac(
            "sha256",
            password.encode("utf-8"),
            self.salt,
            self.iterations,
        )
        return hmac.compare_digest(derived, self.digest)


def verify_password(password: str, encoded: str) -> bool:
    """Return ``True`` when ``password`` matches ``encoded`` hash."""

    if not encoded:
        return False
    parsed = PasswordHash.parse(encoded)
    return parsed.verify(password)


@dataclass(slots=True)
class PasswordHasher:
    """Hash new passwords and verify stored ones."""

    iterations: int = DEFAULT_ITERATIONS
    salt_bytes: int = 16

    def hash(self, password: str) -> str:
        """Return a PBKDF2 hash encoded with algorithm metadata."""

        if not password:
            raise ValueError("password must not be empty")
        salt = secrets.token_bytes(self.salt_bytes)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self.iterations
        )
        return PasswordHash(
            algorithm=DEFAULT_ALGORITHM,
            iterations=self.iterations,
            salt=salt,
            digest=digest,
        ).encode()

    def verify(self, password: str, encoded: str | None) -> bool:
        if not encoded:
            return False
        return verify_password(password, encoded)


__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_ITERATIONS",
    "PasswordHash",
    "PasswordHasher",
    "verify_password",
]
