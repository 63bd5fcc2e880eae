"""Security utilities for the contacts API."""

from .passwords import PasswordHash, PasswordHasher, verify_password
from .tokens import decode_token, encode_token

__all__ = [
    "PasswordHash",
    "PasswordHasher",
    "decode_token",
    "encode_token",
    "verify_password",
]
