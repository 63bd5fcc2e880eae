"""Domain objects for registered users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class User:
    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def public_profile(self) -> dict:
        """Return the fields safe to expose over the API."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at,
        }
