"""Domain objects for issued access tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class AccessToken:
    id: str
    user_id: int
    revoked: bool
    created_at: datetime
    expires_at: datetime
