"""Domain objects for contacts."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass(slots=True)
class Contact:
    id: int
    user_id: int
    first_name: str
    last_name: str | None
    email: str | None
    phone_number: str | None
    created_at: datetime
    updated_at: datetime

    def belongs_to(self, user_id: int) -> bool:
        return self.user_id == user_id

    def to_dict(self) -> dict:
        return asdict(self)
