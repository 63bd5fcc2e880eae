"""Pydantic schemas for the contacts API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..auth.auth_schemas import EMAIL_PATTERN


class ContactPayload(BaseModel):
    """Writable contact fields; unknown keys such as ``id`` are ignored."""

    first_name: str = Field(min_length=1, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)
    phone_number: str | None = Field(default=None, max_length=32)


class ContactSchema(BaseModel):
    id: int
    user_id: int
    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    created_at: datetime
    updated_at: datetime


class ContactData(BaseModel):
    contact: ContactSchema


class ContactsData(BaseModel):
    contacts: list[ContactSchema]


class ContactResponse(BaseModel):
    data: ContactData


class ContactsResponse(BaseModel):
    data: ContactsData
