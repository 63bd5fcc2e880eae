"""Pydantic schemas for the authentication API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6, max_length=255)


class LoginUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)


class TokenResponse(BaseModel):
    data: str


class UserProfile(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime


class UserResponse(BaseModel):
    data: UserProfile
