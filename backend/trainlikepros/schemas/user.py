"""User-related schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from trainlikepros.models.user import UserRole, UserStatus


class UserBase(BaseModel):
    """Shared user fields."""

    email: EmailStr
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    phone_number: str | None = Field(default=None, max_length=32)
    role: UserRole = UserRole.COACH


class UserCreate(UserBase):
    """Payload for creating a user."""

    password: str = Field(min_length=8)
    status: UserStatus = UserStatus.ACTIVE


class UserRead(UserBase):
    """Serialized user response."""

    id: uuid.UUID
    status: UserStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserUpdate(BaseModel):
    """Mutable user fields."""

    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None
