"""Schemas for the athlete roster."""
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from trainlikepros.models.booking import Sport


class AthleteBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    age: int | None = Field(default=None, ge=4, le=25)
    sport: Sport | None = None
    parent_name: str | None = Field(default=None, max_length=255)
    parent_email: EmailStr
    parent_phone: str | None = Field(default=None, max_length=32)
    notes: str | None = Field(default=None, max_length=1024)


class AthleteCreate(AthleteBase):
    """Payload for adding an athlete to the roster."""


class AthleteUpdate(BaseModel):
    """Mutable athlete fields."""

    first_name: str | None = Field(default=None, min_length=1, max_length=120)
    last_name: str | None = Field(default=None, min_length=1, max_length=120)
    age: int | None = Field(default=None, ge=4, le=25)
    sport: Sport | None = None
    parent_name: str | None = Field(default=None, max_length=255)
    parent_email: EmailStr | None = None
    parent_phone: str | None = Field(default=None, max_length=32)
    notes: str | None = Field(default=None, max_length=1024)


class AthleteRead(AthleteBase):
    id: uuid.UUID
    parent_user_id: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RosterEntry(AthleteRead):
    """Roster row with training history derived from bookings."""

    session_count: int = 0
    last_session: date | None = None
    history: list[str] = Field(default_factory=list)
