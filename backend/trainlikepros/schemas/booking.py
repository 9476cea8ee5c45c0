"""Pydantic schemas for bookings and the booking wizard."""
from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from trainlikepros.models.booking import BookingStatus, LessonCategory, LessonType, Sport
from trainlikepros.schemas._time import TimeLabel


class PlayerInfo(BaseModel):
    """Athlete profile collected on the last wizard step."""

    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    age: int | None = Field(default=None, ge=4, le=25)
    parent_name: str | None = Field(default=None, max_length=255)
    parent_email: EmailStr
    parent_phone: str | None = Field(default=None, max_length=32)
    notes: str | None = Field(default=None, max_length=1024)


class BookingRequest(BaseModel):
    """Wizard submission: discipline, lesson, slot and player profile."""

    sport: Sport
    lesson_type: LessonType
    date: dt.date
    time: TimeLabel
    player_info: PlayerInfo


class BookingCreate(BaseModel):
    """Manual scheduling by a coach for a rostered athlete."""

    athlete_id: uuid.UUID
    sport: Sport
    lesson_type: LessonType
    date: dt.date
    time: TimeLabel
    notes: str | None = Field(default=None, max_length=1024)


class BookingRead(BaseModel):
    """Serialized booking representation."""

    id: uuid.UUID
    athlete_id: uuid.UUID
    athlete_name: str
    slot_date: dt.date
    slot_time: str
    sport: Sport
    lesson_type: LessonType
    lesson_label: str
    category: LessonCategory
    price: Decimal
    status: BookingStatus
    notes: str | None = None
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)
