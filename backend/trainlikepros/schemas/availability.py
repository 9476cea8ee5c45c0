"""Schemas for slot availability and the admin calendar."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from trainlikepros.models.booking import LessonCategory, LessonType
from trainlikepros.schemas._time import TimeLabel
from trainlikepros.schemas.booking import BookingRead


class SlotRead(BaseModel):
    """A single bookable slot."""

    time: str
    category: LessonCategory
    price: Decimal
    minutes: int

    model_config = ConfigDict(from_attributes=True)


class AvailabilityResponse(BaseModel):
    """Slots offered on one date."""

    date: dt.date | None
    lesson_type: LessonType | None = None
    slots: list[SlotRead] = Field(default_factory=list)


class ScheduleDayRead(BaseModel):
    """Everything the admin calendar shows for one date."""

    date: dt.date
    closed: bool
    blocked_slots: list[str]
    custom_shifts: list[str]
    bookings: list[BookingRead]
    available_slots: list[SlotRead]


class ScheduleMonthDay(BaseModel):
    date: dt.date
    closed: bool
    booked_count: int
    open_count: int


class ScheduleMonthRead(BaseModel):
    year: int
    month: int
    days: list[ScheduleMonthDay]


class ClosureToggleRequest(BaseModel):
    date: dt.date
    reason: str | None = Field(default=None, max_length=255)


class ClosureToggleResponse(BaseModel):
    date: dt.date
    closed: bool


class SlotToggleRequest(BaseModel):
    """A (date, time) pair for slot blocks and custom shifts."""

    date: dt.date
    time: TimeLabel


class SlotBlockToggleResponse(BaseModel):
    date: dt.date
    time: str
    blocked: bool


class CustomShiftToggleResponse(BaseModel):
    date: dt.date
    time: str
    active: bool
