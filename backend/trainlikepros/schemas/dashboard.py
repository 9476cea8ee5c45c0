"""Admin dashboard schemas."""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, Field

from trainlikepros.models.booking import BookingStatus


class LineupEntry(BaseModel):
    """One row of today's lineup."""

    booking_id: uuid.UUID
    athlete_id: uuid.UUID
    athlete_name: str
    time: str
    lesson_label: str
    status: BookingStatus


class DashboardSummary(BaseModel):
    today: date
    total_sessions: int
    sessions_this_month: int
    sessions_last_month: int
    month_change_pct: float | None = None
    active_athletes: int
    utilization: float | None = None
    today_lineup: list[LineupEntry] = Field(default_factory=list)
