"""Booking models and lesson enumerations."""
from __future__ import annotations

import enum
import uuid
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainlikepros.db.base import Base
from trainlikepros.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from trainlikepros.models.athlete import Athlete


class Sport(str, enum.Enum):
    """Disciplines offered by the wizard."""

    BASEBALL = "baseball"
    SOFTBALL = "softball"


class LessonType(str, enum.Enum):
    """Curriculum choices for a training session."""

    HITTING = "hitting"
    FIELDING = "fielding"
    PITCHING = "pitching"
    SMALL_GROUP = "small-group"

    @property
    def category(self) -> "LessonCategory":
        if self is LessonType.SMALL_GROUP:
            return LessonCategory.GROUP
        return LessonCategory.PRIVATE


class LessonCategory(str, enum.Enum):
    """Slot category; decides the default times and the price."""

    PRIVATE = "private"
    GROUP = "group"


class BookingStatus(str, enum.Enum):
    """Lifecycle states for bookings."""

    PENDING = "pending"
    CONFIRMED = "confirmed"


class Booking(TimestampMixin, Base):
    """A training session held by one athlete at one (date, time) slot."""

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    athlete_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("athletes.id", ondelete="CASCADE"), nullable=False
    )
    slot_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    slot_time: Mapped[str] = mapped_column(String(8), nullable=False)
    sport: Mapped[Sport] = mapped_column(Enum(Sport), nullable=False)
    lesson_type: Mapped[LessonType] = mapped_column(
        Enum(LessonType), nullable=False
    )
    lesson_label: Mapped[str] = mapped_column(String(120), nullable=False)
    category: Mapped[LessonCategory] = mapped_column(
        Enum(LessonCategory), nullable=False
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus), default=BookingStatus.PENDING, nullable=False
    )
    notes: Mapped[str | None] = mapped_column(String(1024))
    created_by_user_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL")
    )

    athlete: Mapped["Athlete"] = relationship("Athlete", back_populates="bookings")

    @property
    def athlete_name(self) -> str:
        return self.athlete.full_name
