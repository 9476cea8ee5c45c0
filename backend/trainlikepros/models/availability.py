"""Calendar overrides: whole-day closures, slot blocks and custom shifts."""
from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Date, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from trainlikepros.db.base import Base
from trainlikepros.models.mixins import TimestampMixin


class DayClosure(TimestampMixin, Base):
    """A date on which nothing can be booked."""

    __tablename__ = "day_closures"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    closed_date: Mapped[date] = mapped_column(Date, nullable=False, unique=True)
    reason: Mapped[str | None] = mapped_column(String(255))


class SlotBlock(TimestampMixin, Base):
    """One default template time removed from an otherwise open date."""

    __tablename__ = "slot_blocks"
    __table_args__ = (UniqueConstraint("slot_date", "slot_time"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    slot_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    slot_time: Mapped[str] = mapped_column(String(8), nullable=False)


class CustomShift(TimestampMixin, Base):
    """An extra time offered on a date beyond the default template."""

    __tablename__ = "custom_shifts"
    __table_args__ = (UniqueConstraint("slot_date", "slot_time"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    slot_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    slot_time: Mapped[str] = mapped_column(String(8), nullable=False)
