"""Athlete roster model."""
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainlikepros.db.base import Base
from trainlikepros.models.booking import Sport
from trainlikepros.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from trainlikepros.models.booking import Booking
    from trainlikepros.models.user import User


class Athlete(TimestampMixin, Base):
    """A player on the roster together with the parent contact details."""

    __tablename__ = "athletes"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    age: Mapped[int | None] = mapped_column(Integer)
    sport: Mapped[Sport | None] = mapped_column(Enum(Sport))
    parent_name: Mapped[str | None] = mapped_column(String(255))
    parent_email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    parent_phone: Mapped[str | None] = mapped_column(String(32))
    notes: Mapped[str | None] = mapped_column(String(1024))
    parent_user_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL")
    )

    parent_user: Mapped["User | None"] = relationship(
        "User", back_populates="athletes"
    )
    bookings: Mapped[list["Booking"]] = relationship(
        "Booking", back_populates="athlete", cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
