"""User model for coaches, admins and parent identities."""
from __future__ import annotations

import enum
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainlikepros.db.base import Base
from trainlikepros.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from trainlikepros.models.athlete import Athlete


class UserRole(str, enum.Enum):
    """Role enumeration for console permissions."""

    ADMIN = "admin"
    COACH = "coach"
    PARENT = "parent"


class UserStatus(str, enum.Enum):
    """Enumerates user activation states."""

    INVITED = "invited"
    ACTIVE = "active"
    SUSPENDED = "suspended"


STAFF_ROLES = frozenset({UserRole.ADMIN, UserRole.COACH})


class User(TimestampMixin, Base):
    """Login identity; staff run the console, parents book for their athletes."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(32))
    role: Mapped[UserRole] = mapped_column(Enum(UserRole), nullable=False)
    status: Mapped[UserStatus] = mapped_column(
        Enum(UserStatus), default=UserStatus.ACTIVE, nullable=False
    )

    athletes: Mapped[list["Athlete"]] = relationship(
        "Athlete", back_populates="parent_user"
    )

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES
