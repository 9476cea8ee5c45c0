"""ORM models package export."""

from trainlikepros.models.athlete import Athlete
from trainlikepros.models.availability import CustomShift, DayClosure, SlotBlock
from trainlikepros.models.booking import (
    Booking,
    BookingStatus,
    LessonCategory,
    LessonType,
    Sport,
)
from trainlikepros.models.user import STAFF_ROLES, User, UserRole, UserStatus

__all__ = [
    "Athlete",
    "Booking",
    "BookingStatus",
    "CustomShift",
    "DayClosure",
    "LessonCategory",
    "LessonType",
    "STAFF_ROLES",
    "SlotBlock",
    "Sport",
    "User",
    "UserRole",
    "UserStatus",
]
