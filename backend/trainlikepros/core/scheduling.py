"""Slot vocabulary and the default weekly slot template.

Time labels use the 12-hour form shown to athletes, e.g. ``"01:00 PM"``.
Labels are compared as strings everywhere except when sorting, where they are
converted to minutes since midnight.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from trainlikepros.core.config import get_settings
from trainlikepros.models.booking import LessonCategory

MINUTES_PER_DAY = 24 * 60

_TIME_LABEL_RE = re.compile(r"^\s*(0?[1-9]|1[0-2]):([0-5][0-9])\s*([AaPp][Mm])\s*$")

WEEKEND_PRIVATE_SLOTS: tuple[str, ...] = (
    "01:00 PM",
    "02:00 PM",
    "03:00 PM",
    "04:00 PM",
    "05:00 PM",
    "06:00 PM",
    "07:00 PM",
    "08:00 PM",
)
WEEKDAY_PRIVATE_SLOTS: tuple[str, ...] = ("01:00 PM", "02:00 PM", "03:00 PM", "04:00 PM")
WEEKDAY_GROUP_SLOTS: tuple[str, ...] = ("05:00 PM", "06:00 PM", "07:00 PM")
WEEKEND_GROUP_SLOTS: tuple[str, ...] = ("10:00 AM", "11:00 AM")


def time_to_minutes(label: str) -> int:
    """Convert a 12-hour label to minutes since midnight.

    ``"12:00 AM"`` is 0 and ``"12:00 PM"`` is 720. Raises ``ValueError`` for
    anything that is not a 12-hour label.
    """
    match = _TIME_LABEL_RE.match(label or "")
    if match is None:
        raise ValueError(f"Invalid time label: {label!r}")
    hour = int(match.group(1)) % 12
    minute = int(match.group(2))
    if match.group(3).upper() == "PM":
        hour += 12
    return hour * 60 + minute


def minutes_to_label(minutes: int) -> str:
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError("minutes must fall within a single day")
    hour, minute = divmod(minutes, 60)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{(hour % 12) or 12:02d}:{minute:02d} {suffix}"


def normalize_time_label(label: str) -> str:
    """Return the canonical zero-padded form, e.g. ``"9:30 pm"`` -> ``"09:30 PM"``."""
    return minutes_to_label(time_to_minutes(label))


@dataclass(frozen=True, slots=True)
class ScheduleTemplate:
    """Default slot sets and the price attached to each lesson category."""

    weekend_private: tuple[str, ...] = WEEKEND_PRIVATE_SLOTS
    weekday_private: tuple[str, ...] = WEEKDAY_PRIVATE_SLOTS
    weekday_group: tuple[str, ...] = WEEKDAY_GROUP_SLOTS
    weekend_group: tuple[str, ...] = WEEKEND_GROUP_SLOTS
    private_price: Decimal = Decimal("50")
    group_price: Decimal = Decimal("60")

    def price_for(self, category: LessonCategory) -> Decimal:
        if category is LessonCategory.GROUP:
            return self.group_price
        return self.private_price

    def default_times(self, *, weekend: bool) -> set[str]:
        """Times the standard (non small-group) template offers on a weekday or weekend."""
        if weekend:
            return set(self.weekend_private)
        return set(self.weekday_private) | set(self.weekday_group)


DEFAULT_TEMPLATE = ScheduleTemplate()


def get_schedule_template() -> ScheduleTemplate:
    """Return the default template priced from the current settings."""
    settings = get_settings()
    return ScheduleTemplate(
        private_price=settings.private_lesson_price,
        group_price=settings.group_lesson_price,
    )
