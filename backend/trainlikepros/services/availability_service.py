"""Bookable slot computation for a single calendar date.

``resolve_available_slots`` is a pure function over four read-only snapshots
(day closures, slot blocks, custom shifts and booked times). The async helpers
below only load those snapshots from the database; no availability state is
cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.core.scheduling import (
    DEFAULT_TEMPLATE,
    MINUTES_PER_DAY,
    ScheduleTemplate,
    get_schedule_template,
    normalize_time_label,
    time_to_minutes,
)
from trainlikepros.models.availability import CustomShift, DayClosure, SlotBlock
from trainlikepros.models.booking import Booking, LessonCategory, LessonType

logger = logging.getLogger(__name__)

_WEEKEND = {5, 6}  # date.weekday(): Saturday, Sunday


@dataclass(slots=True, frozen=True)
class AvailableSlot:
    """One bookable time on a date with its category and price."""

    time: str
    category: LessonCategory
    price: Decimal

    @property
    def minutes(self) -> int:
        return _sort_minutes(self.time)


def _sort_minutes(label: str) -> int:
    try:
        return time_to_minutes(label)
    except ValueError:
        return MINUTES_PER_DAY


def _parse_date_key(date_key: str) -> date | None:
    try:
        return date.fromisoformat(date_key)
    except (TypeError, ValueError):
        return None


def _entries(mapping: Mapping[str, Collection[str]] | None, date_key: str) -> Collection[str]:
    if not mapping:
        return ()
    return mapping.get(date_key) or ()


def _shift_labels(
    custom_shifts: Mapping[str, Collection[str]] | None, date_key: str
) -> set[str]:
    labels = set()
    for raw in _entries(custom_shifts, date_key):
        try:
            labels.add(normalize_time_label(raw))
        except ValueError:
            logger.debug("Ignoring malformed custom shift %r on %s", raw, date_key)
    return labels


def _template_slots(
    template: ScheduleTemplate, *, weekend: bool, group_only: bool
) -> list[AvailableSlot]:
    private_price = template.price_for(LessonCategory.PRIVATE)
    group_price = template.price_for(LessonCategory.GROUP)
    if group_only:
        times = template.weekend_group if weekend else template.weekday_group
        return [AvailableSlot(t, LessonCategory.GROUP, group_price) for t in times]
    if weekend:
        return [
            AvailableSlot(t, LessonCategory.PRIVATE, private_price)
            for t in template.weekend_private
        ]
    return [
        AvailableSlot(t, LessonCategory.PRIVATE, private_price)
        for t in template.weekday_private
    ] + [
        AvailableSlot(t, LessonCategory.GROUP, group_price)
        for t in template.weekday_group
    ]


def resolve_available_slots(
    date_key: str | None,
    *,
    day_closures: Collection[str] = (),
    slot_blocks: Mapping[str, Collection[str]] | None = None,
    custom_shifts: Mapping[str, Collection[str]] | None = None,
    bookings: Mapping[str, Collection[str]] | None = None,
    lesson_type: LessonType | None = None,
    template: ScheduleTemplate = DEFAULT_TEMPLATE,
) -> list[AvailableSlot]:
    """Return the ordered slots that may still be offered on ``date_key``.

    The result is empty when no date is given, the date does not parse or the
    whole day is closed. Otherwise it is the weekday/weekend template plus the
    date's custom shifts, minus blocked and booked times, sorted by time of day.
    A custom shift that repeats a template time is dropped. Booked times are
    removed whatever lesson occupies them.

    With ``lesson_type`` set to small-group the template holds only the group
    default times. Custom shifts are always private slots at the private price.
    """
    if not date_key:
        return []
    if date_key in day_closures:
        return []
    parsed = _parse_date_key(date_key)
    if parsed is None:
        return []

    weekend = parsed.weekday() in _WEEKEND
    group_only = lesson_type is LessonType.SMALL_GROUP
    slots = _template_slots(template, weekend=weekend, group_only=group_only)

    shift_price = template.price_for(LessonCategory.PRIVATE)
    offered = {slot.time for slot in slots}
    for shift_time in sorted(_shift_labels(custom_shifts, date_key), key=_sort_minutes):
        if shift_time in offered:
            continue
        offered.add(shift_time)
        slots.append(AvailableSlot(shift_time, LessonCategory.PRIVATE, shift_price))

    removed = set(_entries(slot_blocks, date_key)) | set(_entries(bookings, date_key))
    remaining = [slot for slot in slots if slot.time not in removed]
    remaining.sort(key=lambda slot: slot.minutes)
    return remaining


@dataclass(slots=True, frozen=True)
class AvailabilitySnapshot:
    """Read-only view of everything that shapes availability over a date range."""

    day_closures: frozenset[str] = frozenset()
    slot_blocks: Mapping[str, frozenset[str]] = field(default_factory=dict)
    custom_shifts: Mapping[str, frozenset[str]] = field(default_factory=dict)
    bookings: Mapping[str, frozenset[str]] = field(default_factory=dict)

    def resolve(
        self,
        date_key: str | None,
        *,
        lesson_type: LessonType | None = None,
        template: ScheduleTemplate = DEFAULT_TEMPLATE,
    ) -> list[AvailableSlot]:
        return resolve_available_slots(
            date_key,
            day_closures=self.day_closures,
            slot_blocks=self.slot_blocks,
            custom_shifts=self.custom_shifts,
            bookings=self.bookings,
            lesson_type=lesson_type,
            template=template,
        )

    def is_closed(self, date_key: str) -> bool:
        return date_key in self.day_closures

    def blocked_times(self, date_key: str) -> frozenset[str]:
        return self.slot_blocks.get(date_key, frozenset())

    def shift_times(self, date_key: str) -> frozenset[str]:
        return self.custom_shifts.get(date_key, frozenset())

    def booked_times(self, date_key: str) -> frozenset[str]:
        return self.bookings.get(date_key, frozenset())


def _group_by_date(rows: Iterable[tuple[date, str]]) -> dict[str, frozenset[str]]:
    grouped: dict[str, set[str]] = {}
    for slot_date, slot_time in rows:
        grouped.setdefault(slot_date.isoformat(), set()).add(slot_time)
    return {key: frozenset(values) for key, values in grouped.items()}


async def load_snapshot(
    session: AsyncSession,
    *,
    date_from: date,
    date_to: date,
) -> AvailabilitySnapshot:
    """Read closures, blocks, shifts and booked times between two dates inclusive."""
    if date_from > date_to:
        raise ValueError("date_from must be on or before date_to")

    closures = await session.execute(
        select(DayClosure.closed_date).where(
            DayClosure.closed_date >= date_from,
            DayClosure.closed_date <= date_to,
        )
    )
    blocks = await session.execute(
        select(SlotBlock.slot_date, SlotBlock.slot_time).where(
            SlotBlock.slot_date >= date_from,
            SlotBlock.slot_date <= date_to,
        )
    )
    shifts = await session.execute(
        select(CustomShift.slot_date, CustomShift.slot_time).where(
            CustomShift.slot_date >= date_from,
            CustomShift.slot_date <= date_to,
        )
    )
    booked = await session.execute(
        select(Booking.slot_date, Booking.slot_time).where(
            Booking.slot_date >= date_from,
            Booking.slot_date <= date_to,
        )
    )
    return AvailabilitySnapshot(
        day_closures=frozenset(day.isoformat() for day in closures.scalars().all()),
        slot_blocks=_group_by_date(blocks.tuples().all()),
        custom_shifts=_group_by_date(shifts.tuples().all()),
        bookings=_group_by_date(booked.tuples().all()),
    )


async def list_available_slots(
    session: AsyncSession,
    *,
    slot_date: date | None,
    lesson_type: LessonType | None = None,
) -> list[AvailableSlot]:
    """Load a fresh snapshot for ``slot_date`` and resolve its open slots."""
    if slot_date is None:
        return []
    snapshot = await load_snapshot(session, date_from=slot_date, date_to=slot_date)
    return snapshot.resolve(
        slot_date.isoformat(),
        lesson_type=lesson_type,
        template=get_schedule_template(),
    )


async def count_open_and_booked(
    session: AsyncSession,
    *,
    date_from: date,
    date_to: date,
) -> tuple[int, int]:
    """Return ``(open_slots, booked_slots)`` summed over a date range."""
    snapshot = await load_snapshot(session, date_from=date_from, date_to=date_to)
    template = get_schedule_template()
    open_count = 0
    booked_count = 0
    current = date_from
    while current <= date_to:
        key = current.isoformat()
        open_count += len(snapshot.resolve(key, template=template))
        booked_count += len(snapshot.booked_times(key))
        current += timedelta(days=1)
    logger.debug(
        "Availability %s..%s: %d open, %d booked",
        date_from,
        date_to,
        open_count,
        booked_count,
    )
    return open_count, booked_count
