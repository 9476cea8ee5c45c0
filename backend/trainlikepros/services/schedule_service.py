"""Admin calendar: day closures, slot blocks and custom shifts."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.core.scheduling import get_schedule_template, time_to_minutes
from trainlikepros.models.availability import CustomShift, DayClosure, SlotBlock
from trainlikepros.models.booking import Booking
from trainlikepros.services import booking_service
from trainlikepros.services.availability_service import (
    AvailableSlot,
    load_snapshot,
)
from trainlikepros.services.booking_service import SlotUnavailableError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScheduleDay:
    date: date
    closed: bool
    blocked_slots: list[str]
    custom_shifts: list[str]
    bookings: list[Booking]
    available_slots: list[AvailableSlot]


@dataclass(slots=True, frozen=True)
class MonthDay:
    date: date
    closed: bool
    booked_count: int
    open_count: int


def _by_time(times: frozenset[str]) -> list[str]:
    return sorted(times, key=time_to_minutes)


def _is_weekend(day: date) -> bool:
    return day.weekday() >= 5


async def get_day(session: AsyncSession, *, day: date) -> ScheduleDay:
    snapshot = await load_snapshot(session, date_from=day, date_to=day)
    key = day.isoformat()
    return ScheduleDay(
        date=day,
        closed=snapshot.is_closed(key),
        blocked_slots=_by_time(snapshot.blocked_times(key)),
        custom_shifts=_by_time(snapshot.shift_times(key)),
        bookings=await booking_service.list_bookings_for_date(session, slot_date=day),
        available_slots=snapshot.resolve(key, template=get_schedule_template()),
    )


async def get_month(session: AsyncSession, *, year: int, month: int) -> list[MonthDay]:
    if not 1 <= month <= 12:
        raise ValueError("month must be between 1 and 12")
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    snapshot = await load_snapshot(session, date_from=first, date_to=last)
    template = get_schedule_template()

    days: list[MonthDay] = []
    current = first
    while current <= last:
        key = current.isoformat()
        days.append(
            MonthDay(
                date=current,
                closed=snapshot.is_closed(key),
                booked_count=len(snapshot.booked_times(key)),
                open_count=len(snapshot.resolve(key, template=template)),
            )
        )
        current += timedelta(days=1)
    return days


async def toggle_day_closure(
    session: AsyncSession, *, day: date, reason: str | None = None
) -> bool:
    """Close an open day or reopen a closed one; returns the new closed state.

    Existing bookings stay in place when a day is closed.
    """
    result = await session.execute(select(DayClosure).where(DayClosure.closed_date == day))
    closure = result.scalar_one_or_none()
    if closure is not None:
        await session.delete(closure)
        await session.commit()
        logger.info("Reopened %s", day.isoformat())
        return False
    session.add(DayClosure(closed_date=day, reason=reason))
    await session.commit()
    logger.info("Closed %s", day.isoformat())
    return True


async def _booked_times(session: AsyncSession, day: date) -> set[str]:
    result = await session.execute(
        select(Booking.slot_time).where(Booking.slot_date == day)
    )
    return set(result.scalars().all())


async def toggle_slot_block(session: AsyncSession, *, day: date, slot_time: str) -> bool:
    """Block or unblock one default time on ``day``; returns the new blocked state."""
    result = await session.execute(
        select(SlotBlock).where(SlotBlock.slot_date == day, SlotBlock.slot_time == slot_time)
    )
    block = result.scalar_one_or_none()
    if block is not None:
        await session.delete(block)
        await session.commit()
        logger.info("Unblocked %s %s", day.isoformat(), slot_time)
        return False

    template = get_schedule_template()
    if slot_time not in template.default_times(weekend=_is_weekend(day)):
        raise ValueError(f"{slot_time} is not a default slot on {day.isoformat()}")
    if slot_time in await _booked_times(session, day):
        raise SlotUnavailableError(f"{slot_time} on {day.isoformat()} is already booked")
    session.add(SlotBlock(slot_date=day, slot_time=slot_time))
    await session.commit()
    logger.info("Blocked %s %s", day.isoformat(), slot_time)
    return True


async def toggle_custom_shift(
    session: AsyncSession, *, day: date, slot_time: str
) -> bool:
    """Add or remove an extra time on ``day``; returns whether the shift now exists."""
    result = await session.execute(
        select(CustomShift).where(
            CustomShift.slot_date == day, CustomShift.slot_time == slot_time
        )
    )
    shift = result.scalar_one_or_none()
    if shift is not None:
        if slot_time in await _booked_times(session, day):
            raise SlotUnavailableError(
                f"{slot_time} on {day.isoformat()} is already booked"
            )
        await session.delete(shift)
        await session.commit()
        logger.info("Removed custom shift %s %s", day.isoformat(), slot_time)
        return False

    template = get_schedule_template()
    if slot_time in template.default_times(weekend=_is_weekend(day)):
        raise ValueError(f"{slot_time} is already a default slot on {day.isoformat()}")
    session.add(CustomShift(slot_date=day, slot_time=slot_time))
    await session.commit()
    logger.info("Added custom shift %s %s", day.isoformat(), slot_time)
    return True
