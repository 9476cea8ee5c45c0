"""Booking management service helpers."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from trainlikepros.core.catalog import lesson_info
from trainlikepros.core.scheduling import time_to_minutes
from trainlikepros.models.athlete import Athlete
from trainlikepros.models.booking import Booking, BookingStatus, LessonType, Sport
from trainlikepros.schemas.booking import BookingRequest
from trainlikepros.services import athlete_service
from trainlikepros.services.availability_service import (
    AvailableSlot,
    list_available_slots,
)

logger = logging.getLogger(__name__)


class SlotUnavailableError(ValueError):
    """Raised when a requested time is not currently offered."""


def _base_booking_query():
    return select(Booking).options(selectinload(Booking.athlete))


def _sort_by_slot(bookings: Sequence[Booking]) -> list[Booking]:
    return sorted(bookings, key=lambda b: (b.slot_date, time_to_minutes(b.slot_time)))


async def list_bookings(
    session: AsyncSession,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
    skip: int = 0,
    limit: int = 50,
) -> list[Booking]:
    stmt = _base_booking_query().order_by(Booking.slot_date.asc())
    if date_from is not None:
        stmt = stmt.where(Booking.slot_date >= date_from)
    if date_to is not None:
        stmt = stmt.where(Booking.slot_date <= date_to)
    result = await session.execute(stmt.offset(skip).limit(limit))
    return _sort_by_slot(result.scalars().unique().all())


async def list_bookings_for_date(session: AsyncSession, *, slot_date: date) -> list[Booking]:
    result = await session.execute(
        _base_booking_query().where(Booking.slot_date == slot_date)
    )
    return _sort_by_slot(result.scalars().unique().all())


async def list_bookings_for_parent(
    session: AsyncSession, *, parent_user_id: uuid.UUID
) -> list[Booking]:
    result = await session.execute(
        _base_booking_query()
        .join(Athlete, Booking.athlete_id == Athlete.id)
        .where(Athlete.parent_user_id == parent_user_id)
    )
    return _sort_by_slot(result.scalars().unique().all())


async def get_booking(session: AsyncSession, *, booking_id: uuid.UUID) -> Booking | None:
    result = await session.execute(
        _base_booking_query().where(Booking.id == booking_id)
    )
    return result.scalars().unique().one_or_none()


async def _claim_slot(
    session: AsyncSession,
    *,
    slot_date: date,
    slot_time: str,
    lesson_type: LessonType,
) -> AvailableSlot:
    slots = await list_available_slots(
        session, slot_date=slot_date, lesson_type=lesson_type
    )
    category = lesson_type.category
    for slot in slots:
        if slot.time == slot_time and slot.category is category:
            return slot
    raise SlotUnavailableError(
        f"{slot_time} on {slot_date.isoformat()} is not available for {lesson_type.value}"
    )


async def create_booking(
    session: AsyncSession,
    *,
    athlete: Athlete,
    sport: Sport,
    lesson_type: LessonType,
    slot_date: date,
    slot_time: str,
    status: BookingStatus = BookingStatus.PENDING,
    notes: str | None = None,
    created_by_user_id: uuid.UUID | None = None,
) -> Booking:
    """Store a booking for a time the resolver currently offers.

    Availability is re-read right before the insert. There is no lock and no
    (date, time) uniqueness constraint, so two concurrent writers can still
    both succeed.
    """
    slot = await _claim_slot(
        session, slot_date=slot_date, slot_time=slot_time, lesson_type=lesson_type
    )
    booking = Booking(
        athlete_id=athlete.id,
        slot_date=slot_date,
        slot_time=slot.time,
        sport=sport,
        lesson_type=lesson_type,
        lesson_label=lesson_info(lesson_type).label,
        category=slot.category,
        price=slot.price,
        status=status,
        notes=notes,
        created_by_user_id=created_by_user_id,
    )
    session.add(booking)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    logger.info(
        "Booked %s %s for athlete %s (%s, %s)",
        slot_date.isoformat(),
        slot.time,
        athlete.id,
        lesson_type.value,
        status.value,
    )
    await session.refresh(booking, ["athlete"])
    return booking


async def submit_booking_request(
    session: AsyncSession,
    *,
    payload: BookingRequest,
    parent_user_id: uuid.UUID | None = None,
) -> Booking:
    """Handle a completed booking wizard."""
    # Fail before touching the roster when the slot is already gone.
    await _claim_slot(
        session,
        slot_date=payload.date,
        slot_time=payload.time,
        lesson_type=payload.lesson_type,
    )
    athlete = await athlete_service.find_or_create_from_profile(
        session,
        profile=payload.player_info,
        sport=payload.sport,
        parent_user_id=parent_user_id,
    )
    return await create_booking(
        session,
        athlete=athlete,
        sport=payload.sport,
        lesson_type=payload.lesson_type,
        slot_date=payload.date,
        slot_time=payload.time,
        status=BookingStatus.PENDING,
        notes=payload.player_info.notes,
        created_by_user_id=parent_user_id,
    )


async def confirm_booking(session: AsyncSession, *, booking: Booking) -> Booking:
    """Mark a pending booking as confirmed; confirmed bookings are left as is."""
    if booking.status is BookingStatus.CONFIRMED:
        return booking
    booking.status = BookingStatus.CONFIRMED
    await session.commit()
    logger.info("Confirmed booking %s", booking.id)
    await session.refresh(booking, ["athlete"])
    return booking
