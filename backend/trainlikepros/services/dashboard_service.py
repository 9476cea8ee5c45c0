"""Admin dashboard metrics."""

from __future__ import annotations

from datetime import date, timedelta

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.models.booking import Booking
from trainlikepros.schemas.dashboard import DashboardSummary, LineupEntry
from trainlikepros.services import availability_service, booking_service

ACTIVE_WINDOW_DAYS = 90
UTILIZATION_WINDOW_DAYS = 7


def _month_bounds(day: date) -> tuple[date, date]:
    first = day.replace(day=1)
    next_first = (first + timedelta(days=32)).replace(day=1)
    return first, next_first - timedelta(days=1)


async def _count_bookings(
    session: AsyncSession, *, date_from: date | None = None, date_to: date | None = None
) -> int:
    stmt = select(func.count(Booking.id))
    if date_from is not None:
        stmt = stmt.where(Booking.slot_date >= date_from)
    if date_to is not None:
        stmt = stmt.where(Booking.slot_date <= date_to)
    return int((await session.execute(stmt)).scalar_one())


def _percent_change(current: int, previous: int) -> float | None:
    if previous == 0:
        return None
    return round((current - previous) / previous * 100, 1)


async def build_summary(session: AsyncSession, *, today: date) -> DashboardSummary:
    month_start, month_end = _month_bounds(today)
    last_month_start, last_month_end = _month_bounds(month_start - timedelta(days=1))
    this_month = await _count_bookings(session, date_from=month_start, date_to=month_end)
    last_month = await _count_bookings(
        session, date_from=last_month_start, date_to=last_month_end
    )

    active_stmt = select(func.count(distinct(Booking.athlete_id))).where(
        Booking.slot_date >= today - timedelta(days=ACTIVE_WINDOW_DAYS),
        Booking.slot_date <= today,
    )
    active_athletes = int((await session.execute(active_stmt)).scalar_one())

    open_count, booked_count = await availability_service.count_open_and_booked(
        session,
        date_from=today,
        date_to=today + timedelta(days=UTILIZATION_WINDOW_DAYS - 1),
    )
    capacity = open_count + booked_count
    utilization = round(booked_count / capacity, 2) if capacity else None

    lineup = [
        LineupEntry(
            booking_id=booking.id,
            athlete_id=booking.athlete_id,
            athlete_name=booking.athlete_name,
            time=booking.slot_time,
            lesson_label=booking.lesson_label,
            status=booking.status,
        )
        for booking in await booking_service.list_bookings_for_date(
            session, slot_date=today
        )
    ]

    return DashboardSummary(
        today=today,
        total_sessions=await _count_bookings(session),
        sessions_this_month=this_month,
        sessions_last_month=last_month,
        month_change_pct=_percent_change(this_month, last_month),
        active_athletes=active_athletes,
        utilization=utilization,
        today_lineup=lineup,
    )
