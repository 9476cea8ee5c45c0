"""Admin calendar endpoints."""

from __future__ import annotations

import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.api import deps
from trainlikepros.schemas.availability import (
    ClosureToggleRequest,
    ClosureToggleResponse,
    CustomShiftToggleResponse,
    ScheduleDayRead,
    ScheduleMonthDay,
    ScheduleMonthRead,
    SlotBlockToggleResponse,
    SlotRead,
    SlotToggleRequest,
)
from trainlikepros.schemas.booking import BookingRead
from trainlikepros.services import schedule_service
from trainlikepros.services.booking_service import SlotUnavailableError

router = APIRouter(dependencies=[Depends(deps.get_current_staff_user)])

DbSession = Annotated[AsyncSession, Depends(deps.get_db_session)]


def _translate(exc: ValueError) -> HTTPException:
    if isinstance(exc, SlotUnavailableError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/days/{day}", response_model=ScheduleDayRead, summary="Calendar day")
async def read_day(day: dt.date, session: DbSession) -> ScheduleDayRead:
    detail = await schedule_service.get_day(session, day=day)
    return ScheduleDayRead(
        date=detail.date,
        closed=detail.closed,
        blocked_slots=detail.blocked_slots,
        custom_shifts=detail.custom_shifts,
        bookings=[BookingRead.model_validate(b) for b in detail.bookings],
        available_slots=[SlotRead.model_validate(s) for s in detail.available_slots],
    )


@router.get("/month", response_model=ScheduleMonthRead, summary="Calendar month")
async def read_month(
    session: DbSession,
    year: Annotated[int, Query(ge=2000, le=2100)],
    month: Annotated[int, Query(ge=1, le=12)],
) -> ScheduleMonthRead:
    days = await schedule_service.get_month(session, year=year, month=month)
    return ScheduleMonthRead(
        year=year,
        month=month,
        days=[
            ScheduleMonthDay(
                date=day.date,
                closed=day.closed,
                booked_count=day.booked_count,
                open_count=day.open_count,
            )
            for day in days
        ],
    )


@router.post(
    "/closures/toggle", response_model=ClosureToggleResponse, summary="Close or reopen a day"
)
async def toggle_closure(
    payload: ClosureToggleRequest, session: DbSession
) -> ClosureToggleResponse:
    closed = await schedule_service.toggle_day_closure(
        session, day=payload.date, reason=payload.reason
    )
    return ClosureToggleResponse(date=payload.date, closed=closed)


@router.post(
    "/slot-blocks/toggle",
    response_model=SlotBlockToggleResponse,
    summary="Block or unblock a default slot",
)
async def toggle_slot_block(
    payload: SlotToggleRequest, session: DbSession
) -> SlotBlockToggleResponse:
    try:
        blocked = await schedule_service.toggle_slot_block(
            session, day=payload.date, slot_time=payload.time
        )
    except ValueError as exc:
        raise _translate(exc) from exc
    return SlotBlockToggleResponse(date=payload.date, time=payload.time, blocked=blocked)


@router.post(
    "/custom-shifts/toggle",
    response_model=CustomShiftToggleResponse,
    summary="Add or remove a custom shift",
)
async def toggle_custom_shift(
    payload: SlotToggleRequest, session: DbSession
) -> CustomShiftToggleResponse:
    try:
        active = await schedule_service.toggle_custom_shift(
            session, day=payload.date, slot_time=payload.time
        )
    except ValueError as exc:
        raise _translate(exc) from exc
    return CustomShiftToggleResponse(date=payload.date, time=payload.time, active=active)
