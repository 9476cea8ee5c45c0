"""Booking wizard submission and booking management API."""

from __future__ import annotations

import datetime as dt
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.api import deps
from trainlikepros.models.booking import BookingStatus
from trainlikepros.models.user import User, UserRole
from trainlikepros.schemas.booking import BookingCreate, BookingRead, BookingRequest
from trainlikepros.services import athlete_service, booking_service
from trainlikepros.services.booking_service import SlotUnavailableError

router = APIRouter()


def _conflict(exc: SlotUnavailableError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.post(
    "/requests",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit booking wizard",
)
async def submit_booking_request(
    payload: BookingRequest,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    current_user: Annotated[User | None, Depends(deps.get_optional_user)],
) -> BookingRead:
    """Book a slot for an athlete; guests may book without an account."""
    parent_user_id = (
        current_user.id
        if current_user is not None and current_user.role == UserRole.PARENT
        else None
    )
    try:
        booking = await booking_service.submit_booking_request(
            session, payload=payload, parent_user_id=parent_user_id
        )
    except SlotUnavailableError as exc:
        raise _conflict(exc) from exc
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to create booking"
        ) from exc
    return BookingRead.model_validate(booking)


@router.post(
    "",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a booking for a rostered athlete",
)
async def create_booking(
    payload: BookingCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    current_user: Annotated[User, Depends(deps.get_current_staff_user)],
) -> BookingRead:
    athlete = await athlete_service.get_athlete(session, athlete_id=payload.athlete_id)
    if athlete is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found"
        )
    try:
        booking = await booking_service.create_booking(
            session,
            athlete=athlete,
            sport=payload.sport,
            lesson_type=payload.lesson_type,
            slot_date=payload.date,
            slot_time=payload.time,
            status=BookingStatus.CONFIRMED,
            notes=payload.notes,
            created_by_user_id=current_user.id,
        )
    except SlotUnavailableError as exc:
        raise _conflict(exc) from exc
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to create booking"
        ) from exc
    return BookingRead.model_validate(booking)


@router.get("", response_model=list[BookingRead], summary="List bookings")
async def list_bookings(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
    date_from: dt.date | None = None,
    date_to: dt.date | None = None,
    skip: int = 0,
    limit: Annotated[int, Query(le=200)] = 50,
) -> list[BookingRead]:
    bookings = await booking_service.list_bookings(
        session, date_from=date_from, date_to=date_to, skip=skip, limit=limit
    )
    return [BookingRead.model_validate(obj) for obj in bookings]


@router.get("/mine", response_model=list[BookingRead], summary="Bookings for my athletes")
async def list_my_bookings(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    current_user: Annotated[User, Depends(deps.get_current_active_user)],
) -> list[BookingRead]:
    bookings = await booking_service.list_bookings_for_parent(
        session, parent_user_id=current_user.id
    )
    return [BookingRead.model_validate(obj) for obj in bookings]


@router.get("/{booking_id}", response_model=BookingRead, summary="Get booking")
async def get_booking(
    booking_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
) -> BookingRead:
    booking = await booking_service.get_booking(session, booking_id=booking_id)
    if booking is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found"
        )
    return BookingRead.model_validate(booking)


@router.post(
    "/{booking_id}/confirm", response_model=BookingRead, summary="Confirm booking"
)
async def confirm_booking(
    booking_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
) -> BookingRead:
    booking = await booking_service.get_booking(session, booking_id=booking_id)
    if booking is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found"
        )
    confirmed = await booking_service.confirm_booking(session, booking=booking)
    return BookingRead.model_validate(confirmed)
