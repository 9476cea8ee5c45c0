"""Catalog and slot availability endpoints used by the booking wizard."""

from __future__ import annotations

import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.api import deps
from trainlikepros.core.catalog import LESSONS, SPORTS
from trainlikepros.core.scheduling import get_schedule_template
from trainlikepros.models.booking import LessonType
from trainlikepros.schemas.availability import AvailabilityResponse, SlotRead
from trainlikepros.schemas.catalog import CatalogRead, LessonRead, SportRead
from trainlikepros.services import availability_service

router = APIRouter()


@router.get("/catalog", response_model=CatalogRead, summary="Sports and lessons")
async def read_catalog() -> CatalogRead:
    template = get_schedule_template()
    return CatalogRead(
        sports=[SportRead.model_validate(sport) for sport in SPORTS],
        lessons=[
            LessonRead(
                id=lesson.id,
                label=lesson.label,
                description=lesson.description,
                icon=lesson.icon,
                category=lesson.category,
                price=template.price_for(lesson.category),
            )
            for lesson in LESSONS
        ],
    )


@router.get(
    "/availability",
    response_model=AvailabilityResponse,
    summary="Open slots for a date",
)
async def read_availability(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    slot_date: Annotated[dt.date | None, Query(alias="date")] = None,
    lesson_type: LessonType | None = None,
) -> AvailabilityResponse:
    """List bookable slots; without a date the list is empty."""
    slots = await availability_service.list_available_slots(
        session, slot_date=slot_date, lesson_type=lesson_type
    )
    return AvailabilityResponse(
        date=slot_date,
        lesson_type=lesson_type,
        slots=[SlotRead.model_validate(slot) for slot in slots],
    )
