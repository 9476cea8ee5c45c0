"""Athlete roster endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.api import deps
from trainlikepros.models.user import User
from trainlikepros.schemas.athlete import (
    AthleteCreate,
    AthleteRead,
    AthleteUpdate,
    RosterEntry,
)
from trainlikepros.services import athlete_service

router = APIRouter()


@router.get("", response_model=list[RosterEntry], summary="Athlete roster")
async def list_roster(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
    skip: int = 0,
    limit: Annotated[int, Query(le=200)] = 50,
) -> list[RosterEntry]:
    athletes = await athlete_service.list_athletes(session, skip=skip, limit=limit)
    return await athlete_service.build_roster(session, athletes=athletes)


@router.post(
    "",
    response_model=AthleteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add athlete",
)
async def create_athlete(
    payload: AthleteCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
) -> AthleteRead:
    athlete = await athlete_service.create_athlete(session, payload)
    return AthleteRead.model_validate(athlete)


@router.get("/{athlete_id}", response_model=RosterEntry, summary="Athlete profile")
async def read_athlete(
    athlete_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
) -> RosterEntry:
    athlete = await athlete_service.get_athlete(session, athlete_id=athlete_id)
    if athlete is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found"
        )
    [entry] = await athlete_service.build_roster(session, athletes=[athlete])
    return entry


@router.patch("/{athlete_id}", response_model=AthleteRead, summary="Update athlete")
async def update_athlete(
    athlete_id: uuid.UUID,
    payload: AthleteUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
) -> AthleteRead:
    athlete = await athlete_service.get_athlete(session, athlete_id=athlete_id)
    if athlete is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found"
        )
    try:
        updated = await athlete_service.update_athlete(
            session, athlete=athlete, payload=payload
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return AthleteRead.model_validate(updated)
