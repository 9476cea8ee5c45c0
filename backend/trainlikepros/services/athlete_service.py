"""Athlete roster service helpers."""
from __future__ import annotations

import uuid
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.core.scheduling import time_to_minutes
from trainlikepros.models.athlete import Athlete
from trainlikepros.models.booking import Booking, Sport
from trainlikepros.schemas.athlete import AthleteCreate, AthleteUpdate, RosterEntry
from trainlikepros.schemas.booking import PlayerInfo

HISTORY_LIMIT = 10


async def get_athlete(session: AsyncSession, *, athlete_id: uuid.UUID) -> Athlete | None:
    return await session.get(Athlete, athlete_id)


async def list_athletes(
    session: AsyncSession,
    *,
    parent_user_id: uuid.UUID | None = None,
    skip: int = 0,
    limit: int = 50,
) -> Sequence[Athlete]:
    stmt = (
        select(Athlete)
        .order_by(Athlete.last_name.asc(), Athlete.first_name.asc())
        .offset(skip)
        .limit(limit)
    )
    if parent_user_id is not None:
        stmt = stmt.where(Athlete.parent_user_id == parent_user_id)
    result = await session.execute(stmt)
    return result.scalars().all()


async def create_athlete(
    session: AsyncSession,
    payload: AthleteCreate,
    *,
    parent_user_id: uuid.UUID | None = None,
) -> Athlete:
    athlete = Athlete(
        **payload.model_dump(exclude={"parent_email"}),
        parent_email=str(payload.parent_email).lower(),
        parent_user_id=parent_user_id,
    )
    session.add(athlete)
    await session.commit()
    await session.refresh(athlete)
    return athlete


async def update_athlete(
    session: AsyncSession, *, athlete: Athlete, payload: AthleteUpdate
) -> Athlete:
    for key, value in payload.model_dump(exclude_unset=True).items():
        if key == "parent_email":
            if value is None:
                raise ValueError("Parent email cannot be cleared")
            value = str(value).lower()
        setattr(athlete, key, value)
    await session.commit()
    await session.refresh(athlete)
    return athlete


async def find_or_create_from_profile(
    session: AsyncSession,
    *,
    profile: PlayerInfo,
    sport: Sport,
    parent_user_id: uuid.UUID | None = None,
) -> Athlete:
    """Match a wizard profile to a rostered athlete, creating one when new.

    Athletes match on parent email plus first and last name, ignoring case.
    Contact details from the latest submission overwrite the stored ones.
    Nothing is committed; the caller commits together with the booking.
    """
    email = str(profile.parent_email).lower()
    stmt = select(Athlete).where(
        Athlete.parent_email == email,
        func.lower(Athlete.first_name) == profile.first_name.strip().lower(),
        func.lower(Athlete.last_name) == profile.last_name.strip().lower(),
    )
    athlete = (await session.execute(stmt)).scalars().first()
    if athlete is None:
        athlete = Athlete(
            first_name=profile.first_name.strip(),
            last_name=profile.last_name.strip(),
            parent_email=email,
        )
        session.add(athlete)

    athlete.sport = sport
    if profile.age is not None:
        athlete.age = profile.age
    if profile.parent_name:
        athlete.parent_name = profile.parent_name
    if profile.parent_phone:
        athlete.parent_phone = profile.parent_phone
    if profile.notes:
        athlete.notes = profile.notes
    if parent_user_id is not None and athlete.parent_user_id is None:
        athlete.parent_user_id = parent_user_id
    await session.flush()
    return athlete


def _history_key(booking: Booking) -> tuple:
    return (booking.slot_date, time_to_minutes(booking.slot_time))


async def build_roster(
    session: AsyncSession,
    *,
    athletes: Sequence[Athlete],
) -> list[RosterEntry]:
    """Attach session counts and lesson history to each athlete."""
    if not athletes:
        return []
    ids = [athlete.id for athlete in athletes]
    result = await session.execute(select(Booking).where(Booking.athlete_id.in_(ids)))
    by_athlete: dict[uuid.UUID, list[Booking]] = {}
    for booking in result.scalars().all():
        by_athlete.setdefault(booking.athlete_id, []).append(booking)

    entries: list[RosterEntry] = []
    for athlete in athletes:
        bookings = sorted(by_athlete.get(athlete.id, []), key=_history_key, reverse=True)
        entry = RosterEntry.model_validate(athlete)
        entries.append(
            entry.model_copy(
                update={
                    "session_count": len(bookings),
                    "last_session": bookings[0].slot_date if bookings else None,
                    "history": [b.lesson_label for b in bookings[:HISTORY_LIMIT]],
                }
            )
        )
    return entries
