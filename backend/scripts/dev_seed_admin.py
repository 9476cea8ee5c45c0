"""Seed a local database with an admin login and a demo roster."""

from __future__ import annotations

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.core.config import get_settings
from trainlikepros.db.session import get_sessionmaker
from trainlikepros.models import Athlete, Sport, UserRole, UserStatus
from trainlikepros.schemas.athlete import AthleteCreate
from trainlikepros.schemas.user import UserCreate
from trainlikepros.services import athlete_service, user_service

EMAIL = "admin@trainlikepros.dev"
PASSWORD = "admin12345"

DEMO_ROSTER = (
    ("Alex", "Rodriguez", 14, "Enrique Rodriguez", "enrique.r@email.com", "(555) 123-4567"),
    ("Babe", "Ruth", 12, "George Ruth Sr.", "george.ruth@email.com", "(555) 987-6543"),
    ("Jackie", "Robinson", 15, "Mallie Robinson", "mallie.r@email.com", "(555) 444-5555"),
    ("Ken", "Griffey Jr.", 13, "Ken Griffey Sr.", "ken.sr@email.com", "(555) 222-3333"),
)


async def seed(session: AsyncSession) -> list[str]:
    """Insert whatever is missing and return a line per created record."""
    created: list[str] = []
    if await user_service.get_user_by_email(session, EMAIL) is None:
        await user_service.create_user(
            session,
            UserCreate(
                email=EMAIL,
                password=PASSWORD,
                first_name="Dev",
                last_name="Admin",
                role=UserRole.ADMIN,
                status=UserStatus.ACTIVE,
            ),
        )
        created.append(f"admin {EMAIL} / {PASSWORD}")

    for first, last, age, parent, email, phone in DEMO_ROSTER:
        existing = await session.execute(
            select(Athlete.id).where(
                Athlete.parent_email == email, Athlete.first_name == first
            )
        )
        if existing.first():
            continue
        await athlete_service.create_athlete(
            session,
            AthleteCreate(
                first_name=first,
                last_name=last,
                age=age,
                sport=Sport.BASEBALL,
                parent_name=parent,
                parent_email=email,
                parent_phone=phone,
            ),
        )
        created.append(f"athlete {first} {last}")
    return created


async def main() -> None:
    settings = get_settings()
    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        created = await seed(session)
    if not created:
        print("Nothing to seed")
    for line in created:
        print(f"Created {line}")


if __name__ == "__main__":
    asyncio.run(main())
