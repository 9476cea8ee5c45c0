"""Test fixtures for the Train Like Pros backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.pop("GEMINI_API_KEY", None)
os.environ.pop("REDIS_URL", None)

from trainlikepros.core.config import get_settings
from trainlikepros.core.security import get_password_hash
from trainlikepros.db.base import Base
from trainlikepros.db.session import dispose_engine, get_sessionmaker
from trainlikepros.main import app
from trainlikepros.models import User, UserRole, UserStatus


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def app_context(
    reset_database: None, db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client plus credentials for a seeded admin and coach."""
    sessionmaker = get_sessionmaker(db_url)
    admin_password = "Adm1nPass!"
    coach_password = "C0achPass!"

    async with sessionmaker() as session:
        admin = User(
            email="head.coach@example.com",
            hashed_password=get_password_hash(admin_password),
            first_name="Jordan",
            last_name="Head",
            role=UserRole.ADMIN,
            status=UserStatus.ACTIVE,
        )
        coach = User(
            email="coach@example.com",
            hashed_password=get_password_hash(coach_password),
            first_name="Riley",
            last_name="Coach",
            role=UserRole.COACH,
            status=UserStatus.ACTIVE,
        )
        session.add_all([admin, coach])
        await session.commit()

        context: dict[str, object] = {
            "admin_id": admin.id,
            "admin_email": admin.email,
            "admin_password": admin_password,
            "coach_id": coach.id,
            "coach_email": coach.email,
            "coach_password": coach_password,
        }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context
