"""Async engine and session factories, one per database URL."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from trainlikepros.core.config import get_settings

_engines: dict[str, AsyncEngine] = {}
_factories: dict[str, async_sessionmaker[AsyncSession]] = {}


def _url_or_default(database_url: str | None) -> str:
    return database_url or get_settings().database_url


def _engine_options(url: str) -> dict[str, Any]:
    if make_url(url).get_backend_name() == "sqlite":
        return {}
    return {"pool_pre_ping": True}


def get_sessionmaker(
    database_url: str | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Return the session factory for ``database_url``, building it on first use."""
    url = _url_or_default(database_url)
    factory = _factories.get(url)
    if factory is None:
        engine = create_async_engine(url, **_engine_options(url))
        factory = async_sessionmaker(engine, expire_on_commit=False)
        _engines[url] = engine
        _factories[url] = factory
    return factory


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session; uncommitted work is rolled back on error."""
    async with get_sessionmaker()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def dispose_engine(database_url: str | None = None) -> None:
    """Forget and close the engine for ``database_url``."""
    url = _url_or_default(database_url)
    _factories.pop(url, None)
    engine = _engines.pop(url, None)
    if engine is not None:
        await engine.dispose()
