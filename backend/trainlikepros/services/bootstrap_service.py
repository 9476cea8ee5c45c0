"""Bootstrap helpers for default data."""

from __future__ import annotations

import logging

from trainlikepros.core.config import get_settings
from trainlikepros.db.session import get_sessionmaker
from trainlikepros.models import UserRole, UserStatus
from trainlikepros.schemas.user import UserCreate
from trainlikepros.services import user_service

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_FIRST = "Head"
DEFAULT_ADMIN_LAST = "Coach"


async def ensure_default_admin() -> bool:
    """Create the configured admin account if it does not exist yet.

    Returns ``True`` when a user was created. Nothing happens unless both
    ``DEFAULT_ADMIN_EMAIL`` and ``DEFAULT_ADMIN_PASSWORD`` are set.
    """
    settings = get_settings()
    if not settings.default_admin_email or not settings.default_admin_password:
        return False

    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        existing = await user_service.get_user_by_email(
            session, settings.default_admin_email
        )
        if existing is not None:
            return False
        payload = UserCreate(
            email=settings.default_admin_email,
            password=settings.default_admin_password,
            first_name=DEFAULT_ADMIN_FIRST,
            last_name=DEFAULT_ADMIN_LAST,
            role=UserRole.ADMIN,
            status=UserStatus.ACTIVE,
        )
        await user_service.create_user(session, payload)
    logger.info("Created default admin %s", settings.default_admin_email)
    return True
