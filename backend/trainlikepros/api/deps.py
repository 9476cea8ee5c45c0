"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.core.config import get_settings
from trainlikepros.core.security import subject_from_token
from trainlikepros.db.session import get_session
from trainlikepros.integrations.gemini_client import GeminiClient, build_gemini_client
from trainlikepros.models.user import User, UserRole, UserStatus

settings = get_settings()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_v1_prefix}/auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.api_v1_prefix}/auth/token", auto_error=False
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


async def _load_active_user(session: AsyncSession, token: str) -> User | None:
    try:
        user_id = subject_from_token(token)
    except JWTError:
        return None
    user = await session.get(User, user_id)
    if user is None or user.status != UserStatus.ACTIVE:
        return None
    return user


async def get_current_active_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> User:
    """Authenticate request via bearer token."""
    user = await _load_active_user(session, token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_optional_user(
    token: Annotated[str | None, Depends(optional_oauth2_scheme)],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> User | None:
    """Return the caller when a valid token is sent; guests get ``None``."""
    if not token:
        return None
    return await _load_active_user(session, token)


async def get_current_staff_user(
    current_user: Annotated[User, Depends(get_current_active_user)],
) -> User:
    """Only coaches and admins may use the console endpoints."""
    if not current_user.is_staff:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions"
        )
    return current_user


async def get_current_admin_user(
    current_user: Annotated[User, Depends(get_current_active_user)],
) -> User:
    if current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions"
        )
    return current_user


def get_gemini_client() -> GeminiClient | None:
    return build_gemini_client()
