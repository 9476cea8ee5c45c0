"""Authentication endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.api.deps import get_db_session
from trainlikepros.core.config import get_settings
from trainlikepros.models.user import UserRole, UserStatus
from trainlikepros.schemas.auth import RegistrationRequest, RegistrationResponse, Token
from trainlikepros.schemas.user import UserCreate, UserRead
from trainlikepros.services import user_service
from trainlikepros.services.auth_service import (
    authenticate_user,
    create_access_token_for_user,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_settings = get_settings()

_WINDOW_SECONDS = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
}


def parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    """Turn ``"10/minute"`` into ``(10, 60)``; malformed values use ``fallback``."""
    count_str, _, window_str = value.partition("/")
    try:
        count = int(count_str.strip())
    except ValueError:
        return fallback
    window = window_str.strip().lower().rstrip("s")
    return count, _WINDOW_SECONDS.get(window, fallback[1])


def _rate_dependency(limit: tuple[int, int]):
    async def _dependency(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return None
        limiter = RateLimiter(times=limit[0], seconds=limit[1])
        await limiter(request, response)

    return Depends(_dependency)


_LOGIN_RATE_DEP = _rate_dependency(parse_rate(_settings.rate_limit_login, fallback=(10, 60)))
_DEFAULT_RATE_DEP = _rate_dependency(
    parse_rate(_settings.rate_limit_default, fallback=(100, 60))
)


@router.post(
    "/token",
    response_model=Token,
    summary="Obtain access token",
    dependencies=[_LOGIN_RATE_DEP],
)
async def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> Token:
    """Validate credentials and issue a bearer token."""
    user = await authenticate_user(
        session, email=form_data.username, password=form_data.password
    )
    if user is None:
        logger.info("Rejected login for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token_for_user(user))


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register parent account",
    dependencies=[_DEFAULT_RATE_DEP],
)
async def register_parent(
    payload: RegistrationRequest,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> RegistrationResponse:
    existing = await user_service.get_user_by_email(session, email=payload.email)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered"
        )
    try:
        user = await user_service.create_user(
            session,
            UserCreate(
                email=payload.email,
                password=payload.password,
                first_name=payload.first_name,
                last_name=payload.last_name,
                phone_number=payload.phone_number,
                role=UserRole.PARENT,
                status=UserStatus.ACTIVE,
            ),
        )
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered"
        ) from exc
    return RegistrationResponse(
        token=Token(access_token=create_access_token_for_user(user)),
        user=UserRead.model_validate(user),
    )
