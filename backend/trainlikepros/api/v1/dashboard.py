"""Admin dashboard endpoint."""

from __future__ import annotations

import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trainlikepros.api import deps
from trainlikepros.models.user import User
from trainlikepros.schemas.dashboard import DashboardSummary
from trainlikepros.services import dashboard_service

router = APIRouter()


@router.get("/summary", response_model=DashboardSummary, summary="Dashboard metrics")
async def read_summary(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    _: Annotated[User, Depends(deps.get_current_staff_user)],
    today: dt.date | None = None,
) -> DashboardSummary:
    return await dashboard_service.build_summary(
        session, today=today or dt.date.today()
    )
