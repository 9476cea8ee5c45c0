"""Versioned API router."""

from fastapi import APIRouter

from . import (
    advice,
    athletes,
    auth,
    availability,
    bookings,
    dashboard,
    health,
    schedule,
    users,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(availability.router, tags=["availability"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(athletes.router, prefix="/athletes", tags=["athletes"])
router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(advice.router, prefix="/advice", tags=["advice"])

__all__ = ["router"]
