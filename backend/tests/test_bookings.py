"""Booking wizard and booking management API tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MONDAY = "2030-01-07"
SATURDAY = "2030-01-05"


async def _authenticate(client: AsyncClient, email: str, password: str) -> str:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    return response.json()["access_token"]


def _wizard_payload(
    *,
    date: str = MONDAY,
    time: str = "01:00 PM",
    lesson_type: str = "hitting",
    first_name: str = "Alex",
    parent_email: str = "enrique.r@example.com",
) -> dict[str, Any]:
    return {
        "sport": "baseball",
        "lesson_type": lesson_type,
        "date": date,
        "time": time,
        "player_info": {
            "first_name": first_name,
            "last_name": "Rodriguez",
            "age": 14,
            "parent_name": "Enrique Rodriguez",
            "parent_email": parent_email,
            "parent_phone": "(555) 123-4567",
            "notes": "Working on launch angle",
        },
    }


async def test_guest_wizard_creates_pending_booking(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    response = await client.post("/api/v1/bookings/requests", json=_wizard_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["slot_date"] == MONDAY
    assert body["slot_time"] == "01:00 PM"
    assert body["category"] == "private"
    assert Decimal(body["price"]) == Decimal("50")
    assert body["lesson_label"] == "Hitting Fundamentals"
    assert body["athlete_name"] == "Alex Rodriguez"

    availability = await client.get(
        "/api/v1/availability", params={"date": MONDAY}
    )
    times = [slot["time"] for slot in availability.json()["slots"]]
    assert "01:00 PM" not in times


async def test_booked_slot_is_rejected(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    first = await client.post("/api/v1/bookings/requests", json=_wizard_payload())
    assert first.status_code == 201

    second = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(first_name="Babe", parent_email="george.ruth@example.com"),
    )
    assert second.status_code == 409


async def test_repeat_wizard_reuses_roster_athlete(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    first = await client.post("/api/v1/bookings/requests", json=_wizard_payload())
    second = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(
            time="2:00 pm",
            lesson_type="fielding",
            first_name="alex",
            parent_email="Enrique.R@example.com",
        ),
    )
    assert second.status_code == 201
    assert second.json()["slot_time"] == "02:00 PM"
    assert second.json()["athlete_id"] == first.json()["athlete_id"]


async def test_lesson_category_must_match_slot(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    group_in_private_slot = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(lesson_type="small-group", time="01:00 PM"),
    )
    assert group_in_private_slot.status_code == 409

    private_in_group_slot = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(lesson_type="pitching", time="05:00 PM"),
    )
    assert private_in_group_slot.status_code == 409

    group = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(lesson_type="small-group", time="05:00 PM"),
    )
    assert group.status_code == 201
    assert group.json()["category"] == "group"
    assert Decimal(group.json()["price"]) == Decimal("60")


async def test_custom_shift_is_a_private_slot(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    token = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]
    )
    headers = {"Authorization": f"Bearer {token}"}

    added = await client.post(
        "/api/v1/schedule/custom-shifts/toggle",
        json={"date": MONDAY, "time": "09:00 AM"},
        headers=headers,
    )
    assert added.json()["active"] is True

    group = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(lesson_type="small-group", time="09:00 AM"),
    )
    assert group.status_code == 409

    private = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(lesson_type="hitting", time="09:00 AM"),
    )
    assert private.status_code == 201
    assert private.json()["category"] == "private"
    assert Decimal(private.json()["price"]) == Decimal("50")


async def test_wizard_rejects_malformed_time(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    response = await client.post(
        "/api/v1/bookings/requests", json=_wizard_payload(time="25:00")
    )
    assert response.status_code == 422


async def test_closed_day_cannot_be_booked(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    token = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]
    )
    headers = {"Authorization": f"Bearer {token}"}

    closed = await client.post(
        "/api/v1/schedule/closures/toggle",
        json={"date": SATURDAY, "reason": "Tournament"},
        headers=headers,
    )
    assert closed.json()["closed"] is True

    response = await client.post(
        "/api/v1/bookings/requests", json=_wizard_payload(date=SATURDAY)
    )
    assert response.status_code == 409


async def test_parent_sees_own_bookings(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    register = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "mallie.r@example.com",
            "password": "ParentPass1!",
            "first_name": "Mallie",
            "last_name": "Robinson",
        },
    )
    assert register.status_code == 201
    headers = {"Authorization": f"Bearer {register.json()['token']['access_token']}"}

    booked = await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(first_name="Jackie", parent_email="mallie.r@example.com"),
        headers=headers,
    )
    assert booked.status_code == 201

    # Guest booking for another family does not show up.
    await client.post(
        "/api/v1/bookings/requests",
        json=_wizard_payload(time="03:00 PM", parent_email="other@example.com"),
    )

    mine = await client.get("/api/v1/bookings/mine", headers=headers)
    assert mine.status_code == 200
    assert [b["id"] for b in mine.json()] == [booked.json()["id"]]

    forbidden = await client.get("/api/v1/bookings", headers=headers)
    assert forbidden.status_code == 403


async def test_staff_books_and_confirms(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    token = await _authenticate(
        client, app_context["coach_email"], app_context["coach_password"]
    )
    headers = {"Authorization": f"Bearer {token}"}

    athlete = await client.post(
        "/api/v1/athletes",
        json={
            "first_name": "Ken",
            "last_name": "Griffey Jr.",
            "age": 13,
            "sport": "baseball",
            "parent_email": "ken.sr@example.com",
        },
        headers=headers,
    )
    assert athlete.status_code == 201
    athlete_id = athlete.json()["id"]

    staff_booking = await client.post(
        "/api/v1/bookings",
        json={
            "athlete_id": athlete_id,
            "sport": "baseball",
            "lesson_type": "hitting",
            "date": SATURDAY,
            "time": "08:00 PM",
        },
        headers=headers,
    )
    assert staff_booking.status_code == 201
    assert staff_booking.json()["status"] == "confirmed"

    missing = await client.post(
        "/api/v1/bookings",
        json={
            "athlete_id": "00000000-0000-0000-0000-000000000000",
            "sport": "baseball",
            "lesson_type": "hitting",
            "date": SATURDAY,
            "time": "07:00 PM",
        },
        headers=headers,
    )
    assert missing.status_code == 404

    pending = await client.post(
        "/api/v1/bookings/requests", json=_wizard_payload(date=SATURDAY)
    )
    pending_id = pending.json()["id"]
    confirmed = await client.post(
        f"/api/v1/bookings/{pending_id}/confirm", headers=headers
    )
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "confirmed"

    listing = await client.get(
        "/api/v1/bookings",
        params={"date_from": SATURDAY, "date_to": SATURDAY},
        headers=headers,
    )
    assert listing.status_code == 200
    assert [b["slot_time"] for b in listing.json()] == ["01:00 PM", "08:00 PM"]

    fetched = await client.get(f"/api/v1/bookings/{pending_id}", headers=headers)
    assert fetched.json()["status"] == "confirmed"


async def test_booking_listing_requires_login(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    response = await client.get("/api/v1/bookings")
    assert response.status_code == 401
