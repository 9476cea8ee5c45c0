"""Admin calendar API tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MONDAY = "2030-01-07"
TUESDAY = "2030-01-08"
SATURDAY = "2030-01-05"


async def _authenticate(client: AsyncClient, email: str, password: str) -> str:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    return response.json()["access_token"]


async def _staff_headers(app_context: dict[str, Any]) -> dict[str, str]:
    token = await _authenticate(
        app_context["client"], app_context["coach_email"], app_context["coach_password"]
    )
    return {"Authorization": f"Bearer {token}"}


async def _open_times(client: AsyncClient, date: str) -> list[str]:
    response = await client.get("/api/v1/availability", params={"date": date})
    assert response.status_code == 200
    return [slot["time"] for slot in response.json()["slots"]]


async def _book(client: AsyncClient, date: str, time: str) -> dict[str, Any]:
    response = await client.post(
        "/api/v1/bookings/requests",
        json={
            "sport": "softball",
            "lesson_type": "hitting",
            "date": date,
            "time": time,
            "player_info": {
                "first_name": "Jennie",
                "last_name": "Finch",
                "parent_email": "finch.family@example.com",
            },
        },
    )
    assert response.status_code == 201
    return response.json()


async def test_day_closure_toggles(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _staff_headers(app_context)

    closed = await client.post(
        "/api/v1/schedule/closures/toggle",
        json={"date": MONDAY, "reason": "Field maintenance"},
        headers=headers,
    )
    assert closed.status_code == 200
    assert closed.json() == {"date": MONDAY, "closed": True}
    assert await _open_times(client, MONDAY) == []

    reopened = await client.post(
        "/api/v1/schedule/closures/toggle", json={"date": MONDAY}, headers=headers
    )
    assert reopened.json()["closed"] is False
    assert len(await _open_times(client, MONDAY)) == 7


async def test_slot_block_toggles(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _staff_headers(app_context)

    blocked = await client.post(
        "/api/v1/schedule/slot-blocks/toggle",
        json={"date": MONDAY, "time": "2:00 pm"},
        headers=headers,
    )
    assert blocked.status_code == 200
    assert blocked.json() == {"date": MONDAY, "time": "02:00 PM", "blocked": True}
    assert "02:00 PM" not in await _open_times(client, MONDAY)
    assert "02:00 PM" in await _open_times(client, TUESDAY)

    unblocked = await client.post(
        "/api/v1/schedule/slot-blocks/toggle",
        json={"date": MONDAY, "time": "02:00 PM"},
        headers=headers,
    )
    assert unblocked.json()["blocked"] is False
    assert "02:00 PM" in await _open_times(client, MONDAY)


async def test_slot_block_rejects_unknown_or_booked_times(
    app_context: dict[str, Any],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _staff_headers(app_context)

    not_default = await client.post(
        "/api/v1/schedule/slot-blocks/toggle",
        json={"date": MONDAY, "time": "09:00 AM"},
        headers=headers,
    )
    assert not_default.status_code == 400

    await _book(client, MONDAY, "03:00 PM")
    booked = await client.post(
        "/api/v1/schedule/slot-blocks/toggle",
        json={"date": MONDAY, "time": "03:00 PM"},
        headers=headers,
    )
    assert booked.status_code == 409


async def test_custom_shift_toggles(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _staff_headers(app_context)

    added = await client.post(
        "/api/v1/schedule/custom-shifts/toggle",
        json={"date": MONDAY, "time": "09:00 AM"},
        headers=headers,
    )
    assert added.status_code == 200
    assert added.json()["active"] is True
    assert (await _open_times(client, MONDAY))[0] == "09:00 AM"

    default_time = await client.post(
        "/api/v1/schedule/custom-shifts/toggle",
        json={"date": MONDAY, "time": "01:00 PM"},
        headers=headers,
    )
    assert default_time.status_code == 400

    await _book(client, MONDAY, "09:00 AM")
    booked = await client.post(
        "/api/v1/schedule/custom-shifts/toggle",
        json={"date": MONDAY, "time": "09:00 AM"},
        headers=headers,
    )
    assert booked.status_code == 409


async def test_weekend_morning_shift_and_block(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _staff_headers(app_context)

    added = await client.post(
        "/api/v1/schedule/custom-shifts/toggle",
        json={"date": SATURDAY, "time": "10:00 AM"},
        headers=headers,
    )
    assert added.status_code == 200
    assert added.json()["active"] is True

    response = await client.get("/api/v1/availability", params={"date": SATURDAY})
    first = response.json()["slots"][0]
    assert first["time"] == "10:00 AM"
    assert first["category"] == "private"
    assert Decimal(first["price"]) == Decimal("50")

    not_default = await client.post(
        "/api/v1/schedule/slot-blocks/toggle",
        json={"date": SATURDAY, "time": "11:00 AM"},
        headers=headers,
    )
    assert not_default.status_code == 400


async def test_day_and_month_views(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _staff_headers(app_context)

    await _book(client, MONDAY, "04:00 PM")
    await _book(client, MONDAY, "01:00 PM")
    await client.post(
        "/api/v1/schedule/slot-blocks/toggle",
        json={"date": MONDAY, "time": "06:00 PM"},
        headers=headers,
    )
    await client.post(
        "/api/v1/schedule/custom-shifts/toggle",
        json={"date": MONDAY, "time": "10:00 AM"},
        headers=headers,
    )
    await client.post(
        "/api/v1/schedule/closures/toggle", json={"date": TUESDAY}, headers=headers
    )

    day = await client.get(f"/api/v1/schedule/days/{MONDAY}", headers=headers)
    assert day.status_code == 200
    body = day.json()
    assert body["closed"] is False
    assert body["blocked_slots"] == ["06:00 PM"]
    assert body["custom_shifts"] == ["10:00 AM"]
    assert [b["slot_time"] for b in body["bookings"]] == ["01:00 PM", "04:00 PM"]
    assert [s["time"] for s in body["available_slots"]] == [
        "10:00 AM",
        "02:00 PM",
        "03:00 PM",
        "05:00 PM",
        "07:00 PM",
    ]

    month = await client.get(
        "/api/v1/schedule/month", params={"year": 2030, "month": 1}, headers=headers
    )
    assert month.status_code == 200
    days = {d["date"]: d for d in month.json()["days"]}
    assert len(days) == 31
    assert days[MONDAY]["booked_count"] == 2
    assert days[MONDAY]["open_count"] == 5
    assert days[TUESDAY]["closed"] is True
    assert days[TUESDAY]["open_count"] == 0

    invalid = await client.get(
        "/api/v1/schedule/month", params={"year": 2030, "month": 13}, headers=headers
    )
    assert invalid.status_code == 422


async def test_schedule_requires_staff(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    anonymous = await client.get(f"/api/v1/schedule/days/{MONDAY}")
    assert anonymous.status_code == 401

    register = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "parent@example.com",
            "password": "ParentPass1!",
            "first_name": "Pat",
            "last_name": "Parent",
        },
    )
    headers = {"Authorization": f"Bearer {register.json()['token']['access_token']}"}
    forbidden = await client.post(
        "/api/v1/schedule/closures/toggle", json={"date": MONDAY}, headers=headers
    )
    assert forbidden.status_code == 403
