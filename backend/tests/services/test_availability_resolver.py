"""Tests for the pure slot resolver and the time label helpers."""

from __future__ import annotations

import copy
from decimal import Decimal

import pytest

from trainlikepros.core.scheduling import (
    ScheduleTemplate,
    minutes_to_label,
    normalize_time_label,
    time_to_minutes,
)
from trainlikepros.models.booking import LessonCategory, LessonType
from trainlikepros.services.availability_service import (
    AvailabilitySnapshot,
    AvailableSlot,
    resolve_available_slots,
)

SATURDAY = "2024-06-08"
SUNDAY = "2024-06-09"
MONDAY = "2024-06-10"

WEEKEND_TIMES = [
    "01:00 PM",
    "02:00 PM",
    "03:00 PM",
    "04:00 PM",
    "05:00 PM",
    "06:00 PM",
    "07:00 PM",
    "08:00 PM",
]
WEEKDAY_TIMES = [
    "01:00 PM",
    "02:00 PM",
    "03:00 PM",
    "04:00 PM",
    "05:00 PM",
    "06:00 PM",
    "07:00 PM",
]


def _times(slots: list[AvailableSlot]) -> list[str]:
    return [slot.time for slot in slots]


def test_weekend_returns_private_template() -> None:
    slots = resolve_available_slots(SATURDAY)

    assert _times(slots) == WEEKEND_TIMES
    assert {slot.category for slot in slots} == {LessonCategory.PRIVATE}
    assert {slot.price for slot in slots} == {Decimal("50")}
    assert _times(resolve_available_slots(SUNDAY)) == WEEKEND_TIMES


def test_weekday_excludes_booked_time() -> None:
    slots = resolve_available_slots(MONDAY, bookings={MONDAY: {"02:00 PM"}})

    assert _times(slots) == [t for t in WEEKDAY_TIMES if t != "02:00 PM"]
    by_time = {slot.time: slot for slot in slots}
    assert by_time["01:00 PM"].category is LessonCategory.PRIVATE
    assert by_time["01:00 PM"].price == Decimal("50")
    assert by_time["05:00 PM"].category is LessonCategory.GROUP
    assert by_time["05:00 PM"].price == Decimal("60")


def test_closed_day_returns_nothing() -> None:
    assert resolve_available_slots(MONDAY, day_closures={MONDAY}) == []


def test_closure_wins_over_shifts_and_bookings() -> None:
    slots = resolve_available_slots(
        MONDAY,
        day_closures=[MONDAY],
        custom_shifts={MONDAY: {"09:00 AM"}},
        bookings={MONDAY: {"01:00 PM"}},
    )
    assert slots == []


def test_early_custom_shift_sorts_first() -> None:
    slots = resolve_available_slots(MONDAY, custom_shifts={MONDAY: {"07:00 AM"}})

    assert _times(slots) == ["07:00 AM", *WEEKDAY_TIMES]
    assert slots[0] == AvailableSlot("07:00 AM", LessonCategory.PRIVATE, Decimal("50"))


def test_custom_shift_on_template_time_is_dropped() -> None:
    slots = resolve_available_slots(MONDAY, custom_shifts={MONDAY: {"01:00 PM"}})

    assert _times(slots).count("01:00 PM") == 1
    assert _times(slots) == WEEKDAY_TIMES


def test_empty_date_returns_nothing() -> None:
    assert resolve_available_slots("") == []
    assert resolve_available_slots(None) == []


def test_malformed_date_returns_nothing() -> None:
    assert resolve_available_slots("not-a-date") == []
    assert resolve_available_slots("2024-13-40") == []


def test_block_wins_over_custom_shift() -> None:
    slots = resolve_available_slots(
        MONDAY,
        custom_shifts={MONDAY: {"08:00 PM"}},
        slot_blocks={MONDAY: {"08:00 PM", "03:00 PM"}},
    )
    assert "08:00 PM" not in _times(slots)
    assert "03:00 PM" not in _times(slots)


def test_booked_time_removed_for_every_category() -> None:
    slots = resolve_available_slots(
        MONDAY,
        custom_shifts={MONDAY: {"09:00 AM"}},
        bookings={MONDAY: {"09:00 AM", "06:00 PM"}},
    )
    assert "09:00 AM" not in _times(slots)
    assert "06:00 PM" not in _times(slots)


def test_overrides_for_other_dates_are_ignored() -> None:
    slots = resolve_available_slots(
        MONDAY,
        day_closures={SATURDAY},
        slot_blocks={SATURDAY: {"01:00 PM"}},
        bookings={SUNDAY: {"02:00 PM"}},
    )
    assert _times(slots) == WEEKDAY_TIMES


def test_result_is_unique_and_strictly_ascending() -> None:
    slots = resolve_available_slots(
        SATURDAY,
        custom_shifts={SATURDAY: {"09:30 PM", "12:00 PM", "12:00 AM", "01:00 PM"}},
        slot_blocks={SATURDAY: {"05:00 PM"}},
    )
    minutes = [slot.minutes for slot in slots]
    assert len(set(_times(slots))) == len(slots)
    assert minutes == sorted(minutes)
    assert len(set(minutes)) == len(minutes)
    assert _times(slots)[:2] == ["12:00 AM", "12:00 PM"]
    assert _times(slots)[-1] == "09:30 PM"


def test_resolver_is_pure_and_repeatable() -> None:
    closures = {"2024-06-01"}
    blocks = {MONDAY: {"03:00 PM"}}
    shifts = {MONDAY: {"09:00 AM", "01:00 PM"}}
    bookings = {MONDAY: {"05:00 PM"}}
    before = copy.deepcopy((closures, blocks, shifts, bookings))

    first = resolve_available_slots(
        MONDAY,
        day_closures=closures,
        slot_blocks=blocks,
        custom_shifts=shifts,
        bookings=bookings,
    )
    second = resolve_available_slots(
        MONDAY,
        day_closures=closures,
        slot_blocks=blocks,
        custom_shifts=shifts,
        bookings=bookings,
    )

    assert first == second
    assert (closures, blocks, shifts, bookings) == before


def test_small_group_context_on_weekday() -> None:
    slots = resolve_available_slots(MONDAY, lesson_type=LessonType.SMALL_GROUP)

    assert _times(slots) == ["05:00 PM", "06:00 PM", "07:00 PM"]
    assert {slot.category for slot in slots} == {LessonCategory.GROUP}
    assert {slot.price for slot in slots} == {Decimal("60")}


def test_small_group_context_on_weekend_and_custom_shift() -> None:
    slots = resolve_available_slots(
        SATURDAY,
        custom_shifts={SATURDAY: {"09:00 AM"}},
        lesson_type=LessonType.SMALL_GROUP,
    )

    assert _times(slots) == ["09:00 AM", "10:00 AM", "11:00 AM"]
    assert slots[0] == AvailableSlot("09:00 AM", LessonCategory.PRIVATE, Decimal("50"))
    assert slots[1] == AvailableSlot("10:00 AM", LessonCategory.GROUP, Decimal("60"))


def test_custom_shift_labels_are_normalized_before_merging() -> None:
    slots = resolve_available_slots(
        MONDAY, custom_shifts={MONDAY: {"1:00 PM", "9:00 am", "not a time"}}
    )

    assert _times(slots) == ["09:00 AM", *WEEKDAY_TIMES]
    assert len({slot.minutes for slot in slots}) == len(slots)

def test_private_lesson_context_uses_standard_template() -> None:
    assert _times(
        resolve_available_slots(MONDAY, lesson_type=LessonType.PITCHING)
    ) == WEEKDAY_TIMES


def test_template_prices_are_configurable() -> None:
    template = ScheduleTemplate(private_price=Decimal("75"), group_price=Decimal("40"))
    slots = resolve_available_slots(
        MONDAY, custom_shifts={MONDAY: {"09:00 AM"}}, template=template
    )
    by_time = {slot.time: slot.price for slot in slots}
    assert by_time["09:00 AM"] == Decimal("75")
    assert by_time["01:00 PM"] == Decimal("75")
    assert by_time["07:00 PM"] == Decimal("40")


def test_snapshot_delegates_to_resolver() -> None:
    snapshot = AvailabilitySnapshot(
        day_closures=frozenset({SUNDAY}),
        slot_blocks={MONDAY: frozenset({"01:00 PM"})},
        bookings={MONDAY: frozenset({"02:00 PM"})},
    )
    assert snapshot.resolve(SUNDAY) == []
    assert snapshot.is_closed(SUNDAY)
    assert snapshot.blocked_times(MONDAY) == {"01:00 PM"}
    assert snapshot.booked_times(SATURDAY) == frozenset()
    assert _times(snapshot.resolve(MONDAY)) == WEEKDAY_TIMES[2:]


@pytest.mark.parametrize(
    ("label", "minutes"),
    [
        ("12:00 AM", 0),
        ("12:00 PM", 720),
        ("01:00 PM", 780),
        ("9:30 am", 570),
        ("11:59 PM", 1439),
    ],
)
def test_time_to_minutes(label: str, minutes: int) -> None:
    assert time_to_minutes(label) == minutes


@pytest.mark.parametrize("label", ["", "13:00 PM", "1 PM", "10:60 AM", "noon"])
def test_time_to_minutes_rejects_bad_labels(label: str) -> None:
    with pytest.raises(ValueError):
        time_to_minutes(label)


def test_labels_normalize_to_padded_form() -> None:
    assert normalize_time_label("1:00 pm") == "01:00 PM"
    assert normalize_time_label(" 12:15 am ") == "12:15 AM"
    assert minutes_to_label(0) == "12:00 AM"
    assert minutes_to_label(720) == "12:00 PM"
