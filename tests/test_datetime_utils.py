"""Tests for the reference-timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from bravo_api.config import reset_settings_cache
from bravo_api.utils import (
    business_date_for,
    format_duration,
    format_time_of_day,
    is_business_date,
)


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("last_second_of_day", "expected_before", "expected_after"),
    [
        # Winter, UTC+2.
        (_utc(2024, 1, 15, 21, 59, 59), "2024-01-15", "2024-01-16"),
        # Midnight right before the spring-forward transition (2024-03-29 02:00).
        (_utc(2024, 3, 28, 21, 59, 59), "2024-03-28", "2024-03-29"),
        # First midnight after the spring-forward transition, UTC+3.
        (_utc(2024, 3, 29, 20, 59, 59), "2024-03-29", "2024-03-30"),
        # Midnight before the fall-back transition (2024-10-27 02:00), still UTC+3.
        (_utc(2024, 10, 26, 20, 59, 59), "2024-10-26", "2024-10-27"),
        # First midnight after the fall-back transition, UTC+2 again.
        (_utc(2024, 10, 27, 21, 59, 59), "2024-10-27", "2024-10-28"),
    ],
)
def test_business_date_rolls_over_at_local_midnight(
    last_second_of_day: datetime, expected_before: str, expected_after: str
) -> None:
    assert business_date_for(last_second_of_day) == expected_before
    assert business_date_for(last_second_of_day + timedelta(seconds=1)) == expected_after


def test_business_date_differs_from_utc_date_after_utc_midnight_offset() -> None:
    instant = _utc(2024, 7, 1, 22, 30)

    assert instant.date().isoformat() == "2024-07-01"
    assert business_date_for(instant) == "2024-07-02"


def test_business_date_treats_naive_values_as_utc() -> None:
    assert business_date_for(datetime(2024, 7, 1, 21, 0)) == "2024-07-02"


def test_format_time_of_day_uses_local_24_hour_clock() -> None:
    assert format_time_of_day(_utc(2024, 7, 1, 6, 0)) == "09:00"
    assert format_time_of_day(_utc(2024, 1, 1, 12, 5)) == "14:05"


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(minutes=90), "1:30"),
        (timedelta(hours=8, minutes=30), "8:30"),
        (timedelta(seconds=59), "0:00"),
        (timedelta(minutes=5), "0:05"),
        (timedelta(hours=25, minutes=5, seconds=59), "25:05"),
        (timedelta(hours=-1), "-1:00"),
        (timedelta(minutes=-30), "-1:-30"),
        (timedelta(seconds=-59), "-1:-1"),
        (timedelta(hours=-2, minutes=-15), "-3:-15"),
    ],
)
def test_format_duration(delta: timedelta, expected: str) -> None:
    assert format_duration(delta) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-07-01", True),
        ("2024-02-30", False),
        ("2024-7-1", False),
        ("01/07/2024", False),
        ("", False),
    ],
)
def test_is_business_date(value: str, expected: bool) -> None:
    assert is_business_date(value) is expected


def test_resetting_settings_cache_switches_reference_timezone(monkeypatch) -> None:
    instant = _utc(2024, 7, 1, 22, 30)
    monkeypatch.setenv("APP_TIMEZONE", "UTC")
    reset_settings_cache()
    try:
        assert business_date_for(instant) == "2024-07-01"
    finally:
        monkeypatch.undo()
        reset_settings_cache()

    assert business_date_for(instant) == "2024-07-02"
