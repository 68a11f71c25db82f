"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bravo_api.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "Asia/Jerusalem"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)
_MS_PER_HOUR: Final[int] = 3_600_000
_MS_PER_MINUTE: Final[int] = 60_000
_BUSINESS_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def get_app_timezone() -> tzinfo:
    """Return the configured reference timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable (via
    the ``Settings`` model). If the provided value cannot be resolved, the
    default ``Asia/Jerusalem`` timezone is used as a fallback. Only the
    settings are cached, so ``reset_settings_cache`` also resets the timezone.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(tz_name)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in the configured timezone.

    Naive values are interpreted as UTC, which is how instants are stored.
    """

    if value is None:
        return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(get_app_timezone())


def ensure_utc_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC without attaching ``tzinfo``.

    SQLite drops offsets from ``DATETIME`` columns, so instants are persisted as
    naive UTC and re-attached to ``timezone.utc`` when read back.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive values and convert aware ones to UTC."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def business_date_for(instant: datetime) -> str:
    """Return the ``YYYY-MM-DD`` calendar date of ``instant`` in the app timezone."""

    localized = ensure_app_timezone(instant)
    return localized.date().isoformat()


def today_business_date() -> str:
    return now_in_app_timezone().date().isoformat()


def is_business_date(value: str) -> bool:
    """Return ``True`` when ``value`` is a valid ``YYYY-MM-DD`` calendar date."""

    if not _BUSINESS_DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def format_time_of_day(instant: datetime) -> str:
    """Render ``instant`` as a 24 hour ``HH:MM`` string in the app timezone."""

    return ensure_app_timezone(instant).strftime("%H:%M")


def format_duration(delta: timedelta) -> str:
    """Render ``delta`` as ``H:MM``.

    Hours are floored and never roll over into days. Minutes are the floored
    remainder, which keeps the sign of ``delta``: a logout paired before its
    login renders ``-1:-30`` for minus thirty minutes.
    """

    total_ms = delta // timedelta(milliseconds=1)
    hours = math.floor(total_ms / _MS_PER_HOUR)
    minutes = math.floor(math.fmod(total_ms, _MS_PER_HOUR) / _MS_PER_MINUTE)
    return f"{hours}:{minutes:02d}"


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return ZoneInfo(_DEFAULT_TIMEZONE)
