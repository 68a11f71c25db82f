"""Utility helpers for reusable functionality."""

from .datetime import (
    business_date_for,
    ensure_app_timezone,
    ensure_utc,
    ensure_utc_naive_datetime,
    format_duration,
    format_time_of_day,
    get_app_timezone,
    is_business_date,
    now_in_app_timezone,
    now_utc,
    today_business_date,
)

__all__ = [
    "business_date_for",
    "ensure_app_timezone",
    "ensure_utc",
    "ensure_utc_naive_datetime",
    "format_duration",
    "format_time_of_day",
    "get_app_timezone",
    "is_business_date",
    "now_in_app_timezone",
    "now_utc",
    "today_business_date",
]
