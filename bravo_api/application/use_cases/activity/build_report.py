"""Use case building the daily activity report."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from bravo_api.domain.entities import (
    ActivityEvent,
    ActivityEventKind,
    ActivityReport,
    ActivitySession,
)
from bravo_api.utils import format_duration, format_time_of_day

from .store import ActivityStore

# Report attribute receiving the rows of each non-session event kind.
_REPORT_BUCKETS: dict[ActivityEventKind, str] = {
    ActivityEventKind.COLLECTION_MARK: "collections",
    ActivityEventKind.INVENTORY_SOLD: "inventory_sold",
    ActivityEventKind.ORDER_CREATE: "orders",
    ActivityEventKind.CUSTOMER_VIEW: "customer_views",
    ActivityEventKind.ITEM_VIEW: "item_views",
    ActivityEventKind.CUSTOMER_VISIT_SUMMARY: "visit_summaries",
}


def _to_report_row(event: ActivityEvent) -> dict[str, Any]:
    """Merge the payload with the local time of the event.

    A ``time`` key coming from the payload is replaced by the computed value.
    """

    row: dict[str, Any] = {"time": format_time_of_day(event.occurred_at)}
    row.update((key, value) for key, value in event.payload.items() if key != "time")
    return row


def pair_sessions(
    login_times: list[datetime], logout_times: list[datetime]
) -> list[ActivitySession]:
    """Pair the i-th login with the i-th logout.

    Pairing is positional and ignores which user produced each event: extra
    logins stay open and extra logouts are dropped. Interleaved sessions of
    different users on the same date are therefore misattributed.
    """

    sessions: list[ActivitySession] = []
    for index, login_at in enumerate(login_times):
        logout_at = logout_times[index] if index < len(logout_times) else None
        if logout_at is None:
            sessions.append(ActivitySession(login_time=format_time_of_day(login_at)))
            continue
        sessions.append(
            ActivitySession(
                login_time=format_time_of_day(login_at),
                logout_time=format_time_of_day(logout_at),
                duration=format_duration(logout_at - login_at),
            )
        )
    return sessions


def build_activity_report(store: ActivityStore, business_date: str) -> ActivityReport:
    """Return the activity report of ``business_date``.

    The events are read once; a ``StorageError`` from ``store`` propagates and
    no partial report is produced.
    """

    events = store.list_by_business_date(business_date)

    report = ActivityReport(date=business_date)
    login_times: list[datetime] = []
    logout_times: list[datetime] = []

    for event in events:
        if event.event_kind is ActivityEventKind.LOGIN:
            login_times.append(event.occurred_at)
        elif event.event_kind is ActivityEventKind.LOGOUT:
            logout_times.append(event.occurred_at)
        else:
            getattr(report, _REPORT_BUCKETS[event.event_kind]).append(
                _to_report_row(event)
            )

    report.sessions = pair_sessions(login_times, logout_times)
    return report


__all__ = ["build_activity_report", "pair_sessions"]
