"""Domain entity describing a tracked user action."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Union

JSONValue = Union[
    str, int, float, bool, None, list["JSONValue"], dict[str, "JSONValue"]
]
"""JSON compatible value stored inside an activity payload."""


class ActivityEventKind(str, Enum):
    """Closed set of actions recorded in the activity log."""

    LOGIN = "login"
    LOGOUT = "logout"
    COLLECTION_MARK = "collection_mark"
    INVENTORY_SOLD = "inventory_sold"
    ORDER_CREATE = "order_create"
    CUSTOMER_VIEW = "customer_view"
    ITEM_VIEW = "item_view"
    # Bucketed by the daily report; no endpoint produces it yet.
    CUSTOMER_VISIT_SUMMARY = "customer_visit_summary"


CLIENT_SUBMITTABLE_KINDS: frozenset[ActivityEventKind] = frozenset(
    {ActivityEventKind.CUSTOMER_VIEW, ActivityEventKind.ITEM_VIEW}
)


@dataclass(frozen=True)
class ActivityEvent:
    """A single immutable entry of the activity log.

    ``business_date`` is derived from ``occurred_at`` in the reference timezone
    when the event is written and is never recomputed afterwards.
    """

    actor_id: str
    actor_display_name: str
    event_kind: ActivityEventKind
    business_date: str
    occurred_at: datetime
    payload: dict[str, JSONValue] = field(default_factory=dict)
    id: int | None = None
    created_at: datetime | None = None


__all__ = [
    "ActivityEvent",
    "ActivityEventKind",
    "CLIENT_SUBMITTABLE_KINDS",
    "JSONValue",
]
