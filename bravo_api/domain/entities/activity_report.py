"""Derived values produced by the daily activity report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ActivitySession:
    """Login/logout interval rebuilt from the activity log.

    Sessions are never stored; ``logout_time`` and ``duration`` are ``None``
    while no logout has been paired with the login.
    """

    login_time: str
    logout_time: str | None = None
    duration: str | None = None


@dataclass
class ActivityReport:
    """Activity of a single business date grouped by event kind."""

    date: str
    sessions: list[ActivitySession] = field(default_factory=list)
    collections: list[dict[str, Any]] = field(default_factory=list)
    inventory_sold: list[dict[str, Any]] = field(default_factory=list)
    orders: list[dict[str, Any]] = field(default_factory=list)
    customer_views: list[dict[str, Any]] = field(default_factory=list)
    item_views: list[dict[str, Any]] = field(default_factory=list)
    visit_summaries: list[dict[str, Any]] = field(default_factory=list)


__all__ = ["ActivityReport", "ActivitySession"]
