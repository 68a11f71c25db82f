"""Contracts the activity use cases rely on."""

from __future__ import annotations

from typing import Any, Protocol

from bravo_api.domain.entities import ActivityEvent


class ActivityStore(Protocol):
    """Append-only log of activity events partitioned by business date."""

    def insert(self, event: ActivityEvent) -> ActivityEvent:
        """Persist ``event``; raise ``StorageError`` when it cannot be stored."""

    def list_by_business_date(self, business_date: str) -> list[ActivityEvent]:
        """Return the events of ``business_date`` ordered by ``occurred_at``."""


class ActivityLogger(Protocol):
    """Subset of :class:`logging.Logger` used to report swallowed failures."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


__all__ = ["ActivityLogger", "ActivityStore"]
