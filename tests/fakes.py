"""In-memory stand-ins for the activity store and logger."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from bravo_api.domain.entities import ActivityEvent
from bravo_api.domain.exceptions import StorageError


class InMemoryActivityStore:
    """Append-only list ordered the way the database orders it."""

    def __init__(self) -> None:
        self.events: list[ActivityEvent] = []
        self.reads = 0

    def insert(self, event: ActivityEvent) -> ActivityEvent:
        stored = replace(
            event,
            id=len(self.events) + 1,
            created_at=datetime.now(tz=timezone.utc),
        )
        self.events.append(stored)
        return stored

    def list_by_business_date(self, business_date: str) -> list[ActivityEvent]:
        self.reads += 1
        matching = [e for e in self.events if e.business_date == business_date]
        return sorted(matching, key=lambda e: (e.occurred_at, e.id))


class FailingActivityStore:
    """Store whose every read and write fails."""

    def __init__(self) -> None:
        self.insert_attempts = 0

    def insert(self, event: ActivityEvent) -> ActivityEvent:
        self.insert_attempts += 1
        raise StorageError("disk full")

    def list_by_business_date(self, business_date: str) -> list[ActivityEvent]:
        raise StorageError("connection lost")


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, msg: str, *args) -> None:
        self.records.append((level, msg % args if args else msg))

    def info(self, msg, *args, **kwargs) -> None:
        self._record("info", msg, *args)

    def warning(self, msg, *args, **kwargs) -> None:
        self._record("warning", msg, *args)

    def error(self, msg, *args, **kwargs) -> None:
        self._record("error", msg, *args)
