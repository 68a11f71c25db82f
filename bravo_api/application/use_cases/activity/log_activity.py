"""Use cases for recording user activity."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime

from bravo_api.domain.entities import (
    CLIENT_SUBMITTABLE_KINDS,
    ActivityEvent,
    ActivityEventKind,
    JSONValue,
)
from bravo_api.domain.exceptions import StorageError, ValidationError
from bravo_api.utils import business_date_for, ensure_utc, now_utc

from .store import ActivityLogger, ActivityStore

_module_logger = logging.getLogger(__name__)


def _coerce_event_kind(event_kind: ActivityEventKind | str) -> ActivityEventKind:
    try:
        return ActivityEventKind(event_kind)
    except ValueError as exc:
        raise ValidationError(f"Unknown activity event kind: {event_kind!r}") from exc


def log_activity(
    store: ActivityStore,
    *,
    actor_id: str | int,
    actor_display_name: str,
    event_kind: ActivityEventKind | str,
    payload: Mapping[str, JSONValue] | None = None,
    occurred_at: datetime | None = None,
    logger: ActivityLogger | None = None,
) -> ActivityEvent | None:
    """Append an activity event without ever failing the calling action.

    The business date is computed once, here, from ``occurred_at`` (or the
    current instant). A ``StorageError`` raised by ``store`` is logged through
    ``logger`` and swallowed, in which case ``None`` is returned. An unknown
    ``event_kind`` raises :class:`ValidationError` before anything is written.
    """

    kind = _coerce_event_kind(event_kind)
    instant = ensure_utc(occurred_at) if occurred_at is not None else now_utc()
    event = ActivityEvent(
        actor_id=str(actor_id),
        actor_display_name=actor_display_name,
        event_kind=kind,
        payload=dict(payload or {}),
        business_date=business_date_for(instant),
        occurred_at=instant,
    )

    log = logger or _module_logger
    try:
        return store.insert(event)
    except StorageError as exc:
        log.error(
            "Failed to log activity %s for user %s: %s",
            kind.value,
            event.actor_id,
            exc,
        )
        return None


def log_client_view(
    store: ActivityStore,
    *,
    actor_id: str | int,
    actor_display_name: str,
    event_kind: str,
    payload: Mapping[str, JSONValue] | None = None,
    logger: ActivityLogger | None = None,
) -> ActivityEvent | None:
    """Record a view event reported by the browser client.

    Only customer and item views may be submitted this way; the other kinds
    are produced by the server itself.
    """

    try:
        kind = ActivityEventKind(event_kind)
    except ValueError:
        kind = None
    if kind not in CLIENT_SUBMITTABLE_KINDS:
        raise ValidationError("Invalid event type")

    return log_activity(
        store,
        actor_id=actor_id,
        actor_display_name=actor_display_name,
        event_kind=kind,
        payload=payload,
        logger=logger,
    )


__all__ = ["log_activity", "log_client_view"]
