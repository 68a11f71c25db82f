"""Persistence layer for the append-only activity log."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bravo_api.domain.entities import ActivityEvent, ActivityEventKind
from bravo_api.domain.exceptions import StorageError
from bravo_api.infrastructure.models import ActivityLogModel
from bravo_api.utils import ensure_utc, ensure_utc_naive_datetime, now_utc


class ActivityLogRepository:
    """Append and scan :class:`ActivityEvent` records.

    Stored events are never updated or deleted through this repository.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert(self, event: ActivityEvent) -> ActivityEvent:
        """Persist ``event`` and return it with its store assigned fields."""

        model = ActivityLogModel()
        self._apply_entity_to_model(model, event)
        try:
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError("Could not store activity event") from exc
        return self._to_entity(model)

    def list_by_business_date(self, business_date: str) -> list[ActivityEvent]:
        """Return the events of ``business_date`` ordered by ``occurred_at``.

        An empty list is returned when nothing was recorded on that date.
        """

        try:
            models: Iterable[ActivityLogModel] = (
                self.session.query(ActivityLogModel)
                .filter(ActivityLogModel.business_date == business_date)
                .order_by(ActivityLogModel.occurred_at, ActivityLogModel.id)
                .all()
            )
            return [self._to_entity(model) for model in models]
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Could not read activity events for {business_date}"
            ) from exc

    @staticmethod
    def _to_entity(model: ActivityLogModel) -> ActivityEvent:
        return ActivityEvent(
            id=model.id,
            actor_id=model.actor_id,
            actor_display_name=model.actor_display_name,
            event_kind=ActivityEventKind(model.event_kind),
            payload=dict(model.payload) if model.payload is not None else {},
            business_date=model.business_date,
            occurred_at=ensure_utc(model.occurred_at),
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: ActivityLogModel, event: ActivityEvent) -> None:
        model.actor_id = event.actor_id
        model.actor_display_name = event.actor_display_name
        model.event_kind = ActivityEventKind(event.event_kind).value
        model.payload = dict(event.payload)
        model.business_date = event.business_date
        model.occurred_at = ensure_utc_naive_datetime(event.occurred_at)
        model.created_at = ensure_utc_naive_datetime(event.created_at or now_utc())


__all__ = ["ActivityLogRepository"]
