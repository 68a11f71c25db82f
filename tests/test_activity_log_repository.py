"""Integration tests for the SQLAlchemy backed activity store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from bravo_api.application.use_cases.activity import build_activity_report, log_activity
from bravo_api.domain.entities import ActivityEvent, ActivityEventKind
from bravo_api.domain.exceptions import StorageError
from bravo_api.infrastructure.models import ActivityLogModel
from bravo_api.infrastructure.repositories import ActivityLogRepository

# 2024-01-10 00:00 in Israel (UTC+2 in winter).
LOCAL_MIDNIGHT = datetime(2024, 1, 9, 22, 0, tzinfo=timezone.utc)


def _event(kind: ActivityEventKind, minutes: int, payload=None) -> ActivityEvent:
    return ActivityEvent(
        actor_id="3",
        actor_display_name="noa",
        event_kind=kind,
        business_date="2024-01-10",
        occurred_at=LOCAL_MIDNIGHT + timedelta(minutes=minutes),
        payload=payload or {},
    )


def test_insert_returns_stored_event(db_session) -> None:
    repository = ActivityLogRepository(db_session)

    before = datetime.now(tz=timezone.utc).replace(microsecond=0)
    stored = repository.insert(_event(ActivityEventKind.ORDER_CREATE, 600, {"orderNumber": "Q-1"}))
    after = datetime.now(tz=timezone.utc)

    assert stored.id is not None
    assert before <= stored.created_at <= after
    assert stored.created_at.utcoffset() == timedelta(0)
    assert stored.occurred_at == LOCAL_MIDNIGHT + timedelta(minutes=600)
    assert stored.occurred_at.tzinfo is not None
    assert db_session.query(ActivityLogModel).count() == 1


def test_list_by_business_date_orders_by_occurred_at(db_session) -> None:
    repository = ActivityLogRepository(db_session)
    repository.insert(_event(ActivityEventKind.LOGOUT, 900))
    repository.insert(_event(ActivityEventKind.LOGIN, 480))
    repository.insert(_event(ActivityEventKind.ITEM_VIEW, 500))

    events = repository.list_by_business_date("2024-01-10")

    assert [event.event_kind for event in events] == [
        ActivityEventKind.LOGIN,
        ActivityEventKind.ITEM_VIEW,
        ActivityEventKind.LOGOUT,
    ]


def test_list_by_business_date_returns_empty_list(db_session) -> None:
    repository = ActivityLogRepository(db_session)
    repository.insert(_event(ActivityEventKind.LOGIN, 480))

    assert repository.list_by_business_date("2024-01-11") == []


def test_payload_round_trips_with_key_order(db_session) -> None:
    payload = {
        "zeta": 1,
        "alpha": {"nested": [1, "two", None, True]},
        "mid": 2.5,
    }
    repository = ActivityLogRepository(db_session)
    repository.insert(_event(ActivityEventKind.COLLECTION_MARK, 540, payload))

    (stored,) = repository.list_by_business_date("2024-01-10")

    assert stored.payload == payload
    assert list(stored.payload) == ["zeta", "alpha", "mid"]


def test_read_failure_is_reported_as_storage_error(db_session, database) -> None:
    ActivityLogModel.__table__.drop(bind=database)

    with pytest.raises(StorageError) as excinfo:
        ActivityLogRepository(db_session).list_by_business_date("2024-01-10")

    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_write_failure_is_swallowed_by_log_activity(db_session, database) -> None:
    ActivityLogModel.__table__.drop(bind=database)

    result = log_activity(
        ActivityLogRepository(db_session),
        actor_id="3",
        actor_display_name="noa",
        event_kind=ActivityEventKind.LOGIN,
    )

    assert result is None


def test_report_over_database(db_session) -> None:
    repository = ActivityLogRepository(db_session)
    for kind, minutes, payload in [
        (ActivityEventKind.LOGIN, 9 * 60, None),
        (ActivityEventKind.CUSTOMER_VIEW, 9 * 60 + 15, {"customerCode": "C1"}),
        (ActivityEventKind.ITEM_VIEW, 9 * 60 + 20, {"itemCode": "I9"}),
        (ActivityEventKind.LOGOUT, 17 * 60 + 30, None),
    ]:
        log_activity(
            repository,
            actor_id="3",
            actor_display_name="noa",
            event_kind=kind,
            payload=payload,
            occurred_at=LOCAL_MIDNIGHT + timedelta(minutes=minutes),
        )

    report = build_activity_report(repository, "2024-01-10")

    assert len(report.sessions) == 1
    session = report.sessions[0]
    assert (session.login_time, session.logout_time, session.duration) == (
        "09:00",
        "17:30",
        "8:30",
    )
    assert report.customer_views == [{"time": "09:15", "customerCode": "C1"}]
    assert report.item_views == [{"time": "09:20", "itemCode": "I9"}]
