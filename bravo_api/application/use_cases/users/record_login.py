"""Use cases registering the start and end of a user's work session."""

from sqlalchemy.orm import Session

from bravo_api.application.use_cases.activity import log_activity
from bravo_api.domain.entities import ActivityEventKind, User
from bravo_api.infrastructure.repositories import ActivityLogRepository, UserRepository
from bravo_api.utils import ensure_utc_naive_datetime, now_utc


def record_login(session: Session, user: User) -> None:
    """Persist the last login timestamp and log a ``login`` activity event."""

    now = now_utc()
    repository = UserRepository(session)
    user.last_login = ensure_utc_naive_datetime(now)
    repository.update(user)

    log_activity(
        ActivityLogRepository(session),
        actor_id=user.id,
        actor_display_name=user.username,
        event_kind=ActivityEventKind.LOGIN,
        occurred_at=now,
    )


def record_logout(session: Session, user: User) -> None:
    """Log a ``logout`` activity event for ``user``."""

    log_activity(
        ActivityLogRepository(session),
        actor_id=user.id,
        actor_display_name=user.username,
        event_kind=ActivityEventKind.LOGOUT,
    )


__all__ = ["record_login", "record_logout"]
