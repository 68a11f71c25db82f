"""SQLAlchemy model for the append-only activity log."""

from sqlalchemy import Column, DateTime, Index, Integer, String
from sqlalchemy.types import JSON

from bravo_api.infrastructure.database import Base


class ActivityLogModel(Base):
    """Database representation of a tracked user action.

    ``occurred_at`` and ``created_at`` hold naive UTC values; ``business_date`` is the
    ``YYYY-MM-DD`` partition key computed in the reference timezone.
    """

    __tablename__ = "activity_log"
    __table_args__ = (
        Index("ix_activity_log_actor_business_date", "actor_id", "business_date"),
        Index("ix_activity_log_business_date_occurred_at", "business_date", "occurred_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    actor_id = Column(String(64), nullable=False)
    actor_display_name = Column(String(120), nullable=False)
    event_kind = Column(String(40), nullable=False)
    # Plain JSON keeps payload key order; JSONB would not.
    payload = Column(JSON, nullable=False, default=dict)
    business_date = Column(String(10), nullable=False)
    occurred_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False)


__all__ = ["ActivityLogModel"]
