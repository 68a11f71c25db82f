"""Use cases for tracking and reporting user activity."""

from .build_report import build_activity_report, pair_sessions
from .log_activity import log_activity, log_client_view
from .store import ActivityLogger, ActivityStore

__all__ = [
    "ActivityLogger",
    "ActivityStore",
    "build_activity_report",
    "log_activity",
    "log_client_view",
    "pair_sessions",
]
