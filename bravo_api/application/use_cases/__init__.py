"""Aggregate application use cases."""

from .activity import build_activity_report, log_activity, log_client_view
from .users import authenticate_user, create_user, record_login, record_logout

__all__ = [
    "authenticate_user",
    "build_activity_report",
    "create_user",
    "log_activity",
    "log_client_view",
    "record_login",
    "record_logout",
]
