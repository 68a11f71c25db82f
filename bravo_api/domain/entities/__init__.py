"""Domain entities exposed by the application."""

from .activity_event import (
    CLIENT_SUBMITTABLE_KINDS,
    ActivityEvent,
    ActivityEventKind,
    JSONValue,
)
from .activity_report import ActivityReport, ActivitySession
from .role import Role
from .user import ROLE_ADMIN, ROLE_AGENT, ROLE_MANAGER, User

__all__ = [
    "ActivityEvent",
    "ActivityEventKind",
    "ActivityReport",
    "ActivitySession",
    "CLIENT_SUBMITTABLE_KINDS",
    "JSONValue",
    "ROLE_ADMIN",
    "ROLE_AGENT",
    "ROLE_MANAGER",
    "Role",
    "User",
]
