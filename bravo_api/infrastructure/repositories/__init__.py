"""Repository implementations for infrastructure layer."""

from .activity_log_repository import ActivityLogRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityLogRepository",
    "RoleRepository",
    "UserRepository",
]
