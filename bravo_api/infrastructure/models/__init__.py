"""ORM models used by the application infrastructure."""

from .activity_log import ActivityLogModel
from .role import RoleModel
from .user import UserModel

__all__ = [
    "ActivityLogModel",
    "RoleModel",
    "UserModel",
]
