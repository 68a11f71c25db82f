"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


from .role import Role

ROLE_AGENT = "agent"
ROLE_MANAGER = "manager"
ROLE_ADMIN = "admin"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    username: str
    email: str
    password: str
    last_login: datetime | None
    created_at: datetime | None
    is_active: bool

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def has_any_role(self, *aliases: str) -> bool:
        return any(self.has_role(alias) for alias in aliases)


__all__ = ["ROLE_ADMIN", "ROLE_AGENT", "ROLE_MANAGER", "User"]
