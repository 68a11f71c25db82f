"""Domain entity representing a user role."""

from dataclasses import dataclass


@dataclass
class Role:
    """Role assigned to a user; ``alias`` is one of agent, manager or admin."""

    id: int
    name: str
    alias: str


__all__ = ["Role"]
