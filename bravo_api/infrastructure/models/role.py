"""SQLAlchemy model for user roles."""

from sqlalchemy import Column, Integer, String

from bravo_api.infrastructure.database import Base


class RoleModel(Base):
    """Database representation of the roles a user can hold."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True)
    alias = Column(String(20), nullable=False, unique=True)


__all__ = ["RoleModel"]
