"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from bravo_api.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a sales agent, manager or administrator."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("role.id"), nullable=False, index=True)
    name = Column(String(80), nullable=False)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    is_active = Column(Boolean, nullable=False, default=True)
    role = relationship("RoleModel", lazy="joined")


__all__ = ["UserModel"]
