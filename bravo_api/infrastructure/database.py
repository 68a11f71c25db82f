"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bravo_api.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database URL."""

    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        # FastAPI serves sync endpoints from a threadpool.
        connect_args["check_same_thread"] = False

    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = _build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from bravo_api.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.debug("Database schema ensured for %s", engine.url.render_as_string())


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
