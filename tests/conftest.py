"""Shared test configuration.

The settings are read when the application modules are first imported, so
the environment must be prepared before any ``bravo_api`` import happens.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "bravo_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "Asia/Jerusalem"

from bravo_api.config import get_settings  # noqa: E402

get_settings.cache_clear()


@pytest.fixture()
def database():
    """Give each test an empty schema in the SQLite test database."""

    from bravo_api.infrastructure.database import Base, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(database):
    from bravo_api.infrastructure.database import SessionLocal

    with SessionLocal() as session:
        yield session
