"""
Database - Engine and Session Management

Connection settings come from the environment (.env is loaded):
- DATABASE_URL: SQLAlchemy URL (default: local SQLite file)
- TEST_MODE: "true" switches to the test database
- APP_NAME: which word list to use (default: "nouns")
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from core.store.models import Base


load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///data/vocab_trainer.db"
DEFAULT_APP_NAME = "nouns"
PROD_DB_NAME = "vocab_trainer"
TEST_DB_NAME = "test_vocab_trainer"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_app_name() -> str:
    """Get the app (word list) name used to scope stored documents."""
    return os.getenv("APP_NAME", DEFAULT_APP_NAME)


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    For test mode, replaces the production database name with the test
    database name in the URL.
    """
    url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    if not url:
        raise ValueError("DATABASE_URL is set but empty")
    if is_test_mode():
        url = url.replace(PROD_DB_NAME, TEST_DB_NAME)
    return url


@lru_cache(maxsize=None)
def _engine_for(url: str) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, echo=False)
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=False
    )


def get_engine() -> Engine:
    """
    Get the SQLAlchemy engine for the configured database.

    Engines are cached per URL so the connection pool is reused.
    """
    return _engine_for(get_database_url())


def get_session(engine: Optional[Engine] = None) -> Session:
    """Get a SQLAlchemy session bound to `engine` (default: configured engine)."""
    SessionLocal = sessionmaker(bind=engine or get_engine(), expire_on_commit=False)
    return SessionLocal()


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create tables if they don't exist.

    Safe to call multiple times.
    """
    Base.metadata.create_all(engine or get_engine())


def reset_db(engine: Optional[Engine] = None) -> None:
    """
    DANGEROUS: Delete all stored pools and recreate tables.

    All words, progress and statistics are lost!
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("All pool documents dropped (%s)", engine.url.render_as_string(hide_password=True))
    init_db(engine)
