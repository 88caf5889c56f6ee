"""
Pool Store

SQLAlchemy-backed storage for the active pool, the archived pool and the
metadata document of each app. Every operation accepts an optional
`engine`; without one the engine from DATABASE_URL is used.
"""

from core.store.database import (
    get_app_name,
    get_database_url,
    get_engine,
    get_session,
    init_db,
    is_test_mode,
    reset_db,
)
from core.store.repository import (
    ACTIVE,
    ARCHIVED,
    METADATA,
    PersistenceError,
    add_words,
    export_app,
    init_app,
    load_active,
    load_archived,
    load_metadata,
    run_archive_process,
    save_metadata,
    save_pools,
    unarchive_word,
)


__all__ = [
    # Database
    "get_app_name",
    "get_database_url",
    "get_engine",
    "get_session",
    "init_db",
    "is_test_mode",
    "reset_db",

    # Documents
    "ACTIVE",
    "ARCHIVED",
    "METADATA",
    "PersistenceError",
    "add_words",
    "export_app",
    "init_app",
    "load_active",
    "load_archived",
    "load_metadata",
    "run_archive_process",
    "save_metadata",
    "save_pools",
    "unarchive_word",
]
