"""
Pool Repository - Whole-Document Reads and Writes

Every read loads an entire pool; every write replaces it. Writes that
touch several documents (saving both pools, archiving, unarchiving) run
in a single transaction, so a failure leaves the previously stored
state untouched and is raised as PersistenceError.

This module handles ONLY storage. Selection, progress and archiving
rules live in core.learning.
"""

from __future__ import annotations

import datetime as dt
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.learning import archive, dates
from core.schemas import (
    POOL_VERSION,
    ActiveWord,
    ArchivedWord,
    Metadata,
    to_document,
)
from core.store.database import get_session
from core.store.models import PoolDocument


logger = logging.getLogger(__name__)

ACTIVE = "active"
ARCHIVED = "archived"
METADATA = "metadata"


class PersistenceError(RuntimeError):
    """A read or write against the store failed; nothing was committed."""


# ---- Transactions ----

@contextmanager
def _transaction(engine: Optional[Engine] = None) -> Iterator[Session]:
    session = get_session(engine)
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError(f"Store operation failed: {exc}") from exc
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


# ---- Document helpers ----

def _empty_pool_payload() -> dict:
    return {"version": POOL_VERSION, "lastUpdated": _now().isoformat(), "words": []}


def _pool_payload(words: Sequence) -> dict:
    return {
        "version": POOL_VERSION,
        "lastUpdated": _now().isoformat(),
        "words": [to_document(word) for word in words],
    }


def _write_document(session: Session, app_name: str, document: str, payload: dict) -> None:
    row = session.get(PoolDocument, (app_name, document))
    if row is None:
        row = PoolDocument(app_name=app_name, document=document)
        session.add(row)
    row.version = payload.get("version", POOL_VERSION)
    row.payload = payload
    row.last_updated = _now()
    session.flush()


def _default_metadata(today: dt.date) -> Metadata:
    metadata = Metadata()
    metadata.stats.start_date = today
    metadata.last_archive_check = _now()
    return metadata


def _ensure_documents(session: Session, app_name: str) -> None:
    """Create any missing document for the app with default content."""
    if session.get(PoolDocument, (app_name, ACTIVE)) is None:
        _write_document(session, app_name, ACTIVE, _empty_pool_payload())
    if session.get(PoolDocument, (app_name, ARCHIVED)) is None:
        _write_document(session, app_name, ARCHIVED, _empty_pool_payload())
    if session.get(PoolDocument, (app_name, METADATA)) is None:
        _write_document(session, app_name, METADATA, to_document(_default_metadata(dates.today())))


def _read_payload(session: Session, app_name: str, document: str) -> dict:
    _ensure_documents(session, app_name)
    return session.get(PoolDocument, (app_name, document)).payload


def _read_active(session: Session, app_name: str) -> list[ActiveWord]:
    payload = _read_payload(session, app_name, ACTIVE)
    return [ActiveWord.model_validate(word) for word in payload.get("words", [])]


def _read_archived(session: Session, app_name: str) -> list[ArchivedWord]:
    payload = _read_payload(session, app_name, ARCHIVED)
    return [ArchivedWord.model_validate(word) for word in payload.get("words", [])]


def _read_metadata(session: Session, app_name: str) -> Metadata:
    return Metadata.model_validate(_read_payload(session, app_name, METADATA))


# ---- Public API ----

def init_app(app_name: str, engine: Optional[Engine] = None) -> None:
    """Create the app's documents if they don't exist yet."""
    with _transaction(engine) as session:
        _ensure_documents(session, app_name)


def load_active(app_name: str, engine: Optional[Engine] = None) -> list[ActiveWord]:
    """Load the whole active pool."""
    with _transaction(engine) as session:
        return _read_active(session, app_name)


def load_archived(app_name: str, engine: Optional[Engine] = None) -> list[ArchivedWord]:
    """Load the whole archived pool."""
    with _transaction(engine) as session:
        return _read_archived(session, app_name)


def load_metadata(app_name: str, engine: Optional[Engine] = None) -> Metadata:
    """Load settings and statistics."""
    with _transaction(engine) as session:
        return _read_metadata(session, app_name)


def save_pools(
    app_name: str,
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord],
    engine: Optional[Engine] = None
) -> None:
    """
    Replace both pools in one transaction.

    Raises:
        PersistenceError: if the write fails (nothing is committed)
    """
    with _transaction(engine) as session:
        _write_document(session, app_name, ACTIVE, _pool_payload(active_pool))
        _write_document(session, app_name, ARCHIVED, _pool_payload(archived_pool))


def save_metadata(app_name: str, metadata: Metadata, engine: Optional[Engine] = None) -> None:
    """Replace the metadata document."""
    with _transaction(engine) as session:
        _write_document(session, app_name, METADATA, to_document(metadata))


def run_archive_process(
    app_name: str,
    today: Optional[dt.date] = None,
    engine: Optional[Engine] = None
) -> int:
    """
    Sweep words mastered long enough ago into the archive.

    Loads both pools and the settings, sweeps, and writes pools and
    updated counts back in one transaction.

    Returns:
        Number of words archived
    """
    today = today or dates.today()
    with _transaction(engine) as session:
        active = _read_active(session, app_name)
        archived = _read_archived(session, app_name)
        metadata = _read_metadata(session, app_name)

        result = archive.sweep(active, archived, metadata.settings.archive_threshold_days, today)

        metadata.last_archive_check = _now()
        if result.archived_count > 0:
            _write_document(session, app_name, ACTIVE, _pool_payload(result.active))
            _write_document(session, app_name, ARCHIVED, _pool_payload(result.archived))
            metadata.stats.active_words = len(result.active)
            metadata.stats.mastered_words = sum(1 for word in result.active if word.mastered)
            metadata.stats.archived_words = len(result.archived)
            metadata.stats.total_words = len(result.active) + len(result.archived)
            logger.info("Archived %d word(s) for %s", result.archived_count, app_name)
        _write_document(session, app_name, METADATA, to_document(metadata))

    return result.archived_count


def unarchive_word(
    app_name: str,
    word_id: int,
    today: Optional[dt.date] = None,
    engine: Optional[Engine] = None
) -> bool:
    """
    Move one archived word back to the active pool.

    Returns:
        True if the word was found and moved
    """
    with _transaction(engine) as session:
        active = _read_active(session, app_name)
        archived = _read_archived(session, app_name)

        restored = archive.unarchive(archived, active, word_id, today)
        if restored is None:
            return False

        _write_document(session, app_name, ACTIVE, _pool_payload(active))
        _write_document(session, app_name, ARCHIVED, _pool_payload(archived))
    return True


def add_words(
    app_name: str,
    words: Sequence[ActiveWord],
    engine: Optional[Engine] = None
) -> int:
    """
    Append new words to the active pool.

    Words whose id already exists in either pool are skipped, so a word
    is never in both pools.

    Returns:
        Number of words added
    """
    with _transaction(engine) as session:
        active = _read_active(session, app_name)
        archived = _read_archived(session, app_name)
        known_ids = {word.id for word in active} | {word.id for word in archived}

        added = []
        for word in words:
            if word.id in known_ids:
                logger.debug("Skipping word %s: id already stored", word.id)
                continue
            known_ids.add(word.id)
            added.append(word)

        if added:
            _write_document(session, app_name, ACTIVE, _pool_payload([*active, *added]))
            metadata = _read_metadata(session, app_name)
            metadata.stats.active_words = len(active) + len(added)
            metadata.stats.total_words = metadata.stats.active_words + len(archived)
            _write_document(session, app_name, METADATA, to_document(metadata))

    return len(added)


def export_app(app_name: str, engine: Optional[Engine] = None) -> dict:
    """
    Export all documents of an app as one backup object.
    """
    with _transaction(engine) as session:
        _ensure_documents(session, app_name)
        export = {
            ACTIVE: session.get(PoolDocument, (app_name, ACTIVE)).payload,
            ARCHIVED: session.get(PoolDocument, (app_name, ARCHIVED)).payload,
            METADATA: session.get(PoolDocument, (app_name, METADATA)).payload,
            "exportDate": _now().isoformat(),
        }
    return export
