import datetime as dt

import pytest
from sqlalchemy.exc import OperationalError

from conftest import make_archived, make_mastered, make_word
from core import store
from core.store import repository


APP = "nouns"


def test_first_access_creates_defaults(engine):
    assert store.load_active(APP, engine=engine) == []
    assert store.load_archived(APP, engine=engine) == []

    metadata = store.load_metadata(APP, engine=engine)
    assert metadata.settings.archive_threshold_days == 90
    assert metadata.stats.start_date is not None


def test_pools_round_trip(engine, today):
    active = [make_word(1), make_mastered(2, today)]
    archived = [make_archived(3)]

    store.save_pools(APP, active, archived, engine=engine)

    loaded_active = store.load_active(APP, engine=engine)
    loaded_archived = store.load_archived(APP, engine=engine)
    assert [w.model_dump() for w in loaded_active] == [w.model_dump() for w in active]
    assert [w.model_dump() for w in loaded_archived] == [w.model_dump() for w in archived]


def test_apps_are_isolated(engine):
    store.save_pools("nouns", [make_word(1)], [], engine=engine)
    store.save_pools("verbs", [make_word(2), make_word(3)], [], engine=engine)

    assert [w.id for w in store.load_active("nouns", engine=engine)] == [1]
    assert [w.id for w in store.load_active("verbs", engine=engine)] == [2, 3]


def test_metadata_round_trip(engine, today):
    metadata = store.load_metadata(APP, engine=engine)
    metadata.settings.session_length = 20
    metadata.stats.total_sessions = 4
    metadata.stats.last_session_date = today

    store.save_metadata(APP, metadata, engine=engine)
    loaded = store.load_metadata(APP, engine=engine)

    assert loaded.settings.session_length == 20
    assert loaded.stats.total_sessions == 4
    assert loaded.stats.last_session_date == today


def test_failed_save_keeps_previous_state(engine, monkeypatch):
    store.save_pools(APP, [make_word(1)], [], engine=engine)

    original = repository._write_document
    calls = []

    def failing_write(session, app_name, document, payload):
        calls.append(document)
        if document == repository.ARCHIVED:
            raise OperationalError("UPDATE pool_documents", {}, Exception("disk full"))
        original(session, app_name, document, payload)

    monkeypatch.setattr(repository, "_write_document", failing_write)

    with pytest.raises(store.PersistenceError):
        store.save_pools(APP, [make_word(1), make_word(2)], [make_archived(3)], engine=engine)

    monkeypatch.undo()
    assert calls == [repository.ACTIVE, repository.ARCHIVED]
    assert [w.id for w in store.load_active(APP, engine=engine)] == [1]
    assert store.load_archived(APP, engine=engine) == []


def test_run_archive_process(engine):
    today = dt.date(2024, 6, 1)
    active = [make_mastered(1, dt.date(2024, 1, 1)), make_mastered(2, dt.date(2024, 5, 1)), make_word(3)]
    store.save_pools(APP, active, [], engine=engine)

    assert store.run_archive_process(APP, today=today, engine=engine) == 1
    assert [w.id for w in store.load_active(APP, engine=engine)] == [2, 3]
    assert [w.id for w in store.load_archived(APP, engine=engine)] == [1]

    metadata = store.load_metadata(APP, engine=engine)
    assert metadata.stats.archived_words == 1
    assert metadata.stats.active_words == 2
    assert metadata.stats.mastered_words == 1
    assert metadata.last_archive_check is not None

    # second run finds nothing new
    assert store.run_archive_process(APP, today=today, engine=engine) == 0
    assert [w.id for w in store.load_archived(APP, engine=engine)] == [1]


def test_run_archive_process_respects_threshold_setting(engine):
    today = dt.date(2024, 6, 1)
    store.save_pools(APP, [make_mastered(1, dt.date(2024, 5, 1))], [], engine=engine)
    metadata = store.load_metadata(APP, engine=engine)
    metadata.settings.archive_threshold_days = 30
    store.save_metadata(APP, metadata, engine=engine)

    assert store.run_archive_process(APP, today=today, engine=engine) == 1


def test_unarchive_word(engine, today):
    store.save_pools(APP, [make_word(1)], [make_archived(2)], engine=engine)

    assert store.unarchive_word(APP, 2, today=today, engine=engine) is True
    assert store.unarchive_word(APP, 99, today=today, engine=engine) is False

    active = store.load_active(APP, engine=engine)
    assert [w.id for w in active] == [1, 2]
    assert active[-1].streak == 0
    assert store.load_archived(APP, engine=engine) == []


def test_add_words_skips_known_ids(engine):
    store.save_pools(APP, [make_word(1)], [make_archived(2)], engine=engine)

    added = store.add_words(APP, [make_word(1), make_word(2), make_word(3), make_word(3)], engine=engine)

    assert added == 1
    assert [w.id for w in store.load_active(APP, engine=engine)] == [1, 3]
    assert store.load_metadata(APP, engine=engine).stats.total_words == 3


def test_export_app(engine):
    store.save_pools(APP, [make_word(1)], [make_archived(2)], engine=engine)

    export = store.export_app(APP, engine=engine)

    assert set(export) == {"active", "archived", "metadata", "exportDate"}
    assert export["active"]["version"] == "1.0"
    assert [w["id"] for w in export["active"]["words"]] == [1]
    assert [w["id"] for w in export["archived"]["words"]] == [2]
    assert "settings" in export["metadata"]


def test_reset_db_drops_everything(engine):
    store.save_pools(APP, [make_word(1)], [], engine=engine)
    store.reset_db(engine)
    assert store.load_active(APP, engine=engine) == []
