import datetime as dt
import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

# Keep tests away from any configured database before store imports
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TEST_MODE"] = "false"

from core.schemas import ActiveWord, ArchivedWord, Attempt, MasteryStatus  # noqa: E402
from core.store import init_db  # noqa: E402


TODAY = dt.date(2024, 6, 1)


def make_word(word_id: int, **overrides) -> ActiveWord:
    fields = {
        "id": word_id,
        "de": f"Wort{word_id}",
        "article": "das",
        "plural": f"Wörter{word_id}",
        "en": [f"word{word_id}"],
        "pt": [f"palavra{word_id}"],
        "example": f"Das ist Wort{word_id}.",
        "examplePt": f"Isto é palavra{word_id}.",
    }
    fields.update(overrides)
    return ActiveWord(**fields)


def make_mastered(word_id: int, mastered_on: dt.date, **overrides) -> ActiveWord:
    attempts = [Attempt(date=mastered_on, correct=True) for _ in range(5)]
    return make_word(
        word_id,
        attempts=attempts,
        streak=5,
        mastery=MasteryStatus.MASTERED,
        mastered_date=mastered_on,
        **overrides,
    )


def make_archived(word_id: int, **overrides) -> ArchivedWord:
    fields = {
        "id": word_id,
        "de": f"Archiv{word_id}",
        "article": "der",
        "en": [f"archive{word_id}"],
        "pt": [f"arquivo{word_id}"],
        "total_attempts": 6,
        "total_correct": 5,
        "accuracy": 5 / 6,
        "mastered_date": dt.date(2023, 1, 1),
        "archived_date": dt.date(2023, 4, 1),
    }
    fields.update(overrides)
    return ArchivedWord(**fields)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture(name="engine")
def engine_fixture():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()
