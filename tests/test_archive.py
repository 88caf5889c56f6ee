import datetime as dt

from conftest import make_archived, make_mastered, make_word
from core.learning import (
    compress_word,
    decompress_word,
    is_archive_eligible,
    sweep,
    unarchive,
)
from core.schemas import CONTENT_FIELDS, Attempt


def test_eligibility_uses_whole_days():
    word = make_mastered(1, dt.date(2024, 1, 1))
    assert is_archive_eligible(word, 90, dt.date(2024, 3, 31))  # 90 days
    assert not is_archive_eligible(word, 90, dt.date(2024, 3, 30))
    assert not is_archive_eligible(make_word(2), 0, dt.date(2024, 3, 31))


def test_sweep_moves_only_long_mastered_words():
    today = dt.date(2024, 6, 1)
    old = make_mastered(1, dt.date(2024, 1, 1))
    recent = make_mastered(2, dt.date(2024, 5, 20))
    learning = make_word(3)
    existing = make_archived(4)

    result = sweep([old, recent, learning], [existing], 90, today)

    assert result.archived_count == 1
    assert [word.id for word in result.active] == [2, 3]
    assert [word.id for word in result.archived] == [4, 1]
    assert result.archived[-1].archived_date == today


def test_sweep_does_not_modify_inputs():
    active = [make_mastered(1, dt.date(2024, 1, 1))]
    archived = []
    sweep(active, archived, 90, dt.date(2024, 6, 1))
    assert len(active) == 1
    assert archived == []


def test_sweep_is_idempotent():
    today = dt.date(2024, 6, 1)
    active = [make_mastered(1, dt.date(2024, 1, 1)), make_word(2)]

    first = sweep(active, [], 90, today)
    second = sweep(first.active, first.archived, 90, today)

    assert second.archived_count == 0
    assert second.active == first.active
    assert second.archived == first.archived


def test_compression_summarizes_history():
    word = make_mastered(1, dt.date(2024, 1, 1))
    word.attempts.insert(0, Attempt(date=dt.date(2023, 12, 1), correct=False))

    archived = compress_word(word, dt.date(2024, 6, 1))

    assert archived.total_attempts == 6
    assert archived.total_correct == 5
    assert archived.accuracy == 5 / 6
    assert archived.mastered_date == dt.date(2024, 1, 1)
    assert archived.archived_date == dt.date(2024, 6, 1)
    assert archived.last_review_date is None
    assert archived.review_failures == 0


def test_compression_without_attempts_has_zero_accuracy():
    archived = compress_word(make_word(1), dt.date(2024, 6, 1))
    assert archived.total_attempts == 0
    assert archived.accuracy == 0.0


def test_compression_round_trip_keeps_content():
    word = make_mastered(
        7,
        dt.date(2024, 1, 1),
        level="B1",
        difficulty=3,
        false_friend=True,
        warning="Not 'gift' in English",
    )
    restored = decompress_word(compress_word(word, dt.date(2024, 6, 1)), dt.date(2024, 7, 1))

    assert restored.content() == word.content()
    assert set(restored.content()) == CONTENT_FIELDS
    assert restored.streak == 0
    assert not restored.mastered
    assert [(a.date, a.correct, a.response_time_ms) for a in restored.attempts] == [
        (dt.date(2024, 7, 1), False, 0)
    ]


def test_unarchive_moves_word_back():
    archived = [make_archived(1), make_archived(2)]
    active = [make_word(3)]

    restored = unarchive(archived, active, 1, dt.date(2024, 6, 1))

    assert restored.id == 1
    assert [word.id for word in archived] == [2]
    assert [word.id for word in active] == [3, 1]


def test_unarchive_unknown_word_is_ignored():
    archived = [make_archived(1)]
    active = []
    assert unarchive(archived, active, 42) is None
    assert len(archived) == 1
    assert active == []
