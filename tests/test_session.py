import datetime as dt
import random

import pytest

from conftest import make_archived, make_mastered, make_word
from core.learning import (
    EmptySelectionPool,
    SessionMode,
    finalize_session,
    session_length_for,
    session_message,
    start_session,
    submit_answer,
)
from core.schemas import AggregateStats, Settings


def test_session_length_by_mode():
    settings = Settings(session_length=12, review_session_length=8)
    assert session_length_for(SessionMode.PRACTICE, settings) == 12
    assert session_length_for("review", settings) == 8
    assert session_length_for(SessionMode.ARCHIVE, settings) == 8


def test_start_session_with_empty_pool_raises():
    with pytest.raises(EmptySelectionPool) as excinfo:
        start_session(SessionMode.REVIEW, [make_word(1)], [], 10)
    assert excinfo.value.mode == "review"


def test_practice_round_records_answers(today):
    active = [make_word(1, en=["dog"], pt=["cão"]), make_word(2, en=["cat"], pt=["gato"])]
    settings = Settings()
    session = start_session("practice", active, [], 15, rng=random.Random(1))

    assert session.mode == SessionMode.PRACTICE
    assert len(session.words) == 2
    answers = {1: "the dog", 2: "wrong"}

    first = session.current
    outcome = submit_answer(session, answers[first.id], active, [], settings, 900, today=today)
    assert outcome.correct == (first.id == 1)
    assert session.position == 1

    second = session.current
    submit_answer(session, answers[second.id], active, [], settings, today=today)

    assert session.is_finished
    assert session.current is None
    assert session.correct_count == 1
    by_id = {word.id: word for word in active}
    assert by_id[1].streak == 1
    assert by_id[2].attempts[-1].correct is False

    with pytest.raises(ValueError):
        submit_answer(session, "dog", active, [], settings, today=today)


def test_archive_round_can_unarchive(today):
    archived = [make_archived(1, en=["tree"], pt=["árvore"], review_failures=1)]
    active = []
    settings = Settings(unarchive_failure_threshold=2)
    session = start_session(SessionMode.ARCHIVE, active, archived, 10)

    outcome = submit_answer(session, "house", active, archived, settings, today=today)

    assert outcome.correct is False
    assert outcome.unarchived is True
    assert archived == []
    assert [word.id for word in active] == [1]


def test_review_round_uses_active_progress(today):
    active = [make_mastered(1, dt.date(2024, 1, 1), en=["book"])]
    session = start_session(SessionMode.REVIEW, active, [], 10)

    outcome = submit_answer(session, "bok", active, [], Settings(), today=today)

    assert outcome.correct is True
    assert active[0].streak == 6


def test_finalize_session_updates_counters_and_accuracy(today):
    stats = AggregateStats(total_sessions=1, total_cards=10, overall_accuracy=0.5)
    active = [make_word(1), make_mastered(2, today)]
    archived = [make_archived(3)]

    updated = finalize_session(stats, [True, True, True, False, True], active, archived, today)

    assert updated.total_sessions == 2
    assert updated.total_cards == 15
    assert updated.overall_accuracy == pytest.approx((0.5 * 10 + 4) / 15)
    assert updated.active_words == 2
    assert updated.mastered_words == 1
    assert updated.archived_words == 1
    assert updated.total_words == 3
    assert updated.start_date == today
    assert updated.last_session_date == today
    # input record untouched
    assert stats.total_sessions == 1


def test_finalize_session_with_no_results_only_refreshes_counts(today):
    stats = AggregateStats(total_sessions=3, total_cards=30, overall_accuracy=0.8)
    updated = finalize_session(stats, [], [make_word(1)], [], today)

    assert updated.total_sessions == 3
    assert updated.total_cards == 30
    assert updated.overall_accuracy == 0.8
    assert updated.active_words == 1
    assert updated.last_session_date is None


@pytest.mark.parametrize(
    "last_session, current, expected",
    [
        (None, 0, 1),
        (dt.date(2024, 6, 1), 3, 3),    # same day
        (dt.date(2024, 5, 31), 3, 4),   # consecutive day
        (dt.date(2024, 5, 20), 3, 1),   # gap
    ],
)
def test_finalize_session_day_streak(last_session, current, expected, today):
    stats = AggregateStats(current_streak=current, longest_streak=3, last_session_date=last_session)
    updated = finalize_session(stats, [True], [], [], today)

    assert updated.current_streak == expected
    assert updated.longest_streak == max(3, expected)


@pytest.mark.parametrize(
    "correct, total, message",
    [
        (15, 15, "Perfect! 🌟"),
        (13, 15, "Excellent! 🎉"),
        (10, 15, "Great job! 👏"),
        (7, 15, "Good effort! 💪"),
        (6, 15, "Keep practicing! 📚"),
        (0, 0, ""),
    ],
)
def test_session_message(correct, total, message):
    assert session_message(correct, total) == message
