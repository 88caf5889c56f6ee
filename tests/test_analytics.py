import datetime as dt

import pytest

from conftest import make_archived, make_mastered, make_word
from core.analytics import build_overview, build_statistics_dashboard
from core.schemas import AggregateStats, Attempt


def _attempts(*results, day=dt.date(2024, 6, 1)):
    return [Attempt(date=day, correct=result) for result in results]


def test_overview_of_empty_pools():
    overview = build_overview([], [])

    assert overview.learning == 0
    assert overview.mastered == 0
    assert overview.archived == 0
    assert overview.total_attempts == 0
    assert overview.accuracy == 0.0
    assert overview.streak_distribution == {0: 0, 1: 0, 2: 0, 3: 0, 4: 0}


def test_overview_counts_and_accuracy():
    active = [
        make_word(1, attempts=_attempts(False)),
        make_word(2, streak=2, attempts=_attempts(False, True, True)),
        make_word(3, streak=2, attempts=_attempts(True, True)),
        make_mastered(4, dt.date(2024, 5, 1)),
    ]
    archived = [make_archived(5), make_archived(6)]

    overview = build_overview(active, archived)

    assert overview.learning == 3
    assert overview.mastered == 1
    assert overview.archived == 2
    assert overview.active == 4
    assert overview.total == 6
    # archived summaries are not part of the active accuracy
    assert overview.total_attempts == 11
    assert overview.accuracy == pytest.approx(9 / 11)
    assert overview.streak_distribution == {0: 1, 1: 0, 2: 2, 3: 0, 4: 0}


def test_statistics_dashboard_series():
    active = [
        make_word(1, difficulty=3, attempts=_attempts(False, False, day=dt.date(2024, 6, 1))),
        make_word(2, difficulty=1, streak=1, attempts=_attempts(True, day=dt.date(2024, 6, 3))),
    ]
    archived = [make_archived(3, difficulty=1, total_attempts=4, total_correct=2)]
    stats = AggregateStats(total_sessions=2)

    dashboard = build_statistics_dashboard(active, archived, stats)

    assert dashboard.stats.total_sessions == 2

    daily = dashboard.attempts_daily
    assert len(daily) == 3  # 1st to 3rd, gap day filled
    assert daily["attempts"].tolist() == [2, 0, 1]
    assert daily["correct"].tolist() == [0, 0, 1]
    assert daily["accuracy"].tolist() == [0.0, 0.0, 1.0]

    breakdown = dashboard.difficulty_breakdown
    assert breakdown.loc["Easy", "words"] == 2
    assert breakdown.loc["Easy", "attempts"] == 5
    assert breakdown.loc["Easy", "accuracy"] == pytest.approx(3 / 5)
    assert breakdown.loc["Hard", "accuracy"] == 0.0
    assert "Medium" not in breakdown.index

    hardest = dashboard.hardest_words
    assert hardest["word_id"].tolist() == [1, 3, 2]


def test_statistics_dashboard_without_answers():
    dashboard = build_statistics_dashboard([make_word(1)], [], AggregateStats())

    assert dashboard.attempts_daily.empty
    assert dashboard.hardest_words.empty
    assert dashboard.difficulty_breakdown.loc["Medium", "words"] == 1
