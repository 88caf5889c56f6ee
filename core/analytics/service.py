"""
Service layer to assemble the overview and the statistics dashboard.
"""

from __future__ import annotations

from typing import Sequence

from core.analytics.metrics import (
    compute_accuracy,
    compute_daily_attempts,
    compute_difficulty_breakdown,
    compute_hardest_words,
    compute_pool_counts,
    compute_streak_distribution,
)
from core.analytics.queries import build_attempts_frame, build_words_frame
from core.analytics.types import PoolOverview, StatisticsDashboard
from core.schemas import ActiveWord, AggregateStats, ArchivedWord


def build_overview(
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord]
) -> PoolOverview:
    """
    Counts and accuracy for the mode selection screen.
    """
    words_df = build_words_frame(active_pool, archived_pool)
    attempts_df = build_attempts_frame(active_pool)
    counts = compute_pool_counts(words_df)

    return PoolOverview(
        learning=counts["learning"],
        mastered=counts["mastered"],
        archived=counts["archived"],
        total_attempts=len(attempts_df),
        accuracy=compute_accuracy(attempts_df),
        streak_distribution=compute_streak_distribution(words_df),
    )


def build_statistics_dashboard(
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord],
    stats: AggregateStats
) -> StatisticsDashboard:
    """
    Build all KPI values and series needed by the statistics page.
    """
    words_df = build_words_frame(active_pool, archived_pool)
    attempts_df = build_attempts_frame(active_pool)

    return StatisticsDashboard(
        overview=build_overview(active_pool, archived_pool),
        stats=stats,
        attempts_daily=compute_daily_attempts(attempts_df),
        difficulty_breakdown=compute_difficulty_breakdown(words_df),
        hardest_words=compute_hardest_words(words_df),
    )
