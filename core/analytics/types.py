"""
Types for the statistics dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from core.schemas import AggregateStats


@dataclass(frozen=True)
class PoolOverview:
    """
    Current counts shown on the mode selection screen.

    `accuracy` covers attempts recorded in the active pool; it is 0.0
    when there are none. `streak_distribution` maps streak 0-4 to the
    number of learning words at that streak.
    """
    learning: int
    mastered: int
    archived: int
    total_attempts: int
    accuracy: float
    streak_distribution: dict[int, int] = field(default_factory=dict)

    @property
    def active(self) -> int:
        return self.learning + self.mastered

    @property
    def total(self) -> int:
        return self.active + self.archived


@dataclass(frozen=True)
class StatisticsDashboard:
    """
    Precomputed metrics and series for the statistics page.
    """
    overview: PoolOverview
    stats: AggregateStats
    attempts_daily: pd.DataFrame
    difficulty_breakdown: pd.DataFrame
    hardest_words: pd.DataFrame
