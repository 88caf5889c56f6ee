"""
Metric computations for the statistics dashboard.
"""

from __future__ import annotations

import pandas as pd

from core.analytics.constants import DIFFICULTY_LABELS, HARDEST_WORDS_LIMIT, STREAK_BUCKETS


DAILY_COLUMNS = ["attempts", "correct", "accuracy"]
DIFFICULTY_COLUMNS = ["words", "attempts", "correct", "accuracy"]


def _ratio(correct: pd.Series, attempts: pd.Series) -> pd.Series:
    # 0/0 -> 0.0
    return (correct / attempts.where(attempts > 0)).fillna(0.0).astype("float64")


def compute_pool_counts(words_df: pd.DataFrame) -> dict[str, int]:
    """
    Number of words in each pool state.
    """
    counts = words_df["pool"].value_counts() if not words_df.empty else pd.Series(dtype="int64")
    return {pool: int(counts.get(pool, 0)) for pool in ("learning", "mastered", "archived")}


def compute_accuracy(attempts_df: pd.DataFrame) -> float:
    """
    Share of correct attempts; 0.0 when there are no attempts.
    """
    if attempts_df.empty:
        return 0.0
    return float(attempts_df["correct"].astype(bool).mean())


def compute_streak_distribution(words_df: pd.DataFrame) -> dict[int, int]:
    """
    Count learning words per current streak (0 up to one short of mastery).
    """
    if words_df.empty:
        return {bucket: 0 for bucket in STREAK_BUCKETS}

    learning = words_df[words_df["pool"] == "learning"]
    counts = learning["streak"].astype("int64").value_counts()
    return {bucket: int(counts.get(bucket, 0)) for bucket in STREAK_BUCKETS}


def compute_daily_attempts(attempts_df: pd.DataFrame) -> pd.DataFrame:
    """
    Attempts, correct answers and accuracy per day over a dense day range.
    """
    if attempts_df.empty:
        return pd.DataFrame(columns=DAILY_COLUMNS)

    daily = attempts_df.groupby(attempts_df["date"].dt.floor("D")).agg(
        attempts=("correct", "size"),
        correct=("correct", "sum"),
    )
    day_index = pd.date_range(start=daily.index.min(), end=daily.index.max(), freq="D")
    daily = daily.reindex(day_index, fill_value=0).astype("int64")
    daily["accuracy"] = _ratio(daily["correct"], daily["attempts"])
    daily.index.name = "date"
    return daily[DAILY_COLUMNS]


def compute_difficulty_breakdown(words_df: pd.DataFrame) -> pd.DataFrame:
    """
    Word count and answer accuracy per difficulty tier.
    """
    if words_df.empty:
        return pd.DataFrame(columns=DIFFICULTY_COLUMNS)

    scoped = words_df.astype({"difficulty": "int64", "attempts": "int64", "correct": "int64"})
    breakdown = scoped.groupby("difficulty").agg(
        words=("word_id", "count"),
        attempts=("attempts", "sum"),
        correct=("correct", "sum"),
    )
    breakdown["accuracy"] = _ratio(breakdown["correct"], breakdown["attempts"])
    breakdown.index = [DIFFICULTY_LABELS.get(level, str(level)) for level in breakdown.index]
    breakdown.index.name = "difficulty"
    return breakdown[DIFFICULTY_COLUMNS]


def compute_hardest_words(words_df: pd.DataFrame, limit: int = HARDEST_WORDS_LIMIT) -> pd.DataFrame:
    """
    Words with the lowest accuracy among those answered at least once.
    """
    columns = ["word_id", "de", "pool", "attempts", "accuracy"]
    if words_df.empty:
        return pd.DataFrame(columns=columns)

    answered = words_df[words_df["attempts"].astype("int64") > 0].copy()
    if answered.empty:
        return pd.DataFrame(columns=columns)

    answered["accuracy"] = _ratio(
        answered["correct"].astype("int64"),
        answered["attempts"].astype("int64"),
    )
    answered = answered.sort_values(["accuracy", "attempts"], ascending=[True, False])
    return answered[columns].head(limit).reset_index(drop=True)
