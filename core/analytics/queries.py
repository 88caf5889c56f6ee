"""
Data-loading helpers for analytics.

Turn in-memory pools into dataframes; no storage access happens here.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.schemas import ActiveWord, ArchivedWord


WORD_COLUMNS = ["word_id", "de", "pool", "difficulty", "streak", "attempts", "correct"]
ATTEMPT_COLUMNS = ["word_id", "date", "correct", "response_time_ms"]


def build_words_frame(
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord]
) -> pd.DataFrame:
    """
    One row per word across both pools.

    Archived words contribute their frozen summary counts.
    """
    rows = []
    for word in active_pool:
        rows.append({
            "word_id": word.id,
            "de": word.display_term,
            "pool": "mastered" if word.mastered else "learning",
            "difficulty": int(word.difficulty),
            "streak": word.streak,
            "attempts": len(word.attempts),
            "correct": sum(1 for attempt in word.attempts if attempt.correct),
        })
    for word in archived_pool:
        rows.append({
            "word_id": word.id,
            "de": word.display_term,
            "pool": "archived",
            "difficulty": int(word.difficulty),
            "streak": 0,
            "attempts": word.total_attempts,
            "correct": word.total_correct,
        })

    if not rows:
        return pd.DataFrame(columns=WORD_COLUMNS)
    return pd.DataFrame(rows, columns=WORD_COLUMNS)


def build_attempts_frame(active_pool: Sequence[ActiveWord]) -> pd.DataFrame:
    """
    One row per recorded attempt in the active pool, sorted by date.
    """
    rows = [
        {
            "word_id": word.id,
            "date": attempt.date,
            "correct": attempt.correct,
            "response_time_ms": attempt.response_time_ms,
        }
        for word in active_pool
        for attempt in word.attempts
    ]
    if not rows:
        return pd.DataFrame(columns=ATTEMPT_COLUMNS)

    df = pd.DataFrame(rows, columns=ATTEMPT_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    df["correct"] = df["correct"].astype(bool)
    return df.sort_values("date").reset_index(drop=True)
