"""
Constants for the statistics dashboard.
"""

from __future__ import annotations

from typing import Final

from core.schemas import MASTERY_STREAK, Difficulty


# Streak buckets shown for learning words (a streak of MASTERY_STREAK masters the word)
STREAK_BUCKETS: Final[list[int]] = list(range(MASTERY_STREAK))

DIFFICULTY_LABELS: Final[dict[int, str]] = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}

POOL_LABELS: Final[dict[str, str]] = {
    "learning": "Learning",
    "mastered": "Mastered",
    "archived": "Archived",
}

HARDEST_WORDS_LIMIT: Final[int] = 10
