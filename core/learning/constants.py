"""
Learning Engine Constants

Selection weights, mastery threshold and answer-matching tolerances
in one place.
"""

from enum import Enum

from core.schemas import MASTERY_STREAK, Difficulty  # noqa: F401


# ---- Session Modes ----

class SessionMode(str, Enum):
    """Which pool a practice round draws from."""
    PRACTICE = "practice"   # Words still being learned (weighted random)
    REVIEW = "review"       # Recently mastered words (oldest mastery first)
    ARCHIVE = "archive"     # Archived words (least recently reviewed first)


MODE_LABELS = {
    SessionMode.PRACTICE: "Practice",
    SessionMode.REVIEW: "Review Recently Mastered",
    SessionMode.ARCHIVE: "Archive Review",
}


# ---- Practice Selection Weights ----
# Multipliers compose; a word starts at weight 1.0

BASE_WEIGHT = 1.0
FAILED_LAST_ATTEMPT_WEIGHT = 3.0   # Most recent answer was wrong
LOW_STREAK_WEIGHT = 2.0            # 0 < streak <= LOW_STREAK_MAX
LOW_STREAK_MAX = 2

DIFFICULTY_WEIGHT = {
    Difficulty.EASY: 0.5,
    Difficulty.MEDIUM: 1.0,
    Difficulty.HARD: 2.0,
}


# ---- Answer Matching ----

MAX_TYPO_DISTANCE = 1  # Edits tolerated between answer and accepted translation
