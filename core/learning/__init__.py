"""
Learning Engine

Decides which words a learner sees next, tracks mastery, and moves words
between the active pool and the archive.

- Selection: weighted practice sampling, review and archive-review ordering
- Progress: streak and mastery updates per answer
- Archive: time-based sweep with lossy compression, unarchive on failed reviews
- Session: one round of answers folded into aggregate statistics

Everything here works on in-memory pools; persistence is done by core.store.

Quick start:
    from core import learning

    session = learning.start_session("practice", active, archived, count=15)
    outcome = learning.submit_answer(session, "dog", active, archived, settings)
    stats = learning.finalize_session(stats, session.results, active, archived)
    result = learning.sweep(active, archived, settings.archive_threshold_days)
"""

# Selection
from core.learning.selection import (
    practice_weight,
    weighted_sample,
    select_for_practice,
    select_for_review,
    select_for_archive_review,
    select_for_mode,
)

# Progress tracking
from core.learning.progress import (
    find_word,
    record_attempt,
    record_archive_review_attempt,
)

# Archive management
from core.learning.archive import (
    SweepResult,
    is_archive_eligible,
    compress_word,
    decompress_word,
    sweep,
    unarchive,
)

# Sessions
from core.learning.session import (
    Session,
    AnswerOutcome,
    session_length_for,
    start_session,
    submit_answer,
    finalize_session,
    session_message,
)

# Answer matching
from core.learning.matching import (
    normalize_answer,
    levenshtein,
    is_correct_answer,
)

# Constants and errors
from core.learning.constants import SessionMode, MODE_LABELS, MASTERY_STREAK
from core.learning.errors import LearningError, EmptySelectionPool


__all__ = [
    # Selection
    "practice_weight",
    "weighted_sample",
    "select_for_practice",
    "select_for_review",
    "select_for_archive_review",
    "select_for_mode",

    # Progress
    "find_word",
    "record_attempt",
    "record_archive_review_attempt",

    # Archive
    "SweepResult",
    "is_archive_eligible",
    "compress_word",
    "decompress_word",
    "sweep",
    "unarchive",

    # Sessions
    "Session",
    "AnswerOutcome",
    "session_length_for",
    "start_session",
    "submit_answer",
    "finalize_session",
    "session_message",

    # Matching
    "normalize_answer",
    "levenshtein",
    "is_correct_answer",

    # Constants and errors
    "SessionMode",
    "MODE_LABELS",
    "MASTERY_STREAK",
    "LearningError",
    "EmptySelectionPool",
]
