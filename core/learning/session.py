"""
Session - One Practice Round

A session is an ordered batch of words plus the learner's results. It is
never persisted: when the round ends its results are folded into the
aggregate statistics by `finalize_session`, which takes the current
statistics record and returns the updated one.
"""

from __future__ import annotations

import datetime as dt
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from core.learning import dates
from core.learning.constants import SessionMode
from core.learning.errors import EmptySelectionPool
from core.learning.matching import is_correct_answer
from core.learning.progress import record_archive_review_attempt, record_attempt
from core.learning.selection import select_for_mode
from core.schemas import ActiveWord, AggregateStats, ArchivedWord, Settings


logger = logging.getLogger(__name__)

SessionWord = Union[ActiveWord, ArchivedWord]


@dataclass
class Session:
    """Words selected for one round and the results recorded so far."""
    mode: SessionMode
    words: list[SessionWord]
    results: list[bool] = field(default_factory=list)

    @property
    def position(self) -> int:
        return len(self.results)

    @property
    def current(self) -> Optional[SessionWord]:
        if self.is_finished:
            return None
        return self.words[self.position]

    @property
    def is_finished(self) -> bool:
        return self.position >= len(self.words)

    @property
    def correct_count(self) -> int:
        return sum(1 for result in self.results if result)


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of answering the current card."""
    word: SessionWord
    correct: bool
    unarchived: bool = False


def session_length_for(mode: SessionMode, settings: Settings) -> int:
    """Cards per round: practice uses sessionLength, review modes reviewSessionLength."""
    if SessionMode(mode) == SessionMode.PRACTICE:
        return settings.session_length
    return settings.review_session_length


def start_session(
    mode: SessionMode,
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord],
    count: int,
    rng: Optional[random.Random] = None
) -> Session:
    """
    Select words for a new round.

    Raises:
        EmptySelectionPool: if the mode has no eligible words
    """
    mode = SessionMode(mode)
    words = select_for_mode(mode, active_pool, archived_pool, count, rng)
    if not words:
        raise EmptySelectionPool(mode.value)
    logger.debug("Started %s session with %d word(s)", mode.value, len(words))
    return Session(mode=mode, words=list(words))


def submit_answer(
    session: Session,
    user_input: str,
    active_pool: list[ActiveWord],
    archived_pool: list[ArchivedWord],
    settings: Settings,
    response_time_ms: int = 0,
    today: Optional[dt.date] = None
) -> AnswerOutcome:
    """
    Check the answer for the current card and record it.

    Practice and review rounds record an attempt on the active word;
    archive rounds record an archive review, which may unarchive the word.
    """
    word = session.current
    if word is None:
        raise ValueError("Session is already finished")

    correct = is_correct_answer(user_input, word.accepted_answers)
    unarchived = False

    if session.mode == SessionMode.ARCHIVE:
        unarchived = record_archive_review_attempt(
            archived_pool,
            active_pool,
            word.id,
            correct,
            settings.unarchive_failure_threshold,
            today,
        )
    else:
        record_attempt(active_pool, word.id, correct, response_time_ms, today)

    session.results.append(correct)
    return AnswerOutcome(word=word, correct=correct, unarchived=unarchived)


def finalize_session(
    stats: AggregateStats,
    results: Sequence[bool],
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord],
    today: Optional[dt.date] = None
) -> AggregateStats:
    """
    Fold a finished round into the aggregate statistics.

    - Session and card counters are incremented
    - Overall accuracy is a running average over all cards answered
    - Pool counts are refreshed from the current pools
    - The practice-day streak advances once per calendar day

    Returns:
        A new AggregateStats; the input record is not modified
    """
    today = today or dates.today()
    active_words = len(active_pool)
    archived_words = len(archived_pool)
    update = {
        "total_words": active_words + archived_words,
        "active_words": active_words,
        "mastered_words": sum(1 for word in active_pool if word.mastered),
        "archived_words": archived_words,
        "start_date": stats.start_date or today,
    }

    total = len(results)
    if total == 0:
        return stats.model_copy(update=update)

    correct = sum(1 for result in results if result)
    old_cards = stats.total_cards
    total_cards = old_cards + total
    update["total_sessions"] = stats.total_sessions + 1
    update["total_cards"] = total_cards
    update["overall_accuracy"] = (stats.overall_accuracy * old_cards + correct) / total_cards

    current_streak = _next_day_streak(stats.current_streak, stats.last_session_date, today)
    update["current_streak"] = current_streak
    update["longest_streak"] = max(stats.longest_streak, current_streak)
    update["last_session_date"] = today

    return stats.model_copy(update=update)


def _next_day_streak(current: int, last_session: Optional[dt.date], today: dt.date) -> int:
    if last_session is None:
        return 1
    gap = dates.days_between(last_session, today)
    if gap <= 0:
        return max(current, 1)
    if gap == 1:
        return current + 1
    return 1


def session_message(correct: int, total: int) -> str:
    """Motivational message for the results screen."""
    if total <= 0:
        return ""
    if correct == total:
        return "Perfect! 🌟"
    if correct >= total - 2:
        return "Excellent! 🎉"
    if correct >= total - 5:
        return "Great job! 👏"
    if correct >= total - 8:
        return "Good effort! 💪"
    return "Keep practicing! 📚"
