"""
Progress - Recording Answers

Two recording policies:
- Active words (practice and review rounds): attempt history, streak and
  mastery are updated.
- Archived words (archive review rounds): only the review date and the
  failure counter change; enough failures send the word back to practice.

Attempts for ids that are not in the expected pool are ignored, since the
host may hold a selection made from an older snapshot.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional, Sequence, TypeVar

from core.learning import dates
from core.learning.archive import unarchive
from core.schemas import MASTERY_STREAK, ActiveWord, ArchivedWord, Attempt, WordContent


logger = logging.getLogger(__name__)

W = TypeVar("W", bound=WordContent)


def find_word(pool: Sequence[W], word_id: int) -> Optional[W]:
    return next((word for word in pool if word.id == word_id), None)


def record_attempt(
    active_pool: Sequence[ActiveWord],
    word_id: int,
    correct: bool,
    response_time_ms: int = 0,
    today: Optional[dt.date] = None
) -> Optional[ActiveWord]:
    """
    Record an answer for an active word (modifies the word in place).

    Rules:
    - Correct: streak + 1; reaching MASTERY_STREAK masters the word
    - Incorrect: streak reset to 0; a mastered word loses mastery

    Args:
        active_pool: Active words
        word_id: Word answered
        correct: Whether the answer was correct
        response_time_ms: Time taken to answer
        today: Attempt date (defaults to today)

    Returns:
        The updated word, or None if the id is not in the pool
    """
    word = find_word(active_pool, word_id)
    if word is None:
        logger.debug("Ignoring attempt for unknown word %s", word_id)
        return None

    today = today or dates.today()
    word.attempts.append(
        Attempt(date=today, correct=correct, response_time_ms=max(0, int(response_time_ms)))
    )

    if correct:
        word.streak += 1
        if word.streak >= MASTERY_STREAK and not word.mastered:
            word.mark_mastered(today)
            logger.info("Word %s (%s) mastered", word.id, word.de)
    else:
        word.streak = 0
        if word.mastered:
            word.revoke_mastery()
            logger.info("Word %s (%s) lost mastery", word.id, word.de)

    return word


def record_archive_review_attempt(
    archived_pool: list[ArchivedWord],
    active_pool: list[ActiveWord],
    word_id: int,
    correct: bool,
    unarchive_failure_threshold: int,
    today: Optional[dt.date] = None
) -> bool:
    """
    Record an answer for an archived word under review.

    Never touches streak or mastery. A correct answer clears the failure
    counter; failures accumulate until the threshold unarchives the word.

    Returns:
        True if the word left the archive
    """
    word = find_word(archived_pool, word_id)
    if word is None:
        logger.debug("Ignoring archive review for unknown word %s", word_id)
        return False

    today = today or dates.today()
    word.last_review_date = today

    if correct:
        word.review_failures = 0
        return False

    word.review_failures += 1
    if word.review_failures >= unarchive_failure_threshold:
        unarchive(archived_pool, active_pool, word_id, today)
        return True
    return False
