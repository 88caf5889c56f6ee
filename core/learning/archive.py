"""
Archive - Moving Words Between Active and Archived Pools

State machine per word:
    active(learning) -> active(mastered) -> archived -> active(learning)
    active(mastered) -> active(learning)    (on a lapse)

Archiving compresses a word: the attempt history is replaced by frozen
summary counts. Unarchiving decompresses it: content is restored exactly,
learning progress starts over.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from core.learning import dates
from core.schemas import ActiveWord, ArchivedWord, Attempt


logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Pools after a sweep and how many words moved."""
    active: list[ActiveWord]
    archived: list[ArchivedWord]
    archived_count: int


def is_archive_eligible(word: ActiveWord, threshold_days: int, today: dt.date) -> bool:
    """
    True when a word has been mastered for at least `threshold_days`.
    """
    if not word.mastered or word.mastered_date is None:
        return False
    return dates.days_between(word.mastered_date, today) >= threshold_days


def compress_word(word: ActiveWord, today: dt.date) -> ArchivedWord:
    """
    Compress an active word for the archive.

    Accuracy is frozen here; a word without attempts gets 0.0.
    """
    total_attempts = len(word.attempts)
    total_correct = sum(1 for attempt in word.attempts if attempt.correct)
    accuracy = total_correct / total_attempts if total_attempts else 0.0

    return ArchivedWord(
        **word.content(),
        total_attempts=total_attempts,
        total_correct=total_correct,
        accuracy=accuracy,
        mastered_date=word.mastered_date,
        archived_date=today,
        last_review_date=None,
        review_failures=0,
    )


def decompress_word(word: ArchivedWord, today: dt.date) -> ActiveWord:
    """
    Restore an archived word to a fresh active word.

    The history is seeded with one failed attempt marking the review
    failure that sent the word back.
    """
    return ActiveWord(
        **word.content(),
        attempts=[Attempt(date=today, correct=False, response_time_ms=0)],
        streak=0,
    )


def sweep(
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord],
    threshold_days: int,
    today: Optional[dt.date] = None
) -> SweepResult:
    """
    Move every word mastered at least `threshold_days` ago into the archive.

    The input pools are not modified. Running a sweep twice without new
    mastery events archives nothing the second time.

    Args:
        active_pool: Current active words
        archived_pool: Current archived words
        threshold_days: Days since mastery before a word is archived
        today: Sweep date (defaults to today)

    Returns:
        SweepResult with the new pools and the number of words archived
    """
    today = today or dates.today()

    remaining: list[ActiveWord] = []
    newly_archived: list[ArchivedWord] = []
    for word in active_pool:
        if is_archive_eligible(word, threshold_days, today):
            newly_archived.append(compress_word(word, today))
        else:
            remaining.append(word)

    if newly_archived:
        logger.info("Archiving %d word(s) mastered %d+ days ago", len(newly_archived), threshold_days)

    return SweepResult(
        active=remaining,
        archived=[*archived_pool, *newly_archived],
        archived_count=len(newly_archived),
    )


def unarchive(
    archived_pool: list[ArchivedWord],
    active_pool: list[ActiveWord],
    word_id: int,
    today: Optional[dt.date] = None
) -> Optional[ActiveWord]:
    """
    Move an archived word back to the active pool (in place).

    Returns:
        The restored active word, or None if the id is not archived
    """
    index = next((i for i, word in enumerate(archived_pool) if word.id == word_id), None)
    if index is None:
        logger.debug("Unarchive ignored: word %s is not archived", word_id)
        return None

    archived = archived_pool.pop(index)
    restored = decompress_word(archived, today or dates.today())
    active_pool.append(restored)
    logger.info("Unarchived word %s (%s) after failed reviews", archived.id, archived.de)
    return restored
