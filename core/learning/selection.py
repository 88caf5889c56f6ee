"""
Selection - Choosing Words for a Round

Three selection policies, one per session mode:
1. Practice: unmastered words, weighted random sampling without replacement
2. Review: mastered words, oldest mastery first (closest to archiving)
3. Archive review: archived words, never-reviewed first, then oldest review

Selection is a pure function of the pools; nothing here mutates a word.
An empty result means no round is possible for that mode.
"""

from __future__ import annotations

import datetime as dt
import random
from typing import Optional, Sequence, TypeVar

from core.learning.constants import (
    BASE_WEIGHT,
    DIFFICULTY_WEIGHT,
    FAILED_LAST_ATTEMPT_WEIGHT,
    LOW_STREAK_MAX,
    LOW_STREAK_WEIGHT,
    SessionMode,
)
from core.schemas import ActiveWord, ArchivedWord


T = TypeVar("T")


def practice_weight(word: ActiveWord) -> float:
    """
    Selection weight of an unmastered word.

    Weight factors (multiplicative):
    - Most recent attempt failed: x3
    - Low streak (1-2): x2
    - Hard word: x2, easy word: x0.5
    """
    weight = BASE_WEIGHT

    last = word.last_attempt
    if last is not None and not last.correct:
        weight *= FAILED_LAST_ATTEMPT_WEIGHT

    if 0 < word.streak <= LOW_STREAK_MAX:
        weight *= LOW_STREAK_WEIGHT

    return weight * DIFFICULTY_WEIGHT.get(word.difficulty, 1.0)


def weighted_sample(
    items: Sequence[T],
    weights: Sequence[float],
    count: int,
    rng: Optional[random.Random] = None
) -> list[T]:
    """
    Draw up to `count` items without replacement, proportional to weight.

    Each step draws a cursor uniformly in [0, total remaining weight) and
    walks the buffer subtracting weights until the cursor is non-positive.
    The chosen slot is overwritten by the last live slot, so removal is O(1).

    Args:
        items: Candidates
        weights: Positive weight per candidate (same length as items)
        count: Number of items to draw
        rng: Random source (defaults to the module-level generator)

    Returns:
        Distinct items in draw order
    """
    if len(items) != len(weights):
        raise ValueError("items and weights must have the same length")

    draw = rng.random if rng is not None else random.random
    buffer = list(items)
    buffer_weights = [float(w) for w in weights]
    live = len(buffer)
    selected: list[T] = []

    while len(selected) < count and live > 0:
        total = sum(buffer_weights[:live])
        cursor = draw() * total

        chosen = live - 1  # float round-off can leave the cursor just above zero
        for position in range(live):
            cursor -= buffer_weights[position]
            if cursor <= 0:
                chosen = position
                break

        selected.append(buffer[chosen])
        live -= 1
        buffer[chosen] = buffer[live]
        buffer_weights[chosen] = buffer_weights[live]

    return selected


def select_for_practice(
    active_pool: Sequence[ActiveWord],
    count: int,
    rng: Optional[random.Random] = None
) -> list[ActiveWord]:
    """
    Select unmastered words for a practice round.

    If there are no more learning words than requested, all of them are
    returned; otherwise a weighted sample is drawn.
    """
    learning = [word for word in active_pool if not word.mastered]
    if count <= 0 or not learning:
        return []
    if len(learning) <= count:
        return learning
    return weighted_sample(learning, [practice_weight(w) for w in learning], count, rng)


def select_for_review(active_pool: Sequence[ActiveWord], count: int) -> list[ActiveWord]:
    """
    Select mastered words, oldest mastery first.
    """
    if count <= 0:
        return []
    mastered = [word for word in active_pool if word.mastered]
    mastered.sort(key=lambda word: word.mastered_date or dt.date.min)
    return mastered[:count]


def select_for_archive_review(
    archived_pool: Sequence[ArchivedWord],
    count: int
) -> list[ArchivedWord]:
    """
    Select archived words, never-reviewed first, then least recently reviewed.
    """
    if count <= 0:
        return []
    ordered = sorted(
        archived_pool,
        key=lambda word: (
            word.last_review_date is not None,
            word.last_review_date or dt.date.min,
        )
    )
    return ordered[:count]


def select_for_mode(
    mode: SessionMode,
    active_pool: Sequence[ActiveWord],
    archived_pool: Sequence[ArchivedWord],
    count: int,
    rng: Optional[random.Random] = None
) -> list:
    """
    Dispatch to the selection policy for a session mode.
    """
    mode = SessionMode(mode)
    if mode == SessionMode.PRACTICE:
        return select_for_practice(active_pool, count, rng)
    if mode == SessionMode.REVIEW:
        return select_for_review(active_pool, count)
    return select_for_archive_review(archived_pool, count)
