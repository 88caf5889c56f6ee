"""
Answer Matching

Fuzzy comparison of a typed answer against the accepted translations.

Rules:
- Case, surrounding whitespace and repeated spaces are ignored
- A leading article (English "the/a/an", Portuguese "o/a/os/as") is ignored
- One edit (insert, delete, substitute) is tolerated for typos
"""

from __future__ import annotations

import re
from typing import Iterable

from core.learning.constants import MAX_TYPO_DISTANCE


LEADING_ARTICLE = re.compile(r"^(the|a|an|o|os|as)\s+", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")


def normalize_answer(text: str) -> str:
    """
    Normalize an answer for comparison.

    Examples:
        "  The Dog " -> "dog"
        "os  livros" -> "livros"
    """
    text = text.lower().strip()
    text = LEADING_ARTICLE.sub("", text, count=1)
    return WHITESPACE.sub(" ", text)


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between two strings (insertions, deletions, substitutions).
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(
                    previous[j - 1],  # substitution
                    current[j - 1],   # insertion
                    previous[j],      # deletion
                ))
        previous = current
    return previous[-1]


def is_correct_answer(
    user_input: str,
    accepted_answers: Iterable[str],
    max_distance: int = MAX_TYPO_DISTANCE
) -> bool:
    """
    Check a typed answer against the accepted translations.

    Args:
        user_input: Raw text typed by the learner
        accepted_answers: Translations that count as correct
        max_distance: Typo tolerance in edits

    Returns:
        True if the answer matches any accepted translation
    """
    normalized = normalize_answer(user_input)
    if not normalized:
        return False

    for answer in accepted_answers:
        expected = normalize_answer(answer)
        if not expected:
            continue
        if normalized == expected:
            return True
        if levenshtein(normalized, expected) <= max_distance:
            return True
    return False
