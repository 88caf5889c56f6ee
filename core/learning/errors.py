"""
Errors raised by the learning engine.
"""

from __future__ import annotations


class LearningError(Exception):
    """Base class for learning engine errors."""


class EmptySelectionPool(LearningError):
    """
    Raised when a round is requested but the mode has no eligible words.

    Not fatal: the host should refuse to start the round and let the
    learner pick another mode.
    """

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"No words available for mode '{mode}'")
