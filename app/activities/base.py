"""
Abstract Base Activity

Defines the interface for card activities.
"""

from abc import ABC, abstractmethod
from typing import Callable, Union

from core.learning import AnswerOutcome
from core.schemas import ActiveWord, ArchivedWord


class AbstractActivity(ABC):
    """
    Abstract base class for card activities.

    Subclasses should implement:
    - render_card_front()
    - render_card_back()
    """

    def __init__(self, word: Union[ActiveWord, ArchivedWord]):
        self.word = word

    @abstractmethod
    def render_card_front(self, on_submit: Callable[[str], None], key: str) -> None:
        """Render the question side with an answer input."""

    @abstractmethod
    def render_card_back(self, outcome: AnswerOutcome) -> None:
        """Render the answer side with the result of the last answer."""
