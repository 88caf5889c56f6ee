"""Card Activities for the German Vocabulary Trainer"""

from app.activities.base import AbstractActivity
from app.activities.noun_activity import NounActivity

__all__ = [
    "AbstractActivity",
    "NounActivity",
]
