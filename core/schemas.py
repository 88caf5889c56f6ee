"""
Pydantic models for the vocabulary pools and app metadata.

These models define the structure of the persisted pool documents
(active words, archived words, metadata). Field aliases follow the
camelCase keys used in the stored JSON.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    model_validator,
)


# Configuration
MASTERY_STREAK = 5  # Consecutive correct answers needed to master a word
POOL_VERSION = "1.0"


class Difficulty(IntEnum):
    """Difficulty tier of a word."""
    EASY = 1
    MEDIUM = 2
    HARD = 3


class Article(str, Enum):
    """German articles for nouns."""
    DER = "der"
    DIE = "die"
    DAS = "das"


class MasteryStatus(str, Enum):
    """Learning state of an active word."""
    LEARNING = "learning"
    MASTERED = "mastered"


# ---- Attempts ----

class Attempt(BaseModel):
    """A single answer given for a word."""
    model_config = ConfigDict(populate_by_name=True)

    date: dt.date
    correct: bool
    response_time_ms: int = Field(
        0,
        alias="responseTimeMs",
        validation_alias=AliasChoices("responseTimeMs", "ms"),
    )


# ---- Word content ----

class WordContent(BaseModel):
    """
    Static content of a vocabulary entry.

    Shared by active and archived words; never changed by learning.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int
    de: str = Field(..., description="German term")
    article: Optional[Article] = None
    plural: Optional[str] = None
    en: list[str] = Field(default_factory=list, description="English translations")
    pt: list[str] = Field(default_factory=list, description="Portuguese translations")
    example: str = ""
    example_pt: str = Field("", alias="examplePt")
    level: Optional[str] = None  # CEFR label, e.g. "A1"
    difficulty: Difficulty = Difficulty.MEDIUM
    false_friend: bool = Field(False, alias="falseFriend")
    warning: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_null_content(cls, data: Any) -> Any:
        # Older exports store missing flags and lists as null
        if isinstance(data, dict):
            data = {
                key: value for key, value in data.items()
                if not (value is None and key in ("en", "pt", "example", "examplePt", "falseFriend"))
            }
        return data

    def content(self) -> dict:
        """Return only the static content fields (python names)."""
        return self.model_dump(include=set(WordContent.model_fields))

    @property
    def display_term(self) -> str:
        """Term with its article, e.g. 'der Hund'."""
        if self.article:
            return f"{self.article.value} {self.de}"
        return self.de

    @property
    def accepted_answers(self) -> list[str]:
        return [*self.en, *self.pt]


CONTENT_FIELDS = frozenset(WordContent.model_fields)


# ---- Active and archived words ----

class ActiveWord(WordContent):
    """
    A word in the active pool, with its full attempt history.

    Mastery is an explicit state: a mastered word always carries the date
    it was mastered and a streak of at least MASTERY_STREAK.
    """
    attempts: list[Attempt] = Field(default_factory=list)
    streak: int = Field(0, ge=0)
    mastery: MasteryStatus = MasteryStatus.LEARNING
    mastered_date: Optional[dt.date] = Field(
        None,
        alias="masteredDate",
        validation_alias=AliasChoices("masteredDate", "memorizedDate", "mastered_date"),
    )

    @model_validator(mode="before")
    @classmethod
    def _legacy_mastery_flag(cls, data: Any) -> Any:
        # Documents written before the mastery enum only carry a boolean
        if isinstance(data, dict) and "mastery" not in data:
            flag = data.get("mastered", data.get("memorized"))
            if flag is not None:
                data = dict(data)
                data["mastery"] = MasteryStatus.MASTERED if flag else MasteryStatus.LEARNING
        return data

    @model_validator(mode="after")
    def _check_mastery(self) -> "ActiveWord":
        if self.mastery == MasteryStatus.MASTERED:
            if self.mastered_date is None:
                raise ValueError(f"word {self.id} is mastered but has no masteredDate")
            if self.streak < MASTERY_STREAK:
                raise ValueError(
                    f"word {self.id} is mastered with streak {self.streak} < {MASTERY_STREAK}"
                )
        elif self.mastered_date is not None:
            raise ValueError(f"word {self.id} is not mastered but has a masteredDate")
        return self

    @computed_field
    @property
    def mastered(self) -> bool:
        return self.mastery == MasteryStatus.MASTERED

    @property
    def last_attempt(self) -> Optional[Attempt]:
        return self.attempts[-1] if self.attempts else None

    def mark_mastered(self, today: dt.date) -> None:
        self.mastery = MasteryStatus.MASTERED
        self.mastered_date = today

    def revoke_mastery(self) -> None:
        self.mastery = MasteryStatus.LEARNING
        self.mastered_date = None


class ArchivedWord(WordContent):
    """
    Compressed form of a word kept in the archive.

    The attempt history is replaced by summary counts frozen at archive time.
    """
    total_attempts: int = Field(0, alias="totalAttempts", ge=0)
    total_correct: int = Field(0, alias="totalCorrect", ge=0)
    accuracy: float = 0.0
    mastered_date: Optional[dt.date] = Field(
        None,
        alias="masteredDate",
        validation_alias=AliasChoices("masteredDate", "memorizedDate", "mastered_date"),
    )
    archived_date: dt.date = Field(..., alias="archivedDate")
    last_review_date: Optional[dt.date] = Field(None, alias="lastReviewDate")
    review_failures: int = Field(0, alias="reviewFailures", ge=0)


# ---- Metadata ----

class Settings(BaseModel):
    """Learner-facing settings stored with the app metadata."""
    model_config = ConfigDict(populate_by_name=True)

    archive_threshold_days: int = Field(90, alias="archiveThresholdDays", ge=0)
    session_length: int = Field(15, alias="sessionLength", ge=1)
    review_session_length: int = Field(10, alias="reviewSessionLength", ge=1)
    unarchive_failure_threshold: int = Field(2, alias="unarchiveFailureThreshold", ge=1)


class AggregateStats(BaseModel):
    """Aggregate statistics, updated only when a session ends."""
    model_config = ConfigDict(populate_by_name=True)

    total_words: int = Field(0, alias="totalWords")
    active_words: int = Field(0, alias="activeWords")
    mastered_words: int = Field(
        0,
        alias="masteredWords",
        validation_alias=AliasChoices("masteredWords", "memorizedWords", "mastered_words"),
    )
    archived_words: int = Field(0, alias="archivedWords")
    start_date: Optional[dt.date] = Field(None, alias="startDate")
    total_sessions: int = Field(0, alias="totalSessions")
    total_cards: int = Field(0, alias="totalCards")
    overall_accuracy: float = Field(0.0, alias="overallAccuracy")
    current_streak: int = Field(0, alias="currentStreak")
    longest_streak: int = Field(0, alias="longestStreak")
    last_session_date: Optional[dt.date] = Field(None, alias="lastSessionDate")


class Metadata(BaseModel):
    """Settings and statistics document for one app."""
    model_config = ConfigDict(populate_by_name=True)

    version: str = POOL_VERSION
    settings: Settings = Field(default_factory=Settings)
    stats: AggregateStats = Field(default_factory=AggregateStats)
    last_archive_check: Optional[dt.datetime] = Field(None, alias="lastArchiveCheck")
    last_backup: Optional[dt.datetime] = Field(None, alias="lastBackup")


def to_document(model: BaseModel) -> dict:
    """Serialize a model to its stored JSON form (camelCase keys)."""
    return model.model_dump(mode="json", by_alias=True)
