"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.schemas import Article


# ---- Shared Card Layout ----

CARD_PADDING = "30px 24px"
CARD_MIN_HEIGHT = "200px"
ACCENT_WIDTH = "6px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


# ---- Gender Colors ----

GENDER_COLORS = {
    Article.DER: "#2563eb",  # blue
    Article.DIE: "#dc2626",  # red
    Article.DAS: "#16a34a",  # green
}
NEUTRAL_ACCENT = "#9ca3af"

RESULT_CORRECT_COLOR = "#16a34a"
RESULT_INCORRECT_COLOR = "#dc2626"


def gender_color(article: Optional[Article]) -> str:
    """Accent color for a noun's grammatical gender."""
    if article is None:
        return NEUTRAL_ACCENT
    return GENDER_COLORS.get(Article(article), NEUTRAL_ACCENT)


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = "2.6em"
    main_color: str = "#1f1f1f"
    subtitle_font_size: str = "1.2em"
    subtitle_color: str = "#666"
    corner_font_size: str = "0.9em"
    corner_color: str = "#666"
    wrap_text: bool = False
    bg_color: str = FRONT_BG_COLOR


# ---- Card Presets ----

NOUN_FRONT_STYLE = FlashcardStyle()

NOUN_BACK_STYLE = FlashcardStyle(
    main_font_size="1.9em",
    subtitle_font_size="1.0em",
    wrap_text=True,
    bg_color=BACK_BG_COLOR,
)
