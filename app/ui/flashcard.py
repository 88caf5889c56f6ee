"""
Flashcard UI Component

Renders a noun card with a gender-colored accent bar.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.flashcard_style import (
    ACCENT_WIDTH,
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    NOUN_FRONT_STYLE,
    FlashcardStyle,
)


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    accent_color: str | None = None,
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text below the main text, e.g. the plural
        corner_text: Optional text in the top-right corner
        accent_color: Color of the left accent bar (gender color for nouns)
        style: Style preset (default: noun front)
    """
    style = style or NOUN_FRONT_STYLE
    white_space = "normal" if style.wrap_text else "nowrap"
    border = f"border-left: {ACCENT_WIDTH} solid {accent_color};" if accent_color else ""

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color}; '
            f'font-style: italic;">{escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        f'font-weight: normal; margin: 0; white-space: {white_space}; '
        'text-align: center; line-height: 1.4; overflow-wrap: anywhere;">'
        f"{escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            'font-style: italic; margin: 12px 0 0 0; text-align: center;">'
            f"{escape(subtitle)}</p>"
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; {border} '
        'border-radius: 15px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); '
        f'min-height: {CARD_MIN_HEIGHT}; display: flex; flex-direction: column; '
        'align-items: center; justify-content: center; position: relative;">'
        f"{corner_html}{main_html}{subtitle_html}</div>"
    )
    st.markdown(html, unsafe_allow_html=True)
