"""
Noun Activity

Shows the German noun with its article and plural; the learner types an
English or Portuguese translation.
"""

from typing import Callable

import streamlit as st

from app.activities.base import AbstractActivity
from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import (
    NOUN_BACK_STYLE,
    NOUN_FRONT_STYLE,
    RESULT_CORRECT_COLOR,
    RESULT_INCORRECT_COLOR,
    gender_color,
)
from core.learning import AnswerOutcome


class NounActivity(AbstractActivity):
    """
    Noun translation card.

    Front: article + noun, plural, answer box.
    Back: result, translations, warning and example sentence.
    """

    def render_card_front(self, on_submit: Callable[[str], None], key: str) -> None:
        word = self.word
        render_flashcard(
            main_text=word.display_term,
            subtitle=word.plural or "",
            corner_text=word.level or "",
            accent_color=gender_color(word.article),
            style=NOUN_FRONT_STYLE,
        )
        st.markdown("<br>", unsafe_allow_html=True)

        with st.form(key=f"answer_form_{key}", clear_on_submit=True):
            answer = st.text_input(
                "Translation",
                placeholder="Type translation (English or Portuguese)...",
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button("Check Answer", type="primary", use_container_width=True)

        if submitted:
            if answer.strip():
                on_submit(answer)
                st.rerun()
            else:
                st.warning("Type an answer first.")

    def render_card_back(self, outcome: AnswerOutcome) -> None:
        word = self.word
        header = word.display_term
        if word.plural:
            header = f"{header} → {word.plural}"

        render_flashcard(
            main_text=header,
            corner_text=word.level or "",
            accent_color=gender_color(word.article),
            style=NOUN_BACK_STYLE,
        )

        if outcome.correct:
            st.markdown(f"<h3 style='color: {RESULT_CORRECT_COLOR};'>✓ Correct</h3>", unsafe_allow_html=True)
        else:
            st.markdown(f"<h3 style='color: {RESULT_INCORRECT_COLOR};'>✗ Incorrect</h3>", unsafe_allow_html=True)
        if outcome.unarchived:
            st.warning(f"Word unarchived: {word.de}. You'll see it in normal practice now.")

        st.markdown(
            "**Translations:**  \n"
            f"🇬🇧 {', '.join(word.en) or '-'}  \n"
            f"🇧🇷 {', '.join(word.pt) or '-'}"
        )

        if word.warning:
            st.warning(f"⚠️ {word.warning}")
        elif word.false_friend:
            st.warning("⚠️ False friend")

        if word.example:
            example = f"**Example:**  \n{word.example}"
            if word.example_pt:
                example += f"  \n*({word.example_pt})*"
            st.markdown(example)
