"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.activities import NounActivity
from app.session_controller import next_card, start_new_session, submit_current_answer
from app.ui import render_pool_counts, render_session_complete
from core import store
from core.analytics import build_overview
from core.learning import MODE_LABELS, SessionMode


def render_study_page() -> None:
    """
    Render the study flow (mode selection or active round).
    """
    if st.session_state.session is None:
        _render_intro_screen()
    else:
        _render_active_session()


def _render_intro_screen() -> None:
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("🇩🇪 German Vocabulary Trainer")
    if store.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using the test database (set TEST_MODE=false in .env for production)")

    render_session_complete()

    overview = build_overview(st.session_state.active_pool, st.session_state.archived_pool)
    render_pool_counts(overview)

    settings = st.session_state.metadata.settings
    st.markdown("### 📚 Choose a mode")

    buttons = [
        (SessionMode.PRACTICE, settings.session_length, overview.learning, "primary"),
        (SessionMode.REVIEW, settings.review_session_length, overview.mastered, "secondary"),
        (SessionMode.ARCHIVE, settings.review_session_length, overview.archived, "secondary"),
    ]
    for mode, length, available, button_type in buttons:
        label = f"{MODE_LABELS[mode]} ({length} cards)"
        if st.button(label, type=button_type, use_container_width=True, disabled=available == 0, key=f"start_{mode.value}"):
            if start_new_session(mode):
                st.rerun()


def _render_active_session() -> None:
    session = st.session_state.session
    outcome = st.session_state.last_outcome

    st.markdown("<br>", unsafe_allow_html=True)

    if not st.session_state.show_answer or outcome is None:
        activity = NounActivity(session.current)
        activity.render_card_front(on_submit=submit_current_answer, key=str(session.position))
        return

    activity = NounActivity(outcome.word)
    activity.render_card_back(outcome)
    st.markdown("<br>", unsafe_allow_html=True)

    label = "Finish Session" if session.is_finished else "Next Card →"
    if st.button(label, type="primary", use_container_width=True, key=f"next_{session.position}"):
        if next_card():
            st.rerun()
