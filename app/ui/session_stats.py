"""
Session Statistics UI

Renders round progress, the results screen and pool counts.
"""

import streamlit as st

from core import learning
from core.analytics import PoolOverview


def render_session_stats() -> bool:
    """
    Render round progress metrics and the quit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    session = st.session_state.session
    if session is None:
        return False

    total = len(session.words)
    answered = session.position

    col1, col2, col3, col4 = st.columns([3, 2, 2, 1])

    with col1:
        st.caption(learning.MODE_LABELS[session.mode])
        st.progress(answered / total if total else 0.0, text=f"Card {min(answered + 1, total)} of {total}")

    with col2:
        st.metric("Answered", answered)

    with col3:
        if answered > 0:
            accuracy = session.correct_count / answered * 100
            st.metric("Accuracy", f"{accuracy:.0f}%")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("❌", help="Quit session (progress is saved)", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete() -> None:
    """Render the results of the last finished round."""
    results = st.session_state.last_results
    if not results or results["total"] <= 0:
        return

    correct = results["correct"]
    total = results["total"]
    accuracy = round(correct / total * 100)
    st.success(f"{results['message']} {correct} out of {total} correct.")
    st.info(f"Accuracy: {accuracy}%")


def render_pool_counts(overview: PoolOverview) -> None:
    """Render learning / mastered / archived counts."""
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Learning", overview.learning)
    with col2:
        st.metric("Mastered", overview.mastered)
    with col3:
        st.metric("Archived", overview.archived)
