"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging

import streamlit as st

from app.state import load_pools
from core import learning, store


logger = logging.getLogger(__name__)


def start_new_session(mode: learning.SessionMode) -> bool:
    """
    Start a new round for `mode`, or show an error if it has no words.

    Returns:
        True if a round was started
    """
    settings = st.session_state.metadata.settings
    count = learning.session_length_for(mode, settings)

    try:
        session = learning.start_session(
            mode,
            st.session_state.active_pool,
            st.session_state.archived_pool,
            count,
        )
    except learning.EmptySelectionPool:
        st.error("No words available for this mode. Try a different practice mode.")
        return False

    st.session_state.session = session
    st.session_state.last_results = None
    _reset_card()
    return True


def _reset_card() -> None:
    st.session_state.show_answer = False
    st.session_state.last_outcome = None
    st.session_state.start_time = datetime.now(timezone.utc)


def submit_current_answer(user_input: str) -> None:
    """
    Check and record the answer for the current card, then show its back.
    """
    session = st.session_state.session
    if session is None or session.is_finished or not user_input.strip():
        return

    response_time_ms = 0
    if st.session_state.start_time:
        elapsed = datetime.now(timezone.utc) - st.session_state.start_time
        response_time_ms = int(elapsed.total_seconds() * 1000)

    outcome = learning.submit_answer(
        session,
        user_input,
        st.session_state.active_pool,
        st.session_state.archived_pool,
        st.session_state.metadata.settings,
        response_time_ms=response_time_ms,
    )
    st.session_state.last_outcome = outcome
    st.session_state.show_answer = True


def next_card() -> bool:
    """
    Move to the next card, or finish the round after the last one.

    Returns:
        False if the round could not be saved
    """
    session = st.session_state.session
    if session is None:
        return False
    if session.is_finished:
        return finish_session()
    _reset_card()
    return True


def finish_session() -> bool:
    """
    Save pools, fold results into the statistics and sweep the archive.

    On a failed save the round is kept so the user can retry.

    Returns:
        True if the round was saved
    """
    session = st.session_state.session
    if session is None:
        return False
    app_name = st.session_state.app_name
    active_pool = st.session_state.active_pool
    archived_pool = st.session_state.archived_pool
    metadata = st.session_state.metadata

    stats = learning.finalize_session(
        metadata.stats,
        session.results,
        active_pool,
        archived_pool,
    )
    try:
        store.save_pools(app_name, active_pool, archived_pool)
        store.save_metadata(app_name, metadata.model_copy(update={"stats": stats}))
    except store.PersistenceError as e:
        logger.error("Failed to save %s session: %s", session.mode.value, e)
        st.error(f"❌ Could not save your progress: {e}. Please try again.")
        return False
    metadata.stats = stats

    correct = session.correct_count
    total = len(session.results)
    st.session_state.last_results = {
        "mode": session.mode,
        "correct": correct,
        "total": total,
        "message": learning.session_message(correct, total),
    }
    logger.info("Finished %s session: %d/%d correct", session.mode.value, correct, total)

    st.session_state.session = None
    _reload_pools()
    return True


def quit_session() -> bool:
    """
    Abandon the round; answers given so far are saved.
    """
    session = st.session_state.session
    if session is None:
        return False
    try:
        store.save_pools(
            st.session_state.app_name,
            st.session_state.active_pool,
            st.session_state.archived_pool,
        )
    except store.PersistenceError as e:
        logger.error("Failed to save pools on quit: %s", e)
        st.error(f"❌ Could not save your progress: {e}. Please try again.")
        return False
    st.session_state.session = None
    st.session_state.last_results = None
    _reload_pools()
    return True


def _reload_pools() -> None:
    load_pools()
    _reset_card()
