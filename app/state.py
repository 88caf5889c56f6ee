"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import logging

import streamlit as st

from core import store


logger = logging.getLogger(__name__)


def init_database() -> None:
    """
    Initialize database schema and the app's documents (cached per process).
    """
    @st.cache_resource
    def _init_database(app_name: str) -> None:
        store.init_db()
        store.init_app(app_name)

    _init_database(store.get_app_name())


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "app_name" not in st.session_state:
        st.session_state.app_name = store.get_app_name()
    if "active_pool" not in st.session_state:
        st.session_state.active_pool = None
    if "archived_pool" not in st.session_state:
        st.session_state.archived_pool = None
    if "metadata" not in st.session_state:
        st.session_state.metadata = None
    if "session" not in st.session_state:
        st.session_state.session = None
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "last_outcome" not in st.session_state:
        st.session_state.last_outcome = None
    if "start_time" not in st.session_state:
        st.session_state.start_time = None
    if "last_results" not in st.session_state:
        st.session_state.last_results = None

    if st.session_state.active_pool is None:
        load_pools()


def load_pools() -> None:
    """
    Run the archive sweep, then load both pools and the metadata.

    A failed sweep is logged and the pools load as last saved.
    """
    app_name = st.session_state.app_name
    try:
        archived_count = store.run_archive_process(app_name)
    except store.PersistenceError as e:
        logger.warning("Archive check failed, loading pools unchanged: %s", e)
    else:
        if archived_count:
            logger.info("Archive sweep on load moved %d word(s)", archived_count)

    st.session_state.active_pool = store.load_active(app_name)
    st.session_state.archived_pool = store.load_archived(app_name)
    st.session_state.metadata = store.load_metadata(app_name)
