"""
German Vocabulary Trainer - Main App

Streamlit UI for the streak-based vocabulary learning engine.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st

from app.router import PAGES
from app.session_controller import quit_session
from app.state import ensure_session_state, init_database
from app.ui import render_session_stats
from core.logging_setup import setup_logging


# ---- Page Setup ----

st.set_page_config(
    page_title="German Vocabulary Trainer",
    page_icon="🇩🇪",
    layout="centered"
)

setup_logging()
init_database()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    if st.session_state.session is not None:
        # No tabs while a round is running
        if render_session_stats():
            if quit_session():
                st.rerun()
        PAGES[0].render()
        return

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
