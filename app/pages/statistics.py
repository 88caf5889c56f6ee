"""
Statistics page rendering.
"""

from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from core import store
from core.analytics import build_statistics_dashboard
from core.analytics.constants import STREAK_BUCKETS
from core.learning import dates


def render_statistics_page() -> None:
    st.subheader("Learning Statistics")
    st.caption(f"Word list: {st.session_state.app_name}")

    dashboard = build_statistics_dashboard(
        st.session_state.active_pool,
        st.session_state.archived_pool,
        st.session_state.metadata.stats,
    )
    stats = dashboard.stats
    overview = dashboard.overview

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Current Streak", f"{stats.current_streak} days")
    with col2:
        st.metric("Longest Streak", f"{stats.longest_streak} days")
    with col3:
        st.metric(
            "Accuracy",
            f"{overview.accuracy * 100:.0f}%",
            help=f"{overview.total_attempts:,} answers on active words",
        )
    with col4:
        st.metric("Sessions", f"{stats.total_sessions:,}")

    st.markdown("### Learning Words by Streak")
    if overview.learning == 0:
        st.info("No words in learning.")
    else:
        streaks = pd.Series(
            [overview.streak_distribution.get(bucket, 0) for bucket in STREAK_BUCKETS],
            index=[f"streak {bucket}" for bucket in STREAK_BUCKETS],
            name="words",
        )
        st.bar_chart(streaks.to_frame())

    st.markdown("### Answers Over Time")
    if dashboard.attempts_daily.empty:
        st.info("No answers recorded yet.")
    else:
        st.bar_chart(dashboard.attempts_daily[["attempts", "correct"]])

    st.markdown("### By Difficulty")
    if dashboard.difficulty_breakdown.empty:
        st.info("No words yet.")
    else:
        st.dataframe(dashboard.difficulty_breakdown, use_container_width=True)

    st.markdown("### Hardest Words")
    if dashboard.hardest_words.empty:
        st.info("No answers recorded yet.")
    else:
        st.dataframe(dashboard.hardest_words, use_container_width=True, hide_index=True)

    st.markdown("### Backup")
    app_name = st.session_state.app_name
    st.download_button(
        "Export Data",
        data=json.dumps(store.export_app(app_name), ensure_ascii=False, indent=2),
        file_name=f"{app_name}-backup-{dates.today().isoformat()}.json",
        mime="application/json",
    )
