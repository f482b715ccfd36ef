"""Streamlit building blocks for the leaderboard page."""

from __future__ import annotations

import streamlit as st

from seasonboard.models.competitor import Competitor
from seasonboard.state import LeaderboardController

from .charts import build_round_chart
from .constants import PERFORMANCE_INDEX_MAX
from .formatters import format_stat, format_subtitle, performance_fraction
from .tables import round_rows, summary_metrics

TABLE_EPOCH_KEY = "roster_table_epoch"


def roster_table_key(generation: int, query: str) -> str:
    """Widget key for the roster table.

    Changing it drops any stale row selection held by the dataframe widget.
    """
    epoch = st.session_state.get(TABLE_EPOCH_KEY, 0)
    return f"roster-{generation}-{epoch}-{query.strip().lower()}"


def close_detail(controller: LeaderboardController) -> None:
    controller.clear_selection()
    st.session_state[TABLE_EPOCH_KEY] = st.session_state.get(TABLE_EPOCH_KEY, 0) + 1


def render_detail(controller: LeaderboardController, driver: Competitor) -> None:
    """Body of the driver detail dialog."""
    head_col, close_col = st.columns([5, 1])
    with head_col:
        st.subheader(driver.full_name or format_stat(driver.driver_id))
        st.caption(format_subtitle(driver.constructor, driver.nationality))
    with close_col:
        if st.button("Close", key="close_detail"):
            close_detail(controller)
            st.rerun()

    metric_cols = st.columns(3)
    for col, (label, value) in zip(metric_cols, summary_metrics(driver).items()):
        col.metric(label, value)
    st.progress(performance_fraction(driver.performance_index, PERFORMANCE_INDEX_MAX))

    st.markdown("#### Round-by-round")
    rows = round_rows(driver)
    if not rows:
        st.info("No round data available.")
        return
    st.dataframe(rows, hide_index=True, use_container_width=True)
    st.plotly_chart(build_round_chart(driver), use_container_width=True)
