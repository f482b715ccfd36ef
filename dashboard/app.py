"""F1 Season Leaderboard — Streamlit + Plotly over the season summary service."""

from __future__ import annotations

import streamlit as st

from seasonboard.state import StoreStatus

from shared import (
    ROSTER_COLUMNS,
    close_detail,
    format_driver_count,
    format_updated,
    get_controller,
    render_detail,
    roster_rows,
    roster_table_key,
    run_fetch,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Driver Leaderboard",
    page_icon="\U0001f3ce\ufe0f",
    layout="wide",
)

controller = get_controller()
st.session_state.setdefault("season_input", controller.season)
st.session_state.setdefault("search_query", "")


# ── Header — season selector ─────────────────────────────────────────────────

title_col, season_col, status_col = st.columns([4, 1, 1])
with title_col:
    st.title("F1 Driver Performance Dashboard")
    st.caption("Live ranking and detailed stats for the current season")
with season_col:
    season = int(st.number_input("Season", key="season_input", step=1, format="%d"))

if season != controller.season:
    with st.spinner("Fetching data…"):
        run_fetch(lambda: controller.set_season(season))
elif controller.status is StoreStatus.IDLE:
    with st.spinner("Fetching data…"):
        run_fetch(controller.mount)

with status_col:
    st.caption(format_updated(controller.view.updated_at))
    if st.button("Refresh"):
        with st.spinner("Fetching data…"):
            run_fetch(controller.refresh)


# ── Search ───────────────────────────────────────────────────────────────────

search_col, count_col = st.columns([5, 1])
with search_col:
    query = st.text_input(
        "Search",
        key="search_query",
        placeholder="Search driver or team",
        label_visibility="collapsed",
    )
if query != controller.view.search_query:
    controller.set_query(query)

view = controller.view
with count_col:
    st.markdown(f"**{format_driver_count(view.driver_count)}**")

if view.error:
    st.error(view.error)


# ── Roster table ─────────────────────────────────────────────────────────────

event = st.dataframe(
    roster_rows(view.visible),
    column_order=ROSTER_COLUMNS,
    column_config={
        "Perf Index": st.column_config.ProgressColumn(
            "Perf Index", min_value=0, max_value=100, format="%.1f",
        ),
    },
    hide_index=True,
    use_container_width=True,
    on_select="rerun",
    selection_mode="single-row",
    key=roster_table_key(view.generation, view.search_query),
)

picked = event.selection.rows
if picked and not view.detail_open and picked[0] < len(view.visible):
    controller.select(view.visible[picked[0]])
    view = controller.view


# ── Driver detail ────────────────────────────────────────────────────────────


@st.dialog("Driver detail", width="large", on_dismiss=lambda: close_detail(controller))
def show_driver_detail() -> None:
    selected = controller.view.selected
    if selected is not None:
        render_detail(controller, selected)


if view.detail_open:
    show_driver_detail()
