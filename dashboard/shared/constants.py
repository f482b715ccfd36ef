"""Shared constants for the leaderboard dashboard."""

from __future__ import annotations

F1_RED = "#E10600"
GRID_GRAY = "#9CA3AF"

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

ROSTER_COLUMNS: list[str] = [
    "#",
    "Driver",
    "Team",
    "Pts",
    "Wins",
    "Avg Quali",
    "Avg Grid",
    "Avg Finish",
    "Perf Index",
    "DNFs",
]

ROUND_COLUMNS: list[str] = ["Rnd", "Quali", "Grid", "Finish", "Status", "Pts"]

# Performance index is rendered as a 0-100 progress bar
PERFORMANCE_INDEX_MAX = 100.0
