"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    F1_RED,
    PERFORMANCE_INDEX_MAX,
    PLOTLY_LAYOUT_DEFAULTS,
    ROSTER_COLUMNS,
    ROUND_COLUMNS,
)
from .formatters import (
    format_driver_count,
    format_stat,
    format_subtitle,
    format_updated,
    performance_fraction,
)
from .tables import round_rows, roster_rows, summary_metrics

# --- Charts ---
from .charts import build_round_chart

# --- Runtime & UI components ---
from .runtime import fetch_season_summary, get_controller, run_fetch
from .components import close_detail, render_detail, roster_table_key

__all__ = [
    "F1_RED",
    "PERFORMANCE_INDEX_MAX",
    "PLOTLY_LAYOUT_DEFAULTS",
    "ROSTER_COLUMNS",
    "ROUND_COLUMNS",
    "build_round_chart",
    "close_detail",
    "fetch_season_summary",
    "format_driver_count",
    "format_stat",
    "format_subtitle",
    "format_updated",
    "get_controller",
    "performance_fraction",
    "render_detail",
    "roster_rows",
    "roster_table_key",
    "round_rows",
    "run_fetch",
    "summary_metrics",
]
