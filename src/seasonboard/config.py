"""Runtime configuration for the season leaderboard."""

from __future__ import annotations

import datetime
import os

BACKEND_URL_ENV = "SEASONBOARD_BACKEND_URL"
LOG_DIR_ENV = "SEASONBOARD_LOG_DIR"

# Origin of the Streamlit server hosting the dashboard
DEFAULT_BACKEND_URL = "http://localhost:8501"
DEFAULT_LOG_DIR = "logs"
DEFAULT_TIMEOUT = 30.0

SUMMARY_ENDPOINT = "/api/season/summary"


def get_backend_url() -> str:
    """Return the aggregation service base URL.

    Falls back to the host serving the dashboard when the variable is unset
    or blank.
    """
    value = os.environ.get(BACKEND_URL_ENV, "").strip()
    return value.rstrip("/") or DEFAULT_BACKEND_URL


def get_log_dir() -> str:
    return os.environ.get(LOG_DIR_ENV) or DEFAULT_LOG_DIR


def current_season() -> int:
    """Return the current calendar year in UTC."""
    return datetime.datetime.now(datetime.timezone.utc).year
