"""Session-scoped controller and asyncio driver for the Streamlit app."""

from __future__ import annotations

import asyncio
from typing import Callable

import streamlit as st

from seasonboard import AsyncSeasonSummaryClient, SeasonSummary
from seasonboard.config import get_backend_url
from seasonboard.state import LeaderboardController

_CONTROLLER_KEY = "leaderboard_controller"


async def fetch_season_summary(season: int) -> SeasonSummary:
    async with AsyncSeasonSummaryClient(base_url=get_backend_url()) as client:
        return await client.season_summary(season)


def get_controller() -> LeaderboardController:
    """Return this browser session's controller, creating it on first use."""
    if _CONTROLLER_KEY not in st.session_state:
        st.session_state[_CONTROLLER_KEY] = LeaderboardController(fetch_season_summary)
    return st.session_state[_CONTROLLER_KEY]


def run_fetch(start: Callable[[], asyncio.Task[bool]]) -> bool:
    """Start a controller fetch on a fresh event loop and wait for it.

    ``start`` is a controller method such as ``controller.refresh``; it must
    be invoked inside the loop because it schedules a task.
    """

    async def _drive() -> bool:
        return await start()

    return asyncio.run(_drive())
