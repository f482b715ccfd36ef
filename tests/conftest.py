"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import asyncio
import logging

import pytest

import seasonboard.api_logging as api_logging
from seasonboard.models import SeasonSummary

BASE_URL = "http://aggregator.test"
SUMMARY_URL = f"{BASE_URL}/api/season/summary"


SAMPLE_ROUNDS_VER = [
    {"round": 2, "quali": 1, "grid": 1, "position": 1, "status": "Finished", "points": 25},
    {"round": 1, "quali": 1, "grid": 1, "position": 1, "status": "Finished", "points": 26},
    {"round": 3, "quali": 2, "grid": 2, "position": None, "status": "Brakes", "points": 0},
]

SAMPLE_DRIVER_VER = {
    "driverId": "max_verstappen",
    "givenName": "Max",
    "familyName": "Verstappen",
    "constructor": "Red Bull",
    "nationality": "Dutch",
    "rank": 1,
    "points": 51,
    "wins": 2,
    "dnfs": 1,
    "avg_quali": 1.33,
    "avg_grid": 1.33,
    "avg_finish": 1.0,
    "performance_index": 92.4,
    "results": SAMPLE_ROUNDS_VER,
}

SAMPLE_DRIVER_LEC = {
    "driverId": "leclerc",
    "givenName": "Charles",
    "familyName": "Leclerc",
    "constructor": "Ferrari",
    "nationality": "Monegasque",
    "rank": 2,
    "points": 40,
    "wins": 0,
    "dnfs": 0,
    "avg_quali": 3.0,
    "avg_grid": 3.0,
    "avg_finish": 2.67,
    "performance_index": 81.0,
    "results": [
        {"round": 1, "quali": 4, "grid": 4, "position": 3, "status": "Finished", "points": 15},
        {"round": 2, "quali": 3, "grid": 3, "position": 2, "status": "Finished", "points": 18},
    ],
}

SAMPLE_DRIVER_ROOKIE = {
    "driverId": "rookie",
    "givenName": "Ollie",
    "familyName": "Bearman",
    "constructor": None,
    "nationality": "British",
    "rank": 3,
    "points": 0,
    "wins": 0,
    "dnfs": 0,
    "avg_quali": None,
    "avg_grid": None,
    "avg_finish": None,
    "performance_index": 12.5,
}

SAMPLE_SUMMARY_2024 = {"season": 2024, "drivers": [SAMPLE_DRIVER_VER, SAMPLE_DRIVER_LEC]}


def make_summary(*drivers: dict, season: int | None = None) -> SeasonSummary:
    return SeasonSummary.model_validate({"season": season, "drivers": list(drivers)})


class FakeSource:
    """Controllable async fetcher: each call waits until the test settles it."""

    def __init__(self) -> None:
        self.calls: list[int] = []
        self._pending: list[asyncio.Future[SeasonSummary]] = []

    async def __call__(self, season: int) -> SeasonSummary:
        future: asyncio.Future[SeasonSummary] = asyncio.get_running_loop().create_future()
        self.calls.append(season)
        self._pending.append(future)
        return await future

    def resolve(self, index: int, summary: SeasonSummary) -> None:
        self._pending[index].set_result(summary)

    def fail(self, index: int, exc: Exception) -> None:
        self._pending[index].set_exception(exc)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture(autouse=True)
def log_dir(tmp_path):
    """Redirect the API log file to tmp_path and reset the cached logger."""
    old_logger = api_logging._logger
    old_dir = api_logging._log_dir

    named_logger = logging.getLogger(api_logging.LOGGER_NAME)
    named_logger.handlers.clear()

    api_logging._logger = None
    api_logging._log_dir = str(tmp_path)

    yield tmp_path

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    api_logging._logger = old_logger
    api_logging._log_dir = old_dir
