"""seasonboard — season-scoped F1 driver leaderboard client and view state."""

from seasonboard.client import AsyncSeasonSummaryClient, SeasonSummaryClient
from seasonboard.exceptions import (
    SeasonboardAPIError,
    SeasonboardConnectionError,
    SeasonboardError,
    SeasonboardTimeoutError,
    SeasonboardValidationError,
)
from seasonboard.models import Competitor, RoundResult, SeasonSummary

__all__ = [
    "AsyncSeasonSummaryClient",
    "Competitor",
    "RoundResult",
    "SeasonSummary",
    "SeasonSummaryClient",
    "SeasonboardAPIError",
    "SeasonboardConnectionError",
    "SeasonboardError",
    "SeasonboardTimeoutError",
    "SeasonboardValidationError",
]

__version__ = "0.1.0"
