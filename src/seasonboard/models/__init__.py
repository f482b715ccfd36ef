"""Season summary data models."""

from seasonboard.models.competitor import Competitor, RoundResult
from seasonboard.models.season import SeasonSummary

__all__ = [
    "Competitor",
    "RoundResult",
    "SeasonSummary",
]
