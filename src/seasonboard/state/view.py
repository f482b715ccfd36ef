"""Renderable leaderboard view model."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from seasonboard.models.competitor import Competitor
from seasonboard.state.store import StoreStatus


@dataclass(frozen=True)
class ViewState:
    """Snapshot of everything the leaderboard renders.

    ``visible`` is ``roster`` narrowed by ``search_query``; ``selected`` is
    the competitor whose detail is open, if any.
    """

    season: int
    generation: int
    status: StoreStatus
    error: str | None
    roster: list[Competitor]
    visible: list[Competitor]
    search_query: str
    selected: Competitor | None
    updated_at: datetime.datetime | None

    @property
    def loading(self) -> bool:
        return self.status is StoreStatus.LOADING

    @property
    def driver_count(self) -> int:
        return len(self.visible)

    @property
    def detail_open(self) -> bool:
        return self.selected is not None
