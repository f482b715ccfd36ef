"""Leaderboard controller: wires the store, search filter and selection."""

from __future__ import annotations

import asyncio
from typing import Callable

from seasonboard.api_logging import get_logger, log_service_call
from seasonboard.models.competitor import Competitor
from seasonboard.state.roster_filter import filter_roster
from seasonboard.state.selection import SelectionController
from seasonboard.state.store import (
    SeasonDataStore,
    StoreEvent,
    StoreStatus,
    SummaryFetcher,
)
from seasonboard.state.view import ViewState

ViewListener = Callable[[ViewState], None]


class LeaderboardController:
    """Owns the leaderboard view state and accepts user events.

    Every event (season change, query change, select, dismiss, response
    arrival) ends with a recompute of :attr:`view` before control returns
    to the caller.

    Usage:
        controller = LeaderboardController(fetch)
        await controller.mount()
        controller.set_query("red")
        controller.select(controller.view.visible[0])
    """

    def __init__(self, fetch: SummaryFetcher, season: int | None = None) -> None:
        self._store = SeasonDataStore(fetch, season=season)
        self._selection = SelectionController()
        self._query = ""
        self._listeners: list[ViewListener] = []
        self._memo_roster: list[Competitor] | None = None
        self._memo_query: str | None = None
        self._memo_visible: list[Competitor] = []
        self._store.subscribe(self._on_store_event)
        self._view = self._build_view()

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def season(self) -> int:
        return self._store.season

    @property
    def status(self) -> StoreStatus:
        return self._store.status

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Call ``listener`` with the new view after every recompute."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Season lifecycle ───────────────────────────────────────

    @log_service_call
    def mount(self) -> asyncio.Task[bool]:
        """Issue the initial fetch for the starting season."""
        return self._store.set_season(self._store.season)

    @log_service_call
    def set_season(self, year: int) -> asyncio.Task[bool]:
        return self._store.set_season(year)

    @log_service_call
    def refresh(self) -> asyncio.Task[bool]:
        return self._store.refresh()

    # ── Search & selection ─────────────────────────────────────

    @log_service_call
    def set_query(self, text: str) -> None:
        self._query = text
        self._recompute()

    @log_service_call
    def select(self, competitor: Competitor) -> None:
        self._selection.select(competitor)
        self._recompute()

    @log_service_call
    def select_by_id(self, driver_id: str) -> Competitor | None:
        """Open detail for the roster entry with ``driver_id``.

        Unknown ids leave the current selection untouched and return None.
        """
        for competitor in self._store.roster:
            if competitor.driver_id == driver_id:
                self.select(competitor)
                return competitor
        get_logger().warning("SELECT: no competitor %r in season %d", driver_id, self.season)
        return None

    @log_service_call
    def clear_selection(self) -> None:
        self._selection.clear()
        self._recompute()

    # ── Recompute ──────────────────────────────────────────────

    def _on_store_event(self, event: StoreEvent) -> None:
        # A detail view never outlives the roster it was opened from
        if event is not StoreEvent.DISCARDED:
            self._selection.clear()
        self._recompute()

    def _visible(self, roster: list[Competitor]) -> list[Competitor]:
        if roster is not self._memo_roster or self._query != self._memo_query:
            self._memo_roster = roster
            self._memo_query = self._query
            self._memo_visible = filter_roster(roster, self._query)
        return self._memo_visible

    def _build_view(self) -> ViewState:
        roster = self._store.roster
        return ViewState(
            season=self._store.season,
            generation=self._store.generation,
            status=self._store.status,
            error=self._store.error,
            roster=roster,
            visible=self._visible(roster),
            search_query=self._query,
            selected=self._selection.selected,
            updated_at=self._store.updated_at,
        )

    def _recompute(self) -> None:
        self._view = self._build_view()
        for listener in list(self._listeners):
            listener(self._view)
