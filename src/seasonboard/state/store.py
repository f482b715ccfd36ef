"""Season-scoped roster store with stale-response suppression."""

from __future__ import annotations

import asyncio
import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from seasonboard.api_logging import get_logger
from seasonboard.config import current_season
from seasonboard.models.competitor import Competitor
from seasonboard.models.season import SeasonSummary

LOAD_ERROR_MESSAGE = "Could not load data. Ensure backend URL is configured."


class StoreStatus(str, Enum):
    """Lifecycle of the roster held by a SeasonDataStore."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class StoreEvent(str, Enum):
    """Notifications emitted to store subscribers."""

    STARTED = "started"
    SETTLED = "settled"
    DISCARDED = "discarded"


SummaryFetcher = Callable[[int], Awaitable[SeasonSummary]]
StoreListener = Callable[[StoreEvent], None]


@dataclass(frozen=True)
class FetchRequest:
    """A single fetch attempt, tagged with the generation that issued it."""

    generation: int
    season: int


class SeasonDataStore:
    """Keeps exactly one roster in sync with exactly one season value.

    Every call to :meth:`set_season` or :meth:`refresh` bumps a generation
    counter. A response is applied only if its generation is still the
    latest one when it arrives; anything older is discarded. The previous
    roster stays in place while loading and after a failure.
    """

    def __init__(self, fetch: SummaryFetcher, season: int | None = None) -> None:
        self._fetch = fetch
        self._season = current_season() if season is None else season
        self._status = StoreStatus.IDLE
        self._roster: list[Competitor] = []
        self._error: str | None = None
        self._updated_at: datetime.datetime | None = None
        self._generation = 0
        self._listeners: list[StoreListener] = []

    # ── State ──────────────────────────────────────────────────

    @property
    def season(self) -> int:
        return self._season

    @property
    def status(self) -> StoreStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status is StoreStatus.LOADING

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def roster(self) -> list[Competitor]:
        return self._roster

    @property
    def updated_at(self) -> datetime.datetime | None:
        return self._updated_at

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Events ─────────────────────────────────────────────────

    def set_season(self, year: int) -> asyncio.Task[bool]:
        """Switch to ``year`` and start fetching its roster.

        Must be called from a running event loop. The returned task resolves
        to True if its outcome (roster or failure) was applied, False if it
        was superseded by a later fetch.
        """
        loop = asyncio.get_running_loop()
        request = self._begin(year)
        return loop.create_task(self._run(request), name=f"season-fetch-{request.season}")

    def refresh(self) -> asyncio.Task[bool]:
        """Re-fetch the current season."""
        return self.set_season(self._season)

    # ── Internals ──────────────────────────────────────────────

    def _begin(self, year: int) -> FetchRequest:
        self._generation += 1
        self._season = year
        self._error = None
        self._transition(StoreStatus.LOADING)
        self._emit(StoreEvent.STARTED)
        return FetchRequest(generation=self._generation, season=year)

    async def _run(self, request: FetchRequest) -> bool:
        try:
            summary = await self._fetch(request.season)
        except Exception as exc:
            # Fetch boundary: every failure becomes view state
            return self._fail(request, exc)
        return self._apply(request, summary)

    def _is_stale(self, request: FetchRequest) -> bool:
        return request.generation != self._generation

    def _discard(self, request: FetchRequest, outcome: str) -> bool:
        get_logger().info(
            "STALE: discarded %s for season=%d generation=%d (current season=%d generation=%d)",
            outcome, request.season, request.generation, self._season, self._generation,
        )
        self._emit(StoreEvent.DISCARDED)
        return False

    def _apply(self, request: FetchRequest, summary: SeasonSummary) -> bool:
        if self._is_stale(request):
            return self._discard(request, "response")
        self._roster = list(summary.drivers)
        self._error = None
        self._updated_at = datetime.datetime.now(datetime.timezone.utc)
        self._transition(StoreStatus.READY)
        self._emit(StoreEvent.SETTLED)
        return True

    def _fail(self, request: FetchRequest, exc: Exception) -> bool:
        if self._is_stale(request):
            return self._discard(request, "failure")
        get_logger().error(
            "FETCH FAIL: season=%d generation=%d -> %s: %s",
            request.season, request.generation, type(exc).__name__, exc,
        )
        self._error = LOAD_ERROR_MESSAGE
        self._transition(StoreStatus.FAILED)
        self._emit(StoreEvent.SETTLED)
        return True

    def _transition(self, status: StoreStatus) -> None:
        get_logger().info(
            "STATE: %s -> %s (season=%d, generation=%d, roster=%d)",
            self._status.value, status.value, self._season, self._generation, len(self._roster),
        )
        self._status = status

    def _emit(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
