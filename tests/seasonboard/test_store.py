"""Tests for seasonboard/state/store.py — season lifecycle and staleness."""

from __future__ import annotations

import asyncio

import pytest

from seasonboard.exceptions import SeasonboardAPIError, SeasonboardConnectionError
from seasonboard.state import LOAD_ERROR_MESSAGE, SeasonDataStore, StoreEvent, StoreStatus
from tests.conftest import (
    SAMPLE_DRIVER_LEC,
    SAMPLE_DRIVER_VER,
    make_summary,
)


async def _start(store: SeasonDataStore, year: int) -> asyncio.Task[bool]:
    task = store.set_season(year)
    await asyncio.sleep(0)
    return task


class TestInitialState:
    def test_idle_with_explicit_season(self, source):
        store = SeasonDataStore(source, season=2023)
        assert store.season == 2023
        assert store.status is StoreStatus.IDLE
        assert store.roster == []
        assert store.error is None
        assert not store.loading
        assert store.generation == 0

    def test_defaults_to_current_season(self, source, monkeypatch):
        monkeypatch.setattr("seasonboard.state.store.current_season", lambda: 2031)
        assert SeasonDataStore(source).season == 2031

    def test_set_season_requires_running_loop(self, source):
        store = SeasonDataStore(source, season=2024)
        with pytest.raises(RuntimeError):
            store.set_season(2024)
        assert store.status is StoreStatus.IDLE


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_loading_then_ready(self, source):
        store = SeasonDataStore(source, season=2023)
        task = await _start(store, 2024)
        assert store.status is StoreStatus.LOADING
        assert store.loading
        assert store.season == 2024
        assert source.calls == [2024]

        source.resolve(0, make_summary(SAMPLE_DRIVER_VER, SAMPLE_DRIVER_LEC))
        assert await task is True
        assert store.status is StoreStatus.READY
        assert [d.rank for d in store.roster] == [1, 2]
        assert store.error is None
        assert store.updated_at is not None

    @pytest.mark.asyncio
    async def test_previous_roster_visible_while_loading(self, source):
        store = SeasonDataStore(source, season=2024)
        task = await _start(store, 2024)
        source.resolve(0, make_summary(SAMPLE_DRIVER_VER))
        await task
        previous = store.roster

        task = await _start(store, 2023)
        assert store.loading
        assert store.roster is previous
        source.resolve(1, make_summary())
        await task
        assert store.roster == []

    @pytest.mark.asyncio
    async def test_roster_replaced_wholesale(self, source):
        store = SeasonDataStore(source, season=2024)
        task = await _start(store, 2024)
        source.resolve(0, make_summary(SAMPLE_DRIVER_VER, SAMPLE_DRIVER_LEC))
        await task

        task = store.refresh()
        await asyncio.sleep(0)
        source.resolve(1, make_summary(SAMPLE_DRIVER_LEC))
        await task
        assert [d.driver_id for d in store.roster] == ["leclerc"]

    @pytest.mark.asyncio
    async def test_failure_keeps_roster_and_sets_generic_error(self, source):
        store = SeasonDataStore(source, season=2024)
        task = await _start(store, 2024)
        source.resolve(0, make_summary(SAMPLE_DRIVER_VER))
        await task
        previous = store.roster

        task = store.refresh()
        await asyncio.sleep(0)
        source.fail(1, SeasonboardAPIError(500, "secret stack trace"))
        assert await task is True
        assert store.status is StoreStatus.FAILED
        assert store.error == LOAD_ERROR_MESSAGE
        assert "secret" not in store.error
        assert store.roster is previous

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [SeasonboardConnectionError("down"), ValueError("bad payload"), KeyError("drivers")],
    )
    async def test_any_failure_is_caught(self, source, exc):
        store = SeasonDataStore(source, season=2024)
        task = await _start(store, 2024)
        source.fail(0, exc)
        await task
        assert store.status is StoreStatus.FAILED
        assert store.error == LOAD_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_success_after_failure_clears_error(self, source):
        store = SeasonDataStore(source, season=2024)
        task = await _start(store, 2024)
        source.fail(0, SeasonboardConnectionError("down"))
        await task
        assert store.error

        task = store.refresh()
        await asyncio.sleep(0)
        assert store.error is None  # cleared as soon as loading starts
        source.resolve(1, make_summary(SAMPLE_DRIVER_LEC))
        await task
        assert store.status is StoreStatus.READY
        assert store.error is None
        assert [d.driver_id for d in store.roster] == ["leclerc"]

    @pytest.mark.asyncio
    async def test_out_of_range_season_not_validated(self, source):
        store = SeasonDataStore(source, season=2024)
        task = await _start(store, -5)
        assert source.calls == [-5]
        source.resolve(0, make_summary())
        await task
        assert store.season == -5
        assert store.roster == []


class TestStaleResponseSuppression:
    @pytest.mark.asyncio
    async def test_late_response_for_old_season_discarded(self, source):
        store = SeasonDataStore(source, season=2023)
        task_a = await _start(store, 2023)
        task_b = await _start(store, 2024)

        source.resolve(1, make_summary(SAMPLE_DRIVER_LEC, season=2024))
        assert await task_b is True
        source.resolve(0, make_summary(SAMPLE_DRIVER_VER, season=2023))
        assert await task_a is False

        assert store.season == 2024
        assert store.status is StoreStatus.READY
        assert [d.driver_id for d in store.roster] == ["leclerc"]

    @pytest.mark.asyncio
    async def test_old_response_arriving_first_is_discarded(self, source):
        store = SeasonDataStore(source, season=2023)
        task_a = await _start(store, 2023)
        task_b = await _start(store, 2024)

        source.resolve(0, make_summary(SAMPLE_DRIVER_VER))
        assert await task_a is False
        assert store.loading
        assert store.roster == []

        source.resolve(1, make_summary(SAMPLE_DRIVER_LEC))
        await task_b
        assert [d.driver_id for d in store.roster] == ["leclerc"]

    @pytest.mark.asyncio
    async def test_stale_failure_does_not_surface(self, source):
        store = SeasonDataStore(source, season=2023)
        task_a = await _start(store, 2023)
        task_b = await _start(store, 2024)

        source.resolve(1, make_summary(SAMPLE_DRIVER_LEC))
        await task_b
        source.fail(0, SeasonboardConnectionError("late"))
        assert await task_a is False
        assert store.status is StoreStatus.READY
        assert store.error is None

    @pytest.mark.asyncio
    async def test_same_season_reissued_uses_latest(self, source):
        """A -> B -> A: only the last request for A may apply."""
        store = SeasonDataStore(source, season=2023)
        first = await _start(store, 2023)
        middle = await _start(store, 2024)
        last = await _start(store, 2023)

        source.resolve(0, make_summary(SAMPLE_DRIVER_VER))
        source.resolve(1, make_summary())
        assert await first is False
        assert await middle is False
        assert store.loading

        source.resolve(2, make_summary(SAMPLE_DRIVER_LEC))
        assert await last is True
        assert [d.driver_id for d in store.roster] == ["leclerc"]

    @pytest.mark.asyncio
    async def test_discard_is_logged(self, source, log_dir):
        store = SeasonDataStore(source, season=2023)
        task_a = await _start(store, 2023)
        task_b = await _start(store, 2024)
        source.resolve(0, make_summary())
        await task_a
        source.resolve(1, make_summary())
        await task_b
        content = (log_dir / "api_calls.log").read_text()
        assert "STALE: discarded response for season=2023 generation=1" in content
        assert "STATE: loading -> ready (season=2024, generation=2" in content


class TestEvents:
    @pytest.mark.asyncio
    async def test_event_sequence(self, source):
        store = SeasonDataStore(source, season=2023)
        events: list[StoreEvent] = []
        store.subscribe(events.append)

        task_a = await _start(store, 2023)
        task_b = await _start(store, 2024)
        source.resolve(0, make_summary())
        await task_a
        source.resolve(1, make_summary())
        await task_b

        assert events == [
            StoreEvent.STARTED,
            StoreEvent.STARTED,
            StoreEvent.DISCARDED,
            StoreEvent.SETTLED,
        ]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, source):
        store = SeasonDataStore(source, season=2023)
        events: list[StoreEvent] = []
        unsubscribe = store.subscribe(events.append)
        unsubscribe()
        unsubscribe()  # second call is a no-op
        task = await _start(store, 2023)
        source.resolve(0, make_summary())
        await task
        assert events == []
