"""View/state layer: season store, roster filter, selection and controller."""

from seasonboard.state.controller import LeaderboardController
from seasonboard.state.roster_filter import filter_roster
from seasonboard.state.selection import SelectionController
from seasonboard.state.store import (
    LOAD_ERROR_MESSAGE,
    FetchRequest,
    SeasonDataStore,
    StoreEvent,
    StoreStatus,
)
from seasonboard.state.view import ViewState

__all__ = [
    "LOAD_ERROR_MESSAGE",
    "FetchRequest",
    "LeaderboardController",
    "SeasonDataStore",
    "SelectionController",
    "StoreEvent",
    "StoreStatus",
    "ViewState",
    "filter_roster",
]
