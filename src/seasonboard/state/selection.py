"""Single-slot master/detail selection."""

from __future__ import annotations

from seasonboard.models.competitor import Competitor


class SelectionController:
    """Tracks which competitor, if any, is open for detail viewing."""

    def __init__(self) -> None:
        self._selected: Competitor | None = None

    @property
    def selected(self) -> Competitor | None:
        return self._selected

    @property
    def is_open(self) -> bool:
        return self._selected is not None

    def select(self, competitor: Competitor) -> None:
        """Open detail for ``competitor``; the last call wins."""
        self._selected = competitor

    def clear(self) -> None:
        self._selected = None
