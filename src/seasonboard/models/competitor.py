"""Competitor and per-round result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RoundResult(BaseModel):
    """One race round for a competitor.

    Absent positions mean "not classified", which is distinct from zero.
    """

    model_config = ConfigDict(frozen=True)

    round: int | None = None
    quali: int | None = None
    grid: int | None = None
    position: int | None = None
    status: str | None = None
    points: float | None = None


class Competitor(BaseModel):
    """Pre-aggregated season statistics for one driver."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver_id: str | None = Field(default=None, alias="driverId")
    given_name: str | None = Field(default=None, alias="givenName")
    family_name: str | None = Field(default=None, alias="familyName")
    constructor: str | None = None
    nationality: str | None = None
    rank: int | None = None
    points: float | None = None
    wins: int | None = None
    dnfs: int | None = None
    avg_quali: float | None = None
    avg_grid: float | None = None
    avg_finish: float | None = None
    performance_index: float | None = None
    results: list[RoundResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def full_name(self) -> str:
        return f"{self.given_name or ''} {self.family_name or ''}".strip()

    def rounds_in_order(self) -> list[RoundResult]:
        """Return results sorted by round number; unnumbered rounds go last."""
        return sorted(
            self.results,
            key=lambda r: (r.round is None, r.round or 0),
        )
