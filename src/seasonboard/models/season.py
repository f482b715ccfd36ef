"""Season summary response model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seasonboard.models.competitor import Competitor


class SeasonSummary(BaseModel):
    """Body of the season summary endpoint.

    A missing or null ``drivers`` field is an empty roster, not an error.
    """

    model_config = ConfigDict(frozen=True)

    season: int | None = None
    drivers: list[Competitor] = Field(default_factory=list)

    @field_validator("drivers", mode="before")
    @classmethod
    def _null_drivers(cls, value: object) -> object:
        return [] if value is None else value
