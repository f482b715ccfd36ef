"""Public client classes for the season summary service."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from seasonboard._http import AsyncTransport, SyncTransport
from seasonboard._params import build_query_params
from seasonboard.api_logging import log_api_call
from seasonboard.config import DEFAULT_TIMEOUT, SUMMARY_ENDPOINT
from seasonboard.exceptions import SeasonboardValidationError
from seasonboard.models.season import SeasonSummary


def _validate_summary(data: Any) -> SeasonSummary:
    """Validate a decoded JSON body against the SeasonSummary model.

    A body that decodes to something other than an object (an array, a
    string, a number) carries no roster and yields an empty summary; a
    null body is malformed.
    """
    if data is not None and not isinstance(data, dict):
        data = {}
    try:
        return SeasonSummary.model_validate(data)
    except ValidationError as exc:
        raise SeasonboardValidationError(
            f"Failed to validate SeasonSummary response: {exc}"
        ) from exc


class SeasonSummaryClient:
    """Synchronous client for the season summary service.

    Usage:
        with SeasonSummaryClient() as client:
            summary = client.season_summary(2024)
            for driver in summary.drivers:
                print(driver.rank, driver.full_name)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> SeasonSummaryClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def season_summary(self, season: int) -> SeasonSummary:
        """Get the aggregated driver roster for a season."""
        data = self._transport.get(SUMMARY_ENDPOINT, build_query_params(season=season))
        return _validate_summary(data)


class AsyncSeasonSummaryClient:
    """Asynchronous client for the season summary service.

    Usage:
        async with AsyncSeasonSummaryClient() as client:
            summary = await client.season_summary(2024)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncSeasonSummaryClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def season_summary(self, season: int) -> SeasonSummary:
        """Get the aggregated driver roster for a season."""
        data = await self._transport.get(SUMMARY_ENDPOINT, build_query_params(season=season))
        return _validate_summary(data)
