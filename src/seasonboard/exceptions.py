"""Custom exceptions for the season summary client."""

from __future__ import annotations


class SeasonboardError(Exception):
    """Base exception for all season summary client errors."""


class SeasonboardConnectionError(SeasonboardError):
    """Raised when the client cannot reach the aggregation service."""


class SeasonboardTimeoutError(SeasonboardError):
    """Raised when a request to the aggregation service times out."""


class SeasonboardAPIError(SeasonboardError):
    """Raised when the service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class SeasonboardValidationError(SeasonboardError):
    """Raised when a response body cannot be parsed into the expected shape."""
