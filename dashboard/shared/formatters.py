"""Formatting helpers for the leaderboard dashboard."""

from __future__ import annotations

import datetime

PLACEHOLDER = "—"


def format_stat(value: float | int | str | None) -> str:
    """Format an optional statistic, or '—' if absent.

    Whole floats drop their trailing '.0' so 25.0 points reads as '25'.
    """
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_updated(updated_at: datetime.datetime | None) -> str:
    """Format the last successful fetch time as a badge label."""
    if updated_at is None:
        return PLACEHOLDER
    return f"Updated {updated_at.astimezone().strftime('%H:%M:%S')}"


def format_driver_count(count: int) -> str:
    return f"{count} Drivers"


def format_subtitle(constructor: str | None, nationality: str | None) -> str:
    """Format 'Team • Nationality', skipping absent parts."""
    parts = [p for p in (constructor, nationality) if p]
    return " • ".join(parts) if parts else PLACEHOLDER


def performance_fraction(index: float | None, scale: float = 100.0) -> float:
    """Clamp a performance index into [0, 1] for a progress bar."""
    if index is None or scale <= 0:
        return 0.0
    return min(max(index / scale, 0.0), 1.0)
