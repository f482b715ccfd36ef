"""Free-text search over a season roster."""

from __future__ import annotations

from seasonboard.models.competitor import Competitor


def _matches(competitor: Competitor, needle: str) -> bool:
    name = f"{competitor.given_name or ''} {competitor.family_name or ''}".lower()
    team = (competitor.constructor or "").lower()
    return needle in name or needle in team


def filter_roster(roster: list[Competitor], query: str) -> list[Competitor]:
    """Return the competitors whose name or team contains ``query``.

    The query is trimmed and matched case-insensitively. A blank query
    returns ``roster`` itself; otherwise the result keeps roster order.
    """
    needle = query.strip().lower()
    if not needle:
        return roster
    return [c for c in roster if _matches(c, needle)]
