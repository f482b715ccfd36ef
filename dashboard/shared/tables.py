"""Row builders for the roster table and round-by-round detail."""

from __future__ import annotations

from seasonboard.models.competitor import Competitor

from .formatters import format_stat


def roster_rows(competitors: list[Competitor]) -> list[dict[str, object]]:
    """Build one table row per competitor, in the order given.

    Rank, points and performance index keep their raw values so the table
    can show them as numbers; averages are text so absent ones read '—'.
    """
    return [
        {
            "#": c.rank,
            "Driver": c.full_name,
            "Team": c.constructor or "",
            "Pts": c.points,
            "Wins": c.wins,
            "Avg Quali": format_stat(c.avg_quali),
            "Avg Grid": format_stat(c.avg_grid),
            "Avg Finish": format_stat(c.avg_finish),
            "Perf Index": c.performance_index,
            "DNFs": c.dnfs,
        }
        for c in competitors
    ]


def round_rows(competitor: Competitor) -> list[dict[str, str]]:
    """Build the round-by-round table for one competitor, by round number."""
    return [
        {
            "Rnd": format_stat(r.round),
            "Quali": format_stat(r.quali),
            "Grid": format_stat(r.grid),
            "Finish": format_stat(r.position),
            "Status": format_stat(r.status),
            "Pts": format_stat(r.points),
        }
        for r in competitor.rounds_in_order()
    ]


def summary_metrics(competitor: Competitor) -> dict[str, str]:
    """Headline figures for the detail view."""
    return {
        "Performance Index": format_stat(competitor.performance_index),
        "Points • Wins • DNFs": " • ".join(
            format_stat(v) for v in (competitor.points, competitor.wins, competitor.dnfs)
        ),
        "Avg Quali • Grid • Finish": " • ".join(
            format_stat(v) for v in (competitor.avg_quali, competitor.avg_grid, competitor.avg_finish)
        ),
    }
