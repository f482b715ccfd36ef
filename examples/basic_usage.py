"""Print a season leaderboard with the synchronous client."""

import sys

from seasonboard import SeasonboardError, SeasonSummaryClient
from seasonboard.config import current_season


def _fmt(value: object) -> str:
    return "—" if value is None else str(value)


def main() -> None:
    season = int(sys.argv[1]) if len(sys.argv) > 1 else current_season()

    with SeasonSummaryClient() as client:
        try:
            summary = client.season_summary(season)
        except SeasonboardError as exc:
            print(f"Could not load season {season}: {exc}")
            return

    print(f"=== {season} Driver Standings ===")
    if not summary.drivers:
        print("  No drivers found.")
        return

    for d in summary.drivers:
        print(
            f"  {_fmt(d.rank):>3} {d.full_name:<24} {d.constructor or '':<20}"
            f" {_fmt(d.points):>6} pts  {_fmt(d.wins):>2} wins"
            f"  avg finish {_fmt(d.avg_finish)}"
        )

    leader = summary.drivers[0]
    print(f"\n=== Round-by-round for {leader.full_name} ===")
    for r in leader.rounds_in_order():
        print(f"  R{_fmt(r.round):<3} grid {_fmt(r.grid):>3} -> {_fmt(r.position):>3}  {_fmt(r.status)}")


if __name__ == "__main__":
    main()
