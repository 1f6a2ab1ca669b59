"""Basic usage example for the league API client.

The async part uses the dashboard's SeasonStandingsLoader; run it with
``PYTHONPATH=dashboard python examples/basic_usage.py``.
"""

import asyncio

from simleague import AsyncSimLeagueClient, SimLeagueClient, SimLeagueError
from simleague.models import DivisionSeasonStandings

from shared.data import SeasonStandingsLoader, StandingsDataError


def main() -> None:
    season_id = 1
    try:
        with SimLeagueClient() as league:
            standings = league.season_standings(season_id)
    except SimLeagueError as exc:
        print(f"Failed to load standings: {exc}")
        return

    if isinstance(standings, DivisionSeasonStandings):
        for division in sorted(standings.standings, key=lambda d: d.order):
            print(f"=== {division.division_name} ===")
            for d in division.drivers:
                print(f"  {d.position:>3}  {d.driver_name:<24} {d.total_points:g}")
    else:
        print("=== Drivers ===")
        for d in standings.standings:
            print(f"  {d.position:>3}  {d.driver_name:<24} {d.total_points:g}")

    if standings.team_championship_enabled:
        print("\n=== Team Championship ===")
        for t in sorted(standings.team_championship_results, key=lambda t: t.position):
            print(f"  {t.position:>3}  {t.team_name:<24} {t.total_points:g}")


async def switch_seasons() -> None:
    """Quickly switch seasons; only the latest request's standings come back."""
    async with AsyncSimLeagueClient() as league:
        loader = SeasonStandingsLoader(league)
        first = asyncio.create_task(loader.load(1))
        await asyncio.sleep(0)
        try:
            latest = await loader.load(2)
        except StandingsDataError as exc:
            print(f"Failed to load standings: {exc}")
            return
        print(f"Season 1 superseded: {await first is None}")
        if latest is not None:
            print(f"Season 2 loaded with {len(latest.standings)} entries")


if __name__ == "__main__":
    main()
    asyncio.run(switch_seasons())
