"""Team championship view, built alongside the driver standings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from simleague.models import SeasonStandingsResponse, TeamChampionshipStanding


@dataclass(frozen=True)
class TeamChampionshipView:
    show_teams_championship: bool
    results: tuple[TeamChampionshipStanding, ...]
    drop_round_enabled: bool
    total_drop_rounds: int


def sort_teams_by_position(
    teams: Iterable[TeamChampionshipStanding],
) -> list[TeamChampionshipStanding]:
    """Order teams by position; tied teams keep their upstream order."""
    return sorted(teams, key=lambda t: t.position)


def merge_team_championship(response: SeasonStandingsResponse) -> TeamChampionshipView:
    """Build the team table data, or an empty hidden view when disabled.

    The team tab is shown only when the championship is enabled and has
    results to list.
    """
    if not response.team_championship_enabled:
        return TeamChampionshipView(
            show_teams_championship=False,
            results=(),
            drop_round_enabled=False,
            total_drop_rounds=0,
        )

    results = tuple(sort_teams_by_position(response.team_championship_results))
    return TeamChampionshipView(
        show_teams_championship=bool(results),
        results=results,
        drop_round_enabled=response.teams_drop_rounds_enabled,
        total_drop_rounds=response.teams_total_drop_rounds,
    )
