"""League API data models."""

from simleague.models.rounds import RoundPoints, TeamRoundPoints
from simleague.models.standings import (
    DivisionSeasonStandings,
    DriverStanding,
    FlatSeasonStandings,
    SeasonStandingDivision,
    SeasonStandingsResponse,
    TeamChampionshipStanding,
)

__all__ = [
    "DivisionSeasonStandings",
    "DriverStanding",
    "FlatSeasonStandings",
    "RoundPoints",
    "SeasonStandingDivision",
    "SeasonStandingsResponse",
    "TeamChampionshipStanding",
    "TeamRoundPoints",
]
