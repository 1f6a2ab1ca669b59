"""Season standings models (drivers, divisions, and team championship)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from simleague.models.rounds import RoundPoints, TeamRoundPoints


class DriverStanding(BaseModel):
    """Cumulative season standing of one driver.

    ``position`` is assigned upstream using standard competition ranking and
    is displayed as-is.
    """

    model_config = ConfigDict(frozen=True)

    position: int
    driver_id: int
    driver_name: str
    total_points: float
    drop_total: float | None = None
    podiums: int = 0
    poles: int = 0
    team_name: str | None = None
    team_logo: str | None = None
    rounds: list[RoundPoints] = []


class TeamChampionshipStanding(BaseModel):
    """Cumulative season standing of one team."""

    model_config = ConfigDict(frozen=True)

    team_id: int
    team_name: str
    total_points: float
    position: int
    drop_total: float | None = None
    team_logo: str | None = None
    rounds: list[TeamRoundPoints] = []


class SeasonStandingDivision(BaseModel):
    """One division's ranked driver list."""

    model_config = ConfigDict(frozen=True)

    division_id: int
    division_name: str
    order: int
    drivers: list[DriverStanding] = []


class _SeasonStandingsBase(BaseModel):
    """Season-level flags shared by both standings shapes."""

    model_config = ConfigDict(frozen=True)

    drop_round_enabled: bool = False
    total_drop_rounds: int = 0
    team_championship_enabled: bool = False
    team_championship_results: list[TeamChampionshipStanding] = []
    teams_drop_rounds_enabled: bool = False
    teams_total_drop_rounds: int = 0


class FlatSeasonStandings(_SeasonStandingsBase):
    """Standings for a season without divisions."""

    has_divisions: Literal[False]
    standings: list[DriverStanding] = []


class DivisionSeasonStandings(_SeasonStandingsBase):
    """Standings for a season split into divisions."""

    has_divisions: Literal[True]
    standings: list[SeasonStandingDivision] = []


# Exactly one member accepts a given ``has_divisions`` value.
SeasonStandingsResponse = FlatSeasonStandings | DivisionSeasonStandings
