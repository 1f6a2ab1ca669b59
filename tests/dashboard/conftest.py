"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import logging

import pytest

from simleague.models import (
    DivisionSeasonStandings,
    DriverStanding,
    FlatSeasonStandings,
    RoundPoints,
    SeasonStandingDivision,
    TeamChampionshipStanding,
    TeamRoundPoints,
)

# ── Model factories ──────────────────────────────────────────────────────────


def _make_round(
    round_number: int,
    points: float = 25,
    has_pole: bool = False,
    has_fastest_lap: bool = False,
    position: int | None = None,
    total_penalties: float = 0,
    round_id: int | None = None,
) -> RoundPoints:
    return RoundPoints(
        round_id=round_id if round_id is not None else 100 + round_number,
        round_number=round_number,
        points=points,
        has_pole=has_pole,
        has_fastest_lap=has_fastest_lap,
        position=position,
        total_penalties=total_penalties,
    )


def _make_driver(
    position: int,
    driver_name: str,
    total_points: float = 0,
    drop_total: float | None = None,
    rounds: list[RoundPoints] | None = None,
    driver_id: int | None = None,
    podiums: int = 0,
    poles: int = 0,
    team_name: str | None = None,
) -> DriverStanding:
    return DriverStanding(
        position=position,
        driver_id=driver_id if driver_id is not None else position,
        driver_name=driver_name,
        total_points=total_points,
        drop_total=total_points if drop_total is None else drop_total,
        podiums=podiums,
        poles=poles,
        team_name=team_name,
        rounds=rounds or [],
    )


def _make_team(
    position: int,
    team_name: str,
    total_points: float = 0,
    drop_total: float | None = None,
    round_points: dict[int, float] | None = None,
    team_id: int | None = None,
) -> TeamChampionshipStanding:
    return TeamChampionshipStanding(
        team_id=team_id if team_id is not None else position,
        team_name=team_name,
        total_points=total_points,
        position=position,
        drop_total=drop_total,
        rounds=[
            TeamRoundPoints(round_id=100 + n, round_number=n, points=pts)
            for n, pts in (round_points or {}).items()
        ],
    )


def _make_division(
    division_id: int,
    order: int,
    drivers: list[DriverStanding] | None = None,
    division_name: str | None = None,
) -> SeasonStandingDivision:
    return SeasonStandingDivision(
        division_id=division_id,
        division_name=division_name or f"Division {division_id}",
        order=order,
        drivers=drivers or [],
    )


def _make_flat(
    drivers: list[DriverStanding] | None = None,
    teams: list[TeamChampionshipStanding] | None = None,
    **flags,
) -> FlatSeasonStandings:
    if teams is not None:
        flags.setdefault("team_championship_enabled", True)
        flags["team_championship_results"] = teams
    return FlatSeasonStandings(has_divisions=False, standings=drivers or [], **flags)


def _make_divided(
    divisions: list[SeasonStandingDivision] | None = None,
    teams: list[TeamChampionshipStanding] | None = None,
    **flags,
) -> DivisionSeasonStandings:
    if teams is not None:
        flags.setdefault("team_championship_enabled", True)
        flags["team_championship_results"] = teams
    return DivisionSeasonStandings(has_divisions=True, standings=divisions or [], **flags)


# ── Log redirection ──────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path, monkeypatch):
    """Point the API log at tmp_path so tests never write under dashboard/logs."""
    import shared.api_logging as mod

    named_logger = logging.getLogger("league_dashboard.api")
    for handler in named_logger.handlers[:]:
        handler.close()
        named_logger.removeHandler(handler)

    monkeypatch.setattr(mod, "_logger", None)
    monkeypatch.setattr(mod, "_LOG_DIR", str(tmp_path))
    monkeypatch.setattr(mod, "_LOG_FILE", str(tmp_path / "api_calls.log"))

    yield tmp_path / "api_calls.log"

    for handler in named_logger.handlers[:]:
        handler.close()
        named_logger.removeHandler(handler)


# ── Sample data fixtures ─────────────────────────────────────────────────────


@pytest.fixture
def tied_drivers() -> list[DriverStanding]:
    """Six drivers with a two-way tie for 5th (1, 2, 3, 5, 5, 7)."""
    return [
        _make_driver(1, "Lewis Hamilton", 30, rounds=[_make_round(1, 30, has_pole=True)]),
        _make_driver(2, "Max Verstappen", 28, rounds=[_make_round(1, 28, has_fastest_lap=True)]),
        _make_driver(3, "George Russell", 26, rounds=[_make_round(1, 26)]),
        _make_driver(5, "Charles Leclerc", 26, rounds=[_make_round(1, 26)]),
        _make_driver(5, "Lando Norris", 26, rounds=[_make_round(1, 26)]),
        _make_driver(7, "Carlos Sainz", 23, rounds=[_make_round(1, 23)]),
    ]


@pytest.fixture
def sample_teams() -> list[TeamChampionshipStanding]:
    """Teams delivered out of position order."""
    return [
        _make_team(2, "Red Bull Racing", 250, round_points={1: 130, 2: 120}),
        _make_team(1, "Mercedes", 270, round_points={1: 135, 2: 135}),
        _make_team(3, "Ferrari", 130, round_points={1: 65, 2: 65}),
    ]


@pytest.fixture
def make_round():
    return _make_round


@pytest.fixture
def make_driver():
    return _make_driver


@pytest.fixture
def make_team():
    return _make_team


@pytest.fixture
def make_division():
    return _make_division


@pytest.fixture
def make_flat():
    return _make_flat


@pytest.fixture
def make_divided():
    return _make_divided
