"""Cumulative points per round, for the points progression chart."""

from __future__ import annotations

from collections.abc import Sequence

from simleague.models import DriverStanding, TeamChampionshipStanding

from .rounds import get_round_data


def entrant_label(entrant: DriverStanding | TeamChampionshipStanding) -> str:
    if isinstance(entrant, DriverStanding):
        return entrant.driver_name
    return entrant.team_name


def points_progression(
    entrants: Sequence[DriverStanding | TeamChampionshipStanding],
    rounds: Sequence[int],
) -> list[tuple[str, list[float]]]:
    """Running points total after each round column, per entrant, in row order.

    A missed round adds nothing, so the line stays flat across it. Raw round
    points are summed; drop rounds are not applied here. Entrants sharing a
    name each keep their own series.
    """
    series: list[tuple[str, list[float]]] = []
    for entrant in entrants:
        running = 0.0
        totals: list[float] = []
        for n in rounds:
            result = get_round_data(entrant.rounds, n)
            if result is not None:
                running += result.points
            totals.append(running)
        series.append((entrant_label(entrant), totals))
    return series
