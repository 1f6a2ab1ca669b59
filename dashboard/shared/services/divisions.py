"""Split a standings payload into a flat driver list or ordered divisions."""

from __future__ import annotations

from dataclasses import dataclass

from simleague.models import (
    DivisionSeasonStandings,
    DriverStanding,
    SeasonStandingDivision,
    SeasonStandingsResponse,
)


@dataclass(frozen=True)
class FlatStandings:
    """A season without divisions: one ranked driver list."""

    drivers: tuple[DriverStanding, ...]


@dataclass(frozen=True)
class DividedStandings:
    """A season with divisions, ordered by ``order`` (never ``division_id``)."""

    divisions: tuple[SeasonStandingDivision, ...]


PartitionedStandings = FlatStandings | DividedStandings


def partition_standings(response: SeasonStandingsResponse) -> PartitionedStandings:
    """Branch on ``has_divisions`` into exactly one of the two shapes."""
    if isinstance(response, DivisionSeasonStandings):
        ordered = sorted(response.standings, key=lambda d: d.order)
        return DividedStandings(divisions=tuple(ordered))
    return FlatStandings(drivers=tuple(response.standings))


def flat_driver_standings(partition: PartitionedStandings) -> list[DriverStanding]:
    """Driver rows of a flat season; empty for divided seasons."""
    if isinstance(partition, FlatStandings):
        return list(partition.drivers)
    return []


def divisions_with_standings(partition: PartitionedStandings) -> list[SeasonStandingDivision]:
    """Divisions in display order; empty for flat seasons."""
    if isinstance(partition, DividedStandings):
        return list(partition.divisions)
    return []


def has_entrants(partition: PartitionedStandings) -> bool:
    """True when at least one driver row exists anywhere in the partition."""
    if isinstance(partition, FlatStandings):
        return bool(partition.drivers)
    return any(d.drivers for d in partition.divisions)
