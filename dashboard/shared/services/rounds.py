"""Round column aggregation for standings tables."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

from simleague.models import RoundPoints, TeamRoundPoints


class _HasRoundNumber(Protocol):
    round_number: int


class _HasRounds(Protocol):
    @property
    def rounds(self) -> Iterable[_HasRoundNumber]: ...


def get_round_numbers(entrants: Iterable[_HasRounds]) -> list[int]:
    """Return the sorted union of round numbers across every entrant.

    Entrants who missed a round simply have no entry for it, so the columns
    must come from all entrants, not just the first one.
    """
    numbers = {r.round_number for entrant in entrants for r in entrant.rounds}
    return sorted(numbers)


R = TypeVar("R", RoundPoints, TeamRoundPoints)


def get_round_data(
    rounds: Iterable[R], round_number: int,
) -> R | None:
    """Return the entrant's result for *round_number*, or None if missed."""
    for r in rounds:
        if r.round_number == round_number:
            return r
    return None
