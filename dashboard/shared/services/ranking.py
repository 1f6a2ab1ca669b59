"""Ranking presentation: positions are shown exactly as the backend assigned them.

Standings use standard competition ranking (1, 2, 3, 3, 5). The backend owns
tiebreakers, so nothing here re-sorts rows by points or renumbers positions.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..constants import PODIUM_COLORS


class _Ranked(Protocol):
    position: int


def display_positions(rows: Iterable[_Ranked]) -> list[int]:
    """Return each row's position verbatim, in list order."""
    return [row.position for row in rows]


def find_ranking_violations(positions: Sequence[int]) -> list[str]:
    """Describe every place *positions* breaks standard competition ranking.

    Returns an empty list for a valid sequence. Nothing at runtime calls this
    to repair data; invalid upstream rankings are displayed as received.
    """
    violations: list[str] = []
    if not positions:
        return violations
    if positions[0] != 1:
        violations.append(f"first position is {positions[0]}, expected 1")

    tie_size = 1
    for index in range(1, len(positions)):
        previous, current = positions[index - 1], positions[index]
        if current == previous:
            tie_size += 1
            continue
        expected = previous + tie_size
        if current < previous:
            violations.append(
                f"position {current} at index {index} follows {previous}"
            )
        elif current != expected:
            violations.append(
                f"position {current} at index {index} should be {expected} "
                f"after a tie of {tie_size} at {previous}"
            )
        tie_size = 1
    return violations


def tie_groups(positions: Sequence[int]) -> dict[int, int]:
    """Map each shared position to the number of rows tied on it."""
    counts: dict[int, int] = {}
    for position in positions:
        counts[position] = counts.get(position, 0) + 1
    return {pos: n for pos, n in counts.items() if n > 1}


def position_class(position: int) -> str:
    """CSS-style class for the position cell of podium finishers."""
    return f"pos-{position}" if position in PODIUM_COLORS else ""


def row_class(position: int) -> str:
    """CSS-style class highlighting podium rows."""
    return f"row-podium-{position}" if position in PODIUM_COLORS else ""


def podium_color(position: int) -> str | None:
    """Gold/silver/bronze for positions 1-3, None otherwise."""
    return PODIUM_COLORS.get(position)
