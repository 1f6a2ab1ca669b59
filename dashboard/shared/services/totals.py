"""Drop-round (best N of M) totals as supplied by the backend."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class _Totalled(Protocol):
    total_points: float
    drop_total: float | None


def effective_drop_total(entrant: _Totalled) -> float:
    """The counted total, falling back to ``total_points`` when absent."""
    if entrant.drop_total is None:
        return entrant.total_points
    return entrant.drop_total


def find_drop_total_violations(
    entrants: Iterable[_Totalled], drop_round_enabled: bool,
) -> list[str]:
    """Describe entrants whose drop total contradicts the season setting.

    With drop rounds disabled the drop total must equal the total; with them
    enabled it may never exceed it.
    """
    violations: list[str] = []
    for index, entrant in enumerate(entrants):
        counted = effective_drop_total(entrant)
        if drop_round_enabled and counted > entrant.total_points:
            violations.append(
                f"row {index}: drop total {counted} exceeds total {entrant.total_points}"
            )
        elif not drop_round_enabled and counted != entrant.total_points:
            violations.append(
                f"row {index}: drop total {counted} differs from total {entrant.total_points}"
            )
    return violations
