"""Per-round points models attributed to a single entrant."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RoundPoints(BaseModel):
    """A driver's result for one round of the season."""

    model_config = ConfigDict(frozen=True)

    round_id: int
    round_number: int
    points: float
    has_pole: bool = False
    has_fastest_lap: bool = False
    position: int | None = None
    total_penalties: float = 0


class TeamRoundPoints(BaseModel):
    """A team's combined points for one round of the season."""

    model_config = ConfigDict(frozen=True)

    round_id: int
    round_number: int
    points: float
