"""Abstract base repository for season standings access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from simleague.models import SeasonStandingsResponse


class StandingsRepository(ABC):
    """Source-agnostic interface for season standings access."""

    @abstractmethod
    def get_season_standings(self, season_id: int) -> SeasonStandingsResponse: ...
