"""Data layer — standings repository factory and re-exports."""

from __future__ import annotations

from simleague._http import DEFAULT_BASE_URL

from .base import StandingsRepository
from .errors import StandingsDataError
from .loader import SeasonStandingsLoader


def get_repository(base_url: str = DEFAULT_BASE_URL) -> StandingsRepository:
    """Return the standings repository for the configured API base URL."""
    from .api_repo import LeagueApiRepository

    return LeagueApiRepository(base_url=base_url)


__all__ = [
    "SeasonStandingsLoader",
    "StandingsDataError",
    "StandingsRepository",
    "get_repository",
]
