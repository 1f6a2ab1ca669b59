"""League API repository implementation."""

from __future__ import annotations

from simleague import SimLeagueClient, SimLeagueError
from simleague._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from simleague.models import SeasonStandingsResponse

from .base import StandingsRepository
from .errors import StandingsDataError
from ..api_logging import log_api_call


class LeagueApiRepository(StandingsRepository):
    """Fetches standings from the league REST API, one request per call."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"LeagueApiRepository(base_url={self._base_url!r})"

    @log_api_call
    def get_season_standings(self, season_id: int) -> SeasonStandingsResponse:
        try:
            with SimLeagueClient(base_url=self._base_url, timeout=self._timeout) as league:
                return league.season_standings(season_id)
        except SimLeagueError as exc:
            raise StandingsDataError(
                f"Failed to fetch standings for season {season_id}: {exc}"
            ) from exc
