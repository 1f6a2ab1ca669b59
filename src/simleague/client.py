"""Public client classes for the league API."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from simleague._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from simleague.exceptions import SimLeagueValidationError
from simleague.models.standings import SeasonStandingsResponse

_STANDINGS_ADAPTER: TypeAdapter[SeasonStandingsResponse] = TypeAdapter(SeasonStandingsResponse)


def _validate_standings(season_id: int, data: Any) -> SeasonStandingsResponse:
    """Validate a standings payload against the flat/division union."""
    try:
        return _STANDINGS_ADAPTER.validate_python(data)
    except Exception as exc:
        raise SimLeagueValidationError(
            f"Failed to validate standings response for season {season_id}: {exc}"
        ) from exc


def _standings_endpoint(season_id: int) -> str:
    return f"/seasons/{season_id}/standings"


class SimLeagueClient:
    """Synchronous client for the league API.

    Usage:
        league = SimLeagueClient()
        standings = league.season_standings(12)
        league.close()

        # Or as a context manager:
        with SimLeagueClient(base_url="https://league.example.com/api") as league:
            standings = league.season_standings(12)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> SimLeagueClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def season_standings(self, season_id: int) -> SeasonStandingsResponse:
        """Get cumulative driver, division and team standings for a season."""
        data = self._transport.get(_standings_endpoint(season_id))
        return _validate_standings(season_id, data)


class AsyncSimLeagueClient:
    """Asynchronous client for the league API.

    Usage:
        async with AsyncSimLeagueClient() as league:
            standings = await league.season_standings(12)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncSimLeagueClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def season_standings(self, season_id: int) -> SeasonStandingsResponse:
        """Get cumulative driver, division and team standings for a season."""
        data = await self._transport.get(_standings_endpoint(season_id))
        return _validate_standings(season_id, data)
