"""Async standings loader that never lets a superseded season overwrite a newer one."""

from __future__ import annotations

import asyncio
import logging

from simleague import AsyncSimLeagueClient, SimLeagueError
from simleague.models import SeasonStandingsResponse

from .errors import StandingsDataError
from ..api_logging import log_event


class SeasonStandingsLoader:
    """Keeps at most one standings request in flight.

    Starting a new load cancels the pending request. A load
    that was superseded resolves to ``None`` instead of its response, so a
    caller applying results in completion order can never show stale data.

    Usage:
        async with AsyncSimLeagueClient() as league:
            loader = SeasonStandingsLoader(league)
            standings = await loader.load(12)
    """

    def __init__(self, client: AsyncSimLeagueClient) -> None:
        self._client = client
        self._season_id: int | None = None
        self._generation = 0
        self._task: asyncio.Task[SeasonStandingsResponse] | None = None

    @property
    def season_id(self) -> int | None:
        """Season of the most recent load request."""
        return self._season_id

    def cancel(self) -> None:
        """Cancel the pending request, if any."""
        if self._task is not None and not self._task.done():
            log_event("CANCEL: season_standings(%r)", self._season_id)
            self._task.cancel()

    async def load(self, season_id: int) -> SeasonStandingsResponse | None:
        """Fetch standings for *season_id*; ``None`` when superseded."""
        self.cancel()
        self._season_id = season_id
        self._generation += 1
        generation = self._generation
        task = asyncio.create_task(self._client.season_standings(season_id))
        self._task = task
        log_event("CALL: season_standings(%r)", season_id)

        try:
            response = await task
        except asyncio.CancelledError:
            if self._generation != generation:
                return None
            raise
        except SimLeagueError as exc:
            if self._generation != generation:
                return None
            log_event(
                "FAIL: season_standings(%r) -> %s: %s",
                season_id, type(exc).__name__, exc, level=logging.ERROR,
            )
            raise StandingsDataError(
                f"Failed to fetch standings for season {season_id}: {exc}"
            ) from exc

        if self._generation != generation:
            log_event("STALE: season_standings(%r) discarded", season_id)
            return None
        log_event("OK: season_standings(%r)", season_id)
        return response
