"""simleague — Typed Python client for the sim-racing league API."""

from simleague.client import AsyncSimLeagueClient, SimLeagueClient
from simleague.exceptions import (
    SimLeagueAPIError,
    SimLeagueConnectionError,
    SimLeagueError,
    SimLeagueTimeoutError,
    SimLeagueValidationError,
)

__all__ = [
    "AsyncSimLeagueClient",
    "SimLeagueAPIError",
    "SimLeagueClient",
    "SimLeagueConnectionError",
    "SimLeagueError",
    "SimLeagueTimeoutError",
    "SimLeagueValidationError",
]

__version__ = "0.1.0"
