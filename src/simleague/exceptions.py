"""Custom exceptions for the league API client."""

from __future__ import annotations


class SimLeagueError(Exception):
    """Base exception for all league API client errors."""


class SimLeagueConnectionError(SimLeagueError):
    """Raised when the client cannot connect to the API."""


class SimLeagueTimeoutError(SimLeagueError):
    """Raised when a request to the API times out."""


class SimLeagueAPIError(SimLeagueError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class SimLeagueValidationError(SimLeagueError):
    """Raised when API response data fails model validation."""
