"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from simleague.exceptions import (
    SimLeagueAPIError,
    SimLeagueConnectionError,
    SimLeagueTimeoutError,
)

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 30.0


def _error_message(response: httpx.Response) -> str:
    """Prefer the envelope's ``message`` field over the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return the unwrapped JSON payload.

    The league API wraps payloads as ``{"success": true, "data": ...}``;
    bare payloads are returned unchanged.
    """
    if response.status_code >= 400:
        raise SimLeagueAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    body = response.json()
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str) -> Any:
        """Perform a GET request and return the parsed payload."""
        try:
            response = self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise SimLeagueConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise SimLeagueTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str) -> Any:
        """Perform an async GET request and return the parsed payload."""
        try:
            response = await self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise SimLeagueConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise SimLeagueTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
