"""Source-agnostic standings fetch error."""

from __future__ import annotations


class StandingsDataError(Exception):
    """Source-agnostic standings fetch error. UI catches only this."""
