"""Formatting helpers for the standings dashboard."""

from __future__ import annotations


def format_points(points: float | None) -> str:
    """Format points without a trailing '.0' for whole numbers, '—' if None."""
    if points is None:
        return "—"
    if float(points).is_integer():
        return str(int(points))
    return f"{points:.2f}".rstrip("0").rstrip(".")


def format_ordinal(position: int | None) -> str:
    """Format a finishing position as 1st, 2nd, 3rd, 4th, 11th, 22nd..."""
    if position is None:
        return "—"
    if 10 <= position % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(position % 10, "th")
    return f"{position}{suffix}"


def format_round_tooltip(position: int | None, points: float) -> str:
    """Tooltip text for a round cell, e.g. 'P1st - 25 pts'."""
    if position is None:
        return f"{format_points(points)} pts"
    return f"P{format_ordinal(position)} - {format_points(points)} pts"
