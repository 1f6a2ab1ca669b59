"""Shared constants for the standings dashboard."""

from __future__ import annotations

ACCENT_RED = "#E10600"

DRIVERS_TAB_ID = "drivers"
TEAMS_TAB_ID = "teams"
DIVISION_TAB_PREFIX = "division-"

DRIVERS_TAB_LABEL = "Drivers"
TEAMS_TAB_LABEL = "Team Championship"

ERROR_MESSAGE = "Failed to load season standings"
EMPTY_MESSAGE = "No standings data available yet"

MISSING_DRIVER_ROUND = "—"
MISSING_TEAM_ROUND = "0"

POLE_MARKER = "P"
FASTEST_LAP_MARKER = "FL"
PENALTY_MARKER = "*"

PODIUM_COLORS: dict[int, str] = {
    1: "#FFD700",  # gold
    2: "#C0C0C0",  # silver
    3: "#CD7F32",  # bronze
}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
