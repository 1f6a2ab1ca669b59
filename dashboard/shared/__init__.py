"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    ACCENT_RED,
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    PLOTLY_LAYOUT_DEFAULTS,
    PODIUM_COLORS,
)
from .formatters import format_ordinal, format_points, format_round_tooltip

# --- Data layer ---
from .data import SeasonStandingsLoader, StandingsDataError, StandingsRepository, get_repository

# --- Service layer ---
from .services import (
    PanelState,
    PanelStatus,
    StandingsPresenter,
    StandingsTable,
    StandingsView,
    TableKind,
    export_filename,
    podium_color,
    points_progression,
    standings_to_csv,
    table_columns,
    table_records,
)

__all__ = [
    "ACCENT_RED",
    "EMPTY_MESSAGE",
    "ERROR_MESSAGE",
    "PLOTLY_LAYOUT_DEFAULTS",
    "PODIUM_COLORS",
    "PanelState",
    "PanelStatus",
    "SeasonStandingsLoader",
    "StandingsDataError",
    "StandingsPresenter",
    "StandingsRepository",
    "StandingsTable",
    "StandingsView",
    "TableKind",
    "export_filename",
    "format_ordinal",
    "format_points",
    "format_round_tooltip",
    "get_repository",
    "podium_color",
    "points_progression",
    "standings_to_csv",
    "table_columns",
    "table_records",
]
