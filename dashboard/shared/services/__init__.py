"""Service layer — standings aggregation and presentation logic."""

from .divisions import (
    DividedStandings,
    FlatStandings,
    PartitionedStandings,
    divisions_with_standings,
    flat_driver_standings,
    has_entrants,
    partition_standings,
)
from .export import export_filename, standings_to_csv
from .presenter import (
    PanelState,
    PanelStatus,
    StandingsPresenter,
    StandingsTab,
    StandingsTable,
    StandingsView,
    TableKind,
    build_standings_view,
    build_tabs,
    initial_active_tab,
    table_columns,
    table_records,
)
from .progression import points_progression
from .ranking import (
    display_positions,
    find_ranking_violations,
    podium_color,
    position_class,
    row_class,
)
from .rounds import get_round_data, get_round_numbers
from .teams import TeamChampionshipView, merge_team_championship, sort_teams_by_position
from .totals import effective_drop_total, find_drop_total_violations

__all__ = [
    "DividedStandings",
    "FlatStandings",
    "PanelState",
    "PanelStatus",
    "PartitionedStandings",
    "StandingsPresenter",
    "StandingsTab",
    "StandingsTable",
    "StandingsView",
    "TableKind",
    "TeamChampionshipView",
    "build_standings_view",
    "build_tabs",
    "display_positions",
    "divisions_with_standings",
    "effective_drop_total",
    "export_filename",
    "find_drop_total_violations",
    "find_ranking_violations",
    "flat_driver_standings",
    "get_round_data",
    "get_round_numbers",
    "has_entrants",
    "initial_active_tab",
    "merge_team_championship",
    "partition_standings",
    "podium_color",
    "points_progression",
    "position_class",
    "row_class",
    "sort_teams_by_position",
    "standings_to_csv",
    "table_columns",
    "table_records",
]
