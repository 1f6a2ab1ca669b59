"""Standings presenter — tabs, active tab, and table view-models.

Everything here is derived from one immutable standings payload. The
synthetic "drivers" tab is computed from the payload's shape; it is not part
of the data model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from simleague.models import DriverStanding, SeasonStandingsResponse, TeamChampionshipStanding

from ..api_logging import log_service_call
from ..constants import (
    DIVISION_TAB_PREFIX,
    DRIVERS_TAB_ID,
    DRIVERS_TAB_LABEL,
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    FASTEST_LAP_MARKER,
    MISSING_DRIVER_ROUND,
    MISSING_TEAM_ROUND,
    PENALTY_MARKER,
    POLE_MARKER,
    TEAMS_TAB_ID,
    TEAMS_TAB_LABEL,
)
from ..formatters import format_points
from .divisions import (
    DividedStandings,
    FlatStandings,
    PartitionedStandings,
    has_entrants,
    partition_standings,
)
from .rounds import get_round_data, get_round_numbers
from .teams import TeamChampionshipView, merge_team_championship
from .totals import effective_drop_total


class TableKind(str, Enum):
    DRIVERS = "drivers"
    TEAMS = "teams"


class PanelStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True)
class StandingsTab:
    tab_id: str
    label: str


@dataclass(frozen=True)
class StandingsTable:
    """One ranked list ready for tabular rendering."""

    tab_id: str
    title: str
    kind: TableKind
    rounds: tuple[int, ...]
    rows: tuple[DriverStanding, ...] | tuple[TeamChampionshipStanding, ...]
    drop_round_enabled: bool
    total_drop_rounds: int


@dataclass(frozen=True)
class StandingsView:
    has_divisions: bool
    show_teams_championship: bool
    drop_round_enabled: bool
    teams_drop_round_enabled: bool
    tabs: tuple[StandingsTab, ...]
    active_tab_id: str | None
    tables: tuple[StandingsTable, ...]

    @property
    def show_tabs(self) -> bool:
        return bool(self.tabs)

    def table(self, tab_id: str) -> StandingsTable:
        """Return the table rendered under *tab_id*."""
        for table in self.tables:
            if table.tab_id == tab_id:
                return table
        raise KeyError(tab_id)


@dataclass(frozen=True)
class PanelState:
    """Terminal display state of the standings panel for one season."""

    status: PanelStatus
    season_id: int | None = None
    message: str | None = None
    view: StandingsView | None = None


def division_tab_id(division_id: int) -> str:
    return f"{DIVISION_TAB_PREFIX}{division_id}"


def build_tabs(
    partition: PartitionedStandings, teams: TeamChampionshipView,
) -> list[StandingsTab]:
    """Tabs to render, or an empty list when a single table suffices.

    Divided seasons always get one tab per division. Flat seasons get tabs
    only when the team championship is shown next to the drivers.
    """
    tabs: list[StandingsTab] = []
    if isinstance(partition, DividedStandings):
        tabs.extend(
            StandingsTab(division_tab_id(d.division_id), d.division_name)
            for d in partition.divisions
        )
    elif teams.show_teams_championship:
        tabs.append(StandingsTab(DRIVERS_TAB_ID, DRIVERS_TAB_LABEL))

    if teams.show_teams_championship:
        tabs.append(StandingsTab(TEAMS_TAB_ID, TEAMS_TAB_LABEL))
    return tabs


def initial_active_tab(
    partition: PartitionedStandings, teams: TeamChampionshipView,
) -> str | None:
    """Pick the tab selected right after a successful fetch.

    ``None`` when nothing can be selected, including a divided season whose
    divisions are all empty and which has no team table.
    """
    if isinstance(partition, DividedStandings) and has_entrants(partition):
        return division_tab_id(partition.divisions[0].division_id)
    if teams.show_teams_championship:
        if isinstance(partition, FlatStandings):
            return DRIVERS_TAB_ID
        return TEAMS_TAB_ID
    return None


def _driver_table(
    tab_id: str,
    title: str,
    drivers: tuple[DriverStanding, ...],
    response: SeasonStandingsResponse,
) -> StandingsTable:
    return StandingsTable(
        tab_id=tab_id,
        title=title,
        kind=TableKind.DRIVERS,
        rounds=tuple(get_round_numbers(drivers)),
        rows=drivers,
        drop_round_enabled=response.drop_round_enabled,
        total_drop_rounds=response.total_drop_rounds,
    )


def build_standings_view(response: SeasonStandingsResponse) -> StandingsView:
    """Compose partition, round columns and team championship into a view."""
    partition = partition_standings(response)
    teams = merge_team_championship(response)

    tables: list[StandingsTable] = []
    if isinstance(partition, DividedStandings):
        for division in partition.divisions:
            tables.append(_driver_table(
                division_tab_id(division.division_id),
                division.division_name,
                tuple(division.drivers),
                response,
            ))
    else:
        tables.append(_driver_table(
            DRIVERS_TAB_ID, DRIVERS_TAB_LABEL, partition.drivers, response,
        ))

    if teams.show_teams_championship:
        tables.append(StandingsTable(
            tab_id=TEAMS_TAB_ID,
            title=TEAMS_TAB_LABEL,
            kind=TableKind.TEAMS,
            rounds=tuple(get_round_numbers(teams.results)),
            rows=teams.results,
            drop_round_enabled=teams.drop_round_enabled,
            total_drop_rounds=teams.total_drop_rounds,
        ))

    return StandingsView(
        has_divisions=isinstance(partition, DividedStandings),
        show_teams_championship=teams.show_teams_championship,
        drop_round_enabled=response.drop_round_enabled,
        teams_drop_round_enabled=teams.drop_round_enabled,
        tabs=tuple(build_tabs(partition, teams)),
        active_tab_id=initial_active_tab(partition, teams),
        tables=tuple(tables),
    )


def is_empty_view(response: SeasonStandingsResponse) -> bool:
    """No driver rows anywhere and no team table to fall back on."""
    partition = partition_standings(response)
    teams = merge_team_championship(response)
    return not has_entrants(partition) and not teams.show_teams_championship


# ── Display records ─────────────────────────────────────────────────────────


def round_column(round_number: int) -> str:
    return f"R{round_number}"


def _driver_round_cell(driver: DriverStanding, round_number: int) -> str:
    result = get_round_data(driver.rounds, round_number)
    if result is None:
        return MISSING_DRIVER_ROUND
    parts = [format_points(result.points)]
    if result.has_pole:
        parts.append(POLE_MARKER)
    if result.has_fastest_lap:
        parts.append(FASTEST_LAP_MARKER)
    cell = " ".join(parts)
    if result.total_penalties:
        cell += PENALTY_MARKER
    return cell


def _team_round_cell(team: TeamChampionshipStanding, round_number: int) -> str:
    result = get_round_data(team.rounds, round_number)
    if result is None:
        return MISSING_TEAM_ROUND
    return format_points(result.points)


def table_columns(table: StandingsTable) -> list[str]:
    """Column headers in display order."""
    if table.kind is TableKind.DRIVERS:
        columns = ["Pos", "Driver", "Team", "Podiums", "Poles"]
    else:
        columns = ["Pos", "Team"]
    columns += [round_column(n) for n in table.rounds]
    columns.append("Total")
    if table.drop_round_enabled:
        columns.append("Drop")
    return columns


def table_records(table: StandingsTable) -> list[dict[str, str]]:
    """One string-valued record per row, keyed by ``table_columns``."""
    records: list[dict[str, str]] = []
    for row in table.rows:
        if isinstance(row, DriverStanding):
            record = {
                "Pos": str(row.position),
                "Driver": row.driver_name,
                "Team": row.team_name or "",
                "Podiums": str(row.podiums),
                "Poles": str(row.poles) if row.poles else "",
            }
            for n in table.rounds:
                record[round_column(n)] = _driver_round_cell(row, n)
        else:
            record = {"Pos": str(row.position), "Team": row.team_name}
            for n in table.rounds:
                record[round_column(n)] = _team_round_cell(row, n)
        record["Total"] = format_points(row.total_points)
        if table.drop_round_enabled:
            record["Drop"] = format_points(effective_drop_total(row))
        records.append(record)
    return records


# ── Panel state machine ─────────────────────────────────────────────────────


class StandingsPresenter:
    """Tracks the standings panel through loading, error, empty and loaded.

    Each state is terminal for its season: errors are not retried and a new
    fetch starts only when the season changes.
    """

    def __init__(self) -> None:
        self._state = PanelState(status=PanelStatus.LOADING)

    @property
    def state(self) -> PanelState:
        return self._state

    def loading(self, season_id: int) -> PanelState:
        self._state = PanelState(status=PanelStatus.LOADING, season_id=season_id)
        return self._state

    def fail(self, season_id: int) -> PanelState:
        """Show the static error message; no partial data is kept."""
        self._state = PanelState(
            status=PanelStatus.ERROR, season_id=season_id, message=ERROR_MESSAGE,
        )
        return self._state

    @log_service_call
    def present(self, season_id: int, response: SeasonStandingsResponse) -> PanelState:
        """Turn a fetched payload into the empty or loaded state."""
        if is_empty_view(response):
            self._state = PanelState(
                status=PanelStatus.EMPTY, season_id=season_id, message=EMPTY_MESSAGE,
            )
        else:
            self._state = PanelState(
                status=PanelStatus.LOADED,
                season_id=season_id,
                view=build_standings_view(response),
            )
        return self._state

    def needs_fetch(self, season_id: int) -> bool:
        """True when nothing has been fetched yet for *season_id*."""
        return (
            self._state.season_id != season_id
            or self._state.status is PanelStatus.LOADING
        )
