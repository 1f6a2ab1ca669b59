"""League Season Standings Dashboard — Streamlit + Plotly + league API."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    ACCENT_RED,
    PLOTLY_LAYOUT_DEFAULTS,
    PanelStatus,
    StandingsDataError,
    StandingsPresenter,
    StandingsTable,
    TableKind,
    export_filename,
    format_points,
    format_round_tooltip,
    get_repository,
    podium_color,
    points_progression,
    standings_to_csv,
    table_columns,
    table_records,
)
from shared.services.progression import entrant_label
from shared.services.rounds import get_round_data
from shared.sidebar import render_season_sidebar

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="League Standings",
    page_icon="\U0001f3c6",
    layout="wide",
)


# ── Sidebar — season selection ───────────────────────────────────────────────

st.sidebar.title("League Standings")

selection = render_season_sidebar()
if selection is None:
    st.stop()


# ── Fetch (once per season / API URL) ────────────────────────────────────────

presenter: StandingsPresenter = st.session_state.setdefault(
    "standings_presenter", StandingsPresenter(),
)
source_changed = st.session_state.get("standings_api_url") != selection.base_url

if source_changed or presenter.needs_fetch(selection.season_id):
    presenter.loading(selection.season_id)
    with st.spinner("Loading season standings..."):
        try:
            response = get_repository(selection.base_url).get_season_standings(
                selection.season_id,
            )
        except StandingsDataError:
            presenter.fail(selection.season_id)
        else:
            presenter.present(selection.season_id, response)
    st.session_state["standings_api_url"] = selection.base_url

state = presenter.state


# ── Header ───────────────────────────────────────────────────────────────────

st.markdown(f"# Season Standings\n**{selection.label}**")
st.markdown(
    f'<div style="height:4px;background:{ACCENT_RED};border-radius:2px;'
    f'margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)

if state.status is PanelStatus.ERROR:
    st.error(state.message)
    st.stop()

if state.status is PanelStatus.EMPTY:
    st.info(state.message)
    st.stop()

view = state.view
if view is None:
    st.stop()


# ── Table rendering ──────────────────────────────────────────────────────────


def render_podium(table: StandingsTable) -> None:
    """Gold/silver/bronze cards for every podium row, ties included."""
    podium_rows = [row for row in table.rows if podium_color(row.position)]
    if not podium_rows:
        return
    cols = st.columns(len(podium_rows))
    for col, row in zip(cols, podium_rows):
        color = podium_color(row.position)
        col.markdown(
            f'<div style="border-left:6px solid {color};padding-left:0.6rem">'
            f"<b>P{row.position}</b> {entrant_label(row)}<br>"
            f"{format_points(row.total_points)} pts</div>",
            unsafe_allow_html=True,
        )


def render_progression(table: StandingsTable) -> None:
    """Line chart of cumulative round points per entrant."""
    if not table.rounds or not table.rows:
        return
    series = points_progression(table.rows, table.rounds)
    x_labels = [f"R{n}" for n in table.rounds]
    fig = go.Figure()
    for name, totals in series:
        fig.add_trace(go.Scatter(x=x_labels, y=totals, mode="lines+markers", name=name))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        title="Points Progression",
        xaxis_title="Round",
        yaxis_title="Points",
        height=420,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_round_breakdown(table: StandingsTable) -> None:
    """Per-round finishing position and points for one driver."""
    if table.kind is not TableKind.DRIVERS or not table.rows:
        return
    with st.expander("Round breakdown"):
        driver = st.selectbox(
            "Driver",
            list(table.rows),
            format_func=entrant_label,
            key=f"breakdown-{table.tab_id}",
        )
        for n in table.rounds:
            result = get_round_data(driver.rounds, n)
            if result is None:
                st.write(f"R{n}: did not take part")
            else:
                st.write(f"R{n}: {format_round_tooltip(result.position, result.points)}")


def render_table(table: StandingsTable) -> None:
    if table.drop_round_enabled:
        st.caption(f"Drop rounds: best results count, {table.total_drop_rounds} dropped")
    render_podium(table)
    st.dataframe(
        table_records(table),
        column_order=table_columns(table),
        hide_index=True,
        use_container_width=True,
    )
    st.download_button(
        "Export CSV",
        data=standings_to_csv(table),
        file_name=export_filename(selection.label, table),
        mime="text/csv",
        key=f"export-{table.tab_id}",
    )
    render_progression(table)
    render_round_breakdown(table)


# ── Tabs ─────────────────────────────────────────────────────────────────────

if view.show_tabs:
    tab_ids = [tab.tab_id for tab in view.tabs]
    labels = {tab.tab_id: tab.label for tab in view.tabs}
    tab_key = f"standings-tab-{selection.season_id}"
    if st.session_state.get(tab_key) not in tab_ids:
        st.session_state[tab_key] = view.active_tab_id or tab_ids[0]
    active_tab_id = st.radio(
        "Standings",
        tab_ids,
        format_func=labels.__getitem__,
        horizontal=True,
        label_visibility="collapsed",
        key=tab_key,
    )
    render_table(view.table(active_tab_id))
else:
    render_table(view.tables[0])
