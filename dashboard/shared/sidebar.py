"""Shared sidebar rendering for season selection."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from simleague._http import DEFAULT_BASE_URL


@dataclass(frozen=True)
class SeasonSelection:
    """Result of the season sidebar inputs."""

    base_url: str
    season_id: int

    @property
    def label(self) -> str:
        return f"Season {self.season_id}"


def render_season_sidebar() -> SeasonSelection | None:
    """Render API URL and season inputs in the sidebar.

    Returns a SeasonSelection, or None when the inputs are incomplete.
    """
    base_url = st.sidebar.text_input(
        "League API URL",
        value=st.session_state.get("league_api_url", DEFAULT_BASE_URL),
    ).strip()
    st.session_state["league_api_url"] = base_url

    season_id = st.sidebar.number_input(
        "Season ID",
        min_value=1,
        step=1,
        value=int(st.session_state.get("season_id", 1)),
    )
    st.session_state["season_id"] = int(season_id)

    if not base_url:
        st.sidebar.warning("Enter the league API URL.")
        return None
    return SeasonSelection(base_url=base_url, season_id=int(season_id))
