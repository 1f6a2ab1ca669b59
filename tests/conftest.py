"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

BASE_URL = "http://localhost:8000/api"


def _round(
    round_number: int,
    points: float,
    has_pole: bool = False,
    has_fastest_lap: bool = False,
    round_id: int | None = None,
) -> dict:
    return {
        "round_id": round_id if round_id is not None else 100 + round_number,
        "round_number": round_number,
        "points": points,
        "has_pole": has_pole,
        "has_fastest_lap": has_fastest_lap,
    }


SAMPLE_FLAT_STANDINGS = {
    "standings": [
        {
            "position": 1,
            "driver_id": 1,
            "driver_name": "Lewis Hamilton",
            "total_points": 150,
            "drop_total": 150,
            "podiums": 2,
            "rounds": [_round(1, 75, has_pole=True), _round(2, 75, has_fastest_lap=True)],
        },
        {
            "position": 2,
            "driver_id": 2,
            "driver_name": "Max Verstappen",
            "total_points": 140,
            "drop_total": 140,
            "podiums": 2,
            "rounds": [_round(1, 70, has_fastest_lap=True), _round(2, 70, has_pole=True)],
        },
        {
            "position": 3,
            "driver_id": 3,
            "driver_name": "Charles Leclerc",
            "total_points": 130,
            "drop_total": 130,
            "podiums": 1,
            "rounds": [_round(1, 65), _round(2, 65)],
        },
    ],
    "has_divisions": False,
    "drop_round_enabled": False,
    "total_drop_rounds": 0,
    "team_championship_enabled": False,
    "team_championship_results": [],
    "teams_drop_rounds_enabled": False,
    "teams_total_drop_rounds": 0,
}

SAMPLE_DIVISION_STANDINGS = {
    "standings": [
        {
            "division_id": 1,
            "division_name": "Pro Division",
            "order": 1,
            "drivers": [
                {
                    "position": 1,
                    "driver_id": 1,
                    "driver_name": "Lewis Hamilton",
                    "total_points": 150,
                    "drop_total": 150,
                    "podiums": 2,
                    "rounds": [_round(1, 75, has_pole=True), _round(2, 75)],
                },
                {
                    "position": 2,
                    "driver_id": 2,
                    "driver_name": "Max Verstappen",
                    "total_points": 140,
                    "drop_total": 140,
                    "podiums": 2,
                    "rounds": [_round(1, 70), _round(2, 70, has_pole=True)],
                },
            ],
        },
        {
            "division_id": 2,
            "division_name": "Am Division",
            "order": 2,
            "drivers": [
                {
                    "position": 1,
                    "driver_id": 3,
                    "driver_name": "George Russell",
                    "total_points": 120,
                    "drop_total": 120,
                    "podiums": 1,
                    "rounds": [_round(1, 60, True, True), _round(2, 60)],
                },
            ],
        },
    ],
    "has_divisions": True,
    "drop_round_enabled": False,
    "total_drop_rounds": 0,
    "team_championship_enabled": False,
    "team_championship_results": [],
    "teams_drop_rounds_enabled": False,
    "teams_total_drop_rounds": 0,
}

SAMPLE_TEAM_RESULTS = [
    {
        "team_id": 2,
        "team_name": "Red Bull Racing",
        "total_points": 250,
        "drop_total": 250,
        "position": 2,
        "rounds": [
            {"round_id": 101, "round_number": 1, "points": 130},
            {"round_id": 102, "round_number": 2, "points": 120},
        ],
    },
    {
        "team_id": 1,
        "team_name": "Mercedes",
        "total_points": 270,
        "drop_total": 270,
        "position": 1,
        "rounds": [
            {"round_id": 101, "round_number": 1, "points": 135},
            {"round_id": 102, "round_number": 2, "points": 135},
        ],
    },
    {
        "team_id": 3,
        "team_name": "Ferrari",
        "total_points": 130,
        "drop_total": 130,
        "position": 3,
        "rounds": [
            {"round_id": 101, "round_number": 1, "points": 65},
            {"round_id": 102, "round_number": 2, "points": 65},
        ],
    },
]

SAMPLE_EMPTY_STANDINGS = {"standings": [], "has_divisions": False}


def envelope(payload: dict) -> dict:
    """Wrap a payload the way the league API does."""
    return {"success": True, "data": payload}


@pytest.fixture
def base_url() -> str:
    return BASE_URL
