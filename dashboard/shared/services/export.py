"""CSV export of a standings table."""

from __future__ import annotations

import csv
import io
import re

from .presenter import StandingsTable, table_columns, table_records

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def standings_to_csv(table: StandingsTable) -> str:
    """Render *table* as CSV with the same columns the dashboard shows."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=table_columns(table), lineterminator="\n")
    writer.writeheader()
    writer.writerows(table_records(table))
    return buffer.getvalue()


def export_filename(season_label: str, table: StandingsTable) -> str:
    """File name for a table download, e.g. ``season-3-pro-division.csv``."""
    slug = _SLUG_RE.sub("-", f"{season_label} {table.title}".lower()).strip("-")
    return f"{slug or 'standings'}.csv"
