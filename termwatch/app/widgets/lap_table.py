"""Lap table widget."""

from textual.widgets import DataTable

from ...common.duration import format_seconds
from ...common.pydantic import Lap


class LapTable(DataTable):
    """Stopwatch laps, newest on top."""

    def on_mount(self) -> None:
        """Set up the table when mounted."""
        self.cursor_type = "row"
        self.add_columns("Lap", "Lap time", "Total")

    def update_laps(self, laps: list[Lap]) -> None:
        """Replace the rows with laps."""
        self.clear()
        for lap in laps:
            self.add_row(f"{lap.number:02d}", format_seconds(lap.lap_seconds), format_seconds(lap.total_seconds))
