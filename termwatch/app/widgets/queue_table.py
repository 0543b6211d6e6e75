"""Timer queue table widget."""

from typing import Any

from textual.coordinate import Coordinate
from textual.widgets import DataTable

from ...common.duration import format_seconds

HEAD_ICON = "->"


class QueueTable(DataTable):
    """Lists queued timer durations and marks the active one."""

    def __init__(self, durations: tuple[int, ...], **kwargs: Any):
        """Initialize the queue table."""
        super().__init__(cursor_type="row", **kwargs)
        self._durations = durations
        self._head = 0

    def on_mount(self) -> None:
        """Fill the table when mounted."""
        self.add_columns("Queue", "Timer duration")
        for i, duration in enumerate(self._durations):
            self.add_row(HEAD_ICON if i == self._head else str(i + 1), format_seconds(duration))

    def set_head(self, head: int) -> None:
        """Move the head marker to another row."""
        if head == self._head or self.row_count == 0:
            return
        self.update_cell_at(Coordinate(row=self._head, column=0), str(self._head + 1))
        self.update_cell_at(Coordinate(row=head, column=0), HEAD_ICON)
        self._head = head
