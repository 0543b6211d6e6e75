"""Big-digit clock display."""

from typing import Any

from textual.widgets import Digits

from ...common.duration import format_seconds


class ClockDisplay(Digits):
    """Shows a number of seconds as hh:mm:ss."""

    def __init__(self, seconds: int = 0, **kwargs: Any):
        """Initialize the display."""
        super().__init__(format_seconds(seconds), **kwargs)
        self._seconds = seconds

    def show(self, seconds: int) -> None:
        """Display seconds, skipping the update when nothing changed."""
        if seconds == self._seconds:
            return
        self._seconds = seconds
        self.update(format_seconds(seconds))
