"""Status bar widget for the termwatch app."""

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, ProgressBar


class StatusBar(Horizontal):
    """A thin status line with an optional timer progress bar.

    The progress bar is only shown in timer mode; the status text is always
    aligned to the right.
    """

    def __init__(self, show_progress: bool = False, *args: Any, **kwargs: Any):
        """Initialize the status bar."""
        super().__init__(*args, **kwargs)
        self.progress_bar = ProgressBar(id="status_progress_bar", show_eta=False)
        self.status_text = Label("", id="status_text")
        self._show_progress = show_progress

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield self.progress_bar
        yield self.status_text

    def on_mount(self) -> None:
        """Hide the progress bar when it is not wanted."""
        self.progress_bar.display = self._show_progress

    def set_progress(self, elapsed: int, total: int) -> None:
        """Show elapsed out of total seconds."""
        self.progress_bar.update(total=total, progress=elapsed)

    def set_status(self, text: str) -> None:
        """Update the status text."""
        self.status_text.update(text)
