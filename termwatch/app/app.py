"""Terminal stopwatch and timer applications."""

import logging
from typing import ClassVar

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Header

from ..common.debounce import DebouncedRunner
from ..common.duration import format_seconds_letters
from ..core.clock import Clock
from ..core.laps import LapRecorder
from ..core.scheduler import Scheduler
from ..events import EventBus
from ..events.scheduler import QueueAdvanced, QueueExhausted
from .app_config import AppConfig
from .widgets.clock_display import ClockDisplay
from .widgets.lap_table import LapTable
from .widgets.queue_table import QueueTable
from .widgets.status_bar import StatusBar

logger = logging.getLogger(__name__)


def advanced_message(event: QueueAdvanced) -> str:
    """Notification text for an automatic move to the next timer."""
    return f"Timer {event.index + 1} started ({format_seconds_letters(event.duration)})"


class WatchApp(App):
    """Shared layout and clock controls for both modes."""

    BINDINGS: ClassVar = [
        Binding("space", "toggle", "Play/Pause"),
        Binding("r", "restart", "Restart"),
        Binding("q", "close_app", "Quit", priority=True),
        Binding("ctrl+c", "close_app", "Quit", show=False, priority=True),
    ]

    CSS = """
    #side {
        width: 1fr;
        border: round $secondary;
    }

    #main {
        width: 3fr;
        align: center middle;
    }

    ClockDisplay {
        width: auto;
        margin: 1 2;
    }

    StatusBar {
        height: 1;
        padding: 0 2;
    }

    #status_progress_bar {
        width: 1fr;
    }

    #status_text {
        width: 1fr;
        content-align: right middle;
    }
    """

    def __init__(self, config: AppConfig, clock: Clock):
        """Initialize the app."""
        super().__init__()
        self._config = config
        self.clock = clock
        self._closing = False
        self._redraw_debounced = DebouncedRunner(config.redraw_latency)

    def compose_side(self) -> ComposeResult:
        """Create the side panel."""
        yield from ()

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()
        with Horizontal():
            with Vertical(id="side"):
                yield from self.compose_side()
            with Vertical(id="main"):
                yield ClockDisplay(self.displayed_seconds())
                yield StatusBar(show_progress=self.shows_progress)
        yield Footer()

    @property
    def shows_progress(self) -> bool:
        """Whether the status bar shows a progress bar."""
        return False

    def displayed_seconds(self) -> int:
        """Seconds the clock display shows."""
        return self.clock.elapsed

    def status_text(self) -> str:
        """Text for the status bar."""
        return "Running" if self.clock.running else "Paused"

    def refresh_display(self) -> None:
        """Redraw everything that depends on clock state."""
        self.query_one(ClockDisplay).show(self.displayed_seconds())
        self.query_one(StatusBar).set_status(self.status_text())
        self.refresh_bindings()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Dim bindings that would do nothing in the current clock state."""
        if action == "toggle" and not self.clock.is_time_left():
            return None
        return True

    def _request_redraw(self) -> None:
        """Redraw trigger handed to the clock; safe to call from any thread."""
        self._redraw_debounced.submit(self._redraw_from_thread)

    def _redraw_from_thread(self) -> None:
        if self._closing:
            return
        self.call_from_thread(self.refresh_display)

    def ring_bell(self) -> None:
        """Ring the terminal bell from a non-UI thread."""
        if self._closing:
            return
        self.call_from_thread(self.bell)

    def on_mount(self) -> None:
        """Start the clock when mounted."""
        self.clock.set_changed_callback(self._request_redraw)
        self.clock.start()
        self.refresh_display()
        self.after_mount()

    def after_mount(self) -> None:
        """Mode-specific setup once the widgets exist."""

    def on_unmount(self) -> None:
        """Stop ticking when the app goes away."""
        self._closing = True
        self.clock.set_changed_callback(None)
        self._redraw_debounced.cancel()
        self.clock.stop()

    def action_toggle(self) -> None:
        """Pause or resume the clock."""
        self.clock.toggle()
        self.refresh_display()

    def action_restart(self) -> None:
        """Restart the clock from zero."""
        self.clock.reset()
        self.refresh_display()

    def action_close_app(self) -> None:
        """Close the application."""
        self._closing = True
        self.exit()


class StopwatchApp(WatchApp):
    """Open-ended stopwatch with laps."""

    TITLE = "Stopwatch"
    BINDINGS: ClassVar = [
        Binding("l", "lap", "Lap"),
        Binding("y,c", "copy_laps", "Copy laps"),
    ]

    def __init__(self, config: AppConfig, clock: Clock, laps: LapRecorder | None = None):
        """Initialize the app."""
        super().__init__(config, clock)
        self.laps = laps or LapRecorder()

    def compose_side(self) -> ComposeResult:
        """Create the lap table."""
        yield LapTable()

    def action_lap(self) -> None:
        """Record a lap at the current elapsed time."""
        lap = self.laps.add_lap(self.clock.elapsed)
        logger.debug("Lap %d recorded at %d seconds", lap.number, lap.total_seconds)
        self.query_one(LapTable).update_laps(self.laps.laps)

    def action_restart(self) -> None:
        """Restart the stopwatch from zero and forget the laps."""
        self.laps.clear()
        self.query_one(LapTable).update_laps(self.laps.laps)
        super().action_restart()

    def action_copy_laps(self) -> None:
        """Copy all laps to the system clipboard."""
        if len(self.laps) == 0:
            self.notify("No laps to copy")
            return
        self.copy_to_clipboard(self.laps.export_text())
        self.notify(f"Copied {len(self.laps)} laps")


class TimerApp(WatchApp):
    """Countdown timer working through a queue of durations."""

    TITLE = "Timer"
    BINDINGS: ClassVar = [
        Binding("n", "next", "Next"),
        Binding("p", "previous", "Prev"),
    ]

    def __init__(self, config: AppConfig, scheduler: Scheduler, event_bus: EventBus):
        """Initialize the app."""
        super().__init__(config, scheduler.clock)
        self.scheduler = scheduler
        self._event_bus = event_bus

    @property
    def shows_progress(self) -> bool:
        """Whether the status bar shows a progress bar."""
        return self._config.show_progress

    def compose_side(self) -> ComposeResult:
        """Create the queue table."""
        yield QueueTable(self.scheduler.queue.durations)

    def after_mount(self) -> None:
        """Focus the queue and listen for queue outcomes."""
        self.query_one(QueueTable).focus()
        self._event_bus.add_callback(QueueAdvanced, self._on_queue_advanced)
        self._event_bus.add_callback(QueueExhausted, self._on_queue_exhausted)

    def _on_queue_advanced(self, event: QueueAdvanced) -> None:
        if not self._closing:
            self.call_from_thread(self.notify, advanced_message(event))

    def _on_queue_exhausted(self, event: QueueExhausted) -> None:
        if not self._closing:
            self.call_from_thread(self.notify, "All timers finished")

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Dim next/prev at the ends of the queue."""
        queue = self.scheduler.queue
        if action == "next" and queue.is_last():
            return None
        if action == "previous" and queue.head == 0:
            return None
        return super().check_action(action, parameters)

    def displayed_seconds(self) -> int:
        """Seconds left on the active timer."""
        return self.clock.remaining or 0

    def status_text(self) -> str:
        """Text for the status bar."""
        queue = self.scheduler.queue
        position = f"Timer {queue.head + 1}/{len(queue)}"
        if self.clock.expired:
            return f"Time's up! {position}"
        return f"{super().status_text()} {position}"

    def refresh_display(self) -> None:
        """Redraw the clock, progress and queue marker."""
        super().refresh_display()
        self.query_one(StatusBar).set_progress(self.clock.elapsed, self.clock.total or 0)
        self.query_one(QueueTable).set_head(self.scheduler.queue.head)

    def action_toggle(self) -> None:
        """Pause or resume the timer."""
        self.scheduler.toggle()
        self.refresh_display()

    def action_restart(self) -> None:
        """Restart the active timer."""
        self.scheduler.reset()
        self.refresh_display()

    def action_next(self) -> None:
        """Jump to the next timer."""
        self.scheduler.next()
        self.refresh_display()

    def action_previous(self) -> None:
        """Jump to the previous timer."""
        self.scheduler.previous()
        self.refresh_display()

    @on(DataTable.RowSelected)
    def _on_row_selected(self, event: DataTable.RowSelected) -> None:
        self.scheduler.select(event.cursor_row)
        self.refresh_display()
