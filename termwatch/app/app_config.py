"""App components."""

from pydantic import BaseModel, Field

from ..common.ticker import ThreadingTickerFactory, TickerFactory
from ..core.clock import Clock
from ..core.notifier import ExpiryNotifier
from ..core.scheduler import Scheduler
from ..events import EventBus


class AppConfig(BaseModel):
    """User preferences. Timer and stopwatch state is never stored here."""

    chime_count: int = Field(default=3, ge=1, description="Bells rung when a timer expires.")
    chime_gap: float = Field(default=0.4, ge=0, description="Seconds between bells.")
    show_progress: bool = Field(default=True, description="Show the timer progress bar.")
    redraw_latency: float = Field(default=0.05, ge=0, description="Seconds redraw requests are coalesced over.")


def build_scheduler(
    durations: list[int],
    notifier: ExpiryNotifier,
    event_bus: EventBus,
    ticker_factory: TickerFactory | None = None,
) -> Scheduler:
    """Build the timer scheduler."""
    return Scheduler.build(
        durations,
        ticker_factory=ticker_factory or ThreadingTickerFactory(),
        notifier=notifier,
        event_bus=event_bus,
    )


def build_stopwatch(ticker_factory: TickerFactory | None = None) -> Clock:
    """Build the stopwatch clock."""
    return Clock.stopwatch(ticker_factory or ThreadingTickerFactory())
