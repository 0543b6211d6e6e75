"""Chained-timer scheduler."""

import logging
import threading
import time
from collections.abc import Callable, Iterable

from ..common.ticker import TickerFactory
from ..events import Event, EventBus
from ..events.scheduler import AdvanceSuppressed, QueueAdvanced, QueueExhausted, TimerExpired, UserSelected
from .clock import Clock, ClockMode
from .notifier import ExpiryNotifier
from .timer_queue import TimerQueue

logger = logging.getLogger(__name__)


class Scheduler:
    """Coordinates a count-down clock against a queue of durations.

    Expiries (delivered on the ticker thread) and user selections (delivered on
    the input thread) are funneled through ``handle`` under one lock. An expiry
    whose notification interval contains the latest user selection is treated
    as already handled, so the user's choice is never overwritten by the
    auto-advance.
    """

    def __init__(
        self,
        clock: Clock,
        queue: TimerQueue,
        notifier: ExpiryNotifier,
        event_bus: EventBus,
        now: Callable[[], int] = time.monotonic_ns,
    ):
        """Initialize the scheduler and wire the clock and queue callbacks."""
        if clock.mode is not ClockMode.COUNT_DOWN:
            raise ValueError("The scheduler drives a count-down clock")
        self.clock = clock
        self.queue = queue
        self._notifier = notifier
        self._event_bus = event_bus
        self._now = now
        self._lock = threading.RLock()
        self.last_user_selection_t: int | None = None

        if clock.total != queue.current():
            clock.stop()
            clock.set_total_duration(queue.current())
        clock.set_done_callback(self._on_clock_done)
        queue.set_selected_callback(self._on_queue_selected)

    @classmethod
    def build(
        cls,
        durations: Iterable[int],
        ticker_factory: TickerFactory,
        notifier: ExpiryNotifier,
        event_bus: EventBus,
        now: Callable[[], int] = time.monotonic_ns,
    ) -> "Scheduler":
        """Build a scheduler with a fresh clock and queue."""
        queue = TimerQueue(durations)
        clock = Clock.timer(ticker_factory, queue.current())
        return cls(clock, queue, notifier, event_bus, now)

    def _on_clock_done(self) -> None:
        interval = self._notifier.notify()
        self.handle(TimerExpired(interval=interval, event_t=self._now()))

    def _on_queue_selected(self, index: int) -> None:
        self.handle(UserSelected(index=index, event_t=self._now()))

    def handle(self, event: Event) -> None:
        """Process one scheduler event."""
        with self._lock:
            if isinstance(event, TimerExpired):
                self._handle_expired(event)
            elif isinstance(event, UserSelected):
                self._handle_selected(event)
            else:
                raise TypeError(f"Unsupported scheduler event: {type(event).__name__}")

    def _handle_expired(self, event: TimerExpired) -> None:
        selection_t = self.last_user_selection_t
        if selection_t is not None and event.interval.contains(selection_t):
            logger.info("Auto-advance suppressed by selection made during the notification")
            self._event_bus.submit_event(AdvanceSuppressed(selection_t=selection_t, interval=event.interval))
            return
        if not self.queue.advance():
            logger.info("Timer queue exhausted")
            self._event_bus.submit_event(QueueExhausted(index=self.queue.head))
            return
        duration = self._rebind_current()
        self._event_bus.submit_event(QueueAdvanced(index=self.queue.head, duration=duration))

    def _handle_selected(self, event: UserSelected) -> None:
        self.last_user_selection_t = event.event_t
        duration = self._rebind_current()
        logger.info("User selected queue entry %d (%d seconds)", event.index, duration)

    def _rebind_current(self) -> int:
        """Rebind the clock to the head of the queue and restart it."""
        duration = self.queue.current()
        self.clock.stop()
        self.clock.set_total_duration(duration)
        self.clock.reset()
        return duration

    def start(self) -> None:
        """Start the active timer."""
        with self._lock:
            self.clock.start()

    def stop(self) -> None:
        """Pause the active timer."""
        with self._lock:
            self.clock.stop()

    def reset(self) -> None:
        """Restart the active timer from zero."""
        with self._lock:
            self.clock.reset()

    def toggle(self) -> None:
        """Pause a running timer or resume a paused one."""
        with self._lock:
            self.clock.toggle()

    def select(self, index: int) -> bool:
        """Make the queue entry at index active and restart the clock on it."""
        with self._lock:
            return self.queue.select(index)

    def next(self) -> bool:
        """Jump to the next queued timer."""
        with self._lock:
            return self.queue.next()

    def previous(self) -> bool:
        """Jump to the previous queued timer."""
        with self._lock:
            return self.queue.previous()
