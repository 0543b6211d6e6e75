"""Count-up and count-down clock driven by a ticker."""

import logging
import threading
from collections.abc import Callable
from enum import StrEnum

from ..common.ticker import Ticker, TickerFactory

logger = logging.getLogger(__name__)


class ClockMode(StrEnum):
    """Direction the clock counts in."""

    COUNT_UP = "count-up"
    COUNT_DOWN = "count-down"


class ClockStateError(RuntimeError):
    """Raised when a clock is driven out of order, e.g. rebound while running."""


class Clock:
    """A single countable time value with start/stop/reset semantics.

    ``elapsed`` only moves inside the tick callback while the clock is running.
    A count-down clock stops itself in the tick that reaches ``total`` and then
    invokes the done callback exactly once. Callbacks are always invoked after
    the clock lock has been released.
    """

    def __init__(
        self,
        ticker_factory: TickerFactory,
        mode: ClockMode = ClockMode.COUNT_UP,
        total: int | None = None,
    ):
        """Initialize the clock."""
        if mode is ClockMode.COUNT_DOWN:
            if total is None or total <= 0:
                raise ValueError("A count-down clock needs a positive total")
        elif total is not None:
            raise ValueError("A count-up clock is unbounded")
        self._ticker_factory = ticker_factory
        self._mode = mode
        self._total = total
        self._elapsed = 0
        self._running = False
        self._ticker: Ticker | None = None
        self._generation = 0
        self._lock = threading.Lock()
        self._done: Callable[[], None] | None = None
        self._changed: Callable[[], None] | None = None

    @classmethod
    def stopwatch(cls, ticker_factory: TickerFactory) -> "Clock":
        """Build an unbounded count-up clock."""
        return cls(ticker_factory, ClockMode.COUNT_UP)

    @classmethod
    def timer(cls, ticker_factory: TickerFactory, total: int) -> "Clock":
        """Build a count-down clock for total seconds."""
        return cls(ticker_factory, ClockMode.COUNT_DOWN, total)

    @property
    def mode(self) -> ClockMode:
        """Counting direction."""
        return self._mode

    @property
    def elapsed(self) -> int:
        """Seconds counted so far."""
        with self._lock:
            return self._elapsed

    @property
    def total(self) -> int | None:
        """Target duration, None for a stopwatch."""
        with self._lock:
            return self._total

    @property
    def remaining(self) -> int | None:
        """Seconds left on a count-down clock."""
        with self._lock:
            if self._total is None:
                return None
            return self._total - self._elapsed

    @property
    def running(self) -> bool:
        """Whether the clock is ticking."""
        with self._lock:
            return self._running

    @property
    def expired(self) -> bool:
        """Whether a count-down clock has reached its total."""
        with self._lock:
            return not self._is_time_left()

    def _is_time_left(self) -> bool:
        return self._total is None or self._elapsed < self._total

    def is_time_left(self) -> bool:
        """Whether the clock has not yet counted down its whole duration."""
        with self._lock:
            return self._is_time_left()

    def set_done_callback(self, callback: Callable[[], None] | None) -> None:
        """Install the handler invoked once per count-down expiry."""
        self._done = callback

    def set_changed_callback(self, callback: Callable[[], None] | None) -> None:
        """Install the handler invoked after every state change."""
        self._changed = callback

    def _notify_changed(self) -> None:
        if self._changed is not None:
            self._changed()

    def _tick(self, generation: int) -> None:
        """Advance the clock by one second."""
        ticker: Ticker | None = None
        expired = False
        with self._lock:
            # ticks from a ticker that has since been stopped are discarded
            if not self._running or generation != self._generation:
                return
            self._elapsed += 1
            if not self._is_time_left():
                expired = True
                self._running = False
                ticker, self._ticker = self._ticker, None
        if ticker is not None:
            ticker.stop()
        self._notify_changed()
        if expired:
            logger.info("Clock expired after %d seconds", self._total)
            if self._done is not None:
                self._done()

    def start(self) -> None:
        """Start ticking, unless already running or expired."""
        with self._lock:
            if self._running or not self._is_time_left():
                return
            self._running = True
            self._generation += 1
            generation = self._generation
            self._ticker = self._ticker_factory.ticker(lambda: self._tick(generation))
            ticker = self._ticker
            elapsed = self._elapsed
        ticker.start()
        logger.debug("Clock started at %d seconds", elapsed)
        self._notify_changed()

    def stop(self) -> None:
        """Stop ticking; no increment happens after this returns.

        The clock keeps reporting itself running until the ticker has
        acknowledged cancellation.
        """
        with self._lock:
            if not self._running:
                return
            # in-flight ticks from here on are stale
            self._generation += 1
            generation = self._generation
            ticker, self._ticker = self._ticker, None
        if ticker is not None:
            ticker.stop()
        with self._lock:
            if self._generation == generation:
                self._running = False
        logger.debug("Clock stopped at %d seconds", self.elapsed)
        self._notify_changed()

    def reset(self) -> None:
        """Start over from zero. The clock is always running afterwards."""
        self.stop()
        with self._lock:
            self._elapsed = 0
        self.start()

    def toggle(self) -> None:
        """Stop a running clock or start a stopped one."""
        if self.running:
            self.stop()
        else:
            self.start()

    def set_total_duration(self, total: int) -> None:
        """Rebind the duration of a stopped count-down clock."""
        if total <= 0:
            raise ValueError("Duration must be a positive number of seconds")
        with self._lock:
            if self._mode is not ClockMode.COUNT_DOWN:
                raise ClockStateError("Only a count-down clock has a total duration")
            if self._running:
                raise ClockStateError("Cannot rebind the duration of a running clock")
            self._total = total
