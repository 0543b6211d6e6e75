"""Ticker interface for dependency injection."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

logger = logging.getLogger(__name__)

TICK_PERIOD = 1.0


class TickerStateError(RuntimeError):
    """Raised when a ticker is stopped more than once."""


class Ticker(ABC):
    """Ticker interface.

    A ticker invokes its callback once per period until stopped. Each ticker owns
    exactly one cancellation handle and can be stopped exactly once.
    """

    def __init__(self, callback: Callable[[], None], period: float = TICK_PERIOD):
        """Store ticker configuration for later execution."""
        self.callback = callback
        self.period = period
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        """Whether stop() has been called."""
        return self._cancelled.is_set()

    @abstractmethod
    def start(self) -> None:
        """Start the ticker."""

    def stop(self) -> None:
        """Stop the ticker."""
        if self._cancelled.is_set():
            raise TickerStateError("Ticker stopped twice")
        self._cancelled.set()


class TickerFactory(ABC):
    """Factory interface for creating tickers."""

    @abstractmethod
    def ticker(self, callback: Callable[[], None]) -> Ticker:
        """Create a ticker that will call callback once per period."""


class ThreadingTicker(Ticker):
    """Ticker implementation using a daemon thread."""

    def __init__(self, callback: Callable[[], None], period: float = TICK_PERIOD):
        """Prepare the ticking thread."""
        super().__init__(callback, period)
        self._thread = threading.Thread(target=self._run, name="ticker", daemon=True)

    def _run(self) -> None:
        # wait() doubles as the sleep so cancellation is seen immediately
        while not self._cancelled.wait(self.period):
            self.callback()

    def start(self) -> None:
        """Start the ticker."""
        if not self._cancelled.is_set():
            self._thread.start()

    def stop(self) -> None:
        """Stop the ticker and wait for the thread to acknowledge it.

        When called from inside the callback the thread is the caller, so the
        loop exits on its own after the callback returns.
        """
        super().stop()
        if threading.current_thread() is self._thread or not self._thread.is_alive():
            return
        self._thread.join()
        logger.debug("Ticker thread %s joined", self._thread.name)


class ThreadingTickerFactory(TickerFactory):
    """Real ticker factory backed by threads."""

    def __init__(self, period: float = TICK_PERIOD):
        """Initialize the factory."""
        self.period = period

    def ticker(self, callback: Callable[[], None]) -> Ticker:
        """Create a ticker that will call callback once per period."""
        return ThreadingTicker(callback, self.period)
