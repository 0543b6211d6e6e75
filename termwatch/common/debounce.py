"""Debounced runner."""

import threading
from collections.abc import Callable
from typing import Any


class DebouncedRunner:
    """Debounced runner.

    Bursts of submissions within ``delay`` collapse into one call of the last
    submitted function, which runs on a timer thread.
    """

    def __init__(self, delay: float):
        """Initialize the debounced runner."""
        self._delay = delay
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def cancel(self) -> None:
        """Cancel the debounced runner."""
        with self._lock:
            if self._timer:
                self._timer.cancel()
            self._timer = None

    def submit(self, func: Callable[[], Any]) -> None:
        """Run the function once the delay has passed without another submission."""
        with self._lock:
            if self._timer:
                self._timer.cancel()
            self._timer = threading.Timer(self._delay, func)
            self._timer.daemon = True
            self._timer.start()
