"""Expiry notifier interface."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from ..common.pydantic import ExpiryInterval


class ExpiryNotifier(ABC):
    """Delivers the "time's up" notification and reports when it was playing.

    The reported interval must be measured with the same monotonic clock the
    scheduler uses to timestamp user selections.
    """

    @abstractmethod
    def notify(self) -> ExpiryInterval:
        """Deliver the notification, blocking until it has finished."""


class SilentNotifier(ExpiryNotifier):
    """Notifier that delivers nothing and reports an empty interval."""

    def __init__(self, now: Callable[[], int] = time.monotonic_ns):
        """Initialize the notifier."""
        self._now = now

    def notify(self) -> ExpiryInterval:
        """Report an empty interval at the current instant."""
        t = self._now()
        return ExpiryInterval(start_ns=t, end_ns=t)
