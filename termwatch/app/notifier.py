"""Bell notifier for expired timers."""

import logging
import time
from collections.abc import Callable

from ..common.pydantic import ExpiryInterval
from ..core.notifier import ExpiryNotifier

logger = logging.getLogger(__name__)


class BellNotifier(ExpiryNotifier):
    """Rings the terminal bell a few times and reports how long that took."""

    def __init__(
        self,
        chime_count: int = 3,
        chime_gap: float = 0.4,
        now: Callable[[], int] = time.monotonic_ns,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the notifier."""
        self.chime_count = chime_count
        self.chime_gap = chime_gap
        self._now = now
        self._sleep = sleep
        self._ring: Callable[[], None] | None = None

    def set_ring(self, ring: Callable[[], None] | None) -> None:
        """Install the function that rings one bell."""
        self._ring = ring

    def notify(self) -> ExpiryInterval:
        """Ring the bells, blocking until the last one has sounded."""
        start = self._now()
        for i in range(self.chime_count):
            if i:
                self._sleep(self.chime_gap)
            if self._ring is not None:
                self._ring()
        end = self._now()
        logger.debug("Expiry notification took %d ns", end - start)
        return ExpiryInterval(start_ns=start, end_ns=end)
