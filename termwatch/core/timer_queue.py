"""Queue of chained timer durations."""

import logging
import threading
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


class TimerQueue:
    """Ordered timer durations with a cursor on the active one.

    ``head`` is written from two paths, user selection and auto-advance after
    expiry, so every access goes through the head lock.
    """

    def __init__(self, durations: Iterable[int]):
        """Initialize the queue."""
        self._durations = tuple(durations)
        if not self._durations:
            raise ValueError("A timer queue needs at least one duration")
        if any(d <= 0 for d in self._durations):
            raise ValueError("Queue durations must be positive")
        self._head = 0
        self._lock = threading.Lock()
        self._selected: Callable[[int], None] | None = None

    def __len__(self) -> int:
        """Number of queued durations."""
        return len(self._durations)

    @property
    def durations(self) -> tuple[int, ...]:
        """All queued durations in queue order."""
        return self._durations

    @property
    def head(self) -> int:
        """Index of the active duration."""
        with self._lock:
            return self._head

    def current(self) -> int:
        """Return the active duration."""
        with self._lock:
            return self._durations[self._head]

    def is_last(self) -> bool:
        """Whether the active duration is the last one."""
        with self._lock:
            return self._head == len(self._durations) - 1

    def set_selected_callback(self, callback: Callable[[int], None] | None) -> None:
        """Install the handler invoked with the new head after a successful select()."""
        self._selected = callback

    def select(self, index: int) -> bool:
        """Make the duration at index the active one.

        Out-of-range indexes are rejected without mutation and without firing the
        selected callback.
        """
        if not 0 <= index < len(self._durations):
            logger.debug("Rejected queue selection %d", index)
            return False
        with self._lock:
            self._head = index
        if self._selected is not None:
            self._selected(index)
        return True

    def next(self) -> bool:
        """Select the duration after the active one."""
        return self.select(self.head + 1)

    def previous(self) -> bool:
        """Select the duration before the active one."""
        return self.select(self.head - 1)

    def advance(self) -> bool:
        """Move to the next duration after an expiry.

        Returns False and leaves the head untouched when already at the last entry.
        """
        with self._lock:
            if self._head == len(self._durations) - 1:
                return False
            self._head += 1
            logger.debug("Queue advanced to %d", self._head)
            return True
