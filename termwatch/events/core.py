"""A small thread-safe event bus that records the history of what happened.

Components submit frozen event models; readers either query the history by type
and timestamp or register callbacks that run on dedicated worker threads.
"""

import threading
import time
from collections import deque
from collections.abc import Callable
from typing import Any, TypeVar, cast

from pydantic import Field

from ..common.pydantic import FrozenBaseModel


class Event(FrozenBaseModel):
    """Base class for all events, stamped with a monotonic timestamp."""

    event_t: int = Field(default_factory=time.monotonic_ns)


T = TypeVar("T")


class EventBus:
    """Event bus implementation."""

    def __init__(self, history_size: int) -> None:
        """Initialize the event bus."""
        self._events: deque[Event] = deque(maxlen=history_size)
        self._lock = threading.Lock()
        self._ping = threading.Condition(self._lock)
        self._seq = 0

    def submit_event(self, event: Event) -> None:
        """Submit an event to the event bus."""
        with self._ping:
            self._events.append(event)
            self._seq += 1
            self._ping.notify_all()

    def get_events(
        self, event_type: type[Event] | type[Any] | None, after_t: int | None = None, limit: int | None = None
    ) -> list[Event]:
        """Get events from the event bus, oldest first."""
        with self._lock:
            snapshot = list(self._events)
        result = []
        for ev in reversed(snapshot):
            if after_t is not None and ev.event_t <= after_t:
                break
            if event_type is None or isinstance(ev, event_type):
                result.append(ev)
                if limit is not None and len(result) >= limit:
                    break
        return result[::-1]

    def add_callback(self, event_type: type[T] | None, callback: Callable[[T], Any]) -> threading.Thread:
        """Run callback on a worker thread for every subsequent event of a type."""
        with self._lock:
            seq = self._seq

        def worker() -> None:
            nonlocal seq
            while True:
                with self._ping:
                    self._ping.wait_for(lambda: self._seq != seq)
                    new_count = self._seq - seq
                    seq = self._seq
                    # events beyond the history size are lost
                    fresh = list(self._events)[-new_count:] if new_count <= len(self._events) else list(self._events)
                for event in fresh:
                    if event_type is None or isinstance(event, event_type):
                        callback(cast("T", event))

        thread = threading.Thread(target=worker, daemon=True)
        thread.start()
        return thread
