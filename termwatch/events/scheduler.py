"""Scheduler events."""

from ..common.pydantic import ExpiryInterval
from . import Event


class TimerExpired(Event):
    """The active timer expired and its notification was delivered during interval."""

    interval: ExpiryInterval


class UserSelected(Event):
    """The user picked a queue entry."""

    index: int


class QueueAdvanced(Event):
    """The scheduler moved on to the next queued duration."""

    index: int
    duration: int


class AdvanceSuppressed(Event):
    """An expiry was superseded by a selection made during its notification."""

    selection_t: int
    interval: ExpiryInterval


class QueueExhausted(Event):
    """The last queued timer expired."""

    index: int
