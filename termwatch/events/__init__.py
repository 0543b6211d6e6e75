"""Events."""

from .core import Event, EventBus

HISTORY_SIZE = 10_000


def create_event_bus(history_size: int = HISTORY_SIZE) -> EventBus:
    """Create an event bus with the default history size."""
    return EventBus(history_size)


__all__ = ["HISTORY_SIZE", "Event", "EventBus", "create_event_bus"]
