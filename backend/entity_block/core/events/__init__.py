from .bus import Event, EventBus, event_bus
from .events import (
    BlockCreatedEvent,
    BlockConfigurationUpdatedEvent,
    BlockDeletedEvent,
)

__all__ = [
    "Event",
    "EventBus",
    "event_bus",
    "BlockCreatedEvent",
    "BlockConfigurationUpdatedEvent",
    "BlockDeletedEvent",
]
