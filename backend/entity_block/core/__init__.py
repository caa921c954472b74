from .database import Base, get_db, init_db
from .logging_config import setup_logging
from .events import event_bus, Event, EventBus

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "setup_logging",
    "event_bus",
    "Event",
    "EventBus",
]
