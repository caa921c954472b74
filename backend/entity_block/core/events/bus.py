"""
Event Bus for Decoupled Service Communication

Services publish events after a change has been committed; subscribers take
care of cross-cutting concerns such as audit logging. A failing subscriber
never affects the publishing service.
"""
from typing import List, Callable, Dict, Type
from abc import ABC
import logging

logger = logging.getLogger(__name__)


class Event(ABC):
    """Base event class - all events inherit from this"""
    pass


class EventBus:
    """Event bus for decoupled service communication"""
    
    def __init__(self):
        self._subscribers: Dict[Type[Event], List[Callable]] = {}
        logger.info("Event bus initialized")
    
    def subscribe(self, event_type: Type[Event], handler: Callable):
        """
        Subscribe to an event type
        
        Args:
            event_type: The event class to subscribe to
            handler: Callable that handles the event
        """
        handlers = self._subscribers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler {handler.__name__} to {event_type.__name__}")
    
    def unsubscribe(self, event_type: Type[Event], handler: Callable):
        """Remove a previously subscribed handler"""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
    
    def publish(self, event: Event):
        """
        Publish an event to all subscribers
        
        Handlers run synchronously in subscription order. Exceptions raised by
        a handler are logged and do not stop the remaining handlers.
        
        Args:
            event: Event instance to publish
        """
        event_type = type(event)
        handlers = self._subscribers.get(event_type)
        if not handlers:
            logger.debug(f"No subscribers for event {event_type.__name__}")
            return
        for handler in list(handlers):
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Error handling event {event_type.__name__} in {handler.__name__}: {e}",
                    exc_info=True
                )


# Global event bus instance
event_bus = EventBus()
