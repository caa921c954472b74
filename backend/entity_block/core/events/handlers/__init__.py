"""
Event Handler Classes and Registration

Each event type is routed to a method on its handler class.
"""
from .block_handler import BlockEventHandler
from ..bus import event_bus
from ..events import (
    BlockCreatedEvent,
    BlockConfigurationUpdatedEvent,
    BlockDeletedEvent,
)
import logging

logger = logging.getLogger(__name__)

block_handler = BlockEventHandler()


def handle_block_created(event: BlockCreatedEvent):
    """Handle block created event - delegates to BlockEventHandler"""
    block_handler.handle_created(event)


def handle_block_configuration_updated(event: BlockConfigurationUpdatedEvent):
    """Handle block configuration event - delegates to BlockEventHandler"""
    block_handler.handle_configuration_updated(event)


def handle_block_deleted(event: BlockDeletedEvent):
    """Handle block deleted event - delegates to BlockEventHandler"""
    block_handler.handle_deleted(event)


def register_event_handlers():
    """Register all event handlers with the event bus"""
    event_bus.subscribe(BlockCreatedEvent, handle_block_created)
    event_bus.subscribe(BlockConfigurationUpdatedEvent, handle_block_configuration_updated)
    event_bus.subscribe(BlockDeletedEvent, handle_block_deleted)
    logger.info("Event handlers registered successfully")


__all__ = [
    "BlockEventHandler",
    "register_event_handlers",
]
