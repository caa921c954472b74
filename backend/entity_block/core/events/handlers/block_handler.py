"""
Block Event Handler

Handles all block-related events:
- BlockCreatedEvent
- BlockConfigurationUpdatedEvent
- BlockDeletedEvent
"""
from ..events import (
    BlockCreatedEvent,
    BlockConfigurationUpdatedEvent,
    BlockDeletedEvent,
)
import logging

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("entity_block.audit")


class BlockEventHandler:
    """Handler for block-related events"""
    
    def handle_created(self, event: BlockCreatedEvent):
        """Handle block created event"""
        audit_logger.info(
            f"Block placed: {event.block_id} in region '{event.region}' "
            f"using browser '{event.browser_id}' by user {event.user_id} at {event.timestamp}"
        )
    
    def handle_configuration_updated(self, event: BlockConfigurationUpdatedEvent):
        """Handle block configuration saved event"""
        preview = ", ".join(event.entities[:5])
        if len(event.entities) > 5:
            preview += f", ... (+{len(event.entities) - 5} more)"
        audit_logger.info(
            f"Block configuration saved: {event.block_id} by user {event.user_id} "
            f"at {event.timestamp}\n  Entities: [{preview}]"
        )
    
    def handle_deleted(self, event: BlockDeletedEvent):
        """Handle block deleted event"""
        audit_logger.info(
            f"Block deleted: '{event.label}' (id: {event.block_id}) by user {event.user_id} at {event.timestamp}"
        )
