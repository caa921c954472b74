"""
Event Definitions

Block lifecycle events. They are published after the database transaction
has been committed.
"""
from .bus import Event
from typing import List
from datetime import datetime, timezone


class BlockCreatedEvent(Event):
    """Event fired when a block is placed"""
    
    def __init__(self, block_id: int, user_id: int, browser_id: str, region: str):
        self.block_id = block_id
        self.user_id = user_id
        self.browser_id = browser_id
        self.region = region
        self.timestamp = datetime.now(timezone.utc)
    
    def __repr__(self):
        return f"BlockCreatedEvent(block_id={self.block_id}, user_id={self.user_id}, browser_id='{self.browser_id}', region='{self.region}')"


class BlockConfigurationUpdatedEvent(Event):
    """Event fired when a block's entity selection is saved"""
    
    def __init__(self, block_id: int, user_id: int, entities: List[str]):
        self.block_id = block_id
        self.user_id = user_id
        self.entities = entities  # Serialized "type:id:view_mode" references
        self.timestamp = datetime.now(timezone.utc)
    
    def __repr__(self):
        return f"BlockConfigurationUpdatedEvent(block_id={self.block_id}, user_id={self.user_id}, entities={len(self.entities)})"


class BlockDeletedEvent(Event):
    """Event fired when a block is removed"""
    
    def __init__(self, block_id: int, user_id: int, label: str):
        self.block_id = block_id
        self.user_id = user_id
        self.label = label
        self.timestamp = datetime.now(timezone.utc)
    
    def __repr__(self):
        return f"BlockDeletedEvent(block_id={self.block_id}, user_id={self.user_id}, label='{self.label}')"
