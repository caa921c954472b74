from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class BlockConfigurationPayload(BaseModel):
    """Persisted configuration format of an entity browser block"""
    entities: List[str] = []


class BlockBase(BaseModel):
    label: str
    region: str
    weight: int = 0


class BlockCreate(BlockBase):
    browser_id: str
    configuration: BlockConfigurationPayload = Field(default_factory=BlockConfigurationPayload)


class BlockUpdate(BaseModel):
    label: Optional[str] = None
    region: Optional[str] = None
    weight: Optional[int] = None


class Block(BlockBase):
    id: int
    user_id: int
    browser_id: str
    plugin_id: str
    configuration: BlockConfigurationPayload
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
