from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class EntityBrowserBase(BaseModel):
    label: str
    entity_types: List[str] = Field(min_length=1)


class EntityBrowserCreate(EntityBrowserBase):
    id: str = Field(pattern=r"^[a-z0-9_]+$")


class EntityBrowser(EntityBrowserBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class EntityCandidate(BaseModel):
    """An entity offered by a browser's picker"""
    composite_id: str
    entity_type: str
    entity_id: str
    label: str


class BlockType(BaseModel):
    """Block plugin derived from an entity browser"""
    id: str
    admin_label: str
    category: str = "Entity Browser"
    browser_id: str
