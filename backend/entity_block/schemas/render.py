from pydantic import BaseModel
from typing import List


class RenderedFragment(BaseModel):
    entity_type: str
    entity_id: str
    view_mode: str
    label: str
    markup: str


class RenderedBlock(BaseModel):
    block_id: int
    label: str
    plugin_id: str
    fragments: List[RenderedFragment]


class RenderedRegion(BaseModel):
    region: str
    blocks: List[RenderedBlock]
