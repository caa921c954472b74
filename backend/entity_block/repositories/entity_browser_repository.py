from typing import List
from sqlalchemy.orm import Session
from ..models.entity_browser import EntityBrowser
from .base import BaseRepository


class EntityBrowserRepository(BaseRepository[EntityBrowser]):
    """Repository for EntityBrowser model"""
    
    def __init__(self, db: Session):
        super().__init__(EntityBrowser, db)
    
    def list_ordered(self) -> List[EntityBrowser]:
        """All browsers ordered by id"""
        return self.db.query(EntityBrowser).order_by(EntityBrowser.id).all()
    
    def exists(self, browser_id: str) -> bool:
        return self.get(browser_id) is not None
