"""
SQLAlchemy backed entity lookup.

Content entity types are registered in ENTITY_TYPES. View access is granted
for published entities and for entities owned by the viewer.
"""
from typing import Any, Dict, List, Optional, Tuple, Type
import logging

from sqlalchemy.orm import Session

from ..models import User
from ..repositories import BaseRepository, DocumentRepository, ProjectRepository

logger = logging.getLogger(__name__)

ENTITY_TYPES: Dict[str, Type[BaseRepository]] = {
    "project": ProjectRepository,
    "document": DocumentRepository,
}

VIEW_MODES: List[Tuple[str, str]] = [
    ("default", "Default"),
    ("full", "Full content"),
    ("teaser", "Teaser"),
]


def is_known_entity_type(entity_type: str) -> bool:
    return entity_type in ENTITY_TYPES


class SqlEntityLookup:
    """EntityLookup over the content repositories for a single viewer"""
    
    def __init__(self, db: Session, viewer: Optional[User] = None):
        self.db = db
        self.viewer = viewer
        self._repositories: Dict[str, BaseRepository] = {}
    
    def _repository(self, entity_type: str) -> Optional[BaseRepository]:
        if entity_type not in self._repositories:
            repo_class = ENTITY_TYPES.get(entity_type)
            if repo_class is None:
                return None
            self._repositories[entity_type] = repo_class(self.db)
        return self._repositories[entity_type]
    
    def load(self, entity_type: str, entity_id: str) -> Optional[Any]:
        repo = self._repository(entity_type)
        if repo is None:
            logger.warning(f"Unknown entity type: {entity_type}")
            return None
        try:
            key = int(entity_id)
        except (TypeError, ValueError):
            logger.debug(f"Non-numeric id for {entity_type}: {entity_id!r}")
            return None
        return repo.get(key)
    
    def can_view(self, entity: Any) -> bool:
        if entity.published:
            return True
        return self.viewer is not None and entity.user_id == self.viewer.id
    
    def view_mode_options(self, entity_type: str) -> List[Tuple[str, str]]:
        if not is_known_entity_type(entity_type):
            return []
        return list(VIEW_MODES)
    
    def label(self, entity: Any) -> str:
        return entity.label()
