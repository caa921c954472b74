from .base import BaseRepository
from .user_repository import UserRepository
from .project_repository import ProjectRepository
from .document_repository import DocumentRepository
from .entity_browser_repository import EntityBrowserRepository
from .block_repository import BlockRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ProjectRepository",
    "DocumentRepository",
    "EntityBrowserRepository",
    "BlockRepository",
]
