from .auth_service import AuthService
from .project_service import ProjectService
from .document_service import DocumentService
from .entity_browser_service import EntityBrowserService
from .block_service import BlockService

__all__ = [
    "AuthService",
    "ProjectService",
    "DocumentService",
    "EntityBrowserService",
    "BlockService",
]
