"""
Dependency Injection for API Routes

Services are created per request around the request's database session.
The process-wide recursion guard lives here so that it is the only state
shared between requests.
"""
from functools import lru_cache
from fastapi import Depends
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..config import block_settings
from ..blocks import RecursionGuard
from ..services import (
    AuthService,
    ProjectService,
    DocumentService,
    EntityBrowserService,
    BlockService,
)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Get AuthService instance"""
    return AuthService(db)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    """Get ProjectService instance"""
    return ProjectService(db)


def get_document_service(db: Session = Depends(get_db)) -> DocumentService:
    """Get DocumentService instance"""
    return DocumentService(db)


def get_entity_browser_service(db: Session = Depends(get_db)) -> EntityBrowserService:
    """Get EntityBrowserService instance"""
    return EntityBrowserService(db)


@lru_cache(maxsize=1)
def get_process_recursion_guard() -> RecursionGuard:
    """
    Recursion guard shared by all renders of this process
    
    Only consulted when BLOCK_RECURSION_SCOPE is "process".
    """
    return RecursionGuard(block_settings.recursive_render_limit)


def get_block_service(
    db: Session = Depends(get_db),
    process_guard: RecursionGuard = Depends(get_process_recursion_guard)
) -> BlockService:
    """
    Get BlockService instance with its collaborators
    
    Args:
        db: Database session (injected by FastAPI)
        process_guard: Process-wide recursion guard (injected by dependency)
    
    Returns:
        BlockService instance
    """
    return BlockService(db, settings=block_settings, process_guard=process_guard)
