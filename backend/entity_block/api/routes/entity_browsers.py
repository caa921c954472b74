from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from ...core.security import get_current_user, get_optional_user
from ...models import User
from ...schemas import EntityBrowser as EntityBrowserSchema, EntityBrowserCreate, EntityCandidate, BlockType
from ...services import EntityBrowserService
from ..dependencies import get_entity_browser_service

router = APIRouter(tags=["entity browsers"])


@router.get("/entity-browsers", response_model=List[EntityBrowserSchema])
def list_browsers(
    browser_service: EntityBrowserService = Depends(get_entity_browser_service)
):
    """List all entity browsers"""
    return browser_service.list_browsers()


@router.post("/entity-browsers", response_model=EntityBrowserSchema, status_code=status.HTTP_201_CREATED)
def create_browser(
    browser_data: EntityBrowserCreate,
    current_user: User = Depends(get_current_user),
    browser_service: EntityBrowserService = Depends(get_entity_browser_service)
):
    """Create a new entity browser"""
    return browser_service.create_browser(browser_data)


@router.get("/entity-browsers/{browser_id}", response_model=EntityBrowserSchema)
def get_browser(
    browser_id: str,
    browser_service: EntityBrowserService = Depends(get_entity_browser_service)
):
    """Get a specific entity browser"""
    return browser_service.get_browser(browser_id)


@router.get("/entity-browsers/{browser_id}/entities", response_model=List[EntityCandidate])
def list_candidates(
    browser_id: str,
    q: Optional[str] = Query(None, description="Case-insensitive name filter"),
    limit: int = Query(50, ge=1, le=200),
    viewer: Optional[User] = Depends(get_optional_user),
    browser_service: EntityBrowserService = Depends(get_entity_browser_service)
):
    """Entities the browser's picker offers to the current viewer"""
    return browser_service.list_candidates(browser_id, viewer, q, limit)


@router.get("/block-types", response_model=List[BlockType])
def list_block_types(
    browser_service: EntityBrowserService = Depends(get_entity_browser_service)
):
    """Block types derived from the configured entity browsers"""
    return browser_service.list_block_types()
