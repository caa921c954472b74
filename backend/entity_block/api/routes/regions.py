from fastapi import APIRouter, Depends
from typing import Optional
from ...core.security import get_optional_user
from ...models import User
from ...schemas import RenderedRegion
from ...services import BlockService
from ..dependencies import get_block_service

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("/{region}/render", response_model=RenderedRegion)
def render_region(
    region: str,
    viewer: Optional[User] = Depends(get_optional_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Render every block placed in a region"""
    return block_service.render_region(region, viewer)
