from fastapi import APIRouter, Body, Depends, status
from typing import List, Optional
from ...core.security import get_current_user, get_optional_user
from ...models import User
from ...schemas import (
    Block as BlockSchema,
    BlockCreate,
    BlockUpdate,
    BlockConfigurationPayload,
    FormState,
    PartialUpdateRequest,
    SelectionForm,
    RenderedBlock,
)
from ...services import BlockService
from ..dependencies import get_block_service

router = APIRouter(prefix="/blocks", tags=["blocks"])


@router.get("", response_model=List[BlockSchema])
def list_blocks(
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """List all blocks placed by the current user"""
    return block_service.list_blocks(current_user.id)


@router.post("", response_model=BlockSchema, status_code=status.HTTP_201_CREATED)
def create_block(
    block_data: BlockCreate,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Place a new entity browser block"""
    return block_service.create_block(current_user.id, block_data)


@router.get("/{block_id}", response_model=BlockSchema)
def get_block(
    block_id: int,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Get a specific block"""
    return block_service.get_block(current_user.id, block_id)


@router.put("/{block_id}", response_model=BlockSchema)
def update_block(
    block_id: int,
    block_data: BlockUpdate,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Update label, region or weight of a block"""
    return block_service.update_block(current_user.id, block_id, block_data)


@router.delete("/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_block(
    block_id: int,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Delete a block"""
    block_service.delete_block(current_user.id, block_id)
    return None


@router.get("/{block_id}/configuration", response_model=BlockConfigurationPayload)
def get_configuration(
    block_id: int,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Stored entity references of a block"""
    return block_service.get_configuration(current_user.id, block_id)


@router.put("/{block_id}/configuration", response_model=BlockSchema)
def replace_configuration(
    block_id: int,
    payload: BlockConfigurationPayload,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Replace the stored entity references of a block"""
    return block_service.replace_configuration(current_user.id, block_id, payload)


@router.post("/{block_id}/form", response_model=SelectionForm)
def build_form(
    block_id: int,
    form_state: Optional[FormState] = Body(None),
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Build the selection form; post no body for a fresh form"""
    return block_service.build_form(current_user, block_id, form_state)


@router.post("/{block_id}/form/ajax", response_model=SelectionForm)
def partial_update(
    block_id: int,
    request: PartialUpdateRequest,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Re-render the selection container after an add or remove action"""
    return block_service.partial_update(current_user, block_id, request)


@router.post("/{block_id}/form/submit", response_model=BlockSchema)
def submit_form(
    block_id: int,
    form_state: FormState,
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Save the posted selection table as the block configuration"""
    return block_service.submit_form(current_user, block_id, form_state)


@router.get("/{block_id}/render", response_model=RenderedBlock)
def render_block(
    block_id: int,
    viewer: Optional[User] = Depends(get_optional_user),
    block_service: BlockService = Depends(get_block_service)
):
    """Render a block for the current (possibly anonymous) viewer"""
    return block_service.render_block(block_id, viewer)
