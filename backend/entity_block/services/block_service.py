from typing import List, Optional
from sqlalchemy.orm import Session
from opentelemetry import trace
from ..repositories import BlockRepository, EntityBrowserRepository
from ..models import Block, User
from ..schemas import (
    BlockCreate,
    BlockUpdate,
    BlockConfigurationPayload,
    FormState,
    PartialUpdateRequest,
    SelectionForm,
    RenderedFragment,
    RenderedBlock,
    RenderedRegion,
)
from ..exceptions import NotFoundError, ValidationError
from ..config import BlockSettings, block_settings, RECURSION_SCOPE_PROCESS
from ..core.events import (
    event_bus,
    BlockCreatedEvent,
    BlockConfigurationUpdatedEvent,
    BlockDeletedEvent,
)
from ..core.telemetry import get_tracer
from ..blocks import (
    BlockConfiguration,
    EntityViewRenderer,
    RecursionGuard,
    RenderContext,
    SelectionListController,
    SqlEntityLookup,
)
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class BlockService:
    """Service for entity browser block placement, configuration and rendering"""

    def __init__(
        self,
        db: Session,
        settings: BlockSettings = block_settings,
        process_guard: Optional[RecursionGuard] = None
    ):
        self.block_repo = BlockRepository(db)
        self.browser_repo = EntityBrowserRepository(db)
        self.db = db
        self.settings = settings
        self.process_guard = process_guard
        if settings.recursion_scope == RECURSION_SCOPE_PROCESS and process_guard is None:
            raise ValueError("A process-wide RecursionGuard is required for the 'process' recursion scope")

    # ------------------------------------------------------------------
    # Collaborator wiring
    # ------------------------------------------------------------------

    def _controller(self, viewer: Optional[User]) -> SelectionListController:
        return SelectionListController(
            lookup=SqlEntityLookup(self.db, viewer),
            renderer=EntityViewRenderer(self._render_embedded, teaser_length=self.settings.teaser_length),
            recursive_render_limit=self.settings.recursive_render_limit,
            wrapper_id=self.settings.form_wrapper_id,
        )

    def new_render_context(self, viewer: Optional[User]) -> RenderContext:
        """Context for one top-level render, honoring the configured recursion scope"""
        if self.settings.recursion_scope == RECURSION_SCOPE_PROCESS:
            return RenderContext(self.process_guard, viewer=viewer)
        return RenderContext(RecursionGuard(self.settings.recursive_render_limit), viewer=viewer)

    # ------------------------------------------------------------------
    # Placement CRUD
    # ------------------------------------------------------------------

    def list_blocks(self, user_id: int) -> List[Block]:
        """List all blocks placed by a user"""
        logger.debug(f"Listing blocks for user: {user_id}")
        return self.block_repo.get_by_user_id(user_id)

    def get_block(self, user_id: int, block_id: int) -> Block:
        """Get a block owned by the user"""
        logger.debug(f"Getting block {block_id} for user {user_id}")
        block = self.block_repo.get_by_user_and_id(user_id, block_id)
        if not block:
            raise NotFoundError("Block", str(block_id))
        return block

    def create_block(self, user_id: int, block_data: BlockCreate) -> Block:
        """Place a new entity browser block"""
        logger.info(f"Creating block '{block_data.label}' in region '{block_data.region}' for user {user_id}")

        try:
            browser = self.browser_repo.get(block_data.browser_id)
            if not browser:
                raise NotFoundError("Entity browser", block_data.browser_id)

            config = self._parse_configuration(block_data.configuration, browser.entity_types)
            block = self.block_repo.create(
                user_id=user_id,
                browser_id=browser.id,
                label=block_data.label,
                region=block_data.region,
                weight=block_data.weight,
                configuration=config.to_dict()
            )
            self.block_repo.commit()
            logger.info(f"Block created successfully: {block.id}")

            event_bus.publish(BlockCreatedEvent(
                block_id=block.id,
                user_id=user_id,
                browser_id=block.browser_id,
                region=block.region
            ))
            return block
        except Exception as e:
            logger.error(f"Error creating block: {e}")
            self.block_repo.rollback()
            raise

    def update_block(self, user_id: int, block_id: int, block_data: BlockUpdate) -> Block:
        """Update label, region or weight of a block"""
        logger.info(f"Updating block {block_id} for user {user_id}")

        try:
            self.get_block(user_id, block_id)
            updated_block = self.block_repo.update(block_id, **block_data.model_dump(exclude_unset=True))
            self.block_repo.commit()
            logger.info(f"Block updated successfully: {block_id}")
            return updated_block
        except Exception as e:
            logger.error(f"Error updating block: {e}")
            self.block_repo.rollback()
            raise

    def delete_block(self, user_id: int, block_id: int) -> None:
        """Delete a block"""
        logger.info(f"Deleting block {block_id} for user {user_id}")

        try:
            block = self.get_block(user_id, block_id)
            label = block.label
            self.block_repo.delete(block_id)
            self.block_repo.commit()
            logger.info(f"Block deleted successfully: {block_id}")

            event_bus.publish(BlockDeletedEvent(block_id=block_id, user_id=user_id, label=label))
        except Exception as e:
            logger.error(f"Error deleting block: {e}")
            self.block_repo.rollback()
            raise

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_configuration(payload: BlockConfigurationPayload, allowed_types: List[str]) -> BlockConfiguration:
        config = BlockConfiguration.from_dict(payload.model_dump())
        BlockService._check_entity_types(config, allowed_types)
        return config

    @staticmethod
    def _check_entity_types(config: BlockConfiguration, allowed_types: List[str]) -> None:
        disallowed = sorted({e.entity_type for e in config.entities if e.entity_type not in allowed_types})
        if disallowed:
            raise ValidationError(f"Entity types not offered by this browser: {', '.join(disallowed)}")

    def get_configuration(self, user_id: int, block_id: int) -> BlockConfigurationPayload:
        """Stored configuration of a block"""
        block = self.get_block(user_id, block_id)
        return BlockConfigurationPayload(**block.configuration)

    def replace_configuration(self, user_id: int, block_id: int, payload: BlockConfigurationPayload) -> Block:
        """Overwrite a block's configuration with already serialized references"""
        try:
            block = self.get_block(user_id, block_id)
            config = self._parse_configuration(payload, block.browser.entity_types)
            return self._store_configuration(user_id, block, config)
        except Exception as e:
            logger.error(f"Error replacing configuration of block {block_id}: {e}")
            self.block_repo.rollback()
            raise

    def _store_configuration(self, user_id: int, block: Block, config: BlockConfiguration) -> Block:
        stored = config.to_dict()
        self.block_repo.set_configuration(block, stored)
        self.block_repo.commit()
        logger.info(f"Block {block.id} configuration saved with {len(config.entities)} entities")

        event_bus.publish(BlockConfigurationUpdatedEvent(
            block_id=block.id,
            user_id=user_id,
            entities=stored["entities"]
        ))
        return block

    # ------------------------------------------------------------------
    # Configuration form
    # ------------------------------------------------------------------

    def build_form(self, user: User, block_id: int, form_state: Optional[FormState] = None) -> SelectionForm:
        """Build the block's selection form for its owner"""
        block = self.get_block(user.id, block_id)
        config = BlockConfiguration.from_dict(block.configuration)
        return self._controller(user).build_form(config, block.browser_id, form_state)

    def partial_update(self, user: User, block_id: int, request: PartialUpdateRequest) -> SelectionForm:
        """Rebuild the form from the posted state and apply the triggered update"""
        logger.debug(f"Partial update '{request.trigger.op}' on block {block_id}")
        block = self.get_block(user.id, block_id)
        config = BlockConfiguration.from_dict(block.configuration)
        controller = self._controller(user)
        form = controller.build_form(config, block.browser_id, request.form_state)
        return controller.handle_partial_update(request.trigger, form)

    def submit_form(self, user: User, block_id: int, form_state: FormState) -> Block:
        """Normalize the posted table and persist it as the new configuration"""
        with tracer.start_as_current_span("block.submit") as span:
            span.set_attribute("block.id", block_id)
            try:
                block = self.get_block(user.id, block_id)
                config = self._controller(user).submit(form_state)
                self._check_entity_types(config, block.browser.entity_types)
                span.set_attribute("block.entities", len(config.entities))
                return self._store_configuration(user.id, block, config)
            except Exception as e:
                logger.error(f"Error submitting block form {block_id}: {e}")
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                self.block_repo.rollback()
                raise

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, block: Block, context: RenderContext) -> List[RenderedFragment]:
        with tracer.start_as_current_span("block.render") as span:
            span.set_attribute("block.id", block.id)
            span.set_attribute("block.depth", context.depth)
            config = BlockConfiguration.from_dict(block.configuration)
            fragments = self._controller(context.viewer).render(config, context)
            span.set_attribute("block.fragments", len(fragments))
            return fragments

    def _render_embedded(self, block_id: int, context: RenderContext) -> List[RenderedFragment]:
        block = self.block_repo.get(block_id)
        if block is None:
            logger.debug(f"Embedded block {block_id} does not exist")
            return []
        return self._render(block, context)

    def render_block(self, block_id: int, viewer: Optional[User] = None) -> RenderedBlock:
        """Render one block as a top-level render"""
        block = self.block_repo.get(block_id)
        if block is None:
            raise NotFoundError("Block", str(block_id))
        fragments = self._render(block, self.new_render_context(viewer))
        return RenderedBlock(
            block_id=block.id,
            label=block.label,
            plugin_id=block.plugin_id,
            fragments=fragments
        )

    def render_region(self, region: str, viewer: Optional[User] = None) -> RenderedRegion:
        """Render every block of a region with one shared render context"""
        context = self.new_render_context(viewer)
        blocks = []
        for block in self.block_repo.get_by_region(region):
            blocks.append(RenderedBlock(
                block_id=block.id,
                label=block.label,
                plugin_id=block.plugin_id,
                fragments=self._render(block, context)
            ))
        logger.debug(f"Rendered region '{region}' with {len(blocks)} blocks")
        return RenderedRegion(region=region, blocks=blocks)
