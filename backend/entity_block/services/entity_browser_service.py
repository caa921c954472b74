from typing import List, Optional
from sqlalchemy.orm import Session
from ..repositories import EntityBrowserRepository
from ..models import EntityBrowser, User
from ..schemas import EntityBrowserCreate, EntityCandidate, BlockType
from ..exceptions import NotFoundError, ValidationError
from ..blocks.lookup import ENTITY_TYPES, is_known_entity_type
from ..blocks.selection import make_composite_id
import logging

logger = logging.getLogger(__name__)

BLOCK_PLUGIN_PREFIX = "entity_browser_block"


class EntityBrowserService:
    """Service for entity browsers and the block types derived from them"""
    
    def __init__(self, db: Session):
        self.browser_repo = EntityBrowserRepository(db)
        self.db = db
    
    def list_browsers(self) -> List[EntityBrowser]:
        """List all configured entity browsers"""
        return self.browser_repo.list_ordered()
    
    def get_browser(self, browser_id: str) -> EntityBrowser:
        """Get a specific entity browser"""
        browser = self.browser_repo.get(browser_id)
        if not browser:
            raise NotFoundError("Entity browser", browser_id)
        return browser
    
    def create_browser(self, browser_data: EntityBrowserCreate) -> EntityBrowser:
        """Create a new entity browser"""
        logger.info(f"Creating entity browser '{browser_data.id}'")
        
        try:
            if self.browser_repo.exists(browser_data.id):
                logger.warning(f"Entity browser creation failed: id already exists - {browser_data.id}")
                raise ValidationError("Entity browser with this id already exists")
            
            unknown = [t for t in browser_data.entity_types if not is_known_entity_type(t)]
            if unknown:
                raise ValidationError(
                    f"Unknown entity types: {', '.join(unknown)}. "
                    f"Available: {', '.join(sorted(ENTITY_TYPES))}"
                )
            
            browser = self.browser_repo.create(
                id=browser_data.id,
                label=browser_data.label,
                entity_types=list(dict.fromkeys(browser_data.entity_types))
            )
            self.browser_repo.commit()
            logger.info(f"Entity browser created successfully: {browser.id}")
            return browser
        except Exception as e:
            logger.error(f"Error creating entity browser: {e}")
            self.browser_repo.rollback()
            raise
    
    def list_block_types(self) -> List[BlockType]:
        """One block type per entity browser"""
        return [
            BlockType(
                id=f"{BLOCK_PLUGIN_PREFIX}:{browser.id}",
                admin_label=browser.label,
                browser_id=browser.id,
            )
            for browser in self.browser_repo.list_ordered()
        ]
    
    def list_candidates(
        self,
        browser_id: str,
        viewer: Optional[User],
        query: Optional[str] = None,
        limit: int = 50
    ) -> List[EntityCandidate]:
        """Entities the browser's picker offers to the viewer"""
        browser = self.get_browser(browser_id)
        viewer_id = viewer.id if viewer else None
        logger.debug(f"Listing candidates for browser {browser_id}, query={query!r}")
        
        candidates = []
        for entity_type in browser.entity_types:
            repo_class = ENTITY_TYPES.get(entity_type)
            if repo_class is None:
                continue
            for entity in repo_class(self.db).search_viewable(viewer_id, query, limit):
                candidates.append(EntityCandidate(
                    composite_id=make_composite_id(entity_type, entity.id),
                    entity_type=entity_type,
                    entity_id=str(entity.id),
                    label=entity.label(),
                ))
        return candidates[:limit]
