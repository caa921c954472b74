from typing import List, Optional
from sqlalchemy.orm import Session
from ..models.block import Block
from .base import BaseRepository


class BlockRepository(BaseRepository[Block]):
    """Repository for Block model"""
    
    def __init__(self, db: Session):
        super().__init__(Block, db)
    
    def get_by_user_id(self, user_id: int) -> List[Block]:
        """Get all blocks placed by a user"""
        return self.db.query(Block).filter(Block.user_id == user_id).order_by(Block.id).all()
    
    def get_by_user_and_id(self, user_id: int, block_id: int) -> Optional[Block]:
        """Get a block by user ID and block ID"""
        return self.db.query(Block).filter(
            Block.id == block_id,
            Block.user_id == user_id
        ).first()
    
    def get_by_region(self, region: str) -> List[Block]:
        """Blocks placed in a region, in display order"""
        return self.db.query(Block).filter(
            Block.region == region
        ).order_by(Block.weight, Block.id).all()
    
    def set_configuration(self, block: Block, configuration: dict) -> Block:
        """Replace the stored configuration of a block"""
        # Assign a new dict so the JSON column is flagged as changed
        block.configuration = dict(configuration)
        self.db.flush()
        return block
