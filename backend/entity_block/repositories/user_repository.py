from typing import Optional
from sqlalchemy.orm import Session
from ..models.user import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model"""
    
    def __init__(self, db: Session):
        super().__init__(User, db)
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (emails are stored lowercased)"""
        return self.db.query(User).filter(User.email == email.lower()).first()
