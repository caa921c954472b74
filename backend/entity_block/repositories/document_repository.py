from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from ..models.document import Document
from .base import BaseRepository


class DocumentRepository(BaseRepository[Document]):
    """Repository for Document model"""
    
    def __init__(self, db: Session):
        super().__init__(Document, db)
    
    def get_by_project_id(self, project_id: int) -> List[Document]:
        """Get all documents for a project"""
        return self.db.query(Document).filter(Document.project_id == project_id).all()
    
    def get_by_user_and_id(self, user_id: int, document_id: int) -> Optional[Document]:
        """Get a document by user ID and document ID"""
        return self.db.query(Document).filter(
            Document.id == document_id,
            Document.user_id == user_id
        ).first()
    
    def exists_by_name_in_project(self, project_id: int, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check if a document with the given name exists in the project"""
        query = self.db.query(Document).filter(
            Document.project_id == project_id,
            Document.name == name
        )
        if exclude_id:
            query = query.filter(Document.id != exclude_id)
        return query.first() is not None
    
    def search_viewable(self, viewer_id: Optional[int], name_filter: Optional[str] = None, limit: int = 50) -> List[Document]:
        """Published documents plus the viewer's own, optionally filtered by name"""
        visibility = Document.published.is_(True)
        if viewer_id is not None:
            visibility = or_(visibility, Document.user_id == viewer_id)
        query = self.db.query(Document).filter(visibility)
        if name_filter:
            query = query.filter(Document.name.ilike(f"%{name_filter}%"))
        return query.order_by(Document.name, Document.id).limit(limit).all()
