from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..core.database import Base


class EntityBrowser(Base):
    """A configured entity picker; every browser yields one block type"""
    __tablename__ = "entity_browsers"

    id = Column(String, primary_key=True)
    label = Column(String, nullable=False)
    entity_types = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    blocks = relationship("Block", back_populates="browser", cascade="all, delete-orphan")
