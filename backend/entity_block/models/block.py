from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..core.database import Base


def default_configuration():
    return {"entities": []}


class Block(Base):
    __tablename__ = "blocks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    browser_id = Column(String, ForeignKey("entity_browsers.id"), nullable=False)
    label = Column(String, nullable=False)
    region = Column(String, nullable=False, index=True)
    weight = Column(Integer, nullable=False, default=0)
    # {"entities": ["entity_type:entity_id:view_mode", ...]}
    configuration = Column(JSON, nullable=False, default=default_configuration)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="blocks")
    browser = relationship("EntityBrowser", back_populates="blocks")

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )

    @property
    def plugin_id(self) -> str:
        return f"entity_browser_block:{self.browser_id}"
