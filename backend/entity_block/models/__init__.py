from .user import User
from .project import Project
from .document import Document
from .entity_browser import EntityBrowser
from .block import Block

__all__ = [
    "User",
    "Project",
    "Document",
    "EntityBrowser",
    "Block",
]
