from .auth import UserRegister, UserLogin, Token, TokenData
from .user import User, UserBase
from .project import Project, ProjectBase, ProjectCreate, ProjectUpdate
from .document import Document, DocumentBase, DocumentCreate, DocumentUpdate
from .entity_browser import EntityBrowser, EntityBrowserCreate, EntityCandidate, BlockType
from .block import Block, BlockBase, BlockCreate, BlockUpdate, BlockConfigurationPayload
from .form import (
    FormState,
    PartialUpdateRequest,
    SelectionForm,
    SelectionValues,
    TableRowValue,
    TriggeringElement,
    PostedFormState,
)
from .render import RenderedFragment, RenderedBlock, RenderedRegion

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "TokenData",
    "User",
    "UserBase",
    "Project",
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "Document",
    "DocumentBase",
    "DocumentCreate",
    "DocumentUpdate",
    "EntityBrowser",
    "EntityBrowserCreate",
    "EntityCandidate",
    "BlockType",
    "Block",
    "BlockBase",
    "BlockCreate",
    "BlockUpdate",
    "BlockConfigurationPayload",
    "FormState",
    "PartialUpdateRequest",
    "SelectionForm",
    "SelectionValues",
    "TableRowValue",
    "TriggeringElement",
    "PostedFormState",
    "RenderedFragment",
    "RenderedBlock",
    "RenderedRegion",
]
