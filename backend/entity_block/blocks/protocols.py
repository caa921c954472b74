"""
Collaborator interfaces for the selection list controller.

The controller never touches storage or markup directly; the host passes in
objects satisfying these protocols.
"""
from typing import Any, List, Optional, Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..schemas.render import RenderedFragment
    from .recursion import RenderContext


class EntityLookup(Protocol):
    """Loads content entities and answers access questions about them"""
    
    def load(self, entity_type: str, entity_id: str) -> Optional[Any]:
        """
        Load an entity by type and id
        
        Returns:
            The entity, or None when it does not exist or the type is unknown
        """
        ...
    
    def can_view(self, entity: Any) -> bool:
        """Whether the current viewer may see the entity"""
        ...
    
    def view_mode_options(self, entity_type: str) -> List[Tuple[str, str]]:
        """Ordered ``(key, label)`` pairs of display modes for the type"""
        ...
    
    def label(self, entity: Any) -> str:
        """Human readable title of the entity"""
        ...


class ViewRenderer(Protocol):
    """Renders one entity in a display mode"""
    
    def render(self, entity: Any, view_mode: str, context: "RenderContext") -> "RenderedFragment":
        """
        Render an entity
        
        Args:
            entity: A loaded, viewable entity
            view_mode: Display mode key
            context: Render context of the pass in progress; renderers that
                render nested blocks must pass it on unchanged
        """
        ...
