"""
Block Behavior Settings

This module defines configurable settings for the entity browser block.
All settings can be controlled via environment variables or defaults.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
import logging

logger = logging.getLogger(__name__)

RECURSION_SCOPE_PAGE = "page"
RECURSION_SCOPE_PROCESS = "process"


class BlockSettings(BaseSettings):
    """
    Entity browser block configuration settings.
    
    These settings control:
    - Recursive render protection
    - Configuration form markup
    - View mode rendering
    """
    
    # ============================================
    # Recursive Render Protection
    # ============================================
    
    # How many times a single entry may be rendered before the pass stops
    recursive_render_limit: int = 2
    
    # "page": counters reset for every top-level block or region render
    # "process": counters are shared for the life of the process
    recursion_scope: str = RECURSION_SCOPE_PAGE
    
    # ============================================
    # Configuration Form
    # ============================================
    
    # DOM id of the container replaced on partial updates
    form_wrapper_id: str = "entity-browser-block-form"
    
    # ============================================
    # Rendering
    # ============================================
    
    # Maximum number of content characters shown in the teaser view mode
    teaser_length: int = 200
    
    class Config:
        env_file = ".env"
        env_prefix = "BLOCK_"
        case_sensitive = False
    
    @field_validator("recursion_scope")
    @classmethod
    def check_recursion_scope(cls, value: str) -> str:
        value = value.lower()
        if value not in (RECURSION_SCOPE_PAGE, RECURSION_SCOPE_PROCESS):
            raise ValueError(f"recursion_scope must be '{RECURSION_SCOPE_PAGE}' or '{RECURSION_SCOPE_PROCESS}'")
        return value


# Global block settings instance
block_settings = BlockSettings()

logger.info(f"Block settings loaded: recursive_render_limit={block_settings.recursive_render_limit}, "
            f"recursion_scope={block_settings.recursion_scope}")
