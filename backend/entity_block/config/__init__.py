from .settings import settings, Settings, validate_settings
from .block_settings import (
    block_settings,
    BlockSettings,
    RECURSION_SCOPE_PAGE,
    RECURSION_SCOPE_PROCESS,
)

__all__ = [
    "settings",
    "Settings",
    "validate_settings",
    "block_settings",
    "BlockSettings",
    "RECURSION_SCOPE_PAGE",
    "RECURSION_SCOPE_PROCESS",
]
