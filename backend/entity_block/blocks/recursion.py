"""
Recursive render protection.

An entity may embed a block that lists the entity itself. Every render pass
carries a RenderContext whose guard counts how often each entry has been
entered; once an entry goes over the limit the pass stops.
"""
import threading
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_RECURSIVE_RENDER_LIMIT = 2


class RecursionGuard:
    """Occurrence counter keyed by serialized entry"""
    
    def __init__(self, limit: int = DEFAULT_RECURSIVE_RENDER_LIMIT):
        if limit < 1:
            raise ValueError("recursive render limit must be at least 1")
        self.limit = limit
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()
    
    def enter(self, key: str) -> bool:
        """
        Count one more render of ``key``
        
        Returns:
            True while the count is within the limit, False once it exceeds it
        """
        with self._lock:
            count = self._counts.get(key, 0) + 1
            self._counts[key] = count
        return count <= self.limit
    
    def count(self, key: str) -> int:
        with self._lock:
            return self._counts.get(key, 0)
    
    def reset(self) -> None:
        with self._lock:
            self._counts.clear()


class RenderContext:
    """State shared by every render call made during one render pass"""
    
    def __init__(self, guard: Optional[RecursionGuard] = None, viewer: Optional[Any] = None):
        self.guard = guard if guard is not None else RecursionGuard()
        self.viewer = viewer
        self.depth = 0
    
    def __repr__(self):
        return f"RenderContext(limit={self.guard.limit}, depth={self.depth})"
