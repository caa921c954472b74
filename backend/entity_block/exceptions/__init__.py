from .base import EntityBlockException
from .not_found import NotFoundError
from .validation import ValidationError, MalformedSelectionError
from .auth import AuthenticationError, AuthorizationError

__all__ = [
    "EntityBlockException",
    "NotFoundError",
    "ValidationError",
    "MalformedSelectionError",
    "AuthenticationError",
    "AuthorizationError",
]
