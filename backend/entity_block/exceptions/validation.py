from fastapi import status
from .base import EntityBlockException


class ValidationError(EntityBlockException):
    """Exception raised when validation fails"""
    
    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )


class MalformedSelectionError(ValidationError):
    """Exception raised when an entity reference string cannot be parsed"""
    
    def __init__(self, value: str, reason: str = "expected 'entity_type:entity_id:view_mode'"):
        self.value = value
        super().__init__(f"Malformed entity reference '{value}': {reason}")
