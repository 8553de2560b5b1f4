"""Base exceptions for resource-zones.

All exceptions raised by the library inherit from ResourceZoneError and
carry an error code and a details mapping for structured reporting.
"""

from typing import Any, Dict, Optional


class ResourceZoneError(Exception):
    """Base exception for all resource-zones errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging and events."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
