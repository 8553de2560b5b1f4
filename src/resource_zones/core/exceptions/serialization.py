"""Serialization exceptions.

Raised by the bundled codecs when a payload cannot be encoded or decoded.
"""

from typing import Any, Dict, Optional

from .base import ResourceZoneError


class SerializationError(ResourceZoneError):
    """Value cannot be serialized into a cache payload."""
    
    def __init__(
        self,
        message: str,
        value: Any = None,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {"serializer_type": serializer_type}
        if value is not None:
            details["value_type"] = type(value).__name__
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error)
            }
        super().__init__(message, error_code="SERIALIZATION_ERROR", details=details)
        self.value = value
        self.serializer_type = serializer_type
        self.original_error = original_error


class DeserializationError(ResourceZoneError):
    """Cache payload cannot be turned back into a value."""
    
    def __init__(
        self,
        message: str,
        data: Any = None,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {"serializer_type": serializer_type}
        if data is not None:
            details["data_size"] = len(data) if hasattr(data, "__len__") else None
            details["data_preview"] = repr(data)[:100]
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error)
            }
        super().__init__(message, error_code="DESERIALIZATION_ERROR", details=details)
        self.data = data
        self.serializer_type = serializer_type
        self.original_error = original_error
