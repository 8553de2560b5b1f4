"""Zone exceptions.

Errors raised while registering or operating on entries and attachments
of a resource zone.
"""

from typing import Optional

from .base import ResourceZoneError


class UnknownEntry(ResourceZoneError):
    """Entry is not registered in the zone."""
    
    def __init__(self, zone: str, entry: str):
        super().__init__(
            f'Entry "{entry}" doesn\'t exist in resource "{zone}".',
            error_code="UNKNOWN_ENTRY",
            details={"zone": zone, "entry": entry}
        )
        self.zone = zone
        self.entry = entry


class DuplicateEntry(ResourceZoneError):
    """Entry name is already registered in the zone."""
    
    def __init__(self, zone: str, entry: str):
        super().__init__(
            f'Entry "{entry}" already exists in resource "{zone}".',
            error_code="DUPLICATE_ENTRY",
            details={"zone": zone, "entry": entry}
        )
        self.zone = zone
        self.entry = entry


class UnknownAttachment(ResourceZoneError):
    """Attachment is not registered in the zone."""
    
    def __init__(self, zone: str, attachment: str):
        super().__init__(
            f'Attachment "{attachment}" doesn\'t exist in resource "{zone}".',
            error_code="UNKNOWN_ATTACHMENT",
            details={"zone": zone, "attachment": attachment}
        )
        self.zone = zone
        self.attachment = attachment


class DuplicateAttachment(ResourceZoneError):
    """Attachment name is already registered in the zone."""
    
    def __init__(self, zone: str, attachment: str):
        super().__init__(
            f'Attachment "{attachment}" already exists in resource "{zone}".',
            error_code="DUPLICATE_ATTACHMENT",
            details={"zone": zone, "attachment": attachment}
        )
        self.zone = zone
        self.attachment = attachment


class ValidationError(ResourceZoneError):
    """Invalid input, e.g. mismatched batch lengths or a bad schema."""
    
    def __init__(self, message: str, field: Optional[str] = None, **details):
        if field is not None:
            details["field"] = field
        super().__init__(message, error_code="VALIDATION_ERROR", details=details)
        self.field = field
    
    @classmethod
    def length_mismatch(cls, data_count: int, identity_count: int) -> "ValidationError":
        """Create error for batch data/identities of different lengths."""
        return cls(
            "Length of data and identities not matched.",
            field="identities",
            data_count=data_count,
            identity_count=identity_count
        )


class DriverUnavailable(ResourceZoneError):
    """Driver reported itself unusable before the call was attempted."""
    
    def __init__(self, zone: str, operation: Optional[str] = None):
        super().__init__(
            "Cache driver is down.",
            error_code="DRIVER_UNAVAILABLE",
            details={"zone": zone, "operation": operation}
        )
        self.zone = zone
        self.operation = operation
