"""Exceptions module for resource-zones.

Zone errors, factory errors and codec errors, all rooted at
ResourceZoneError.
"""

from .base import ResourceZoneError

from .zone import (
    UnknownEntry,
    DuplicateEntry,
    UnknownAttachment,
    DuplicateAttachment,
    ValidationError,
    DriverUnavailable,
)

from .factory import (
    DuplicateDriver,
    UnknownDriver,
    DuplicateZone,
    UnknownZone,
)

from .serialization import (
    SerializationError,
    DeserializationError,
)

__all__ = [
    "ResourceZoneError",
    "UnknownEntry",
    "DuplicateEntry",
    "UnknownAttachment",
    "DuplicateAttachment",
    "ValidationError",
    "DriverUnavailable",
    "DuplicateDriver",
    "UnknownDriver",
    "DuplicateZone",
    "UnknownZone",
    "SerializationError",
    "DeserializationError",
]
