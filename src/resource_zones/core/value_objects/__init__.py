"""Zone value objects."""

from .identity_schema import IdentityKind, IdentitySchema
from .read_result import ReadResult, ReadStatus
from .never_existed import (
    NEVER_EXISTED,
    NeverExistedMarker,
    CachePayload,
    CacheBody,
    is_never_existed,
)

__all__ = [
    "IdentityKind",
    "IdentitySchema",
    "ReadResult",
    "ReadStatus",
    "NEVER_EXISTED",
    "NeverExistedMarker",
    "CachePayload",
    "CacheBody",
    "is_never_existed",
]
