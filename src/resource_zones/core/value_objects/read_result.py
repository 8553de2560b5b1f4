"""Read result value object.

ONLY read outcomes - tagged tri-state result returned by zone reads:
a found value, a confirmed-absent (negative cache) record, or unknown.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ReadStatus(Enum):
    """Outcome of a cache read."""
    
    FOUND = "found"                  # Payload cached and decoded
    NEVER_EXISTED = "never_existed"  # Backend confirmed it does not exist
    UNKNOWN = "unknown"              # Not cached, or the read failed


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Tri-state cache read result.
    
    Only FOUND results carry a value. NEVER_EXISTED lets callers skip the
    backend lookup; UNKNOWN means they have to do it.
    """
    
    status: ReadStatus
    value: Optional[T] = None
    
    def __post_init__(self):
        """Validate that only found results carry a value."""
        if self.status is not ReadStatus.FOUND and self.value is not None:
            raise ValueError(f"{self.status.value} result cannot carry a value")
    
    @classmethod
    def found(cls, value: T) -> "ReadResult[T]":
        """Create result for a cached value."""
        return cls(ReadStatus.FOUND, value)
    
    @classmethod
    def never_existed(cls) -> "ReadResult[Any]":
        """Create result for a negative cache record."""
        return _NEVER_EXISTED_RESULT
    
    @classmethod
    def unknown(cls) -> "ReadResult[Any]":
        """Create result for a cache miss or a failed read."""
        return _UNKNOWN_RESULT
    
    @property
    def is_found(self) -> bool:
        return self.status is ReadStatus.FOUND
    
    @property
    def is_never_existed(self) -> bool:
        return self.status is ReadStatus.NEVER_EXISTED
    
    @property
    def is_unknown(self) -> bool:
        return self.status is ReadStatus.UNKNOWN
    
    def unwrap(self, default: Optional[T] = None) -> Optional[T]:
        """Get the found value, or default for the other two states."""
        return self.value if self.is_found else default
    
    def __str__(self) -> str:
        if self.is_found:
            return f"found({self.value!r})"
        return self.status.value


_NEVER_EXISTED_RESULT: ReadResult[Any] = ReadResult(ReadStatus.NEVER_EXISTED)
_UNKNOWN_RESULT: ReadResult[Any] = ReadResult(ReadStatus.UNKNOWN)
