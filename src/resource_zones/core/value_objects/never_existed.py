"""Negative cache marker.

ONLY the NEVER-EXISTED marker - an out-of-band value drivers store and
return to say "confirmed not to exist", distinct from any payload
(including an empty one) and from an absent key.
"""

from typing import Union


class NeverExistedMarker:
    """Singleton marker for negative cache records."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __repr__(self) -> str:
        return "NEVER_EXISTED"
    
    def __reduce__(self) -> str:
        # Unpickles to the module-level singleton
        return "NEVER_EXISTED"


NEVER_EXISTED = NeverExistedMarker()

# What serializers produce and drivers store
CachePayload = Union[bytes, str]

# What a driver may hold under a key
CacheBody = Union[bytes, str, NeverExistedMarker]


def is_never_existed(value: object) -> bool:
    """Check whether a driver value is the negative cache marker."""
    return value is NEVER_EXISTED
