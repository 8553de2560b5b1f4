"""Cache driver protocol.

ONLY storage contract - the key-value backend a zone delegates to.
Zones consume this contract; they never implement storage.
"""

from typing import Dict, List, Mapping, Optional, Union
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.never_existed import CacheBody, CachePayload, NeverExistedMarker


@runtime_checkable
class CacheDriver(Protocol):
    """Cache driver protocol.
    
    Values are payloads (bytes or str) or the NEVER_EXISTED marker.
    A TTL of 0 means the item never expires.
    """
    
    def usable(self) -> bool:
        """Tell if the cache is usable now. Checked before every zone call."""
        ...
    
    async def exists(self, key: str) -> Union[bool, NeverExistedMarker]:
        """Check if a cache item exists.
        
        Returns:
            True if a payload is cached, False if nothing is cached, or
            NEVER_EXISTED if the key holds a negative cache record.
        """
        ...
    
    async def get(self, key: str) -> Optional[CacheBody]:
        """Fetch a cache item.
        
        Returns:
            The payload, NEVER_EXISTED for a negative record, or None if
            the key is absent.
        """
        ...
    
    async def get_multi(self, keys: List[str]) -> Dict[str, Optional[CacheBody]]:
        """Fetch multiple cache items.
        
        Returns a mapping of key to payload / NEVER_EXISTED / None. Keys
        missing from the mapping are treated as absent.
        """
        ...
    
    async def set(self, key: str, data: CacheBody, ttl: int) -> bool:
        """Write a payload or the NEVER_EXISTED marker with TTL in seconds."""
        ...
    
    async def set_multi(self, data: Mapping[str, CacheBody], ttl: int) -> bool:
        """Write multiple items sharing one TTL."""
        ...
    
    async def remove(self, key: str) -> bool:
        """Remove an item. True if it was deleted or did not exist."""
        ...
    
    async def remove_multi(self, keys: List[str]) -> int:
        """Remove multiple items, returning how many were deleted."""
        ...


__all__ = ["CacheDriver", "CachePayload", "CacheBody"]
