"""Memory cache driver.

ONLY in-memory implementation - implements the cache driver contract in
process memory for development, testing and single-instance deployments.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from ...core.value_objects.never_existed import (
    NEVER_EXISTED,
    CacheBody,
    NeverExistedMarker,
)

logger = logging.getLogger(__name__)


@dataclass
class MemoryItem:
    """Stored cache item."""

    body: CacheBody
    expires_at: float = 0.0  # 0 = never

    @classmethod
    def create(cls, body: CacheBody, ttl: int) -> "MemoryItem":
        return cls(body, time.monotonic() + ttl if ttl > 0 else 0.0)

    def is_expired(self, now: Optional[float] = None) -> bool:
        if not self.expires_at:
            return False
        return self.expires_at <= (time.monotonic() if now is None else now)


class MemoryDriver:
    """In-memory cache driver.

    Stores payloads and NEVER_EXISTED markers as they are given; expired
    items are dropped lazily on access.
    """

    def __init__(self):
        self._data: Dict[str, MemoryItem] = {}
        self._usable = True
        self._lock = asyncio.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "never_existed_hits": 0,
            "sets": 0,
            "deletes": 0,
            "expired_cleanups": 0,
        }

    def usable(self) -> bool:
        return self._usable

    def set_usable(self, usable: bool) -> None:
        """Switch the driver on or off, e.g. to simulate an outage."""
        self._usable = usable
        logger.debug(f"Memory driver usable={usable}")

    async def exists(self, key: str) -> Union[bool, NeverExistedMarker]:
        async with self._lock:
            item = self._lookup(key)

        if item is None:
            return False

        if item.body is NEVER_EXISTED:
            return NEVER_EXISTED

        return True

    async def get(self, key: str) -> Optional[CacheBody]:
        async with self._lock:
            return self._read(key)

    async def get_multi(self, keys: List[str]) -> Dict[str, Optional[CacheBody]]:
        async with self._lock:
            return {key: self._read(key) for key in keys}

    async def set(self, key: str, data: CacheBody, ttl: int) -> bool:
        async with self._lock:
            self._data[key] = MemoryItem.create(data, ttl)
            self._stats["sets"] += 1
            return True

    async def set_multi(self, data: Mapping[str, CacheBody], ttl: int) -> bool:
        async with self._lock:
            for key, body in data.items():
                self._data[key] = MemoryItem.create(body, ttl)
            self._stats["sets"] += len(data)
            return True

    async def remove(self, key: str) -> bool:
        async with self._lock:
            if self._data.pop(key, None) is not None:
                self._stats["deletes"] += 1
            return True

    async def remove_multi(self, keys: List[str]) -> int:
        async with self._lock:
            deleted = 0
            for key in keys:
                item = self._data.pop(key, None)
                if item is not None and not item.is_expired():
                    deleted += 1

            self._stats["deletes"] += deleted
            return deleted

    async def keys(self) -> List[str]:
        """Get all non-expired keys."""
        async with self._lock:
            self._cleanup_expired()
            return list(self._data)

    async def clear(self) -> None:
        async with self._lock:
            self._data.clear()

    async def cleanup_expired(self) -> int:
        """Remove all expired items."""
        async with self._lock:
            return self._cleanup_expired()

    def get_stats(self) -> Dict[str, Any]:
        """Get driver statistics."""
        total_requests = self._stats["hits"] + self._stats["misses"]
        hit_rate = (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0.0

        return {
            **self._stats,
            "total_keys": len(self._data),
            "total_requests": total_requests,
            "hit_rate_percent": hit_rate,
        }

    def _lookup(self, key: str) -> Optional[MemoryItem]:
        item = self._data.get(key)

        if item is not None and item.is_expired():
            del self._data[key]
            self._stats["expired_cleanups"] += 1
            item = None

        return item

    def _read(self, key: str) -> Optional[CacheBody]:
        item = self._lookup(key)

        if item is None:
            self._stats["misses"] += 1
            return None

        if item.body is NEVER_EXISTED:
            self._stats["never_existed_hits"] += 1
        else:
            self._stats["hits"] += 1

        return item.body

    def _cleanup_expired(self) -> int:
        now = time.monotonic()
        expired_keys = [key for key, item in self._data.items() if item.is_expired(now)]

        for key in expired_keys:
            del self._data[key]

        self._stats["expired_cleanups"] += len(expired_keys)
        return len(expired_keys)


def create_memory_driver() -> MemoryDriver:
    """Create memory cache driver."""
    return MemoryDriver()
