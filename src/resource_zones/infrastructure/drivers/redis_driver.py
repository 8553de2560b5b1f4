"""Redis cache driver.

ONLY Redis implementation - cache driver contract on top of the
redis.asyncio client.

Every stored value starts with a one-byte tag, so NEVER_EXISTED markers,
bytes payloads and text payloads stay distinct (an empty payload is
valid data, not a marker):

    b"N"            NEVER_EXISTED
    b"B" + bytes    bytes payload
    b"S" + utf-8    text payload
"""

import logging
from typing import Dict, List, Mapping, Optional, Union

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from ...config.settings import ZoneSettings
from ...core.exceptions.serialization import DeserializationError
from ...core.value_objects.never_existed import (
    NEVER_EXISTED,
    CacheBody,
    NeverExistedMarker,
)

logger = logging.getLogger(__name__)

TAG_NEVER_EXISTED = b"N"
TAG_BYTES = b"B"
TAG_TEXT = b"S"


def encode_body(body: CacheBody) -> bytes:
    """Encode a payload or marker for storage."""
    if body is NEVER_EXISTED:
        return TAG_NEVER_EXISTED
    if isinstance(body, str):
        return TAG_TEXT + body.encode("utf-8")
    if isinstance(body, (bytes, bytearray, memoryview)):
        return TAG_BYTES + bytes(body)
    raise TypeError(f"Cache payload must be bytes or str, got {type(body).__name__}")


def decode_body(raw: Optional[bytes]) -> Optional[CacheBody]:
    """Decode a stored value; None stays None (absent)."""
    if raw is None:
        return None

    if isinstance(raw, str):
        # Client created with decode_responses=True
        raw = raw.encode("utf-8")

    tag, content = raw[:1], raw[1:]

    if tag == TAG_NEVER_EXISTED:
        return NEVER_EXISTED
    if tag == TAG_BYTES:
        return content
    if tag == TAG_TEXT:
        return content.decode("utf-8")

    raise DeserializationError(
        "Unrecognized cache value tag",
        data=raw,
        serializer_type="redis"
    )


class RedisDriver:
    """Redis cache driver.

    The client is injected (a ``redis.asyncio.Redis``, created with
    ``decode_responses=False``). ``usable()`` reflects the last ``ping()``
    and turns False after ``close()``.
    """

    def __init__(self, redis_client, key_prefix: str = ""):
        """Initialize Redis driver.

        Args:
            redis_client: Async Redis client
            key_prefix: Prefix prepended to every key
        """
        self._redis_client = redis_client
        self._key_prefix = key_prefix
        self._usable = redis_client is not None

    def _full_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def usable(self) -> bool:
        return self._usable

    async def ping(self) -> bool:
        """Check connectivity and refresh ``usable()``."""
        try:
            await self._redis_client.ping()
            self._usable = True
        except (RedisError, OSError) as e:
            logger.warning(f"Redis ping failed: {e}")
            self._usable = False
        return self._usable

    async def close(self) -> None:
        """Close the client; the driver is unusable afterwards."""
        self._usable = False
        await self._redis_client.aclose()

    async def exists(self, key: str) -> Union[bool, NeverExistedMarker]:
        body = decode_body(await self._redis_client.get(self._full_key(key)))

        if body is None:
            return False
        if body is NEVER_EXISTED:
            return NEVER_EXISTED
        return True

    async def get(self, key: str) -> Optional[CacheBody]:
        return decode_body(await self._redis_client.get(self._full_key(key)))

    async def get_multi(self, keys: List[str]) -> Dict[str, Optional[CacheBody]]:
        if not keys:
            return {}

        values = await self._redis_client.mget([self._full_key(key) for key in keys])
        return {key: decode_body(raw) for key, raw in zip(keys, values)}

    async def set(self, key: str, data: CacheBody, ttl: int) -> bool:
        result = await self._redis_client.set(
            self._full_key(key),
            encode_body(data),
            ex=ttl if ttl > 0 else None
        )
        return bool(result)

    async def set_multi(self, data: Mapping[str, CacheBody], ttl: int) -> bool:
        if not data:
            return True

        pipe = self._redis_client.pipeline(transaction=True)
        for key, body in data.items():
            pipe.set(self._full_key(key), encode_body(body), ex=ttl if ttl > 0 else None)

        results = await pipe.execute()
        return all(results)

    async def remove(self, key: str) -> bool:
        await self._redis_client.delete(self._full_key(key))
        return True

    async def remove_multi(self, keys: List[str]) -> int:
        if not keys:
            return 0

        deleted = await self._redis_client.delete(*(self._full_key(key) for key in keys))
        return int(deleted)


def create_redis_driver(url: str, key_prefix: str = "", **client_options) -> RedisDriver:
    """Create Redis driver from a connection URL."""
    client = aioredis.from_url(url, decode_responses=False, **client_options)
    return RedisDriver(client, key_prefix=key_prefix)


def create_redis_driver_from_settings(settings: ZoneSettings) -> RedisDriver:
    """Create Redis driver from zone settings.

    Raises:
        ValueError: If no Redis URL is configured
    """
    if not settings.has_redis():
        raise ValueError("RESOURCE_ZONES_REDIS_URL is not configured")

    return create_redis_driver(settings.redis_url, key_prefix=settings.redis_key_prefix)
