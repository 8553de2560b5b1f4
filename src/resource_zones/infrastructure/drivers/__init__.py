"""Cache driver implementations."""

from .memory_driver import MemoryDriver, MemoryItem, create_memory_driver
from .redis_driver import (
    RedisDriver,
    create_redis_driver,
    create_redis_driver_from_settings,
    encode_body,
    decode_body,
)

__all__ = [
    "MemoryDriver",
    "MemoryItem",
    "create_memory_driver",
    "RedisDriver",
    "create_redis_driver",
    "create_redis_driver_from_settings",
    "encode_body",
    "decode_body",
]
