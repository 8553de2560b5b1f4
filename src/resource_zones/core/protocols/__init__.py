"""Zone protocols."""

from .driver import CacheDriver
from .serializer import Serializer, Unserializer

__all__ = [
    "CacheDriver",
    "Serializer",
    "Unserializer",
]
