"""Serializer protocols.

ONLY codec contract - zones and attachments take a plain serializer and
unserializer function pair, e.g. json_serializer / json_unserializer.
"""

from typing import Callable, TypeVar

from ..value_objects.never_existed import CachePayload

T = TypeVar("T")

# data -> payload stored by the driver
Serializer = Callable[[T], CachePayload]

# payload read from the driver -> data
Unserializer = Callable[[CachePayload], T]

__all__ = ["Serializer", "Unserializer"]
