"""Resource Zones - resource cache orchestration.

Zones derive cache keys from structured identities, keep every access
path (entry) and auxiliary record (attachment) of a resource consistent,
and tell confirmed non-existence apart from a plain cache miss.

Example:

    factory = create_factory()
    factory.add_driver("local", MemoryDriver())

    users = factory.create_zone("users", "local", json_serializer, json_unserializer)
    users.register_entry("primary", {"id": "number"})

    await users.put({"id": 123, "name": "hello"})
    result = await users.read("primary", {"id": 123})
"""

from .__version__ import __version__

from .config import (
    ZoneSettings,
    get_zone_settings,
    reset_zone_settings,
    setup_logging,
    DEFAULT_TTL,
    DEFAULT_NEVER_EXISTED_TTL,
)

from .core.exceptions import (
    ResourceZoneError,
    UnknownEntry,
    DuplicateEntry,
    UnknownAttachment,
    DuplicateAttachment,
    ValidationError,
    DriverUnavailable,
    DuplicateDriver,
    UnknownDriver,
    DuplicateZone,
    UnknownZone,
    SerializationError,
    DeserializationError,
)

from .core.value_objects import (
    IdentityKind,
    IdentitySchema,
    ReadResult,
    ReadStatus,
    NEVER_EXISTED,
)

from .core.entities import Entry, Attachment
from .core.protocols import CacheDriver, Serializer, Unserializer

from .application.services import (
    compile_key_builder,
    ErrorChannel,
    ResourceZone,
    ZoneFactory,
    create_factory,
    create_hub,
)

from .infrastructure.drivers import (
    MemoryDriver,
    RedisDriver,
    create_memory_driver,
    create_redis_driver,
)

from .infrastructure.serializers import (
    JSONCodec,
    json_serializer,
    json_unserializer,
)

__all__ = [
    "__version__",

    # Configuration
    "ZoneSettings",
    "get_zone_settings",
    "reset_zone_settings",
    "setup_logging",
    "DEFAULT_TTL",
    "DEFAULT_NEVER_EXISTED_TTL",

    # Exceptions
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

    # Value objects and entities
    "IdentityKind",
    "IdentitySchema",
    "ReadResult",
    "ReadStatus",
    "NEVER_EXISTED",
    "Entry",
    "Attachment",

    # Protocols
    "CacheDriver",
    "Serializer",
    "Unserializer",

    # Services
    "compile_key_builder",
    "ErrorChannel",
    "ResourceZone",
    "ZoneFactory",
    "create_factory",
    "create_hub",

    # Drivers and codecs
    "MemoryDriver",
    "RedisDriver",
    "create_memory_driver",
    "create_redis_driver",
    "JSONCodec",
    "json_serializer",
    "json_unserializer",
]
