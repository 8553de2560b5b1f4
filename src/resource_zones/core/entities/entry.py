"""Entry and attachment entities.

ONLY registration records - an Entry is a named access path to a
resource; an Attachment is a secondary record addressed by its parent
entry's identity, with its own codec and TTL policy.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..protocols.serializer import Serializer, Unserializer
from ..value_objects.identity_schema import IdentitySchema


@dataclass(frozen=True)
class Entry:
    """Registered cache entry of a resource.
    
    Never mutated after registration. ``ttl`` of 0 means forever;
    ``ne_ttl`` governs how long NEVER_EXISTED markers persist.
    """
    
    resource: str
    name: str
    schema: IdentitySchema
    build_key: Callable[[Any], str]
    ttl: int
    ne_ttl: int
    
    def __post_init__(self):
        """Validate TTL policy."""
        if self.ttl < 0:
            raise ValueError("ttl cannot be negative")
        if self.ne_ttl < 0:
            raise ValueError("ne_ttl cannot be negative")
    
    def get_ttl(self, override: Optional[int] = None) -> int:
        """Get the TTL for one write, honouring a per-call override."""
        return self.ttl if override is None else override


@dataclass(frozen=True)
class Attachment(Entry):
    """Registered attachment of a resource.
    
    The schema is copied from ``parent`` at registration time; keys live
    in the ``<resource>:attach:<name>`` namespace.
    """
    
    parent: str = ""
    serialize: Optional[Serializer] = None
    unserialize: Optional[Unserializer] = None
    
    def __post_init__(self):
        """Validate TTL policy and codec."""
        super().__post_init__()
        if not callable(self.serialize) or not callable(self.unserialize):
            raise ValueError("attachment requires a serializer and an unserializer")
