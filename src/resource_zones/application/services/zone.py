"""Resource zone service.

ONLY zone orchestration - owns one resource's entries and attachments,
binds them to a cache driver and exposes read/write/batch/negative-cache
operations.

Every cache operation is a fail-soft boundary: any error inside it is
logged, published once through the zone's error channel and turned into
the operation's safe default (unknown result, False, 0, or a list of
unknown results matching the input length). Registration is the setup
phase and raises instead.
"""

import asyncio
import logging
from typing import (
    Any, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union
)

from ...config.constants import DEFAULT_NEVER_EXISTED_TTL, DEFAULT_TTL
from ...core.entities.entry import Attachment, Entry
from ...core.exceptions.zone import (
    DriverUnavailable,
    DuplicateAttachment,
    DuplicateEntry,
    UnknownAttachment,
    UnknownEntry,
    ValidationError,
)
from ...core.protocols.driver import CacheDriver
from ...core.protocols.serializer import Serializer, Unserializer
from ...core.value_objects.identity_schema import IdentityKind, IdentitySchema
from ...core.value_objects.never_existed import NEVER_EXISTED, CacheBody
from ...core.value_objects.read_result import ReadResult
from .error_channel import ErrorChannel, ErrorHandler, ErrorMetrics
from .key_compiler import compile_key_builder

logger = logging.getLogger(__name__)

T = TypeVar("T")

Identity = Union[Mapping[str, Any], Any]
SchemaInput = Union[IdentitySchema, Mapping[str, Union[IdentityKind, str]]]


class ResourceZone(Generic[T]):
    """Cache zone of one logical resource type.

    Entries are the named access paths of the resource (e.g. by id, by
    email); attachments are secondary records addressed by an entry's
    identity. Register everything before serving requests: registries are
    read-only afterwards.
    """

    def __init__(
        self,
        name: str,
        driver: CacheDriver,
        serializer: Serializer,
        unserializer: Unserializer,
        default_ttl: int = DEFAULT_TTL,
        default_ne_ttl: int = DEFAULT_NEVER_EXISTED_TTL,
        log_operations: bool = False
    ):
        """Initialize resource zone.

        Args:
            name: Resource name, first segment of every key
            driver: Cache driver the zone delegates to
            serializer: Resource data -> payload
            unserializer: Payload -> resource data
            default_ttl: TTL for entries registered without one (0 = forever)
            default_ne_ttl: NEVER_EXISTED TTL for entries registered without one
            log_operations: Debug-log every driver call
        """
        if not name:
            raise ValueError("Zone name cannot be empty")

        self._name = name
        self._driver = driver
        self._serialize = serializer
        self._unserialize = unserializer
        self._default_ttl = default_ttl
        self._default_ne_ttl = default_ne_ttl
        self._log_operations = log_operations

        self._entries: Dict[str, Entry] = {}
        self._attachments: Dict[str, Attachment] = {}
        self._errors = ErrorChannel(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def driver(self) -> CacheDriver:
        return self._driver

    @property
    def error_metrics(self) -> ErrorMetrics:
        return self._errors.metrics

    def entry_names(self) -> List[str]:
        return list(self._entries)

    def attachment_names(self) -> List[str]:
        return list(self._attachments)

    def get_entry(self, name: str) -> Entry:
        """Get a registered entry, raising UnknownEntry."""
        return self._require_entry(name)

    def get_attachment(self, name: str) -> Attachment:
        """Get a registered attachment, raising UnknownAttachment."""
        return self._require_attachment(name)

    def build_key(self, entry: str, identity: Identity) -> str:
        """Render the cache key of an entry for an identity."""
        return self._require_entry(entry).build_key(identity)

    def build_attachment_key(self, name: str, identity: Identity) -> str:
        """Render the cache key of an attachment for an identity."""
        return self._require_attachment(name).build_key(identity)

    # Error channel

    def on_error(self, handler: ErrorHandler) -> "ResourceZone[T]":
        """Subscribe a handler to contained operation failures."""
        self._errors.subscribe(handler)
        return self

    def remove_error_handler(self, handler: ErrorHandler) -> bool:
        """Unsubscribe an error handler."""
        return self._errors.unsubscribe(handler)

    # Registration

    def register_entry(
        self,
        name: str,
        schema: SchemaInput,
        ttl: Optional[int] = None,
        ne_ttl: Optional[int] = None
    ) -> "ResourceZone[T]":
        """Register a cache entry of the resource.

        Args:
            name: Entry name, unique within the zone
            schema: Identity fields of the entry, in key order
            ttl: Cache TTL in seconds (default: zone default, 0 = forever)
            ne_ttl: NEVER_EXISTED TTL in seconds (default: zone default, 900)

        Raises:
            DuplicateEntry: If the name is already registered
            ValidationError: If the schema is invalid
        """
        if name in self._entries:
            raise DuplicateEntry(self._name, name)

        identity_schema = IdentitySchema.from_mapping(schema)

        self._entries[name] = Entry(
            resource=self._name,
            name=name,
            schema=identity_schema,
            build_key=compile_key_builder(self._name, name, identity_schema),
            ttl=self._default_ttl if ttl is None else ttl,
            ne_ttl=self._default_ne_ttl if ne_ttl is None else ne_ttl
        )

        logger.debug(
            f"Registered entry {name} on zone {self._name} "
            f"with fields {identity_schema.field_names()}"
        )
        return self

    def register_attachment(
        self,
        name: str,
        entry: str,
        serializer: Serializer,
        unserializer: Unserializer,
        ttl: Optional[int] = None,
        ne_ttl: Optional[int] = None
    ) -> "ResourceZone[T]":
        """Register an attachment bound to an entry's identity.

        Args:
            name: Attachment name, unique within the zone
            entry: Parent entry whose identity schema is copied
            serializer: Attachment data -> payload
            unserializer: Payload -> attachment data
            ttl: Cache TTL in seconds (default: zone default, 0 = forever)
            ne_ttl: NEVER_EXISTED TTL in seconds (default: zone default, 900)

        Raises:
            UnknownEntry: If the parent entry is not registered
            DuplicateAttachment: If the name is already registered
        """
        parent = self._require_entry(entry)

        if name in self._attachments:
            raise DuplicateAttachment(self._name, name)

        self._attachments[name] = Attachment(
            resource=self._name,
            name=name,
            schema=parent.schema,
            build_key=compile_key_builder(
                self._name, name, parent.schema, attachment=name
            ),
            ttl=self._default_ttl if ttl is None else ttl,
            ne_ttl=self._default_ne_ttl if ne_ttl is None else ne_ttl,
            parent=parent.name,
            serialize=serializer,
            unserialize=unserializer
        )

        logger.debug(f"Registered attachment {name} on zone {self._name} (entry {entry})")
        return self

    # Single-item operations

    async def read(self, entry: str, identity: Identity) -> ReadResult[T]:
        """Fetch a resource item through an entry.

        Returns:
            found(data), never_existed() if the item is marked NEVER-EXISTED,
            or unknown() if it is not cached or the read failed.
        """
        try:
            self._assert_usable("read")
            key = self._require_entry(entry).build_key(identity)
            self._trace("get", key)

            return self._decode(await self._driver.get(key), self._unserialize)
        except Exception as e:
            self._report("read", e)
            return ReadResult.unknown()

    async def write(
        self,
        entry: str,
        data: T,
        identity: Optional[Identity] = None,
        ttl: Optional[int] = None
    ) -> bool:
        """Write a resource item through an entry.

        Args:
            entry: Entry name
            data: Resource data
            identity: Identity of the item (default: taken from data)
            ttl: TTL for this write only (default: entry TTL)
        """
        try:
            self._assert_usable("write")
            the_entry = self._require_entry(entry)
            key = the_entry.build_key(data if identity is None else identity)
            self._trace("set", key)

            return await self._driver.set(
                key,
                self._serialize(data),
                the_entry.get_ttl(ttl)
            )
        except Exception as e:
            self._report("write", e)
            return False

    async def mark_never_exist(self, entry: str, identity: Identity) -> bool:
        """Record that the backend confirmed the item does not exist.

        Reads short-circuit with never_existed() for up to the entry's
        ne_ttl seconds.
        """
        try:
            self._assert_usable("mark_never_exist")
            the_entry = self._require_entry(entry)
            key = the_entry.build_key(identity)
            self._trace("set NEVER_EXISTED", key)

            return await self._driver.set(key, NEVER_EXISTED, the_entry.ne_ttl)
        except Exception as e:
            self._report("mark_never_exist", e)
            return False

    async def exists(self, entry: str, identity: Identity) -> Optional[bool]:
        """Check if a resource item is cached.

        Returns:
            True if a payload is cached, None if it is marked NEVER-EXISTED,
            False if nothing is cached or the check failed.
        """
        try:
            self._assert_usable("exists")
            key = self._require_entry(entry).build_key(identity)
            self._trace("exists", key)

            result = await self._driver.exists(key)
            if result is NEVER_EXISTED:
                return None
            return bool(result)
        except Exception as e:
            self._report("exists", e)
            return False

    async def remove(self, entry: str, identity: Identity) -> bool:
        """Remove a resource item. Removing an absent item succeeds."""
        try:
            self._assert_usable("remove")
            key = self._require_entry(entry).build_key(identity)
            self._trace("remove", key)

            return await self._driver.remove(key)
        except Exception as e:
            self._report("remove", e)
            return False

    # Batch operations

    async def read_multi(
        self,
        entry: str,
        identities: Sequence[Identity]
    ) -> List[ReadResult[T]]:
        """Fetch multiple resource items through an entry.

        Results keep the order and length of ``identities``. A failure
        anywhere fails the whole batch: every result is unknown().
        """
        try:
            self._assert_usable("read_multi")
            build_key = self._require_entry(entry).build_key
            keys = [build_key(identity) for identity in identities]
            self._trace("get_multi", keys)

            result = await self._driver.get_multi(keys)

            return [self._decode(result.get(key), self._unserialize) for key in keys]
        except Exception as e:
            self._report("read_multi", e)
            return [ReadResult.unknown() for _ in identities]

    async def write_multi(
        self,
        entry: str,
        data: Sequence[T],
        identities: Optional[Sequence[Identity]] = None
    ) -> bool:
        """Write multiple resource items through an entry in one driver call.

        Raises nothing; mismatched ``identities``/``data`` lengths are
        reported as ValidationError and nothing is written.
        """
        try:
            self._assert_usable("write_multi")
            the_entry = self._require_entry(entry)

            if identities is not None and len(identities) != len(data):
                raise ValidationError.length_mismatch(len(data), len(identities))

            sources = data if identities is None else identities
            caches: Dict[str, CacheBody] = {}

            for source, item in zip(sources, data):
                caches[the_entry.build_key(source)] = self._serialize(item)

            self._trace("set_multi", list(caches))
            return await self._driver.set_multi(caches, the_entry.ttl)
        except Exception as e:
            self._report("write_multi", e)
            return False

    async def mark_multi_never_exist(
        self,
        entry: str,
        identities: Sequence[Identity]
    ) -> bool:
        """Mark multiple resource items NEVER-EXISTED in one driver call."""
        try:
            self._assert_usable("mark_multi_never_exist")
            the_entry = self._require_entry(entry)

            caches: Dict[str, CacheBody] = {
                the_entry.build_key(identity): NEVER_EXISTED
                for identity in identities
            }

            self._trace("set_multi NEVER_EXISTED", list(caches))
            return await self._driver.set_multi(caches, the_entry.ne_ttl)
        except Exception as e:
            self._report("mark_multi_never_exist", e)
            return False

    async def remove_multi(
        self,
        entry: str,
        identities: Sequence[Identity]
    ) -> int:
        """Remove multiple resource items, returning how many were deleted."""
        try:
            self._assert_usable("remove_multi")
            build_key = self._require_entry(entry).build_key
            keys = [build_key(identity) for identity in identities]
            self._trace("remove_multi", keys)

            return await self._driver.remove_multi(keys)
        except Exception as e:
            self._report("remove_multi", e)
            return 0

    async def put(self, data: T, ttl: Optional[int] = None) -> bool:
        """Write a resource item through every registered entry.

        Writes run concurrently; the call succeeds only if all of them do.
        A failing branch is reported once for the whole call.
        """
        try:
            self._assert_usable("put")
            payload = self._serialize(data)

            writes = [
                (the_entry.build_key(data), payload, the_entry.get_ttl(ttl))
                for the_entry in self._entries.values()
            ]

            return await self._fan_out(writes)
        except Exception as e:
            self._report("put", e)
            return False

    async def put_multi(self, data: Sequence[T]) -> bool:
        """Write multiple resource items through every registered entry."""
        try:
            self._assert_usable("put_multi")
            writes: List[Tuple[str, CacheBody, int]] = []

            for item in data:
                payload = self._serialize(item)
                for the_entry in self._entries.values():
                    writes.append((the_entry.build_key(item), payload, the_entry.ttl))

            return await self._fan_out(writes)
        except Exception as e:
            self._report("put_multi", e)
            return False

    # Attachments

    async def read_attachment(self, name: str, identity: Identity) -> ReadResult[Any]:
        """Fetch an attachment of a resource item."""
        try:
            self._assert_usable("read_attachment")
            attachment = self._require_attachment(name)
            key = attachment.build_key(identity)
            self._trace("get", key)

            return self._decode(await self._driver.get(key), attachment.unserialize)
        except Exception as e:
            self._report("read_attachment", e)
            return ReadResult.unknown()

    async def write_attachment(self, name: str, identity: Identity, data: Any) -> bool:
        """Write an attachment of a resource item with the attachment's TTL."""
        try:
            self._assert_usable("write_attachment")
            attachment = self._require_attachment(name)
            key = attachment.build_key(identity)
            self._trace("set", key)

            return await self._driver.set(key, attachment.serialize(data), attachment.ttl)
        except Exception as e:
            self._report("write_attachment", e)
            return False

    async def mark_attachment_never_exist(self, name: str, identity: Identity) -> bool:
        """Mark an attachment NEVER-EXISTED for the attachment's ne_ttl."""
        try:
            self._assert_usable("mark_attachment_never_exist")
            attachment = self._require_attachment(name)
            key = attachment.build_key(identity)
            self._trace("set NEVER_EXISTED", key)

            return await self._driver.set(key, NEVER_EXISTED, attachment.ne_ttl)
        except Exception as e:
            self._report("mark_attachment_never_exist", e)
            return False

    async def remove_attachment(self, name: str, identity: Identity) -> bool:
        """Remove an attachment. Removing an absent attachment succeeds."""
        try:
            self._assert_usable("remove_attachment")
            key = self._require_attachment(name).build_key(identity)
            self._trace("remove", key)

            return await self._driver.remove(key)
        except Exception as e:
            self._report("remove_attachment", e)
            return False

    async def remove_all_attachments(self, data: Identity) -> bool:
        """Remove every attachment of a resource item in one driver call."""
        try:
            self._assert_usable("remove_all_attachments")
            keys = [
                attachment.build_key(data)
                for attachment in self._attachments.values()
            ]

            if keys:
                self._trace("remove_multi", keys)
                await self._driver.remove_multi(keys)

            return True
        except Exception as e:
            self._report("remove_all_attachments", e)
            return False

    async def flush(self, data: Identity, include_attachments: bool = False) -> bool:
        """Remove every entry key of a resource item, optionally its attachments."""
        try:
            self._assert_usable("flush")
            keys = [the_entry.build_key(data) for the_entry in self._entries.values()]

            if include_attachments:
                keys.extend(
                    attachment.build_key(data)
                    for attachment in self._attachments.values()
                )

            if keys:
                self._trace("remove_multi", keys)
                await self._driver.remove_multi(keys)

            return True
        except Exception as e:
            self._report("flush", e)
            return False

    # Internals

    def _assert_usable(self, operation: str) -> None:
        if not self._driver.usable():
            raise DriverUnavailable(self._name, operation)

    def _require_entry(self, name: str) -> Entry:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownEntry(self._name, name) from None

    def _require_attachment(self, name: str) -> Attachment:
        try:
            return self._attachments[name]
        except KeyError:
            raise UnknownAttachment(self._name, name) from None

    @staticmethod
    def _decode(body: Optional[CacheBody], unserialize: Unserializer) -> ReadResult[Any]:
        if body is None:
            return ReadResult.unknown()

        if body is NEVER_EXISTED:
            return ReadResult.never_existed()

        return ReadResult.found(unserialize(body))

    async def _fan_out(self, writes: List[Tuple[str, CacheBody, int]]) -> bool:
        """Issue concurrent writes and join on all of them."""
        self._trace("set (fan-out)", [key for key, _, _ in writes])

        results = await asyncio.gather(
            *(self._driver.set(key, payload, ttl) for key, payload, ttl in writes),
            return_exceptions=True
        )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        return all(results)

    def _report(self, operation: str, error: Exception) -> None:
        logger.warning(f"Cache operation {operation} failed on zone {self._name}: {error}")
        self._errors.publish(error)

    def _trace(self, operation: str, keys: Union[str, List[str]]) -> None:
        if self._log_operations:
            logger.debug(f"Zone {self._name} {operation}: {keys}")

    def __repr__(self) -> str:
        return (
            f"ResourceZone(name={self._name!r}, entries={self.entry_names()}, "
            f"attachments={self.attachment_names()})"
        )
