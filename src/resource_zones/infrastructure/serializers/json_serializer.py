"""JSON cache codec.

ONLY JSON serialization - serializer/unserializer pair for zone and
attachment payloads with extended type support and optional compression.
"""

import gzip
import json
from dataclasses import asdict, dataclass, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Union
from uuid import UUID

from ...core.exceptions.serialization import DeserializationError, SerializationError

GZIP_PREFIX = b"GZIP:"


@dataclass
class JSONCodecStats:
    """JSON codec statistics."""

    serialization_count: int = 0
    deserialization_count: int = 0
    total_bytes_serialized: int = 0
    error_count: int = 0


class CustomJSONEncoder(json.JSONEncoder):
    """JSON encoder for extended type support."""

    def default(self, obj: Any) -> Any:
        """Handle non-standard JSON types."""
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        elif isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        elif isinstance(obj, Decimal):
            return {"__decimal__": str(obj)}
        elif isinstance(obj, UUID):
            return {"__uuid__": str(obj)}
        elif isinstance(obj, (set, frozenset)):
            return {"__set__": list(obj)}
        elif isinstance(obj, bytes):
            return {"__bytes__": obj.hex()}
        elif hasattr(obj, "model_dump"):
            # pydantic models
            return obj.model_dump()
        elif is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)

        return super().default(obj)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode custom JSON objects back to Python types."""
    if "__datetime__" in obj:
        return datetime.fromisoformat(obj["__datetime__"])
    elif "__date__" in obj:
        return date.fromisoformat(obj["__date__"])
    elif "__decimal__" in obj:
        return Decimal(obj["__decimal__"])
    elif "__uuid__" in obj:
        return UUID(obj["__uuid__"])
    elif "__set__" in obj:
        return set(obj["__set__"])
    elif "__bytes__" in obj:
        return bytes.fromhex(obj["__bytes__"])

    return obj


class JSONCodec:
    """JSON codec producing bytes payloads.

    Payloads at or above ``compression_threshold`` bytes are gzipped when
    compression is enabled and actually saves space.
    """

    def __init__(
        self,
        sort_keys: bool = False,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024
    ):
        self._sort_keys = sort_keys
        self._use_compression = use_compression
        self._compression_level = compression_level
        self._compression_threshold = compression_threshold
        self._stats = JSONCodecStats()

    @property
    def stats(self) -> JSONCodecStats:
        return self._stats

    def serialize(self, value: Any) -> bytes:
        """Serialize value to JSON bytes."""
        try:
            json_bytes = json.dumps(
                value,
                cls=CustomJSONEncoder,
                ensure_ascii=False,
                separators=(",", ":"),
                sort_keys=self._sort_keys
            ).encode("utf-8")
        except (TypeError, ValueError, OverflowError) as e:
            self._stats.error_count += 1
            raise SerializationError(
                f"JSON serialization failed: {e}",
                value=value,
                serializer_type="json",
                original_error=e
            ) from e

        if self._use_compression and len(json_bytes) >= self._compression_threshold:
            compressed = GZIP_PREFIX + gzip.compress(
                json_bytes, compresslevel=self._compression_level
            )
            if len(compressed) < len(json_bytes):
                json_bytes = compressed

        self._stats.serialization_count += 1
        self._stats.total_bytes_serialized += len(json_bytes)
        return json_bytes

    def deserialize(self, data: Union[bytes, str]) -> Any:
        """Deserialize JSON bytes or text back to a Python object."""
        try:
            if isinstance(data, str):
                json_str = data
            else:
                raw = bytes(data)
                if raw.startswith(GZIP_PREFIX):
                    raw = gzip.decompress(raw[len(GZIP_PREFIX):])
                json_str = raw.decode("utf-8")

            result = json.loads(json_str, object_hook=decode_json_object)
        except (json.JSONDecodeError, UnicodeDecodeError, gzip.BadGzipFile, EOFError) as e:
            self._stats.error_count += 1
            raise DeserializationError(
                f"JSON deserialization failed: {e}",
                data=data,
                serializer_type="json",
                original_error=e
            ) from e

        self._stats.deserialization_count += 1
        return result


_default_codec = JSONCodec()


def json_serializer(value: Any) -> bytes:
    """Serialize with the default JSON codec."""
    return _default_codec.serialize(value)


def json_unserializer(data: Union[bytes, str]) -> Any:
    """Deserialize with the default JSON codec."""
    return _default_codec.deserialize(data)


def create_json_codec(**options) -> JSONCodec:
    """Create JSON codec."""
    return JSONCodec(**options)
