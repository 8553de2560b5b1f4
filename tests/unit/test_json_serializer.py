"""Unit tests for the JSON cache codec."""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel

from resource_zones.core.exceptions import DeserializationError, SerializationError
from resource_zones.infrastructure.serializers import (
    JSONCodec,
    create_json_codec,
    json_serializer,
    json_unserializer,
)


class Profile(BaseModel):
    id: int
    email: str


class TestJSONCodec:
    """Test JSON encoding and decoding."""

    def test_serialize_returns_compact_bytes(self):
        assert json_serializer({"id": 1, "name": "a"}) == b'{"id":1,"name":"a"}'

    def test_unserialize_accepts_text(self):
        assert json_unserializer('{"id":1}') == {"id": 1}

    def test_extended_types(self):
        """Test that extended types come back as the same Python types."""
        value = {
            "created": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            "birthday": date(1990, 5, 17),
            "balance": Decimal("10.25"),
            "uid": UUID("12345678-1234-5678-1234-567812345678"),
            "tags": {"admin"},
            "avatar": b"\x89PNG",
        }

        assert json_unserializer(json_serializer(value)) == value

    def test_pydantic_model(self):
        payload = json_serializer(Profile(id=1, email="a@b.c"))

        assert json_unserializer(payload) == {"id": 1, "email": "a@b.c"}

    def test_unserializable_value(self):
        with pytest.raises(SerializationError) as exc_info:
            json_serializer({"callback": object()})

        assert exc_info.value.serializer_type == "json"
        assert exc_info.value.error_code == "SERIALIZATION_ERROR"

    def test_invalid_payload(self):
        with pytest.raises(DeserializationError):
            json_unserializer(b"{not json")

    def test_compression(self):
        codec = JSONCodec(use_compression=True, compression_threshold=10)
        value = {"items": ["repeated value"] * 50}

        payload = codec.serialize(value)

        assert payload.startswith(b"GZIP:")
        assert codec.deserialize(payload) == value

    def test_small_payload_not_compressed(self):
        codec = create_json_codec(use_compression=True, compression_threshold=1024)

        assert not codec.serialize({"id": 1}).startswith(b"GZIP:")

    def test_stats(self):
        codec = JSONCodec()
        codec.deserialize(codec.serialize([1, 2]))

        with pytest.raises(DeserializationError):
            codec.deserialize(b"[")

        assert codec.stats.serialization_count == 1
        assert codec.stats.deserialization_count == 1
        assert codec.stats.error_count == 1
        assert codec.stats.total_bytes_serialized == len(b"[1,2]")
