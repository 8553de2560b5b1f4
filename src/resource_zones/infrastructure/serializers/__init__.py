"""Cache payload codecs."""

from .json_serializer import (
    JSONCodec,
    JSONCodecStats,
    CustomJSONEncoder,
    decode_json_object,
    json_serializer,
    json_unserializer,
    create_json_codec,
)

__all__ = [
    "JSONCodec",
    "JSONCodecStats",
    "CustomJSONEncoder",
    "decode_json_object",
    "json_serializer",
    "json_unserializer",
    "create_json_codec",
]
