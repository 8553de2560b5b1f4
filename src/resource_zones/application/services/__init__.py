"""Zone application services."""

from .key_compiler import (
    KeyBuilder,
    compile_key_builder,
    build_key_prefix,
    extract_identity_value,
)
from .error_channel import ErrorChannel, ErrorHandler, ErrorMetrics
from .zone import ResourceZone
from .factory import ZoneFactory, create_factory, create_hub

__all__ = [
    "KeyBuilder",
    "compile_key_builder",
    "build_key_prefix",
    "extract_identity_value",
    "ErrorChannel",
    "ErrorHandler",
    "ErrorMetrics",
    "ResourceZone",
    "ZoneFactory",
    "create_factory",
    "create_hub",
]
