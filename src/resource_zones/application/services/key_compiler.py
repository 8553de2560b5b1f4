"""Cache key compiler.

ONLY key derivation - turns (resource, entry, identity schema) into a
reusable key builder at registration time, so the hot path only walks a
prepared field list.

Rendered layout:

    <resource>[:attach:<attachment>]:<name>(:<field>:<value>)*

Field names are rendered next to their values, so ``id:5`` can never
collide with ``code:5``. Literal values are percent-escaped (``%`` and
``:``), so a value can never pass for a field/value pair.
"""

import base64
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple

from ...config.constants import ATTACHMENT_SEGMENT, KEY_SEPARATOR
from ...core.value_objects.identity_schema import IdentityKind, IdentitySchema

KeyBuilder = Callable[[Any], str]


def _render_literal(value: Any) -> str:
    # "%" first, so escapes stay unambiguous
    return str(value).replace("%", "%25").replace(KEY_SEPARATOR, "%3A")


def _render_bytes(value: Any) -> str:
    if isinstance(value, str):
        value = value.encode("utf-8")
    return base64.b64encode(bytes(value)).decode("ascii")


def _render_boolean(value: Any) -> str:
    return "true" if value else "false"


_RENDERERS = {
    IdentityKind.TEXT: _render_literal,
    IdentityKind.NUMBER: _render_literal,
    IdentityKind.BYTES: _render_bytes,
    IdentityKind.BOOLEAN: _render_boolean,
}


def extract_identity_value(record: Any, field: str) -> Any:
    """Read one identity field from a mapping or a plain object."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def build_key_prefix(
    resource: str,
    name: str,
    attachment: Optional[str] = None
) -> str:
    """Build the fixed leading segments of every key of an entry."""
    segments = [resource]

    if attachment:
        segments.extend((ATTACHMENT_SEGMENT, attachment))

    segments.append(name)
    return KEY_SEPARATOR.join(segments)


def compile_key_builder(
    resource: str,
    name: str,
    schema: IdentitySchema,
    attachment: Optional[str] = None
) -> KeyBuilder:
    """Compile a key builder for an entry or attachment.

    Args:
        resource: Resource (zone) name
        name: Entry or attachment name
        schema: Identity schema, in key order
        attachment: Attachment name, puts the key in the attachment namespace

    Returns:
        Function rendering an identity record (mapping or object) to a key.
        Undeclared fields are ignored; missing declared fields render as an
        empty segment.
    """
    prefix = build_key_prefix(resource, name, attachment)
    fields: Tuple[Tuple[str, Callable[[Any], str]], ...] = tuple(
        (field, _RENDERERS[kind]) for field, kind in schema.items()
    )

    def build_key(identity: Any) -> str:
        parts = [prefix]

        for field, render in fields:
            value = extract_identity_value(identity, field)
            parts.append(field)
            parts.append("" if value is None else render(value))

        return KEY_SEPARATOR.join(parts)

    return build_key
