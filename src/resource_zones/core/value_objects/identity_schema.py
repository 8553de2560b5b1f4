"""Identity schema value object.

ONLY identity declarations - ordered, immutable mapping from identity
field name to value kind, consumed when entries are registered.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Tuple, Union

from ..exceptions.zone import ValidationError


class IdentityKind(str, Enum):
    """Kinds of identity values a key can be rendered from."""
    
    TEXT = "text"
    NUMBER = "number"
    BYTES = "bytes"
    BOOLEAN = "boolean"
    
    @classmethod
    def parse(cls, value: Union["IdentityKind", str]) -> "IdentityKind":
        """Parse a kind name, accepting common aliases."""
        if isinstance(value, IdentityKind):
            return value
        
        if isinstance(value, str):
            kind = _KIND_ALIASES.get(value.strip().lower())
            if kind is not None:
                return kind
        
        raise ValidationError(
            f"Unsupported identity kind: {value!r}",
            field="kind",
            supported=sorted(_KIND_ALIASES)
        )


_KIND_ALIASES = {
    "text": IdentityKind.TEXT,
    "string": IdentityKind.TEXT,
    "str": IdentityKind.TEXT,
    "number": IdentityKind.NUMBER,
    "int": IdentityKind.NUMBER,
    "float": IdentityKind.NUMBER,
    "bytes": IdentityKind.BYTES,
    "buffer": IdentityKind.BYTES,
    "boolean": IdentityKind.BOOLEAN,
    "bool": IdentityKind.BOOLEAN,
}


@dataclass(frozen=True)
class IdentitySchema:
    """Identity schema value object.
    
    Fields keep their declaration order; that order is the order in
    which they appear in rendered cache keys.
    """
    
    fields: Tuple[Tuple[str, IdentityKind], ...]
    
    def __post_init__(self):
        """Validate field names."""
        seen = set()
        for name, kind in self.fields:
            if not isinstance(name, str) or not name:
                raise ValidationError(
                    "Identity field name must be a non-empty string",
                    field="fields"
                )
            if name in seen:
                raise ValidationError(
                    f"Identity field {name!r} declared twice",
                    field="fields"
                )
            if not isinstance(kind, IdentityKind):
                raise ValidationError(
                    f"Identity field {name!r} has no valid kind",
                    field=name
                )
            seen.add(name)
    
    @classmethod
    def from_mapping(
        cls,
        mapping: Union["IdentitySchema", Mapping[str, Union[IdentityKind, str]]]
    ) -> "IdentitySchema":
        """Create schema from a {field: kind} mapping."""
        if isinstance(mapping, IdentitySchema):
            return mapping
        
        if not isinstance(mapping, Mapping):
            raise ValidationError(
                "Identity schema must be a mapping of field name to kind",
                field="schema"
            )
        
        return cls(tuple(
            (name, IdentityKind.parse(kind)) for name, kind in mapping.items()
        ))
    
    def field_names(self) -> Tuple[str, ...]:
        """Get declared field names in order."""
        return tuple(name for name, _ in self.fields)
    
    def items(self) -> Iterator[Tuple[str, IdentityKind]]:
        return iter(self.fields)
    
    def to_dict(self) -> dict:
        """Convert to a plain {field: kind-name} dictionary."""
        return {name: kind.value for name, kind in self.fields}
    
    def __len__(self) -> int:
        return len(self.fields)
    
    def __contains__(self, name: object) -> bool:
        return any(name == field for field, _ in self.fields)
