"""Constants for resource-zones.

Key layout and TTL defaults shared by the key compiler, zones and
drivers.
"""

from typing import Final


class KeyLayout:
    """Segments used when rendering cache keys."""
    
    SEPARATOR: Final[str] = ":"
    ATTACHMENT_SEGMENT: Final[str] = "attach"


class ZoneTTL:
    """Default TTL values in seconds."""
    
    FOREVER: Final[int] = 0
    DEFAULT: Final[int] = 0                  # never expires
    NEVER_EXISTED: Final[int] = 900          # 15 minutes


KEY_SEPARATOR: Final[str] = KeyLayout.SEPARATOR
ATTACHMENT_SEGMENT: Final[str] = KeyLayout.ATTACHMENT_SEGMENT
DEFAULT_TTL: Final[int] = ZoneTTL.DEFAULT
DEFAULT_NEVER_EXISTED_TTL: Final[int] = ZoneTTL.NEVER_EXISTED

__all__ = [
    "KeyLayout",
    "ZoneTTL",
    "KEY_SEPARATOR",
    "ATTACHMENT_SEGMENT",
    "DEFAULT_TTL",
    "DEFAULT_NEVER_EXISTED_TTL",
]
