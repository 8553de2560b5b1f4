"""Zone entities."""

from .entry import Entry, Attachment

__all__ = [
    "Entry",
    "Attachment",
]
