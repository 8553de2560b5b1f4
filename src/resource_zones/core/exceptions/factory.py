"""Factory exceptions.

Errors raised by the zone factory while registering drivers and zones.
"""

from .base import ResourceZoneError


class DuplicateDriver(ResourceZoneError):
    """Driver name is already registered."""
    
    def __init__(self, name: str):
        super().__init__(
            f'Cache driver "{name}" already exists.',
            error_code="DUPLICATE_DRIVER",
            details={"driver": name}
        )
        self.name = name


class UnknownDriver(ResourceZoneError):
    """Driver name is not registered."""
    
    def __init__(self, name: str):
        super().__init__(
            f'Cache driver "{name}" doesn\'t exist.',
            error_code="UNKNOWN_DRIVER",
            details={"driver": name}
        )
        self.name = name


class DuplicateZone(ResourceZoneError):
    """Zone name is already taken."""
    
    def __init__(self, name: str):
        super().__init__(
            f'Resource zone "{name}" already exists.',
            error_code="DUPLICATE_ZONE",
            details={"zone": name}
        )
        self.name = name


class UnknownZone(ResourceZoneError):
    """Zone name was never created."""
    
    def __init__(self, name: str):
        super().__init__(
            f'Resource zone "{name}" doesn\'t exist.',
            error_code="UNKNOWN_ZONE",
            details={"zone": name}
        )
        self.name = name
