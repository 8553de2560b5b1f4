"""Zone factory.

ONLY registration - maps driver names and zone names to instances.
Does not handle caching logic itself.
"""

import logging
import warnings
from typing import Dict, List, Optional

from ...config.settings import ZoneSettings, get_zone_settings
from ...core.exceptions.factory import (
    DuplicateDriver,
    DuplicateZone,
    UnknownDriver,
    UnknownZone,
)
from ...core.protocols.driver import CacheDriver
from ...core.protocols.serializer import Serializer, Unserializer
from .zone import ResourceZone

logger = logging.getLogger(__name__)


class ZoneFactory:
    """Registry of cache drivers and resource zones.

    Zones created here take their registration defaults (ttl, ne_ttl)
    from the factory's settings.
    """

    def __init__(self, settings: Optional[ZoneSettings] = None):
        """Initialize zone factory.

        Args:
            settings: Zone settings (default: process-wide settings)
        """
        self._settings = settings or get_zone_settings()
        self._drivers: Dict[str, CacheDriver] = {}
        self._zones: Dict[str, ResourceZone] = {}

    @property
    def settings(self) -> ZoneSettings:
        return self._settings

    def add_driver(self, name: str, driver: CacheDriver) -> "ZoneFactory":
        """Add a cache driver.

        Raises:
            DuplicateDriver: If the name is taken
        """
        if name in self._drivers:
            raise DuplicateDriver(name)

        self._drivers[name] = driver
        logger.info(f"Cache driver {name} added ({type(driver).__name__})")
        return self

    def has_driver(self, name: str) -> bool:
        return name in self._drivers

    def create_zone(
        self,
        name: str,
        driver: str,
        serializer: Serializer,
        unserializer: Unserializer
    ) -> ResourceZone:
        """Create a zone for a resource.

        Args:
            name: Unique zone (resource) name
            driver: Name of a driver added with add_driver
            serializer: Resource data -> payload
            unserializer: Payload -> resource data

        Raises:
            DuplicateZone: If the zone name is taken
            UnknownDriver: If the driver name is unknown
        """
        if name in self._zones:
            raise DuplicateZone(name)

        if driver not in self._drivers:
            raise UnknownDriver(driver)

        zone = ResourceZone(
            name,
            self._drivers[driver],
            serializer,
            unserializer,
            default_ttl=self._settings.default_ttl,
            default_ne_ttl=self._settings.default_never_existed_ttl,
            log_operations=self._settings.log_cache_operations
        )
        self._zones[name] = zone

        logger.debug(f"Resource zone {name} created on driver {driver}")
        return zone

    def get_zone(self, name: str) -> ResourceZone:
        """Get a created zone.

        Raises:
            UnknownZone: If the zone does not exist
        """
        try:
            return self._zones[name]
        except KeyError:
            raise UnknownZone(name) from None

    def has_zone(self, name: str) -> bool:
        return name in self._zones

    def zone_names(self) -> List[str]:
        return list(self._zones)


def create_factory(settings: Optional[ZoneSettings] = None) -> ZoneFactory:
    """Create a zone factory."""
    return ZoneFactory(settings)


def create_hub(settings: Optional[ZoneSettings] = None) -> ZoneFactory:
    """Create a zone factory.

    .. deprecated:: Use create_factory instead.
    """
    warnings.warn(
        "create_hub() is deprecated, use create_factory() instead",
        DeprecationWarning,
        stacklevel=2
    )
    return ZoneFactory(settings)
