"""Configuration module for resource-zones.

Settings, logging setup and key/TTL constants.
"""

from .constants import *

from .settings import (
    ZoneSettings,
    get_zone_settings,
    reset_zone_settings,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "KeyLayout",
    "ZoneTTL",
    "KEY_SEPARATOR",
    "ATTACHMENT_SEGMENT",
    "DEFAULT_TTL",
    "DEFAULT_NEVER_EXISTED_TTL",

    # Settings
    "ZoneSettings",
    "get_zone_settings",
    "reset_zone_settings",

    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
