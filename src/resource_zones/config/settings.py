"""
Zone settings for resource-zones.

Environment driven defaults for zones and drivers, built on
pydantic-settings.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TTL, DEFAULT_NEVER_EXISTED_TTL


class ZoneSettings(BaseSettings):
    """Settings shared by every zone created through a factory."""
    
    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_ZONES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )
    
    # Registration defaults
    default_ttl: int = Field(default=DEFAULT_TTL, ge=0)
    default_never_existed_ttl: int = Field(default=DEFAULT_NEVER_EXISTED_TTL, gt=0)
    
    # Redis driver
    redis_url: Optional[str] = Field(default=None)
    redis_key_prefix: str = Field(default="")
    
    # Diagnostics
    log_cache_operations: bool = Field(default=False)
    
    def has_redis(self) -> bool:
        """Check whether a Redis URL is configured."""
        return bool(self.redis_url)


@lru_cache()
def get_zone_settings() -> ZoneSettings:
    """Get the process-wide zone settings (cached)."""
    return ZoneSettings()


def reset_zone_settings() -> None:
    """Drop the cached settings so the environment is read again."""
    get_zone_settings.cache_clear()
