"""Pytest configuration and fixtures for resource-zones tests."""

from typing import List

import pytest
from unittest.mock import AsyncMock, MagicMock

from resource_zones import (
    MemoryDriver,
    ResourceZone,
    ZoneSettings,
    json_serializer,
    json_unserializer,
)


@pytest.fixture
def memory_driver():
    """Fresh in-memory driver."""
    return MemoryDriver()


@pytest.fixture
def zone_settings():
    """Settings isolated from the environment."""
    return ZoneSettings(
        default_ttl=0,
        default_never_existed_ttl=900,
        redis_url=None,
        log_cache_operations=False,
        _env_file=None
    )


@pytest.fixture
def users_zone(memory_driver):
    """Users zone with three entries and two attachments."""
    zone = ResourceZone("users", memory_driver, json_serializer, json_unserializer)

    zone.register_entry("primary", {"id": "number"})
    zone.register_entry("email", {"email": "text", "system": "number"})
    zone.register_entry("name", {"name": "text", "system": "number"})

    zone.register_attachment("roles", "primary", json_serializer, json_unserializer)
    zone.register_attachment("wallet", "primary", json_serializer, json_unserializer, ttl=60)

    return zone


@pytest.fixture
def sample_user():
    """Sample user record carrying every identity field."""
    return {
        "id": 123,
        "email": "hello@example.com",
        "system": 1,
        "name": "hello",
        "age": 30,
    }


@pytest.fixture
def captured_errors(users_zone) -> List[BaseException]:
    """Errors published by the users zone."""
    errors: List[BaseException] = []
    users_zone.on_error(errors.append)
    return errors


@pytest.fixture
def mock_driver():
    """Driver double with every operation mocked."""
    driver = MagicMock()
    driver.usable = MagicMock(return_value=True)
    driver.exists = AsyncMock(return_value=False)
    driver.get = AsyncMock(return_value=None)
    driver.get_multi = AsyncMock(return_value={})
    driver.set = AsyncMock(return_value=True)
    driver.set_multi = AsyncMock(return_value=True)
    driver.remove = AsyncMock(return_value=True)
    driver.remove_multi = AsyncMock(return_value=0)
    return driver


@pytest.fixture
def mock_redis_client():
    """Async Redis client double."""
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=None)
    client.mget = AsyncMock(return_value=[])
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=0)
    client.aclose = AsyncMock()

    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    client.pipeline.return_value = pipe

    return client
