"""Users zone walkthrough on the in-memory driver.

Registers three access paths and two attachments for a users resource,
then exercises reads, negative caching, attachments, flushing and the
fail-soft behaviour of an unusable driver.

Set RESOURCE_ZONES_REDIS_URL to run the same walkthrough against Redis.
"""

import asyncio
import logging

from resource_zones import (
    MemoryDriver,
    create_factory,
    get_zone_settings,
    json_serializer,
    json_unserializer,
    setup_logging,
)
from resource_zones.infrastructure.drivers import create_redis_driver_from_settings

logger = logging.getLogger(__name__)


async def main():
    setup_logging()
    settings = get_zone_settings()

    if settings.has_redis():
        driver = create_redis_driver_from_settings(settings)
        await driver.ping()
    else:
        driver = MemoryDriver()

    factory = create_factory(settings).add_driver("local", driver)

    users = factory.create_zone("users", "local", json_serializer, json_unserializer)
    users.on_error(lambda error: logger.error(f"users zone error: {error}"))

    users.register_entry("primary", {"id": "number"})
    users.register_entry("email", {"email": "text", "system": "number"})
    users.register_entry("name", {"name": "text", "system": "number"})

    users.register_attachment("roles", "primary", json_serializer, json_unserializer, ttl=3600)
    users.register_attachment("wallet", "primary", json_serializer, json_unserializer, ttl=3600)

    the_user = {"id": 123, "name": "hello", "email": "admin@sample.com", "system": 33}

    await users.put(the_user)
    print("primary 123:", await users.read("primary", {"id": 123}))
    print("email:", await users.read("email", {"email": "admin@sample.com", "system": 33}))

    await users.mark_never_exist("primary", {"id": 321})
    await users.mark_never_exist("email", {"email": "dddd", "system": 31})
    await users.mark_multi_never_exist("primary", [{"id": 444}, {"id": 555}])

    print("primary 321:", await users.read("primary", {"id": 321}))
    print("primary 333:", await users.read("primary", {"id": 333}))
    print("primary 555:", await users.read("primary", {"id": 555}))
    print("email dddd:", await users.read("email", {"email": "dddd", "system": 31}))

    print("roles:", await users.read_attachment("roles", {"id": 123}))
    print("write wallet:", await users.write_attachment("wallet", {"id": 123}, 0))
    print("wallet:", await users.read_attachment("wallet", {"id": 123}))
    print("write roles:", await users.write_attachment("roles", {"id": 123}, [1, 2, 3]))
    print("roles:", await users.read_attachment("roles", {"id": 123}))
    print("remove roles:", await users.remove_attachment("roles", {"id": 123}))
    print("roles:", await users.read_attachment("roles", {"id": 123}))

    await users.write_attachment("roles", {"id": 123}, [1, 2, 3])
    print("remove all attachments:", await users.remove_all_attachments(the_user))
    print("roles:", await users.read_attachment("roles", the_user))
    print("wallet:", await users.read_attachment("wallet", the_user))

    await users.flush(the_user)
    await users.put(the_user)
    await users.write_attachment("wallet", {"id": 123}, 0)
    await users.write_attachment("roles", {"id": 123}, [1, 2, 3])
    await users.flush(the_user, include_attachments=True)
    print("after full flush:", await users.read("primary", the_user))

    if isinstance(driver, MemoryDriver):
        # Simulate an outage; the read is reported through on_error
        driver.set_usable(False)
        print("driver down:", await users.read("primary", {"id": 321}))
    else:
        await driver.close()


if __name__ == "__main__":
    asyncio.run(main())
