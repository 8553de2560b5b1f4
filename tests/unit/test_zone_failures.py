"""Unit tests for fail-soft zone operations."""

import pytest

from resource_zones import DriverUnavailable, ResourceZone, UnknownEntry


OPERATIONS = [
    ("read", lambda zone, user: zone.read("primary", user), lambda r: r.is_unknown),
    ("write", lambda zone, user: zone.write("primary", user), lambda r: r is False),
    ("mark_never_exist", lambda zone, user: zone.mark_never_exist("primary", user), lambda r: r is False),
    ("exists", lambda zone, user: zone.exists("primary", user), lambda r: r is False),
    ("remove", lambda zone, user: zone.remove("primary", user), lambda r: r is False),
    (
        "read_multi",
        lambda zone, user: zone.read_multi("primary", [user, user]),
        lambda r: len(r) == 2 and all(item.is_unknown for item in r),
    ),
    ("write_multi", lambda zone, user: zone.write_multi("primary", [user]), lambda r: r is False),
    (
        "mark_multi_never_exist",
        lambda zone, user: zone.mark_multi_never_exist("primary", [user]),
        lambda r: r is False,
    ),
    ("remove_multi", lambda zone, user: zone.remove_multi("primary", [user]), lambda r: r == 0),
    ("put", lambda zone, user: zone.put(user), lambda r: r is False),
    ("put_multi", lambda zone, user: zone.put_multi([user]), lambda r: r is False),
    ("read_attachment", lambda zone, user: zone.read_attachment("roles", user), lambda r: r.is_unknown),
    (
        "write_attachment",
        lambda zone, user: zone.write_attachment("roles", user, ["admin"]),
        lambda r: r is False,
    ),
    (
        "mark_attachment_never_exist",
        lambda zone, user: zone.mark_attachment_never_exist("roles", user),
        lambda r: r is False,
    ),
    ("remove_attachment", lambda zone, user: zone.remove_attachment("roles", user), lambda r: r is False),
    ("remove_all_attachments", lambda zone, user: zone.remove_all_attachments(user), lambda r: r is False),
    ("flush", lambda zone, user: zone.flush(user, include_attachments=True), lambda r: r is False),
]


class TestUnusableDriver:
    """Test every operation against a driver that reports itself down."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation,call,is_safe_default",
        OPERATIONS,
        ids=[operation for operation, _, _ in OPERATIONS]
    )
    async def test_safe_default_and_one_event(
        self, users_zone, memory_driver, captured_errors, sample_user,
        operation, call, is_safe_default
    ):
        """Test that the call returns its safe default and reports exactly once."""
        memory_driver.set_usable(False)

        result = await call(users_zone, sample_user)

        assert is_safe_default(result)
        assert len(captured_errors) == 1
        assert isinstance(captured_errors[0], DriverUnavailable)
        assert captured_errors[0].operation == operation
        assert str(captured_errors[0]) == "Cache driver is down."

    @pytest.mark.asyncio
    async def test_nothing_written_while_down(self, users_zone, memory_driver, sample_user):
        memory_driver.set_usable(False)
        await users_zone.put(sample_user)

        memory_driver.set_usable(True)
        assert await memory_driver.keys() == []


class TestDriverErrors:
    """Test driver exceptions being contained."""

    @pytest.mark.asyncio
    async def test_read_error(self, mock_driver):
        errors = []
        zone = ResourceZone("users", mock_driver, str, str).on_error(errors.append)
        zone.register_entry("primary", {"id": "number"})
        failure = ConnectionError("connection reset")
        mock_driver.get.side_effect = failure

        result = await zone.read("primary", {"id": 1})

        assert result.is_unknown
        assert errors == [failure]
        assert zone.error_metrics.total_published == 1

    @pytest.mark.asyncio
    async def test_put_branch_failure_reported_once(self, mock_driver):
        """Test that a failing fan-out branch fails the call with one event."""
        errors = []
        zone = ResourceZone("users", mock_driver, str, str).on_error(errors.append)
        zone.register_entry("primary", {"id": "number"})
        zone.register_entry("email", {"email": "text"})
        zone.register_entry("name", {"name": "text"})
        mock_driver.set.side_effect = [True, ConnectionError("down"), ConnectionError("down")]

        result = await zone.put({"id": 1, "email": "a", "name": "b"})

        assert result is False
        assert len(errors) == 1
        assert mock_driver.set.await_count == 3

    @pytest.mark.asyncio
    async def test_serializer_error(self, memory_driver):
        errors = []

        def broken(value):
            raise TypeError("not serializable")

        zone = ResourceZone("users", memory_driver, broken, str).on_error(errors.append)
        zone.register_entry("primary", {"id": "number"})

        assert await zone.write("primary", {"id": 1}) is False
        assert len(errors) == 1
        assert await memory_driver.keys() == []

    @pytest.mark.asyncio
    async def test_unknown_entry_is_contained(self, users_zone, captured_errors):
        assert await users_zone.write("missing", {"id": 1}) is False

        assert len(captured_errors) == 1
        assert isinstance(captured_errors[0], UnknownEntry)

    @pytest.mark.asyncio
    async def test_no_handlers(self, memory_driver):
        """Test that failures without handlers are still contained."""
        zone = ResourceZone("users", memory_driver, str, str)
        memory_driver.set_usable(False)

        assert (await zone.read("primary", {"id": 1})).is_unknown
        assert zone.error_metrics.total_published == 1

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_escape(self, users_zone, captured_errors, memory_driver):
        def explode(error):
            raise RuntimeError("handler bug")

        users_zone.on_error(explode)
        memory_driver.set_usable(False)

        assert await users_zone.remove("primary", {"id": 1}) is False
        assert len(captured_errors) == 1
        assert users_zone.error_metrics.handler_failures == 1

    @pytest.mark.asyncio
    async def test_remove_error_handler(self, users_zone, captured_errors, memory_driver):
        assert users_zone.remove_error_handler(captured_errors.append) is True
        memory_driver.set_usable(False)

        await users_zone.read("primary", {"id": 1})

        assert captured_errors == []
