"""Unit tests for the zone error channel."""

import pytest

from resource_zones.application.services.error_channel import ErrorChannel


class TestErrorChannel:
    """Test error publishing."""

    def test_publish_to_handlers_in_order(self):
        channel = ErrorChannel("users")
        received = []
        channel.subscribe(lambda error: received.append(("first", error)))
        channel.subscribe(lambda error: received.append(("second", error)))
        error = RuntimeError("boom")

        channel.publish(error)

        assert received == [("first", error), ("second", error)]

    def test_publish_without_handlers(self):
        channel = ErrorChannel("users")

        channel.publish(RuntimeError("boom"))

        assert not channel.has_handlers()
        assert channel.metrics.total_published == 1
        assert channel.metrics.last_error == "RuntimeError: boom"
        assert channel.metrics.last_error_time is not None

    def test_subscribe_twice_is_noop(self):
        channel = ErrorChannel("users")
        received = []
        channel.subscribe(received.append)
        channel.subscribe(received.append)

        channel.publish(RuntimeError("boom"))

        assert len(received) == 1

    def test_subscribe_requires_callable(self):
        with pytest.raises(TypeError):
            ErrorChannel("users").subscribe("not a handler")

    def test_unsubscribe(self):
        channel = ErrorChannel("users")
        received = []
        channel.subscribe(received.append)

        assert channel.unsubscribe(received.append) is True
        assert channel.unsubscribe(received.append) is False

        channel.publish(RuntimeError("boom"))
        assert received == []

    def test_handler_may_unsubscribe_itself(self):
        channel = ErrorChannel("users")
        received = []

        def once(error):
            received.append(error)
            channel.unsubscribe(once)

        channel.subscribe(once)
        channel.publish(RuntimeError("one"))
        channel.publish(RuntimeError("two"))

        assert len(received) == 1

    def test_failing_handler_isolated(self):
        """Test that a failing handler does not stop the others."""
        channel = ErrorChannel("users")
        received = []

        def explode(error):
            raise ValueError("handler bug")

        channel.subscribe(explode)
        channel.subscribe(received.append)

        channel.publish(RuntimeError("boom"))

        assert len(received) == 1
        assert channel.metrics.handler_failures == 1

    def test_clear(self):
        channel = ErrorChannel("users")
        channel.subscribe(lambda error: None)

        channel.clear()

        assert not channel.has_handlers()
