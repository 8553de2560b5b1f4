"""Unit tests for tri-state read results."""

import pytest

from resource_zones.core.value_objects import NEVER_EXISTED, ReadResult, ReadStatus
from resource_zones.core.value_objects.never_existed import (
    NeverExistedMarker,
    is_never_existed,
)


class TestReadResult:
    """Test read result states."""

    def test_found(self):
        result = ReadResult.found({"id": 1})

        assert result.status is ReadStatus.FOUND
        assert result.is_found
        assert not result.is_never_existed
        assert not result.is_unknown
        assert result.value == {"id": 1}
        assert result.unwrap() == {"id": 1}

    def test_found_empty_value_is_found(self):
        """Test that empty values are data, not absence."""
        assert ReadResult.found("").is_found
        assert ReadResult.found(None).is_found

    def test_never_existed(self):
        result = ReadResult.never_existed()

        assert result.is_never_existed
        assert result.value is None
        assert result.unwrap("fallback") == "fallback"
        assert str(result) == "never_existed"

    def test_unknown(self):
        result = ReadResult.unknown()

        assert result.is_unknown
        assert result.unwrap() is None
        assert str(result) == "unknown"

    def test_states_are_distinct(self):
        assert ReadResult.never_existed() != ReadResult.unknown()
        assert ReadResult.found(1) == ReadResult.found(1)

    def test_non_found_cannot_carry_value(self):
        """Test that only found results carry a value."""
        with pytest.raises(ValueError):
            ReadResult(ReadStatus.UNKNOWN, "value")

    def test_str_found(self):
        assert str(ReadResult.found("a")) == "found('a')"


class TestNeverExistedMarker:
    """Test the negative cache marker."""

    def test_singleton(self):
        assert NeverExistedMarker() is NEVER_EXISTED

    def test_is_never_existed(self):
        assert is_never_existed(NEVER_EXISTED)
        assert not is_never_existed(b"")
        assert not is_never_existed(None)

    def test_repr(self):
        assert repr(NEVER_EXISTED) == "NEVER_EXISTED"
