"""Unit tests for cache key compilation."""

from dataclasses import dataclass

import pytest

from resource_zones.application.services.key_compiler import (
    build_key_prefix,
    compile_key_builder,
    extract_identity_value,
)
from resource_zones.core.value_objects import IdentitySchema


def schema(**fields):
    return IdentitySchema.from_mapping(fields)


@dataclass
class User:
    id: int
    email: str
    system: int


class TestKeyPrefix:
    """Test fixed key segments."""

    def test_entry_prefix(self):
        assert build_key_prefix("users", "primary") == "users:primary"

    def test_attachment_prefix(self):
        assert build_key_prefix("users", "roles", "roles") == "users:attach:roles:roles"


class TestCompileKeyBuilder:
    """Test compiled key builders."""

    def test_single_number_field(self):
        """Test the basic key layout."""
        build_key = compile_key_builder("users", "primary", schema(id="number"))

        assert build_key({"id": 123}) == "users:primary:id:123"

    def test_multiple_fields_in_declaration_order(self):
        """Test that fields render in declared order with their names."""
        build_key = compile_key_builder(
            "users", "email", schema(email="text", system="number")
        )

        assert build_key({"system": 1, "email": "a@b.c"}) == "users:email:email:a@b.c:system:1"

    def test_deterministic(self):
        """Test that equal identities produce equal keys."""
        build_key = compile_key_builder("users", "primary", schema(id="number"))

        assert build_key({"id": 5}) == build_key({"id": 5})

    def test_field_names_separate_keys(self):
        """Test that equal values under different fields never collide."""
        by_id = compile_key_builder("users", "lookup", schema(id="number"))
        by_code = compile_key_builder("users", "lookup", schema(code="number"))

        assert by_id({"id": 5}) != by_code({"code": 5})

    def test_undeclared_fields_ignored(self):
        """Test that extra record fields do not affect the key."""
        build_key = compile_key_builder("users", "primary", schema(id="number"))

        assert build_key({"id": 1, "name": "x"}) == build_key({"id": 1})

    def test_missing_field_renders_empty(self):
        """Test that a missing declared field renders as an empty segment."""
        build_key = compile_key_builder(
            "users", "email", schema(email="text", system="number")
        )

        assert build_key({"email": "a@b.c"}) == "users:email:email:a@b.c:system:"

    def test_separator_in_value_cannot_shift_fields(self):
        """Test that values containing the separator never collide."""
        build_key = compile_key_builder("users", "pair", schema(a="text", b="text"))

        first = build_key({"a": "1:b:2", "b": "3"})
        second = build_key({"a": "1", "b": "2:b:3"})

        assert first != second
        assert first == "users:pair:a:1%3Ab%3A2:b:3"

    def test_percent_escaped_before_separator(self):
        build_key = compile_key_builder("users", "name", schema(name="text"))

        assert build_key({"name": "%3A"}) != build_key({"name": ":"})
        assert build_key({"name": "100%"}) == "users:name:name:100%25"

    def test_plain_values_unchanged(self):
        build_key = compile_key_builder("users", "email", schema(email="text"))

        assert build_key({"email": "a@b.c"}) == "users:email:email:a@b.c"

    def test_bytes_render_as_base64(self):
        build_key = compile_key_builder("files", "digest", schema(sha="bytes"))

        assert build_key({"sha": b"\x01\x02"}) == "files:digest:sha:AQI="
        assert build_key({"sha": "hi"}) == "files:digest:sha:aGk="

    @pytest.mark.parametrize("value,rendered", [(True, "true"), (False, "false")])
    def test_boolean_render(self, value, rendered):
        build_key = compile_key_builder("users", "active", schema(active="boolean"))

        assert build_key({"active": value}) == f"users:active:active:{rendered}"

    def test_missing_boolean_renders_empty(self):
        build_key = compile_key_builder("users", "active", schema(active="boolean"))

        assert build_key({}) == "users:active:active:"

    def test_object_identity(self):
        """Test that attributes of plain objects are read."""
        build_key = compile_key_builder(
            "users", "email", schema(email="text", system="number")
        )

        assert build_key(User(1, "a@b.c", 2)) == "users:email:email:a@b.c:system:2"

    def test_attachment_key_namespace(self):
        """Test that attachment keys differ from the parent entry key."""
        entry_key = compile_key_builder("users", "primary", schema(id="number"))
        roles_key = compile_key_builder("users", "roles", schema(id="number"), "roles")

        assert roles_key({"id": 1}) == "users:attach:roles:roles:id:1"
        assert roles_key({"id": 1}) != entry_key({"id": 1})


class TestExtractIdentityValue:
    """Test identity field extraction."""

    def test_mapping(self):
        assert extract_identity_value({"id": 1}, "id") == 1
        assert extract_identity_value({}, "id") is None

    def test_object(self):
        user = User(7, "x", 1)

        assert extract_identity_value(user, "id") == 7
        assert extract_identity_value(user, "missing") is None
