"""Tests for JSON Schema export."""

from __future__ import annotations

import pytest

from ttrpg_entities.core.exceptions import EntityDecodeError
from ttrpg_entities.schema import json_schema


class TestJsonSchema:
    def test_monster_required_fields(self) -> None:
        schema = json_schema("monster")

        assert set(schema["required"]) == {"name", "str", "dex", "con", "int", "wis", "cha", "cr"}

    def test_monster_wire_property_names(self) -> None:
        properties = json_schema("monster")["properties"]

        assert "savingThrows" in properties
        assert "type" in properties
        assert "creature_type" not in properties

    def test_spell_required_fields(self) -> None:
        assert set(json_schema("spell")["required"]) == {"name", "components"}

    def test_enum_codes_in_defs(self) -> None:
        defs = json_schema("spell")["$defs"]

        assert defs["SpellSchool"]["enum"] == ["A", "C", "D", "EN", "EV", "I", "N", "T"]

    def test_unknown_kind(self) -> None:
        with pytest.raises(EntityDecodeError):
            json_schema("item")
