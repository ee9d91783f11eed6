"""Tests for the opt-in documented defaults."""

from __future__ import annotations

from typing import Any

import pytest

from ttrpg_entities.codec import decode_monster, decode_spell, to_payload
from ttrpg_entities.defaults import (
    DEFAULT_DURATION_TYPE,
    DEFAULT_RANGE_TYPE,
    DEFAULT_SIZE,
    DEFAULT_SPELL_LEVEL,
    with_defaults,
)
from ttrpg_entities.models import MonsterFeature, Size, SpellDurationType, SpellRangeType


class TestConstants:
    def test_documented_values(self) -> None:
        assert DEFAULT_SIZE is Size.MEDIUM
        assert DEFAULT_SPELL_LEVEL == 0
        assert DEFAULT_RANGE_TYPE is SpellRangeType.RANGE
        assert DEFAULT_DURATION_TYPE is SpellDurationType.INSTANTANEOUS


class TestWithDefaults:
    """with_defaults fills only the documented fields."""

    def test_monster_size(self, minimal_monster_payload: dict[str, Any]) -> None:
        monster = decode_monster(minimal_monster_payload)

        filled = with_defaults(monster)

        assert filled.size is Size.MEDIUM
        assert monster.size is None
        assert to_payload(filled)["size"] == "M"

    def test_monster_derived_values_not_computed(self, minimal_monster_payload: dict[str, Any]) -> None:
        filled = with_defaults(decode_monster(minimal_monster_payload))

        assert filled.initiative is None
        assert filled.proficiency is None
        assert filled.slug is None
        assert filled.id is None

    def test_monster_existing_size_kept(self, minimal_monster_payload: dict[str, Any]) -> None:
        monster = decode_monster({**minimal_monster_payload, "size": "T"})

        assert with_defaults(monster) is monster

    def test_spell(self, minimal_spell_payload: dict[str, Any]) -> None:
        filled = with_defaults(decode_spell(minimal_spell_payload))

        assert filled.level == 0
        assert filled.range_type is SpellRangeType.RANGE
        assert filled.duration_type is SpellDurationType.INSTANTANEOUS
        assert filled.school is None
        assert filled.duration_unit is None

    def test_spell_partial(self, minimal_spell_payload: dict[str, Any]) -> None:
        spell = decode_spell({**minimal_spell_payload, "level": 3, "durationType": "concentration"})

        filled = with_defaults(spell)

        assert filled.level == 3
        assert filled.duration_type is SpellDurationType.CONCENTRATION
        assert filled.range_type is SpellRangeType.RANGE

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            with_defaults(MonsterFeature(name="Bite"))  # type: ignore[type-var]
