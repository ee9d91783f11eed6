"""Tests for the Spell schema."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from ttrpg_entities.models import (
    AreaEffectShape,
    Spell,
    SpellActivationUnit,
    SpellComponent,
    SpellDurationType,
    SpellDurationUnit,
    SpellRangeType,
    SpellSchool,
)


class TestSpellRequiredFields:
    """Only name and components are required."""

    def test_minimal_spell(self, minimal_spell_payload: dict[str, Any]) -> None:
        spell = Spell.model_validate(minimal_spell_payload)

        assert spell.name == "Light"
        assert spell.components == ["V", "M"]
        assert spell.level is None
        assert spell.range_type is None
        assert spell.duration_type is None
        assert spell.ritual is None

    def test_components_required(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Spell.model_validate({"name": "Light"})

        assert exc_info.value.errors()[0]["loc"] == ("components",)

    def test_empty_components_allowed(self) -> None:
        spell = Spell.model_validate({"name": "Wish-ish", "components": []})
        assert spell.components == []

    def test_custom_component_codes(self) -> None:
        """Game systems may define components beyond V, S and M."""
        spell = Spell.model_validate({"name": "Psionic Blast", "components": ["P", "V"]})
        assert spell.components == ["P", "V"]


class TestSpellFields:
    """Field mapping of the documented example."""

    def test_full_example(self, spell_payload: dict[str, Any]) -> None:
        spell = Spell.model_validate(spell_payload)

        assert spell.level == 0
        assert spell.school is SpellSchool.EVOCATION
        assert spell.range == 12
        assert spell.range_type is SpellRangeType.RANGE
        assert spell.area_effect_shape is AreaEffectShape.SPHERE
        assert spell.area_effect_size == 20
        assert spell.activation_unit is SpellActivationUnit.REACTION
        assert spell.activation_condition == "some condition"
        assert spell.components_detail == "material component detail"
        assert spell.duration_unit is SpellDurationUnit.MINUTE
        assert spell.duration_type is SpellDurationType.CONCENTRATION
        assert spell.ritual is True
        assert spell.classes == ["Warlock", "Wizard"]
        assert spell.notes == "custom notes for DM"

    def test_data_and_attributes_independent(self, spell_payload: dict[str, Any]) -> None:
        spell = Spell.model_validate(spell_payload)

        assert spell.data == {"customAttribute1": 12, "customAttribute2": "asdf", "customAttribute3": True}
        assert spell.attributes == {"customAttribute4": 12, "customAttribute5": "asdf", "customAttribute6": True}

    def test_open_class_list(self) -> None:
        spell = Spell.model_validate({"name": "Hex", "components": ["V"], "classes": ["Hexblade (homebrew)"]})
        assert spell.classes == ["Hexblade (homebrew)"]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("school", "Evocation"),
            ("rangeType", "Touch"),
            ("areaEffectShape", "CONE"),
            ("activationUnit", "bonus_actions"),
            ("durationUnit", "Hour"),
            ("durationType", "dispel_or_trigger"),
        ],
    )
    def test_lenient_enum_spellings(self, field: str, value: str) -> None:
        spell = Spell.model_validate({"name": "X", "components": [], field: value})
        assert spell.model_dump(by_alias=True)[field] is not None

    @pytest.mark.parametrize(
        "field,value",
        [
            ("school", "evocation"),
            ("rangeType", "Touch"),
            ("areaEffectShape", 0),
            ("activationUnit", "bonus"),
            ("durationUnit", "week"),
            ("durationType", "permanent"),
        ],
    )
    def test_strict_enum_rejection(self, field: str, value: Any) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Spell.model_validate({"name": "X", "components": [], field: value}, context={"strict": True})

        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_lenient_unknown_value_unset(self) -> None:
        spell = Spell.model_validate({"name": "X", "components": [], "durationUnit": "week"})
        assert spell.duration_unit is None


class TestSpellNumbers:
    """Numeric fields keep the number they were given."""

    @pytest.mark.parametrize("field", ["level", "page", "range", "duration"])
    @pytest.mark.parametrize("value", [1.5, 42.0, 3])
    def test_number_kept_as_given(self, field: str, value: float) -> None:
        spell = Spell.model_validate({"name": "X", "components": [], field: value})

        dumped = spell.model_dump(by_alias=True)[field]
        assert dumped == value
        assert type(dumped) is type(value)

    @pytest.mark.parametrize("value", [False, "3"])
    def test_level_is_not_coerced(self, value: Any) -> None:
        with pytest.raises(ValidationError):
            Spell.model_validate({"name": "X", "components": [], "level": value})


class TestSpellHelpers:
    """Tests for Spell convenience properties."""

    @pytest.mark.parametrize("level,expected", [(0, True), (3, False), (None, None)])
    def test_is_cantrip(self, level: int | None, expected: bool | None) -> None:
        spell = Spell(name="X", components=[], level=level)
        assert spell.is_cantrip is expected

    def test_whole_float_level_is_cantrip(self) -> None:
        assert Spell(name="X", components=[], level=0.0).is_cantrip is True

    def test_has_component(self) -> None:
        spell = Spell(name="Fireball", components=["V", "S", "M"])

        assert spell.has_component("v")
        assert spell.has_component(SpellComponent.MATERIAL)
        assert not Spell(name="Shout", components=["V"]).has_component(SpellComponent.SOMATIC)
