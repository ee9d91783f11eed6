"""Spell definition schema.

A Spell describes casting parameters, components, duration, class
availability, source metadata and two independent extension payloads
(``data`` and ``attributes``). Only ``name`` and ``components`` are
required; ``components`` may be an empty list.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from ttrpg_entities.models.base import EntityModel, ExtensionData, Number, coerce_enum
from ttrpg_entities.models.enums import (
    AreaEffectShape,
    SpellActivationUnit,
    SpellComponent,
    SpellDurationType,
    SpellDurationUnit,
    SpellRangeType,
    SpellSchool,
)


_ENUM_FIELDS: dict[str, type[Any]] = {
    "school": SpellSchool,
    "range_type": SpellRangeType,
    "area_effect_shape": AreaEffectShape,
    "activation_unit": SpellActivationUnit,
    "duration_unit": SpellDurationUnit,
    "duration_type": SpellDurationType,
}


class Spell(EntityModel):
    """Spell entity.

    Example:
        >>> spell = Spell(name="Fire Bolt", level=0, school="EV", components=["V", "S"])
        >>> spell.is_cantrip
        True
    """

    # Identity
    id: str | None = Field(
        default=None,
        description="Unique identifier, usually a UUID. Generated by the consumer if missing.",
    )
    name: str = Field(description="Entity name")
    slug: str | None = Field(
        default=None,
        description="Link reference (e.g. 'arcane-gate'). Derived from name by the consumer if missing.",
    )

    level: Number | None = Field(default=None, description="Spell level; consumers treat unset as 0 (cantrip)")
    school: SpellSchool | None = None

    # Range
    range: Number | None = Field(default=None, description="Range value (units)")
    range_type: SpellRangeType | None = Field(
        default=None,
        description="Range type; consumers treat unset as 'range'",
    )
    area_effect_shape: AreaEffectShape | None = None
    area_effect_size: Number | None = Field(
        default=None,
        description="Radius or length, depending on shape",
    )

    # Time
    activation: Number | None = Field(default=None, description="Activation time value")
    activation_unit: SpellActivationUnit | None = None
    activation_condition: str | None = Field(
        default=None,
        description="Trigger condition, used along with reaction",
    )

    # Components
    components: list[str] = Field(
        description="Component codes defined by the game system, usually V, S, M",
    )
    components_detail: str | None = Field(
        default=None,
        description="Material component detail",
    )

    # Duration
    duration: Number | None = Field(default=None, description="Duration value")
    duration_unit: SpellDurationUnit | None = None
    duration_type: SpellDurationType | None = Field(
        default=None,
        description="Duration type; consumers treat unset as 'instantaneous'",
    )

    ritual: bool | None = Field(default=None, description="Ritual casting")
    classes: list[str] | None = Field(default=None, description="Available classes")

    # Source
    source: str | None = None
    page: Number | None = None
    link: str | None = None

    tags: list[str] | None = None
    descr: str | None = Field(
        default=None,
        description="Description. Markdown (GFM) is supported.",
    )
    notes: str | None = Field(
        default=None,
        description="DM notes. Markdown (GFM) is supported.",
    )
    data: ExtensionData | None = Field(default=None, description="Custom data")
    attributes: ExtensionData | None = Field(default=None, description="Custom attributes")
    image: str | None = Field(default=None, description="Artwork filename or URL")

    @field_validator(*_ENUM_FIELDS, mode="before")
    @classmethod
    def parse_enum_fields(cls, value: Any, info: ValidationInfo) -> Any:
        """Parse closed enumerations honoring the strict decoding context."""
        return coerce_enum(_ENUM_FIELDS[info.field_name], value, info)

    @property
    def is_cantrip(self) -> bool | None:
        """Whether this is a cantrip, or None when the level is unset."""
        if self.level is None:
            return None
        return self.level == 0

    def has_component(self, component: str | SpellComponent) -> bool:
        """Check whether a component code is listed.

        Args:
            component: Component code such as 'V' or SpellComponent.MATERIAL.

        Returns:
            True if the code appears in ``components`` (case-insensitive).
        """
        code = str(component).upper()
        return any(item.upper() == code for item in self.components)


__all__ = [
    "Spell",
]
