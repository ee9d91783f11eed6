"""Monster statblock schema.

A Monster describes a creature statblock: identity, ability scores,
combat statistics, defenses, senses, narrative features, source metadata
and free-form extension data. Only ``name``, the six ability scores and
``cr`` are required; everything else may be absent and stays unset.

Example:
    >>> goblin = Monster(name="Goblin", str=8, dex=14, con=10, int=10, wis=8, cha=8, cr="1/4")
    >>> goblin.size is None
    True
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from ttrpg_entities.models.base import EntityModel, ExtensionData, Number, coerce_enum
from ttrpg_entities.models.enums import Size


# Wire names of the feature lists, in statblock display order
FEATURE_GROUPS: tuple[str, ...] = (
    "traits",
    "actions",
    "reactions",
    "legendaryActions",
    "bonusActions",
    "mythicActions",
)


class MonsterFeature(EntityModel):
    """A named block of statblock prose (trait, action, reaction, ...).

    Example:
        >>> MonsterFeature(
        ...     name="Dagger",
        ...     text="*Melee Weapon Attack:* +4 to hit, reach 5 ft., one target.",
        ... )
    """

    name: str | None = None
    text: str | None = Field(
        default=None,
        description="Feature text. Markdown (GFM) is supported.",
    )


class Movement(EntityModel):
    """Movement speeds, typically in feet."""

    burrow: Number | None = None
    climb: Number | None = None
    fly: Number | None = None
    swim: Number | None = None
    walk: Number | None = None
    hover: Number | None = None
    other: str | None = Field(default=None, description="Any other movement, as text")


class Senses(EntityModel):
    """Special senses with their range in feet."""

    darkvision: Number | None = None
    blindsight: Number | None = None
    tremorsense: Number | None = None
    truesight: Number | None = None
    other: str | None = Field(default=None, description="Any other sense, as text")


class Monster(EntityModel):
    """Monster entity.

    Fields mirror the JSON payload; Python attribute names differ only
    where the wire name is camelCase, abbreviated (``str`` -> ``strength``)
    or shadows a builtin (``type`` -> ``creature_type``).

    Open vocabularies (damage types, conditions, languages, environments,
    tags) are plain strings so game systems can use custom values.
    """

    # Identity
    id: str | None = Field(
        default=None,
        description="Unique identifier, usually a UUID. Generated by the consumer if missing.",
    )
    kind: str | None = Field(
        default=None,
        description="Entity kind defined by the game system (e.g. 'npc').",
    )
    name: str = Field(description="Entity name")
    slug: str | None = Field(
        default=None,
        description="Link reference (e.g. 'adult-dragon'). Derived from name by the consumer if missing.",
    )

    # Physical
    size: Size | None = Field(default=None, description="Creature size; consumers treat unset as medium")
    creature_type: str | None = Field(
        default=None,
        alias="type",
        description="Type and optional subtype (e.g. 'fiend (demon)')",
    )
    alignment: str | None = None
    ac: str | None = Field(default=None, description="Armor Class, e.g. '12 (leather armor)'")
    hp: str | None = Field(default=None, description="Hit Points, e.g. '11 (2d8 + 2)'")
    speed: Movement | None = None

    # Ability scores
    strength: Number = Field(alias="str", description="Strength")
    dexterity: Number = Field(alias="dex", description="Dexterity")
    constitution: Number = Field(alias="con", description="Constitution")
    intelligence: Number = Field(alias="int", description="Intelligence")
    wisdom: Number = Field(alias="wis", description="Wisdom")
    charisma: Number = Field(alias="cha", description="Charisma")

    # Modifiers and defenses
    skills: dict[str, Number] | None = Field(
        default=None,
        description="Skill name -> skill modifier",
    )
    saving_throws: dict[str, Number] | None = Field(
        default=None,
        description="Ability name -> saving throw modifier",
    )
    damage_immunities: list[str] | None = None
    damage_vulnerabilities: list[str] | None = None
    damage_resistances: list[str] | None = None
    condition_immunities: list[str] | None = None

    # Challenge and perception
    cr: str = Field(description="Challenge Rating, e.g. '1/4' or '5'")
    senses: Senses | None = None
    passive_perception: Number | None = None
    passive_insight: Number | None = None
    initiative: Number | None = Field(
        default=None,
        description="Initiative modifier; consumers fall back to the DEX modifier",
    )
    proficiency: Number | None = Field(
        default=None,
        description="Proficiency bonus; computed by the consumer if missing",
    )

    languages: list[str] | None = None
    environments: list[str] | None = None

    # Features
    traits: list[MonsterFeature] | None = None
    actions: list[MonsterFeature] | None = None
    reactions: list[MonsterFeature] | None = None
    legendary_actions: list[MonsterFeature] | None = None
    bonus_actions: list[MonsterFeature] | None = None
    mythic_actions: list[MonsterFeature] | None = None

    # Source
    source: str | None = None
    page: Number | None = None
    link: str | None = None

    tags: list[str] | None = None
    data: ExtensionData | None = Field(default=None, description="Custom data")

    # Images
    image: str | None = Field(default=None, description="Artwork filename or URL")
    token: str | None = Field(default=None, description="Token image filename or URL")

    descr: str | None = Field(
        default=None,
        description="Description. Markdown (GFM) is supported.",
    )

    @field_validator("size", mode="before")
    @classmethod
    def parse_size(cls, value: Any, info: ValidationInfo) -> Any:
        """Parse size codes honoring the strict decoding context."""
        return coerce_enum(Size, value, info)

    def feature_groups(self) -> Iterator[tuple[str, list[MonsterFeature]]]:
        """Iterate over populated feature lists in display order.

        Yields:
            Tuples of (wire name, features), skipping unset lists.
        """
        by_alias = {
            field.alias or name: name for name, field in type(self).model_fields.items()
        }
        for group in FEATURE_GROUPS:
            features = getattr(self, by_alias[group])
            if features is not None:
                yield group, features


__all__ = [
    "FEATURE_GROUPS",
    "Monster",
    "MonsterFeature",
    "Movement",
    "Senses",
]
