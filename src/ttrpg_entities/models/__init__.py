"""Pydantic V2 schemas for monster and spell entities.

Submodules:
    enums: Closed enumerations (Size, SpellSchool, SpellRangeType, ...)
    base: Shared EntityModel base and extension data type
    monster: Monster statblock and its nested value types
    spell: Spell definition

Example:
    >>> from ttrpg_entities.models import Monster, Size
    >>> imp = Monster(name="Imp", size=Size.TINY, str=6, dex=17, con=13, int=11, wis=12, cha=14, cr="1")
    >>> imp.size.grid_squares
    0.5
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from ttrpg_entities.models.enums import (
    AreaEffectShape,
    CodedEnum,
    OrdinalEnum,
    Size,
    SpellActivationUnit,
    SpellComponent,
    SpellDurationType,
    SpellDurationUnit,
    SpellRangeType,
    SpellSchool,
)

# =============================================================================
# Base
# =============================================================================
from ttrpg_entities.models.base import (
    EntityModel,
    ExtensionData,
    Number,
)

# =============================================================================
# Entities
# =============================================================================
from ttrpg_entities.models.monster import (
    FEATURE_GROUPS,
    Monster,
    MonsterFeature,
    Movement,
    Senses,
)
from ttrpg_entities.models.spell import Spell


__all__ = [
    # === Enumerations ===
    "CodedEnum",
    "OrdinalEnum",
    "Size",
    "SpellSchool",
    "SpellRangeType",
    "SpellActivationUnit",
    "SpellDurationType",
    "SpellDurationUnit",
    "AreaEffectShape",
    "SpellComponent",
    # === Base ===
    "EntityModel",
    "ExtensionData",
    "Number",
    # === Monster ===
    "FEATURE_GROUPS",
    "Monster",
    "MonsterFeature",
    "Movement",
    "Senses",
    # === Spell ===
    "Spell",
]
