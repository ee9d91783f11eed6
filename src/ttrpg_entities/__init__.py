"""ttrpg-entities - data-shape contracts for tabletop RPG monsters and spells.

The package defines the payload shapes a game-system application reads
and writes: a Monster statblock and a Spell definition, their nested
value types and closed enumerations. It stores what it is given. Defaults,
derived statistics, slugs and identifiers belong to the consumer.

Example:
    >>> from ttrpg_entities import decode_monster, encode, load_fixture
    >>> monster = decode_monster(load_fixture("monster"))
    >>> monster.size
    <Size.MEDIUM: 'M'>
    >>> print(encode(monster, compact=True)[:40])
    {"id":"8914a43d-5202-4000-a66e-ef66a220b
"""

from __future__ import annotations

__version__ = "0.1.0"

from ttrpg_entities.codec import (
    EntityKind,
    decode,
    decode_all,
    decode_monster,
    decode_spell,
    dump,
    encode,
    load,
    load_all,
    to_payload,
)
from ttrpg_entities.core import (
    ConfigurationError,
    EntitiesError,
    EntityDecodeError,
    EntityEncodeError,
    FixtureNotFoundError,
    ValidationError,
)
from ttrpg_entities.defaults import with_defaults
from ttrpg_entities.fixtures import fixture_names, load_fixture
from ttrpg_entities.models import (
    AreaEffectShape,
    ExtensionData,
    Monster,
    MonsterFeature,
    Movement,
    Senses,
    Size,
    Spell,
    SpellActivationUnit,
    SpellComponent,
    SpellDurationType,
    SpellDurationUnit,
    SpellRangeType,
    SpellSchool,
)
from ttrpg_entities.schema import json_schema


__all__ = [
    "__version__",
    # Models
    "Monster",
    "MonsterFeature",
    "Movement",
    "Senses",
    "Spell",
    "ExtensionData",
    # Enumerations
    "Size",
    "SpellSchool",
    "SpellRangeType",
    "SpellActivationUnit",
    "SpellDurationType",
    "SpellDurationUnit",
    "AreaEffectShape",
    "SpellComponent",
    # Codec
    "EntityKind",
    "decode",
    "decode_all",
    "decode_monster",
    "decode_spell",
    "encode",
    "to_payload",
    "load",
    "load_all",
    "dump",
    "json_schema",
    "with_defaults",
    # Fixtures
    "fixture_names",
    "load_fixture",
    # Exceptions
    "EntitiesError",
    "ConfigurationError",
    "ValidationError",
    "EntityDecodeError",
    "EntityEncodeError",
    "FixtureNotFoundError",
]
