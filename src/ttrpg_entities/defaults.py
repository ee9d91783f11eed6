"""Documented defaults for unset entity fields.

Decoding never fills these in: an absent field stays unset so producers
and consumers can tell "not given" from "given as the default". Consumers
that want the documented values call :func:`with_defaults` explicitly.

Derived values (experience from ``cr``, proficiency bonus, initiative
from the DEX modifier) are game-system rules and are not computed here.
"""

from __future__ import annotations

from typing import Any, TypeVar

from ttrpg_entities.models.enums import Size, SpellDurationType, SpellRangeType
from ttrpg_entities.models.monster import Monster
from ttrpg_entities.models.spell import Spell


DEFAULT_SIZE = Size.MEDIUM
DEFAULT_SPELL_LEVEL = 0
DEFAULT_RANGE_TYPE = SpellRangeType.RANGE
DEFAULT_DURATION_TYPE = SpellDurationType.INSTANTANEOUS

EntityT = TypeVar("EntityT", Monster, Spell)


def with_defaults(entity: EntityT) -> EntityT:
    """Return a copy with documented defaults applied to unset fields.

    Monster: ``size`` -> medium.
    Spell: ``level`` -> 0, ``range_type`` -> range,
    ``duration_type`` -> instantaneous.

    Args:
        entity: Monster or Spell.

    Returns:
        The same instance if nothing was unset, otherwise an updated copy.

    Raises:
        TypeError: If ``entity`` is neither a Monster nor a Spell.
    """
    update: dict[str, Any] = {}
    if isinstance(entity, Monster):
        if entity.size is None:
            update["size"] = DEFAULT_SIZE
    elif isinstance(entity, Spell):
        if entity.level is None:
            update["level"] = DEFAULT_SPELL_LEVEL
        if entity.range_type is None:
            update["range_type"] = DEFAULT_RANGE_TYPE
        if entity.duration_type is None:
            update["duration_type"] = DEFAULT_DURATION_TYPE
    else:
        msg = f"Cannot apply defaults to {type(entity).__name__}"
        raise TypeError(msg)

    if not update:
        return entity
    return entity.model_copy(update=update)


__all__ = [
    "DEFAULT_SIZE",
    "DEFAULT_SPELL_LEVEL",
    "DEFAULT_RANGE_TYPE",
    "DEFAULT_DURATION_TYPE",
    "with_defaults",
]
