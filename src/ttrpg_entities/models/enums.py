"""Enumeration types for monster and spell entities.

Only genuinely closed value sets live here. Open vocabularies such as
damage types, conditions, languages or classes are plain strings on the
entity models, since game systems are free to extend them.

Each enum's value is the wire code used in JSON payloads (``"T"`` for a
tiny creature, ``"EV"`` for evocation, ``"bonusActions"`` for a bonus
action activation).
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from ttrpg_entities.core.logging import get_logger


logger = get_logger(__name__)

_NORMALIZE_RE = re.compile(r"[\s_\-]+")


def _normalize(text: str) -> str:
    return _NORMALIZE_RE.sub("", text).lower()


class CodedEnum(StrEnum):
    """Base for enumerations whose value is a documented wire code.

    Adds tolerant parsing on top of the plain enum lookup so payloads
    written by hand (``"tiny"``, ``"Evocation"``) can still be read.
    """

    @property
    def display_name(self) -> str:
        """Get human-readable name (e.g., 'Gargantuan' for GARGANTUAN)."""
        return self.name.replace("_", " ").title()

    @classmethod
    def _lenient_lookup(cls, value: Any) -> CodedEnum | None:
        if not isinstance(value, str):
            return None
        key = _normalize(value)
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
        return None

    @classmethod
    def parse(cls, value: Any, *, strict: bool = False) -> Any:
        """Parse a wire value into a member.

        Args:
            value: Raw payload value, or a member of this enum.
            strict: Accept only the exact documented wire code.

        Returns:
            The matching member, or None when lenient parsing finds no match.

        Raises:
            ValueError: If strict parsing finds no exact match.
        """
        if isinstance(value, cls):
            return value
        if strict:
            if isinstance(value, str):
                try:
                    return cls(value)
                except ValueError:
                    pass
            allowed = ", ".join(repr(member.value) for member in cls)
            msg = f"{value!r} is not a valid {cls.__name__} code; expected one of {allowed}"
            raise ValueError(msg)

        member = cls._lenient_lookup(value)
        if member is None:
            logger.warning("enum_value_dropped", enum=cls.__name__, value=value)
        return member


class OrdinalEnum(CodedEnum):
    """Coded enum that also accepts its declaration index when lenient.

    Older producers emitted these sets as zero-based integers
    (``2`` for a ``range`` spell range type).
    """

    @classmethod
    def _lenient_lookup(cls, value: Any) -> CodedEnum | None:
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            return None
        return super()._lenient_lookup(value)


# =============================================================================
# Monster Enumerations
# =============================================================================


class Size(CodedEnum):
    """Creature size, used by monsters and their map tokens."""

    TINY = "T"
    SMALL = "S"
    MEDIUM = "M"
    LARGE = "L"
    HUGE = "H"
    GARGANTUAN = "G"
    COLOSSAL = "C"

    @property
    def grid_squares(self) -> float:
        """Get the token footprint along one side, in grid squares.

        Returns:
            Squares per side (e.g., 1.0 for Medium, 0.5 for Tiny).
        """
        squares = {
            Size.TINY: 0.5,
            Size.SMALL: 0.7,
            Size.MEDIUM: 1.0,
            Size.LARGE: 2.0,
            Size.HUGE: 3.0,
            Size.GARGANTUAN: 4.0,
            Size.COLOSSAL: 8.0,
        }
        return squares[self]


# =============================================================================
# Spell Enumerations
# =============================================================================


class SpellSchool(CodedEnum):
    """School of magic."""

    ABJURATION = "A"
    CONJURATION = "C"
    DIVINATION = "D"
    ENCHANTMENT = "EN"
    EVOCATION = "EV"
    ILLUSION = "I"
    NECROMANCY = "N"
    TRANSMUTATION = "T"


class SpellRangeType(OrdinalEnum):
    """How a spell's range is measured."""

    SELF = "self"
    TOUCH = "touch"
    RANGE = "range"
    SIGHT = "sight"
    UNLIMITED = "unlimited"

    @property
    def display_name(self) -> str:
        if self is SpellRangeType.RANGE:
            return "Specific range"
        if self is SpellRangeType.UNLIMITED:
            return "No limits"
        return super().display_name


class SpellActivationUnit(OrdinalEnum):
    """Unit of a spell's casting time."""

    ACTION = "action"
    BONUS_ACTIONS = "bonusActions"
    REACTION = "reaction"
    HOUR = "hour"
    MINUTE = "minute"

    @property
    def display_name(self) -> str:
        if self is SpellActivationUnit.BONUS_ACTIONS:
            return "Bonus Action"
        return super().display_name


class SpellDurationType(OrdinalEnum):
    """Kind of duration a spell has."""

    CONCENTRATION = "concentration"
    INSTANTANEOUS = "instantaneous"
    TIME = "time"
    SPECIAL = "special"
    DISPEL = "dispel"
    DISPEL_OR_TRIGGER = "dispelOrTrigger"

    @property
    def display_name(self) -> str:
        names = {
            SpellDurationType.TIME: "Specific time",
            SpellDurationType.SPECIAL: "Special time",
            SpellDurationType.DISPEL: "Until dispelled",
            SpellDurationType.DISPEL_OR_TRIGGER: "Until dispelled or triggered",
        }
        return names.get(self, super().display_name)


class SpellDurationUnit(OrdinalEnum):
    """Unit of a timed spell duration."""

    ROUND = "round"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


class AreaEffectShape(OrdinalEnum):
    """Shape of a spell's area effect on a battle map."""

    CONE = "cone"
    CUBE = "cube"
    CYLINDER = "cylinder"
    LINE = "line"
    SPHERE = "sphere"


class SpellComponent(CodedEnum):
    """Common spell component codes.

    A reference vocabulary only: ``Spell.components`` accepts any code a
    game system defines.
    """

    VERBAL = "V"
    SOMATIC = "S"
    MATERIAL = "M"


__all__ = [
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
]
