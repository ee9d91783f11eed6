"""Decoding and encoding of entity payloads.

Decoding accepts a mapping or JSON text, ignores keys the schema does not
know, and parses closed enumerations strictly or leniently. Encoding
writes wire (camelCase) names and omits every unset optional field.

Example:
    >>> from ttrpg_entities.codec import decode_spell, encode
    >>> spell = decode_spell({"name": "Light", "components": ["V", "M"]})
    >>> encode(spell, compact=True)
    '{"name":"Light","components":["V","M"]}'
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path
from typing import Any, cast

from pydantic import ValidationError as PydanticValidationError

from ttrpg_entities.core.config import get_settings
from ttrpg_entities.core.exceptions import EntityDecodeError, EntityEncodeError
from ttrpg_entities.core.logging import get_logger
from ttrpg_entities.models.base import EntityModel
from ttrpg_entities.models.monster import Monster
from ttrpg_entities.models.spell import Spell


logger = get_logger(__name__)

Payload = Mapping[str, Any] | str | bytes


class EntityKind(StrEnum):
    """Top-level entity kinds that can be decoded."""

    MONSTER = "monster"
    SPELL = "spell"

    @property
    def model(self) -> type[EntityModel]:
        """Get the schema model for this kind."""
        models: dict[EntityKind, type[EntityModel]] = {
            EntityKind.MONSTER: Monster,
            EntityKind.SPELL: Spell,
        }
        return models[self]

    @classmethod
    def of(cls, entity: EntityModel) -> EntityKind:
        """Get the kind of an entity instance.

        Raises:
            TypeError: If the instance is not a top-level entity.
        """
        for kind in cls:
            if isinstance(entity, kind.model):
                return kind
        msg = f"{type(entity).__name__} is not a top-level entity"
        raise TypeError(msg)


def resolve_kind(kind: EntityKind | str) -> EntityKind:
    """Convert a kind name to EntityKind, raising EntityDecodeError if unknown."""
    try:
        return EntityKind(kind)
    except ValueError as exc:
        allowed = ", ".join(k.value for k in EntityKind)
        raise EntityDecodeError(
            f"Unknown entity kind {kind!r}; expected one of {allowed}",
            entity_kind=str(kind),
        ) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _parse_json(payload: Any, kind: EntityKind, source: str | None) -> Any:
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            return json.loads(payload, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise EntityDecodeError(
                f"Malformed JSON: {exc.msg} at line {exc.lineno} column {exc.colno}",
                entity_kind=kind.value,
                source=source,
            ) from exc
        except ValueError as exc:
            raise EntityDecodeError(
                f"Malformed JSON: {exc}",
                entity_kind=kind.value,
                source=source,
            ) from exc
    return payload


def _validate(kind: EntityKind, data: Any, strict: bool, source: str | None) -> EntityModel:
    if not isinstance(data, Mapping):
        raise EntityDecodeError(
            f"A {kind.value} payload must be a JSON object, got {type(data).__name__}",
            entity_kind=kind.value,
            source=source,
        )

    model = kind.model
    unknown = sorted(model.unknown_keys(data))
    if unknown:
        logger.warning("unknown_keys_ignored", kind=kind.value, keys=unknown, source=source)

    try:
        entity = model.model_validate(data, context={"strict": strict})
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False)
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"]) or kind.value
        raise EntityDecodeError(
            f"Invalid {kind.value} payload: {location}: {first['msg']}",
            entity_kind=kind.value,
            errors=errors,
            source=source,
        ) from exc

    logger.debug("entity_decoded", kind=kind.value, name=entity.name, strict=strict)
    return entity


def decode(
    kind: EntityKind | str,
    payload: Payload,
    *,
    strict: bool | None = None,
    source: str | None = None,
) -> EntityModel:
    """Decode a payload into an entity of the given kind.

    Args:
        kind: 'monster' or 'spell'.
        payload: Mapping, JSON text or JSON bytes holding one entity.
        strict: Reject non-canonical enumeration values. Defaults to
            ``Settings.strict_enums``.
        source: Optional origin (e.g. a file path) for error reporting.

    Returns:
        The decoded Monster or Spell.

    Raises:
        EntityDecodeError: If the payload is malformed or does not fit the schema.
    """
    entity_kind = resolve_kind(kind)
    if strict is None:
        strict = get_settings().strict_enums
    data = _parse_json(payload, entity_kind, source)
    return _validate(entity_kind, data, strict, source)


def decode_all(
    kind: EntityKind | str,
    payload: Payload | list[Any],
    *,
    strict: bool | None = None,
    source: str | None = None,
) -> list[EntityModel]:
    """Decode a single entity or a JSON array of entities.

    Returns:
        Decoded entities in payload order.

    Raises:
        EntityDecodeError: On the first entry that fails to decode; its
            ``details`` carry the failing ``index``.
    """
    entity_kind = resolve_kind(kind)
    if strict is None:
        strict = get_settings().strict_enums
    data = _parse_json(payload, entity_kind, source)
    if not isinstance(data, list):
        return [_validate(entity_kind, data, strict, source)]

    entities: list[EntityModel] = []
    for index, item in enumerate(data):
        try:
            entities.append(_validate(entity_kind, item, strict, source))
        except EntityDecodeError as exc:
            raise EntityDecodeError(
                f"Entry {index}: {exc.message}",
                entity_kind=entity_kind.value,
                errors=exc.errors,
                source=source,
                details={"index": index},
            ) from exc
    return entities


def decode_monster(payload: Payload, *, strict: bool | None = None) -> Monster:
    """Decode a monster payload. See :func:`decode`."""
    return cast(Monster, decode(EntityKind.MONSTER, payload, strict=strict))


def decode_spell(payload: Payload, *, strict: bool | None = None) -> Spell:
    """Decode a spell payload. See :func:`decode`."""
    return cast(Spell, decode(EntityKind.SPELL, payload, strict=strict))


def to_payload(entity: EntityModel) -> dict[str, Any]:
    """Convert an entity to a JSON-compatible dict with wire names.

    Unset optional fields are omitted rather than set to None.
    """
    return entity.model_dump(mode="json", by_alias=True)


def encode(
    entity: EntityModel,
    *,
    indent: int | None = None,
    compact: bool = False,
) -> str:
    """Encode an entity as JSON text.

    Args:
        entity: Entity to encode.
        indent: Indentation; defaults to ``Settings.json_indent``.
        compact: Emit single-line JSON regardless of indent settings.

    Returns:
        JSON text with wire names and unset fields omitted.
    """
    if compact:
        indent = None
    elif indent is None:
        indent = get_settings().json_indent
    text = entity.model_dump_json(by_alias=True, indent=indent)
    logger.debug("entity_encoded", kind=type(entity).__name__, size=len(text))
    return text


def load(
    path: str | Path,
    kind: EntityKind | str,
    *,
    strict: bool | None = None,
) -> EntityModel:
    """Read and decode one entity from a JSON file.

    Raises:
        EntityDecodeError: If the file cannot be read or decoded.
    """
    return decode(kind, _read(path, kind), strict=strict, source=str(path))


def load_all(
    path: str | Path,
    kind: EntityKind | str,
    *,
    strict: bool | None = None,
) -> list[EntityModel]:
    """Read and decode a file holding one entity or an array of them."""
    return decode_all(kind, _read(path, kind), strict=strict, source=str(path))


def _read(path: str | Path, kind: EntityKind | str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise EntityDecodeError(
            f"Cannot read payload file: {exc.strerror or exc}",
            entity_kind=str(kind),
            source=str(path),
        ) from exc


def dump(entity: EntityModel, path: str | Path, *, indent: int | None = None) -> Path:
    """Encode an entity and write it to a JSON file.

    Returns:
        The written path.

    Raises:
        EntityEncodeError: If the file cannot be written.
    """
    target = Path(path)
    text = encode(entity, indent=indent)
    try:
        target.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise EntityEncodeError(
            f"Cannot write payload file: {exc.strerror or exc}",
            entity_kind=EntityKind.of(entity).value,
            destination=str(target),
        ) from exc
    logger.info("entity_written", kind=EntityKind.of(entity).value, path=str(target))
    return target


__all__ = [
    "EntityKind",
    "Payload",
    "decode",
    "decode_all",
    "decode_monster",
    "decode_spell",
    "dump",
    "encode",
    "load",
    "load_all",
    "resolve_kind",
    "to_payload",
]
