"""JSON Schema export for the entity wire shapes."""

from __future__ import annotations

from typing import Any

from ttrpg_entities.codec import EntityKind, resolve_kind


def json_schema(kind: EntityKind | str) -> dict[str, Any]:
    """Build the JSON Schema describing a payload of the given kind.

    Property names are the camelCase wire names.

    Args:
        kind: 'monster' or 'spell'.

    Returns:
        JSON Schema document as a dict.

    Raises:
        EntityDecodeError: If ``kind`` is not a known entity kind.
    """
    return resolve_kind(kind).model.model_json_schema(by_alias=True)


__all__ = ["json_schema"]
