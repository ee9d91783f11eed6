"""Shared base model and type aliases for entity schemas.

Every entity model maps snake_case attributes to the camelCase keys used
on the wire, ignores keys it does not know, and serializes without the
optional fields that were never set.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    JsonValue,
    SerializerFunctionWrapHandler,
    StrictFloat,
    StrictInt,
    ValidationInfo,
    model_serializer,
)
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

from ttrpg_entities.models.enums import CodedEnum


# =============================================================================
# Type Definitions
# =============================================================================

# Integral payload values stay ints; bools and numeric strings are rejected
Number = StrictInt | StrictFloat

# Consumer-defined payload: null, bool, number, string, ordered map or list
ExtensionData = dict[str, JsonValue]


def coerce_enum(enum_cls: type[CodedEnum], value: Any, info: ValidationInfo) -> Any:
    """Parse a closed-enumeration field according to the decode context.

    The context key ``strict`` selects strict parsing; without a context
    values are parsed leniently.

    Args:
        enum_cls: Enumeration the field is typed with.
        value: Raw input value.
        info: Pydantic validation info carrying the context.

    Returns:
        The parsed member, or None when the value is unset or dropped.
    """
    if value is None:
        return None
    context = info.context or {}
    return enum_cls.parse(value, strict=bool(context.get("strict", False)))


class EntityModel(BaseModel):
    """Base class for entity schemas and their nested value types."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        allow_inf_nan=False,
    )

    @model_serializer(mode="wrap")
    def serialize_set_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Unset optionals are omitted, never written as null
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def unknown_keys(cls, data: Mapping[str, Any], prefix: str = "") -> list[str]:
        """Get payload keys this model would ignore, nested models included.

        Args:
            data: Raw payload mapping.
            prefix: Dotted path of ``data`` inside the outer payload.

        Returns:
            Dotted paths of the ignored keys, e.g. ``speed.teleport``.
        """
        fields: dict[str, FieldInfo] = {}
        for name, field in cls.model_fields.items():
            fields[name] = field
            if field.alias:
                fields[field.alias] = field

        unknown: list[str] = []
        for key, value in data.items():
            path = f"{prefix}{key}"
            field = fields.get(key)
            if field is None:
                unknown.append(path)
                continue
            nested = _nested_model(field.annotation)
            if nested is None:
                continue
            if isinstance(value, Mapping):
                unknown.extend(nested.unknown_keys(value, f"{path}."))
            elif isinstance(value, list):
                for index, item in enumerate(value):
                    if isinstance(item, Mapping):
                        unknown.extend(nested.unknown_keys(item, f"{path}.{index}."))
        return unknown


def _nested_model(annotation: Any) -> type[EntityModel] | None:
    if get_origin(annotation) is None and isinstance(annotation, type):
        return annotation if issubclass(annotation, EntityModel) else None
    for arg in get_args(annotation):
        nested = _nested_model(arg)
        if nested is not None:
            return nested
    return None


__all__ = [
    "EntityModel",
    "ExtensionData",
    "Number",
    "coerce_enum",
]
