"""Custom exception hierarchy for ttrpg-entities.

All exceptions inherit from EntitiesError, enabling unified error handling
at the application boundary while preserving context about which entity,
field, or file was involved.

Example:
    >>> from ttrpg_entities.core.exceptions import EntityDecodeError
    >>> raise EntityDecodeError("Invalid payload", entity_kind="monster")
"""

from __future__ import annotations

from typing import Any


class EntitiesError(Exception):
    """Base exception for all ttrpg-entities errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(EntitiesError):
    """Raised when library configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(EntitiesError):
    """Raised when data does not fit an entity schema.

    This includes missing required fields, type mismatches, and
    out-of-set values for closed enumerations under strict decoding.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Codec Exceptions
# =============================================================================


class EntityDecodeError(ValidationError):
    """Raised when a payload cannot be decoded into an entity.

    Wraps malformed JSON, unreadable files, and pydantic validation
    failures. The pydantic error list is kept in ``errors``.
    """

    def __init__(
        self,
        message: str,
        *,
        entity_kind: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize decode error with entity context.

        Args:
            message: Human-readable error description.
            entity_kind: Kind of entity being decoded ('monster', 'spell').
            errors: Structured validation errors, one dict per failure.
            source: File path or other origin of the payload.
            details: Optional dictionary containing additional error context.
        """
        self.entity_kind = entity_kind
        self.errors = errors or []
        combined_details = details or {}
        if entity_kind:
            combined_details["entity_kind"] = entity_kind
        if source:
            combined_details["source"] = source
        if self.errors:
            combined_details["error_count"] = len(self.errors)
        super().__init__(message, details=combined_details)


class EntityEncodeError(EntitiesError):
    """Raised when an entity cannot be serialized or written."""

    def __init__(
        self,
        message: str,
        *,
        entity_kind: str | None = None,
        destination: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if entity_kind:
            combined_details["entity_kind"] = entity_kind
        if destination:
            combined_details["destination"] = destination
        super().__init__(message, details=combined_details)


class FixtureNotFoundError(EntitiesError):
    """Raised when a named conformance fixture does not exist."""

    def __init__(
        self,
        message: str,
        *,
        fixture_name: str | None = None,
        available: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if fixture_name:
            combined_details["fixture_name"] = fixture_name
        if available:
            combined_details["available"] = available
        super().__init__(message, details=combined_details)


__all__ = [
    "EntitiesError",
    "ConfigurationError",
    "ValidationError",
    "EntityDecodeError",
    "EntityEncodeError",
    "FixtureNotFoundError",
]
