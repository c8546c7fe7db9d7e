"""Custom exception hierarchy for gamemstr.

This module defines the exception hierarchy used across the schema library.
All exceptions inherit from GamemstrError, enabling unified error handling
at the application boundary while preserving domain-specific context.

Example:
    >>> from gamemstr.core.exceptions import EntityConstructionError
    >>> raise EntityConstructionError(
    ...     "Missing required fields", entity_type="World", missing_fields=["name"]
    ... )
"""

from __future__ import annotations

from typing import Any


class GamemstrError(Exception):
    """Base exception for all gamemstr errors.

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
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(GamemstrError):
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


# =============================================================================
# Construction Exceptions
# =============================================================================


class EntityConstructionError(GamemstrError):
    """Raised when a request cannot be converted into a concrete entity.

    This covers both absent required fields and field values the target
    entity rejects.
    """

    def __init__(
        self,
        message: str,
        *,
        entity_type: str | None = None,
        missing_fields: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize construction error with entity context.

        Args:
            message: Human-readable error description.
            entity_type: Name of the entity that failed to construct.
            missing_fields: Required fields that were absent.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if entity_type:
            combined_details["entity_type"] = entity_type
        if missing_fields:
            combined_details["missing_fields"] = missing_fields
        self.entity_type = entity_type
        self.missing_fields = list(missing_fields or [])
        super().__init__(message, details=combined_details)


class InvalidIdentifierError(EntityConstructionError):
    """Raised when an empty identifier is supplied where one is required."""

    def __init__(
        self,
        message: str,
        *,
        identifier: str | None = None,
        entity_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid identifier error.

        Args:
            message: Human-readable error description.
            identifier: The rejected identifier value.
            entity_type: Name of the entity being constructed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if identifier is not None:
            combined_details["identifier"] = identifier
        super().__init__(message, entity_type=entity_type, details=combined_details)


# =============================================================================
# Rendering & Record Exceptions
# =============================================================================


class RenderError(GamemstrError):
    """Raised when a value cannot be rendered to text.

    This typically occurs when a negative number reaches the
    number-to-words conversion.
    """

    def __init__(
        self,
        message: str,
        *,
        value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize render error with the offending value.

        Args:
            message: Human-readable error description.
            value: The value that could not be rendered.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if value is not None:
            combined_details["value"] = value
        super().__init__(message, details=combined_details)


class RecordDecodeError(GamemstrError):
    """Raised when a serialized record cannot be decoded into a model."""

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        errors: list[Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize record decode error.

        Args:
            message: Human-readable error description.
            model: Name of the model the record was decoded into.
            errors: Structured validation errors, if any.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if model:
            combined_details["model"] = model
        if errors:
            combined_details["errors"] = errors
        super().__init__(message, details=combined_details)


class MapBoundsError(GamemstrError):
    """Raised when a map cell outside the grid is addressed."""

    def __init__(
        self,
        message: str,
        *,
        x: int,
        y: int,
        width: int,
        height: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize map bounds error with grid context.

        Args:
            message: Human-readable error description.
            x: Requested column.
            y: Requested row.
            width: Map width in cells.
            height: Map height in cells.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        combined_details.update({"x": x, "y": y, "width": width, "height": height})
        super().__init__(message, details=combined_details)


__all__ = [
    "GamemstrError",
    "ConfigurationError",
    "EntityConstructionError",
    "InvalidIdentifierError",
    "RenderError",
    "RecordDecodeError",
    "MapBoundsError",
]
