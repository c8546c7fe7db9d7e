"""Base models shared by every gamemstr value object and entity.

Value objects are frozen and compared structurally. Entities carry an
opaque string identifier that is generated on creation and cannot be
reassigned afterwards.
"""

from __future__ import annotations

from typing import Annotated, Any, Self
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gamemstr.core.exceptions import InvalidIdentifierError


# =============================================================================
# Type Definitions
# =============================================================================

Identifier = Annotated[str, Field(min_length=1, description="Opaque unique identifier")]


def new_identifier() -> str:
    """Generate a fresh opaque identifier.

    Returns:
        A random UUID4 in canonical string form.
    """
    return str(uuid4())


def _reject_blank_identifier(value: str) -> str:
    if not value.strip():
        msg = "Identifier must not be blank"
        raise ValueError(msg)
    return value


# =============================================================================
# Base Models
# =============================================================================


class ValueModel(BaseModel):
    """Base class for immutable value objects owned by an aggregate."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class Entity(BaseModel):
    """Base class for all identified entities.

    Attributes:
        id: Unique identifier, assigned once at creation.
        name: Display name of the entity.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    id: Identifier = Field(
        default_factory=new_identifier,
        frozen=True,
        description="Unique identifier for this entity",
    )
    name: str = Field(
        min_length=1,
        description="Display name of the entity",
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        """Reject identifiers made only of whitespace."""
        return _reject_blank_identifier(value)

    @classmethod
    def with_id(cls, identifier: str, **fields: Any) -> Self:
        """Construct an entity under a caller-supplied identifier.

        Args:
            identifier: The identifier to assign. Must be non-blank.
            **fields: Remaining entity fields.

        Returns:
            The constructed entity.

        Raises:
            InvalidIdentifierError: If identifier is empty or blank.
            pydantic.ValidationError: If any other field is invalid.
        """
        if not isinstance(identifier, str) or not identifier.strip():
            raise InvalidIdentifierError(
                "Entity identifier must be a non-empty string",
                identifier=identifier,
                entity_type=cls.__name__,
            )
        return cls(id=identifier, **fields)


class IdentifiedValue(BaseModel):
    """Base class for small identified records nested inside an aggregate.

    Attributes:
        id: Unique identifier, assigned once at creation.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    id: Identifier = Field(
        default_factory=new_identifier,
        frozen=True,
        description="Unique identifier",
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        """Reject identifiers made only of whitespace."""
        return _reject_blank_identifier(value)


__all__ = [
    "Identifier",
    "new_identifier",
    "ValueModel",
    "Entity",
    "IdentifiedValue",
]
