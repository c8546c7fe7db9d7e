"""Serialized record representation of models.

Records are JSON-compatible dictionaries keyed by field name. Union
variants carry their ``kind`` tag, absent optionals are explicit nulls,
and derived values (ability modifiers, hit point totals) are written
out for readers but recomputed on decode.

Example:
    >>> record = encode(world)
    >>> decode(World, record) == world
    True
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from gamemstr.core.constants import DECODE_CONTEXT_KEY
from gamemstr.core.exceptions import RecordDecodeError
from gamemstr.core.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_DECODE_CONTEXT: dict[str, Any] = {DECODE_CONTEXT_KEY: True}


def encode(model: BaseModel) -> dict[str, Any]:
    """Encode a model as a JSON-compatible record."""
    return model.model_dump(mode="json")


def decode(model_type: type[ModelT], record: dict[str, Any]) -> ModelT:
    """Decode a record into a model.

    Args:
        model_type: The model class to decode into.
        record: The record, as produced by :func:`encode`.

    Returns:
        The decoded model.

    Raises:
        RecordDecodeError: If the record does not describe a valid model.
    """
    try:
        return model_type.model_validate(record, context=_DECODE_CONTEXT)
    except ValidationError as exc:
        logger.warning(
            "Record decode failed",
            model=model_type.__name__,
            error_count=exc.error_count(),
        )
        raise RecordDecodeError(
            f"Invalid {model_type.__name__} record",
            model=model_type.__name__,
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


def to_json(model: BaseModel, indent: int | None = None) -> str:
    """Serialize a model to a JSON string."""
    return model.model_dump_json(indent=indent)


def from_json(model_type: type[ModelT], text: str | bytes) -> ModelT:
    """Deserialize a model from a JSON string.

    Raises:
        RecordDecodeError: If the text is not valid JSON or not a valid model.
    """
    try:
        return model_type.model_validate_json(text, context=_DECODE_CONTEXT)
    except ValidationError as exc:
        logger.warning(
            "Record decode failed",
            model=model_type.__name__,
            error_count=exc.error_count(),
        )
        raise RecordDecodeError(
            f"Invalid {model_type.__name__} JSON",
            model=model_type.__name__,
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


__all__ = [
    "encode",
    "decode",
    "to_json",
    "from_json",
]
