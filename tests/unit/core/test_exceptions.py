"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from gamemstr.core.exceptions import (
    ConfigurationError,
    EntityConstructionError,
    GamemstrError,
    InvalidIdentifierError,
    MapBoundsError,
    RecordDecodeError,
    RenderError,
)


class TestGamemstrError:
    """Tests for the base GamemstrError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = GamemstrError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = GamemstrError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = GamemstrError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "GamemstrError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConstructionExceptions:
    """Tests for entity construction exceptions."""

    def test_missing_fields(self) -> None:
        """Test EntityConstructionError records missing fields."""
        exc = EntityConstructionError(
            "Missing required fields",
            entity_type="World",
            missing_fields=["name", "description"],
        )
        assert exc.entity_type == "World"
        assert exc.missing_fields == ["name", "description"]
        assert exc.details["missing_fields"] == ["name", "description"]

    def test_missing_fields_default_empty(self) -> None:
        """Test missing_fields defaults to an empty list."""
        exc = EntityConstructionError("Invalid values", entity_type="Spell")
        assert exc.missing_fields == []
        assert "missing_fields" not in exc.details

    def test_invalid_identifier(self) -> None:
        """Test InvalidIdentifierError inherits construction context."""
        exc = InvalidIdentifierError("Blank id", identifier="  ", entity_type="Item")
        assert isinstance(exc, EntityConstructionError)
        assert exc.details["identifier"] == "  "
        assert exc.entity_type == "Item"


class TestOtherExceptions:
    """Tests for configuration, rendering, record and map exceptions."""

    @pytest.mark.parametrize(
        "exc",
        [
            ConfigurationError("bad", config_key="x"),
            RenderError("bad", value=-1),
            RecordDecodeError("bad", model="World"),
            MapBoundsError("bad", x=5, y=0, width=3, height=3),
        ],
    )
    def test_inheritance(self, exc: GamemstrError) -> None:
        """Test every library exception derives from GamemstrError."""
        assert isinstance(exc, GamemstrError)
        assert isinstance(exc, Exception)

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Invalid config", config_key="default_reach_ft")
        assert exc.details["config_key"] == "default_reach_ft"

    def test_render_error_value(self) -> None:
        """Test RenderError records the offending value."""
        exc = RenderError("Negative", value=-3)
        assert exc.details["value"] == -3

    def test_record_decode_error(self) -> None:
        """Test RecordDecodeError with model and errors."""
        exc = RecordDecodeError(
            "Invalid record",
            model="Creature",
            errors=[{"loc": ("name",), "msg": "Field required"}],
        )
        assert exc.details["model"] == "Creature"
        assert len(exc.details["errors"]) == 1

    def test_map_bounds_error(self) -> None:
        """Test MapBoundsError records grid context."""
        exc = MapBoundsError("Out of bounds", x=4, y=1, width=4, height=2)
        assert exc.details == {"x": 4, "y": 1, "width": 4, "height": 2}
