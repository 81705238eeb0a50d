"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from endless_realms.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    GameEngineError,
    InvalidGameStateError,
    RealmError,
)


class TestRealmError:
    """Tests for the base RealmError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = RealmError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = RealmError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        exc = RealmError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "RealmError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestEngineErrors:
    """Tests for engine exception context."""

    def test_dice_roll_error_expression(self) -> None:
        exc = DiceRollError("Bad dice", expression="1dX")
        assert exc.details["expression"] == "1dX"
        assert isinstance(exc, GameEngineError)

    def test_invalid_game_state_context(self) -> None:
        exc = InvalidGameStateError(
            "Cannot equip",
            current_state="consumable",
            expected_states=["weapon", "armor"],
        )
        assert exc.details["current_state"] == "consumable"
        assert exc.details["expected_states"] == ["weapon", "armor"]

    def test_configuration_error_key(self) -> None:
        exc = ConfigurationError("Bad value", config_key="guardian_range")
        assert exc.details == {"config_key": "guardian_range"}
        assert not isinstance(exc, GameEngineError)

    @pytest.mark.parametrize(
        "exc_class",
        [GameEngineError, InvalidGameStateError, DiceRollError, ConfigurationError],
    )
    def test_all_inherit_from_base(self, exc_class: type[RealmError]) -> None:
        """Every application error can be caught at one boundary."""
        with pytest.raises(RealmError):
            raise exc_class("boom")
