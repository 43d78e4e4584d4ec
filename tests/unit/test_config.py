"""Unit tests for dontsay.models.config and dontsay.settings.

Tests cover:
- validate_config: target parsing, steps parsing, error types
- GameConfig: direct construction constraints, immutability, distinct_steps
- Settings: environment overrides and fallbacks
"""

import math

import pytest
from pydantic import ValidationError

from dontsay.models.config import (
    ConfigValidationError,
    GameConfig,
    InvalidSteps,
    InvalidTarget,
    parse_steps,
    validate_config,
)
from dontsay.settings import (
    get_computer_delay,
    get_default_steps,
    get_default_target,
    get_log_level,
    get_max_target,
)


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_accepts_default_configuration(self):
        config = validate_config("13", "1,2")
        assert config.target == 13
        assert config.steps == (1, 2)
        assert config.last_move_wins is False

    def test_keeps_configured_order_and_duplicates(self):
        config = validate_config(10, "3, 1, 3")
        assert config.steps == (3, 1, 3)

    def test_accepts_numeric_sequences(self):
        config = validate_config(7.0, [2, 1.0], last_move_wins=True)
        assert config.target == 7
        assert config.steps == (2, 1)
        assert config.last_move_wins is True

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidTarget, ConfigValidationError)
        assert issubclass(InvalidSteps, ConfigValidationError)
        assert issubclass(ConfigValidationError, ValueError)

    @pytest.mark.parametrize(
        "target",
        [0, -3, "0", "abc", "", 2.5, "1.5", math.inf, math.nan, True, None, 10**400, -(10**400)],
    )
    def test_rejects_bad_target(self, target):
        with pytest.raises(InvalidTarget):
            validate_config(target, "1,2")

    def test_rejects_target_above_maximum(self, monkeypatch):
        monkeypatch.setenv("DONTSAY_MAX_TARGET", "100")
        validate_config(100, "1")
        with pytest.raises(InvalidTarget, match="at most 100"):
            validate_config(101, "1")

    def test_empty_sequence_is_invalid_steps(self):
        with pytest.raises(InvalidSteps):
            validate_config(13, [])

    @pytest.mark.parametrize("steps", ["", "1,,2", "1,0", "-1,2", "a,2", "1,inf", "1.5", "nan"])
    def test_rejects_bad_steps(self, steps):
        with pytest.raises(InvalidSteps):
            validate_config(13, steps)

    @pytest.mark.parametrize("steps", [[10**400], [1, -(10**400)], [1e300], "1,20000"])
    def test_rejects_oversized_steps(self, steps):
        with pytest.raises(InvalidSteps):
            validate_config(13, steps)

    def test_step_may_exceed_target(self):
        assert validate_config(5, [7]).steps == (7,)

    def test_target_checked_before_steps(self):
        with pytest.raises(InvalidTarget):
            validate_config(0, "")


class TestParseSteps:
    """Tests for parse_steps()."""

    def test_splits_on_commas_and_strips(self):
        assert parse_steps(" 1 , 2,3 ") == [1.0, 2.0, 3.0]

    def test_empty_and_garbage_tokens(self):
        values = parse_steps(",x")
        assert values[0] == 0.0
        assert math.isnan(values[1])


class TestGameConfig:
    """Tests for the GameConfig model."""

    def test_direct_construction_enforces_invariants(self):
        with pytest.raises(ValidationError):
            GameConfig(target=0, steps=(1,))
        with pytest.raises(ValidationError):
            GameConfig(target=5, steps=())
        with pytest.raises(ValidationError):
            GameConfig(target=5, steps=(1, 0))

    def test_is_frozen(self, classic_config):
        with pytest.raises(ValidationError):
            classic_config.target = 20

    def test_distinct_steps(self):
        config = GameConfig(target=9, steps=(2, 1, 2, 3, 1))
        assert config.distinct_steps == (2, 1, 3)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        assert get_computer_delay() == pytest.approx(0.7)
        assert get_default_target() == 13
        assert get_default_steps() == "1,2"
        assert get_max_target() == 10_000
        assert get_log_level() == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("DONTSAY_COMPUTER_DELAY_MS", "250")
        monkeypatch.setenv("DONTSAY_DEFAULT_TARGET", "21")
        monkeypatch.setenv("DONTSAY_DEFAULT_STEPS", "1,2,3")
        monkeypatch.setenv("DONTSAY_LOG_LEVEL", "debug")
        assert get_computer_delay() == pytest.approx(0.25)
        assert get_default_target() == 21
        assert get_default_steps() == "1,2,3"
        assert get_log_level() == "DEBUG"

    def test_malformed_number_falls_back(self, monkeypatch):
        monkeypatch.setenv("DONTSAY_COMPUTER_DELAY_MS", "soon")
        assert get_computer_delay() == pytest.approx(0.7)
