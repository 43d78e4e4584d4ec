"""Game configuration model and validation.

A game is configured by a target total, an ordered list of allowed steps and
a win-condition flag. Raw user input (a target field and a comma-separated
steps field) is normalized by validate_config() before a game may start.

Errors:
    InvalidTarget: target is not a positive integer within bounds
    InvalidSteps: steps are empty, non-numeric, non-finite, non-integral
        or non-positive
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dontsay.settings import get_max_target


class ConfigValidationError(ValueError):
    """Base class for configuration errors that block game start."""


class InvalidTarget(ConfigValidationError):
    """Target is not a positive integer."""


class InvalidSteps(ConfigValidationError):
    """Steps list is empty or contains a non-positive or non-finite value."""


class GameConfig(BaseModel):
    """Validated configuration, immutable for the lifetime of a game.

    Attributes:
        target: The total that ends the game (>= 1)
        steps: Allowed move sizes in configured order (duplicates allowed)
        last_move_wins: If False, whoever reaches target loses; if True,
            whoever reaches target wins
    """

    model_config = ConfigDict(frozen=True)

    target: int = Field(ge=1)
    steps: tuple[int, ...] = Field(min_length=1)
    last_move_wins: bool = Field(default=False)

    @field_validator("steps")
    @classmethod
    def steps_positive(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Every step must be strictly positive."""
        for step in v:
            if step <= 0:
                raise ValueError(f"steps must be positive, got {step}")
        return v

    @property
    def distinct_steps(self) -> tuple[int, ...]:
        """Steps with duplicates removed, configured order kept."""
        return tuple(dict.fromkeys(self.steps))


def _to_number(token: str) -> float:
    """Convert one steps token to a number.

    An empty token counts as 0 and an unparseable one as NaN, so both are
    caught by the positivity and finiteness checks that follow.
    """
    token = token.strip()
    if not token:
        return 0.0
    try:
        return float(token)
    except ValueError:
        return math.nan


def parse_steps(steps_input: str | Sequence[float]) -> list[float]:
    """Split a comma-separated steps field into numbers.

    Sequences of numbers are passed through unchanged (as a list).
    """
    if isinstance(steps_input, str):
        return [_to_number(token) for token in steps_input.split(",")]
    return list(steps_input)


def _is_whole(value: int | float) -> bool:
    # ints are compared exactly; converting a huge int to float overflows
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value == int(value)


def _parse_target(target_input: int | float | str) -> int:
    if isinstance(target_input, bool):
        raise InvalidTarget(f"Target must be a positive integer, got {target_input!r}")
    if isinstance(target_input, str):
        text = target_input.strip()
        try:
            value = float(text)
        except ValueError:
            raise InvalidTarget(f"Target must be a positive integer, got {target_input!r}") from None
    elif isinstance(target_input, (int, float)):
        value = target_input
    else:
        raise InvalidTarget(f"Target must be a positive integer, got {target_input!r}")

    if not _is_whole(value):
        raise InvalidTarget(f"Target must be a positive integer, got {target_input!r}")
    target = int(value)
    if target < 1:
        raise InvalidTarget(f"Target must be at least 1, got {target}")
    max_target = get_max_target()
    if target > max_target:
        raise InvalidTarget(f"Target must be at most {max_target}, got {target}")
    return target


def _check_steps(values: list[float]) -> tuple[int, ...]:
    if not values:
        raise InvalidSteps("At least one step is required")
    max_step = get_max_target()
    steps: list[int] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidSteps(f"Steps must be numbers, got {value!r}")
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidSteps("Steps must be finite numbers")
        if not _is_whole(value):
            raise InvalidSteps(f"Steps must be whole numbers, got {value}")
        if value <= 0:
            raise InvalidSteps(f"Steps must be positive, got {int(value)}")
        if value > max_step:
            raise InvalidSteps(f"Steps must be at most {max_step}, got {int(value)}")
        steps.append(int(value))
    return tuple(steps)


def validate_config(
    target_input: int | float | str,
    steps_input: str | Sequence[float],
    last_move_wins: bool = False,
) -> GameConfig:
    """Validate raw configuration input.

    Args:
        target_input: Target total as entered (number or numeric string)
        steps_input: Comma-separated string, or a sequence of numbers
        last_move_wins: Win-condition variant

    Returns:
        A frozen GameConfig

    Raises:
        InvalidTarget: If the target is not a positive integer within bounds
        InvalidSteps: If the steps are empty or contain an invalid value
    """
    target = _parse_target(target_input)
    steps = _check_steps(parse_steps(steps_input))
    return GameConfig(target=target, steps=steps, last_move_wins=last_move_wins)
