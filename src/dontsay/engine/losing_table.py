"""Losing-position table for the subtraction game.

For a fixed configuration, is_losing[p] tells whether the player about to
move from total p loses against optimal play. The table is filled backwards
from the target:

    winning_from[p] = any(p + s <= target and not winning_from[p + s] for s in steps)
    is_losing[p] = not winning_from[p]

The terminal entry depends on the win condition. When reaching the target
loses, the player facing the target has already won (is_losing[target] is
False). When reaching the target wins, the player facing it has already lost
(is_losing[target] is True).

Tables are memoized by (target, steps, last_move_wins).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dontsay.models.config import GameConfig


class LosingTable(BaseModel):
    """Read-only losing-position table for one configuration.

    Attributes:
        target: Target total of the configuration
        steps: Steps of the configuration, in configured order
        last_move_wins: Win-condition variant the table was derived for
        is_losing: One entry per total 0..target inclusive
    """

    model_config = ConfigDict(frozen=True)

    target: int = Field(ge=1)
    steps: tuple[int, ...]
    last_move_wins: bool = False
    is_losing: tuple[bool, ...]

    @model_validator(mode="after")
    def check_length(self) -> LosingTable:
        if len(self.is_losing) != self.target + 1:
            raise ValueError(
                f"is_losing must have {self.target + 1} entries, got {len(self.is_losing)}"
            )
        return self

    def __getitem__(self, position: int) -> bool:
        return self.is_losing[position]

    def __len__(self) -> int:
        return len(self.is_losing)

    def losing_positions(self) -> list[int]:
        """Totals below the target that are losing for the mover."""
        return [p for p in range(self.target) if self.is_losing[p]]

    def winning_steps(self, position: int) -> list[int]:
        """Steps from position that leave the opponent in a losing position.

        Duplicated steps are reported once, in configured order.
        """
        return [
            step
            for step in dict.fromkeys(self.steps)
            if position + step <= self.target and self.is_losing[position + step]
        ]

    @property
    def first_player_wins(self) -> bool:
        """Whether the player moving first from 0 can force a win."""
        return not self.is_losing[0]


@lru_cache(maxsize=128)
def _solve(target: int, steps: tuple[int, ...], last_move_wins: bool) -> tuple[bool, ...]:
    winning_from = [False] * (target + 1)
    winning_from[target] = not last_move_wins
    for p in range(target - 1, -1, -1):
        winning_from[p] = any(
            p + step <= target and not winning_from[p + step] for step in steps
        )
    return tuple(not w for w in winning_from)


def compute_losing_table(config: GameConfig) -> LosingTable:
    """Compute the losing-position table for a configuration.

    Args:
        config: Validated game configuration

    Returns:
        LosingTable with entries for totals 0..target
    """
    is_losing = _solve(config.target, config.steps, config.last_move_wins)
    return LosingTable(
        target=config.target,
        steps=config.steps,
        last_move_wins=config.last_move_wins,
        is_losing=is_losing,
    )


def clear_table_cache() -> None:
    """Drop all memoized tables."""
    _solve.cache_clear()
