"""Optimal computer opponent.

Move selection is deterministic and scans the steps in configured order:

1. Play the first step that lands on a losing position for the opponent.
2. If there is none (the computer is already lost under optimal play),
   play the first step that does not overshoot the target.
"""

from __future__ import annotations

from dontsay.engine.losing_table import LosingTable, compute_losing_table
from dontsay.models.config import GameConfig
from dontsay.models.state import GameState
from dontsay.opponents.base import Opponent


def choose_computer_move(
    state: GameState, table: LosingTable, config: GameConfig
) -> int | None:
    """Select a step for the player to move.

    Args:
        state: Current game state
        table: Losing-position table for config
        config: Configuration of the running game

    Returns:
        The chosen step, or None if the game is over or no step fits
    """
    position = state.position
    if state.game_over or position >= config.target:
        return None

    for step in config.steps:
        if position + step <= config.target and table.is_losing[position + step]:
            return step

    for step in config.steps:
        if position + step <= config.target:
            return step

    return None


class OptimalOpponent(Opponent):
    """Plays a winning move whenever one exists.

    The losing-position table is memoized per configuration, so looking it
    up on every turn is cheap.
    """

    def choose_move(self, state: GameState, config: GameConfig) -> int | None:
        table = compute_losing_table(config)
        return choose_computer_move(state, table, config)
