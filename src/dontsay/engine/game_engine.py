"""Core game engine for Don't Say N!.

This module implements the move/turn state machine. The pure transitions
(start_game, apply_move, reset) operate on GameState values and never raise
for bad moves; they return a MoveResult describing why a move was refused.
The GameEngine class wraps them into the phase machine a front end drives:

    CONFIGURING -> MODE_SELECTION -> IN_PROGRESS -> GAME_OVER

with a restart from any phase back to CONFIGURING.

Move Sequence:
1. VALIDATE - game in progress, step configured, no overshoot
2. ADVANCE - add the step to the running total
3. CHECK ENDING - total == target ends the game and attributes the loss
4. HAND OVER - otherwise the other player becomes active
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from dontsay.models.config import GameConfig, validate_config
from dontsay.models.state import (
    GameMode,
    GamePhase,
    GameState,
    MoveRecord,
    Player,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dontsay.opponents.base import Opponent

logger = logging.getLogger(__name__)


class InvalidMove(Enum):
    """Why a move was refused."""

    NOT_IN_PROGRESS = "not_in_progress"  # No mode chosen yet
    GAME_OVER = "game_over"
    UNKNOWN_STEP = "unknown_step"  # Step is not one of the configured steps
    OVERSHOOT = "overshoot"  # position + step > target


@dataclass
class MoveResult:
    """Result of attempting a move.

    Attributes:
        success: Whether the move was applied
        state: The state after the attempt (unchanged when refused)
        error: Reason for refusal (None on success)
        record: The applied move (None when refused)
    """

    success: bool
    state: GameState
    error: Optional[InvalidMove] = None
    record: Optional[MoveRecord] = None


def start_game(config: GameConfig, mode: GameMode) -> GameState:
    """Create the initial in-progress state for a configuration and mode."""
    return GameState(
        position=0,
        target=config.target,
        mode=mode,
        active_player=mode.first_player,
    )


def reset() -> GameState:
    """Return the pre-configuration state."""
    return GameState()


def _refuse(state: GameState, error: InvalidMove, step: object) -> MoveResult:
    logger.debug(f"Refused move {step!r} at position {state.position}: {error.value}")
    return MoveResult(success=False, state=state, error=error)


def apply_move(state: GameState, step: int, config: GameConfig) -> MoveResult:
    """Apply one move to a state.

    Invalid moves are refused without touching the state: no game in
    progress, game already over, a step that is not configured, or a step
    that would overshoot the target.

    Args:
        state: Current game state
        step: Step value to add
        config: Configuration of the running game

    Returns:
        MoveResult with the new state on success
    """
    if state.mode is None:
        return _refuse(state, InvalidMove.NOT_IN_PROGRESS, step)
    if state.game_over:
        return _refuse(state, InvalidMove.GAME_OVER, step)
    if isinstance(step, bool) or not isinstance(step, int) or step not in config.steps:
        return _refuse(state, InvalidMove.UNKNOWN_STEP, step)
    if state.position + step > config.target:
        return _refuse(state, InvalidMove.OVERSHOOT, step)

    mover = state.active_player
    new_position = state.position + step
    record = MoveRecord(
        player=mover,
        step=step,
        position_before=state.position,
        position_after=new_position,
    )

    if new_position == config.target:
        loser = state.mode.other_player(mover) if config.last_move_wins else mover
        new_state = state.model_copy(
            update={
                "position": new_position,
                "game_over": True,
                "loser": loser,
                "moves_made": state.moves_made + 1,
            }
        )
    else:
        new_state = state.model_copy(
            update={
                "position": new_position,
                "active_player": state.mode.other_player(mover),
                "moves_made": state.moves_made + 1,
            }
        )
    return MoveResult(success=True, state=new_state, record=record)


class GameEngine:
    """Phase machine for one session of play.

    The GameEngine handles:
    - Configuration validation and losing-table derivation
    - Mode selection and game start
    - Move application and turn hand-over
    - Restart back to configuration

    Attributes:
        phase: Current phase of the state machine
        config: Active configuration (None while configuring)
        state: Current game state
        history: Moves applied in the current game
    """

    def __init__(self) -> None:
        self.phase = GamePhase.CONFIGURING
        self.config: Optional[GameConfig] = None
        self.state = reset()
        self.history: list[MoveRecord] = []
        # Bumped on every restart and game start so stale turn tokens never match
        self._generation = 0

    # -------------------------------------------------------------------------
    # Phase transitions
    # -------------------------------------------------------------------------

    def configure(
        self,
        target_input: int | float | str,
        steps_input: str | Sequence[float],
        last_move_wins: bool = False,
    ) -> GameConfig:
        """Validate raw input and move on to mode selection.

        Raises:
            InvalidTarget: If the target is invalid
            InvalidSteps: If the steps are invalid
            ValueError: If not currently configuring
        """
        if self.phase != GamePhase.CONFIGURING:
            raise ValueError(f"Cannot configure during {self.phase.value}")
        config = validate_config(target_input, steps_input, last_move_wins)
        self.config = config
        self.phase = GamePhase.MODE_SELECTION
        logger.info(
            f"Configured target={config.target} steps={list(config.steps)} "
            f"last_move_wins={config.last_move_wins}"
        )
        return config

    def start_game(self, mode: GameMode) -> GameState:
        """Start a game in the chosen mode.

        Raises:
            ValueError: If no configuration has been accepted yet
        """
        if self.phase != GamePhase.MODE_SELECTION or self.config is None:
            raise ValueError(f"Cannot start a game during {self.phase.value}")
        self.state = start_game(self.config, mode)
        self.history = []
        self._generation += 1
        self.phase = GamePhase.IN_PROGRESS
        logger.info(f"Started {mode.value} game, {self.state.active_player.value} to move")
        return self.state

    def reset(self) -> GameState:
        """Restart: drop the configuration, mode and game."""
        self.phase = GamePhase.CONFIGURING
        self.config = None
        self.state = reset()
        self.history = []
        self._generation += 1
        logger.info("Game reset")
        return self.state

    # -------------------------------------------------------------------------
    # Moves
    # -------------------------------------------------------------------------

    def make_move(self, step: int) -> MoveResult:
        """Apply a move for the active player.

        Refused moves leave the engine untouched; see apply_move().
        """
        if self.config is None or self.phase not in (GamePhase.IN_PROGRESS, GamePhase.GAME_OVER):
            return _refuse(self.state, InvalidMove.NOT_IN_PROGRESS, step)

        result = apply_move(self.state, step, self.config)
        if not result.success:
            return result

        self.state = result.state
        if result.record is not None:
            self.history.append(result.record)
            logger.info(
                f"{result.record.player.value} played +{step}: "
                f"{result.record.position_before} -> {result.record.position_after}"
            )
        if self.state.game_over:
            self.phase = GamePhase.GAME_OVER
            logger.info(f"Game over at {self.state.position}, {self.get_loser().value} loses")
        return result

    def play_computer_turn(self, opponent: Opponent) -> Optional[MoveResult]:
        """Let the opponent choose and apply one move.

        Does nothing (returns None) unless it is the computer's turn in a
        running vs-computer game, or if the opponent declines to move.
        """
        if not self.is_computer_turn() or self.config is None:
            return None
        step = opponent.choose_move(self.state, self.config)
        if step is None:
            logger.warning(f"{opponent.name} found no legal move at {self.state.position}")
            return None
        return self.make_move(step)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def legal_steps(self) -> list[int]:
        """Distinct configured steps that do not overshoot the target."""
        if self.config is None or not self.state.in_progress:
            return []
        return [
            step
            for step in self.config.distinct_steps
            if self.state.position + step <= self.config.target
        ]

    def is_computer_turn(self) -> bool:
        return (
            self.phase == GamePhase.IN_PROGRESS
            and self.state.mode == GameMode.VS_COMPUTER
            and self.state.active_player == Player.COMPUTER
            and not self.state.game_over
        )

    def is_game_over(self) -> bool:
        return self.state.game_over

    def get_loser(self) -> Optional[Player]:
        return self.state.loser

    def get_history(self) -> list[MoveRecord]:
        return list(self.history)

    @property
    def turn_token(self) -> tuple[int, int]:
        """Identifies the current turn: (game generation, moves made)."""
        return (self._generation, self.state.moves_made)


# =============================================================================
# Factory function for creating games
# =============================================================================


def create_game(
    target_input: int | float | str,
    steps_input: str | Sequence[float],
    mode: GameMode,
    last_move_wins: bool = False,
) -> GameEngine:
    """Create an engine that is configured and already in progress.

    Args:
        target_input: Target total
        steps_input: Steps, comma-separated or as a sequence
        mode: Game mode
        last_move_wins: Win-condition variant

    Returns:
        GameEngine in the IN_PROGRESS phase

    Raises:
        InvalidTarget: If the target is invalid
        InvalidSteps: If the steps are invalid
    """
    engine = GameEngine()
    engine.configure(target_input, steps_input, last_move_wins)
    engine.start_game(mode)
    return engine
