"""Don't Say N! - a two-player subtraction game.

Players take turns adding one of the allowed steps to a running total that
starts at zero. Whoever reaches the target loses (or, in the last-move-wins
variant, wins).
"""

from dontsay.engine import (
    GameEngine,
    InvalidMove,
    LosingTable,
    MoveResult,
    TurnScheduler,
    apply_move,
    compute_losing_table,
    create_game,
    reset,
    start_game,
)
from dontsay.models import (
    ConfigValidationError,
    GameConfig,
    GameMode,
    GamePhase,
    GameState,
    InvalidSteps,
    InvalidTarget,
    MoveRecord,
    Player,
    validate_config,
)
from dontsay.opponents import OptimalOpponent, Opponent, choose_computer_move

__version__ = "0.1.0"

__all__ = [
    "ConfigValidationError",
    "GameConfig",
    "GameEngine",
    "GameMode",
    "GamePhase",
    "GameState",
    "InvalidMove",
    "InvalidSteps",
    "InvalidTarget",
    "LosingTable",
    "MoveRecord",
    "MoveResult",
    "OptimalOpponent",
    "Opponent",
    "Player",
    "TurnScheduler",
    "apply_move",
    "choose_computer_move",
    "compute_losing_table",
    "create_game",
    "reset",
    "start_game",
    "validate_config",
]
