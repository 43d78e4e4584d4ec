"""Don't Say N! game models.

This module exports the core data structures for the game.
"""

from .config import (
    ConfigValidationError,
    GameConfig,
    InvalidSteps,
    InvalidTarget,
    parse_steps,
    validate_config,
)
from .state import (
    GameMode,
    GamePhase,
    GameState,
    MoveRecord,
    Player,
)

__all__ = [
    # Enums
    "GameMode",
    "GamePhase",
    "Player",
    # Config
    "GameConfig",
    "ConfigValidationError",
    "InvalidSteps",
    "InvalidTarget",
    "parse_steps",
    "validate_config",
    # State
    "GameState",
    "MoveRecord",
]
