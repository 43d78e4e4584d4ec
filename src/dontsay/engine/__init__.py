"""Game engine module for Don't Say N!.

This module contains the core game logic including:
- losing_table: Losing-position table (dynamic programming over totals)
- game_engine: Move application and the game phase machine
- scheduler: Delayed, cancellable computer turns

Usage:
    from dontsay.engine import GameEngine, TurnScheduler
    from dontsay.models import GameMode
    from dontsay.opponents import OptimalOpponent

    engine = GameEngine()
    engine.configure("13", "1,2")
    engine.start_game(GameMode.VS_COMPUTER)

    result = engine.make_move(2)
    scheduler = TurnScheduler(engine, OptimalOpponent())
    scheduler.sync()  # computer moves after the configured delay

    if engine.is_game_over():
        print(f"{engine.get_loser().value} loses")
"""

from dontsay.engine.game_engine import (
    GameEngine,
    InvalidMove,
    MoveResult,
    apply_move,
    create_game,
    reset,
    start_game,
)
from dontsay.engine.losing_table import (
    LosingTable,
    clear_table_cache,
    compute_losing_table,
)
from dontsay.engine.scheduler import TurnScheduler, asyncio_timer

__all__ = [
    # Game engine
    "GameEngine",
    "InvalidMove",
    "MoveResult",
    "apply_move",
    "create_game",
    "reset",
    "start_game",
    # Losing table
    "LosingTable",
    "clear_table_cache",
    "compute_losing_table",
    # Scheduling
    "TurnScheduler",
    "asyncio_timer",
]
