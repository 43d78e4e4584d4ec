"""Turn scheduling for the computer player.

The computer does not move instantly: after its turn begins, the move is
applied once a fixed delay has elapsed. At most one move is pending at a
time, and each pending move is keyed by the engine's turn token. If the
token has changed by the time the timer fires (restart, new game, any other
move), the firing is dropped instead of being applied to the wrong turn.

The clock is pluggable. A timer factory takes (delay_seconds, callback) and
returns a zero-argument callable that cancels the pending call. The default
factory uses the running asyncio event loop; the Textual front end passes
one built on Widget.set_timer.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from dontsay.settings import get_computer_delay

if TYPE_CHECKING:
    from dontsay.engine.game_engine import GameEngine, MoveResult
    from dontsay.opponents.base import Opponent

logger = logging.getLogger(__name__)

Cancel = Callable[[], None]
TimerFactory = Callable[[float, Callable[[], None]], Cancel]


def asyncio_timer(delay: float, callback: Callable[[], None]) -> Cancel:
    """Schedule callback on the running asyncio loop.

    Raises:
        RuntimeError: If called outside a running event loop
    """
    handle = asyncio.get_running_loop().call_later(delay, callback)
    return handle.cancel


class TurnScheduler:
    """Schedules delayed computer moves for one engine.

    Attributes:
        engine: Engine whose turns are scheduled
        opponent: Automated player that picks the moves
        delay: Seconds between the computer's turn starting and its move
        on_move: Called with the MoveResult after each computer move
    """

    def __init__(
        self,
        engine: GameEngine,
        opponent: Opponent,
        delay: Optional[float] = None,
        timer_factory: Optional[TimerFactory] = None,
        on_move: Optional[Callable[[MoveResult], None]] = None,
    ) -> None:
        self.engine = engine
        self.opponent = opponent
        self.delay = get_computer_delay() if delay is None else delay
        self.on_move = on_move
        self._timer_factory = timer_factory or asyncio_timer
        self._pending_token: Optional[tuple[int, int]] = None
        self._decided_token: Optional[tuple[int, int]] = None
        self._cancel: Optional[Cancel] = None

    @property
    def pending(self) -> bool:
        """Whether a computer move is currently scheduled."""
        return self._pending_token is not None

    def sync(self) -> bool:
        """Bring the schedule in line with the engine state.

        Call after every state change. Schedules the computer's move if it
        is due and not already scheduled, and cancels a pending move that
        no longer applies.

        At most one decision runs per turn: a turn whose decision already ran
        is never scheduled again, even if the opponent declined to move.

        Returns:
            True if a computer move is pending afterwards
        """
        if not self.engine.is_computer_turn():
            self.cancel()
            return False

        token = self.engine.turn_token
        if token == self._decided_token:
            # Already decided this turn; the opponent found no step to play
            return False
        if self._pending_token == token:
            return True

        self.cancel()
        self._cancel = self._timer_factory(self.delay, lambda: self._fire(token))
        self._pending_token = token
        logger.debug(f"Scheduled computer move for turn {token} in {self.delay:.2f}s")
        return True

    def cancel(self) -> None:
        """Cancel the pending computer move, if any."""
        if self._cancel is not None:
            self._cancel()
            logger.debug(f"Cancelled computer move for turn {self._pending_token}")
        self._cancel = None
        self._pending_token = None

    def _fire(self, token: tuple[int, int]) -> None:
        if token != self._pending_token:
            logger.debug(f"Dropped stale computer move for turn {token}")
            return
        self._cancel = None
        self._pending_token = None

        if token != self.engine.turn_token or not self.engine.is_computer_turn():
            logger.debug(f"Dropped computer move for turn {token}, now {self.engine.turn_token}")
            return

        self._decided_token = token
        result = self.engine.play_computer_turn(self.opponent)
        if result is not None and self.on_move is not None:
            self.on_move(result)
        self.sync()
