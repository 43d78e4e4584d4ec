"""Game state models for Don't Say N!.

This module defines the player identities, game modes and the single live
GameState consumed read-only by the presentation layer. State transitions
live in dontsay.engine.game_engine; the models here only hold data and
enforce range constraints.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Player(Enum):
    """Identity of whoever moves. Values are the display names."""

    PLAYER_1 = "Player 1"
    PLAYER_2 = "Player 2"
    PLAYER = "Player"
    COMPUTER = "Computer"


class GameMode(Enum):
    """Who plays whom. Fixed once chosen for a game."""

    TWO_PLAYER = "two_player"
    VS_COMPUTER = "vs_computer"

    @property
    def players(self) -> tuple[Player, Player]:
        """The two identities of this mode, first mover first."""
        if self is GameMode.TWO_PLAYER:
            return (Player.PLAYER_1, Player.PLAYER_2)
        return (Player.PLAYER, Player.COMPUTER)

    @property
    def first_player(self) -> Player:
        return self.players[0]

    def other_player(self, player: Player) -> Player:
        """Return the opponent of player within this mode.

        Raises:
            ValueError: If player does not take part in this mode
        """
        first, second = self.players
        if player is first:
            return second
        if player is second:
            return first
        raise ValueError(f"{player.value} does not play in {self.value} mode")


class GamePhase(Enum):
    """Phase of the overall state machine."""

    CONFIGURING = "configuring"
    MODE_SELECTION = "mode_selection"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class MoveRecord(BaseModel):
    """Record of a single applied move.

    Attributes:
        player: Who made the move
        step: Step value added
        position_before: Total before the move
        position_after: Total after the move
    """

    player: Player
    step: int = Field(ge=1)
    position_before: int = Field(ge=0)
    position_after: int = Field(ge=0)


class GameState(BaseModel):
    """Complete state of one game.

    The default instance is the pre-configuration state: no mode, position
    zero and Player 1 nominally to move.

    Attributes:
        position: Running total (0 <= position <= target)
        target: Total that ends the game, copied from the config for display
        mode: Game mode (None until chosen)
        active_player: Who moves next (unchanged by the final move)
        game_over: Whether the target has been reached
        loser: Losing identity, set only once game_over is True
        moves_made: Number of moves applied so far
    """

    position: int = Field(default=0, ge=0)
    target: int = Field(default=0, ge=0)
    mode: GameMode | None = Field(default=None)
    active_player: Player = Field(default=Player.PLAYER_1)
    game_over: bool = Field(default=False)
    loser: Player | None = Field(default=None)
    moves_made: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_consistency(self) -> GameState:
        """Position may not pass the target; a loser implies game over."""
        if self.position > self.target:
            raise ValueError(f"position {self.position} exceeds target {self.target}")
        if self.loser is not None and not self.game_over:
            raise ValueError("loser set while game is not over")
        return self

    @property
    def in_progress(self) -> bool:
        return self.mode is not None and not self.game_over

    @property
    def winner(self) -> Player | None:
        """The player who did not lose, once the game is over."""
        if self.loser is None or self.mode is None:
            return None
        return self.mode.other_player(self.loser)
