"""Unit tests for dontsay.models.state module.

Tests cover:
- GameMode: player identities and turn hand-over
- GameState: defaults, range constraints, derived properties
"""

import pytest
from pydantic import ValidationError

from dontsay.models.state import GameMode, GameState, MoveRecord, Player


class TestGameMode:
    """Tests for GameMode."""

    def test_players_first_mover_first(self):
        assert GameMode.TWO_PLAYER.players == (Player.PLAYER_1, Player.PLAYER_2)
        assert GameMode.VS_COMPUTER.players == (Player.PLAYER, Player.COMPUTER)
        assert GameMode.VS_COMPUTER.first_player == Player.PLAYER

    @pytest.mark.parametrize(
        "mode,player,other",
        [
            (GameMode.TWO_PLAYER, Player.PLAYER_1, Player.PLAYER_2),
            (GameMode.TWO_PLAYER, Player.PLAYER_2, Player.PLAYER_1),
            (GameMode.VS_COMPUTER, Player.PLAYER, Player.COMPUTER),
            (GameMode.VS_COMPUTER, Player.COMPUTER, Player.PLAYER),
        ],
    )
    def test_other_player(self, mode, player, other):
        assert mode.other_player(player) == other

    def test_other_player_rejects_foreign_identity(self):
        with pytest.raises(ValueError):
            GameMode.VS_COMPUTER.other_player(Player.PLAYER_1)

    def test_display_names(self):
        assert [p.value for p in Player] == ["Player 1", "Player 2", "Player", "Computer"]


class TestGameState:
    """Tests for GameState."""

    def test_default_is_pre_configuration_state(self):
        state = GameState()
        assert state.position == 0
        assert state.mode is None
        assert state.active_player == Player.PLAYER_1
        assert state.game_over is False
        assert state.loser is None
        assert state.in_progress is False

    def test_position_cannot_exceed_target(self):
        with pytest.raises(ValidationError):
            GameState(position=14, target=13, mode=GameMode.TWO_PLAYER)

    def test_loser_requires_game_over(self):
        with pytest.raises(ValidationError):
            GameState(target=5, mode=GameMode.TWO_PLAYER, loser=Player.PLAYER_1)

    def test_winner_is_other_identity(self):
        state = GameState(
            position=5,
            target=5,
            mode=GameMode.VS_COMPUTER,
            active_player=Player.COMPUTER,
            game_over=True,
            loser=Player.COMPUTER,
        )
        assert state.winner == Player.PLAYER
        assert state.in_progress is False

    def test_winner_none_while_playing(self):
        state = GameState(target=5, mode=GameMode.TWO_PLAYER)
        assert state.winner is None
        assert state.in_progress is True


class TestMoveRecord:
    """Tests for MoveRecord."""

    def test_step_must_be_positive(self):
        with pytest.raises(ValidationError):
            MoveRecord(player=Player.PLAYER_1, step=0, position_before=0, position_after=0)
