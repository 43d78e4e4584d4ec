"""Base opponent interface for Don't Say N!.

This module defines the abstract base class for automated players.
"""

from abc import ABC, abstractmethod

from dontsay.models.config import GameConfig
from dontsay.models.state import GameState


class Opponent(ABC):
    """Abstract base class for all automated players."""

    def __init__(self, name: str = "Computer"):
        """Initialize opponent.

        Args:
            name: Display name for the opponent
        """
        self.name = name

    @abstractmethod
    def choose_move(self, state: GameState, config: GameConfig) -> int | None:
        """Choose a step to play from the current state.

        Args:
            state: Current game state
            config: Configuration of the running game

        Returns:
            A configured step that does not overshoot the target, or None
            if no legal move exists
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
