"""Opponent implementations for Don't Say N!.

All opponents implement the Opponent base class interface.
"""

from dontsay.opponents.base import Opponent
from dontsay.opponents.optimal import OptimalOpponent, choose_computer_move

__all__ = [
    "Opponent",
    "OptimalOpponent",
    "choose_computer_move",
]
