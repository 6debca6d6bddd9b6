"""Engine package exposing rules, board and game state modules."""

from . import rules  # re-export for convenience
from .actions import Move, MoveRejection
from .board import Board, Piece, Player, Position, Rank
from .state import CheckersGame

__all__ = [
    "rules",
    "Board",
    "CheckersGame",
    "Move",
    "MoveRejection",
    "Piece",
    "Player",
    "Position",
    "Rank",
]
