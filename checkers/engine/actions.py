"""Coups du jeu et motifs de refus.

`Move` est la seule action du jeu: déplacer une pièce d'une case vers une
autre. Un saut (distance 2) capture la pièce adverse de la case intermédiaire.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from checkers.engine.board import Position
from checkers.engine.rules import JUMP_DISTANCE


@dataclass(frozen=True)
class Move:
    """Déplacement d'une pièce.

    Args:
        source: case de départ
        target: case d'arrivée
    """

    source: Position
    target: Position

    @classmethod
    def from_coords(cls, from_row: int, from_col: int, to_row: int, to_col: int) -> "Move":
        return cls(Position(from_row, from_col), Position(to_row, to_col))

    @property
    def row_delta(self) -> int:
        return self.target.row - self.source.row

    @property
    def col_delta(self) -> int:
        return self.target.col - self.source.col

    @property
    def is_jump(self) -> bool:
        return abs(self.row_delta) == JUMP_DISTANCE

    @property
    def captured_position(self) -> Optional[Position]:
        """Case sautée lors d'une prise (None pour un pas simple)."""
        if not self.is_jump:
            return None
        return Position(
            (self.source.row + self.target.row) // 2,
            (self.source.col + self.target.col) // 2,
        )


class MoveRejection(Enum):
    """Motif du premier contrôle qui a échoué pour un coup refusé."""

    OFF_BOARD = "OFF_BOARD"
    EMPTY_ORIGIN = "EMPTY_ORIGIN"
    WRONG_PLAYER = "WRONG_PLAYER"
    NOT_CONTINUING_PIECE = "NOT_CONTINUING_PIECE"
    NOT_DIAGONAL = "NOT_DIAGONAL"
    WRONG_DISTANCE = "WRONG_DISTANCE"
    DESTINATION_OCCUPIED = "DESTINATION_OCCUPIED"
    WRONG_DIRECTION = "WRONG_DIRECTION"
    NO_CAPTURE_TARGET = "NO_CAPTURE_TARGET"


__all__ = ["Move", "MoveRejection"]
