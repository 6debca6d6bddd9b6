"""Plateau de dames anglaises 8x8.

Cette implémentation expose:
- les joueurs (`Player`) et le rang des pièces (`Rank`)
- les positions (`Position`) et les pièces (`Piece`), valeurs immuables
- la grille (`Board`) avec la mise en place standard (12 pions par camp)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from checkers.engine.rules import BOARD_SIZE, HOME_ROW_COUNT


class Player(Enum):
    """Camps en présence. RED joue en premier."""

    RED = "RED"
    BLACK = "BLACK"

    @property
    def opponent(self) -> "Player":
        return Player.BLACK if self is Player.RED else Player.RED

    @property
    def forward(self) -> int:
        """Sens de marche des pions (+1 vers les lignes croissantes pour RED)."""
        return 1 if self is Player.RED else -1

    @property
    def promotion_row(self) -> int:
        return BOARD_SIZE - 1 if self is Player.RED else 0

    @property
    def home_rows(self) -> range:
        if self is Player.RED:
            return range(0, HOME_ROW_COUNT)
        return range(BOARD_SIZE - HOME_ROW_COUNT, BOARD_SIZE)


class Rank(Enum):
    """Rang d'une pièce."""

    NORMAL = "NORMAL"
    KING = "KING"


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def is_dark(self) -> bool:
        """Cases jouables: (0, 1), (1, 0), ... i.e. somme des coordonnées impaire."""
        return (self.row + self.col) % 2 == 1

    def offset(self, row_delta: int, col_delta: int) -> "Position":
        return Position(self.row + row_delta, self.col + col_delta)


@dataclass(frozen=True)
class Piece:
    """Pièce posée sur le plateau.

    Args:
        player: camp propriétaire
        rank: NORMAL (pion) ou KING (dame)
    """

    player: Player
    rank: Rank = Rank.NORMAL

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promoted(self) -> "Piece":
        """Retourne la dame correspondante (une dame reste inchangée)."""
        if self.is_king:
            return self
        return Piece(player=self.player, rank=Rank.KING)


Grid = List[List[Optional[Piece]]]


class Board:
    """Grille 8x8 de cases, chacune vide ou occupée par une seule pièce."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: Grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def standard(cls) -> "Board":
        """Crée le plateau de départ: 12 pions par camp sur les cases sombres."""
        board = cls()
        board.setup()
        return board

    def setup(self) -> None:
        """Vide la grille puis place les pions sur les rangées de départ."""
        self.clear()
        for player in Player:
            for row in player.home_rows:
                for col in range(BOARD_SIZE):
                    position = Position(row, col)
                    if position.is_dark():
                        self[position] = Piece(player)

    def clear(self) -> None:
        for row in self._grid:
            for col in range(BOARD_SIZE):
                row[col] = None

    def __getitem__(self, position: Position) -> Optional[Piece]:
        return self._grid[position.row][position.col]

    def __setitem__(self, position: Position, piece: Optional[Piece]) -> None:
        self._grid[position.row][position.col] = piece

    def pieces(self, player: Player | None = None) -> Iterator[Tuple[Position, Piece]]:
        """Parcourt les cases occupées (ligne par ligne), filtrées par camp si demandé."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._grid[row][col]
                if piece is None:
                    continue
                if player is not None and piece.player is not player:
                    continue
                yield Position(row, col), piece

    def count(self, player: Player) -> int:
        return sum(1 for _ in self.pieces(player))

    def rows(self) -> Tuple[Tuple[Optional[Piece], ...], ...]:
        """Copie immuable de la grille (les pièces sont elles-mêmes immuables)."""
        return tuple(tuple(row) for row in self._grid)


__all__ = ["Player", "Rank", "Position", "Piece", "Board"]
