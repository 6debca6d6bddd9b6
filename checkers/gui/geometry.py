"""Geometry utilities for board rendering.

Ce module fournit la classe BoardGeometry qui calcule les rectangles écran
des cases du damier et retrouve la case située sous un point (clic souris).
"""

from __future__ import annotations

from typing import Optional, Tuple

from checkers.engine.board import Position
from checkers.engine.rules import BOARD_SIZE


class BoardGeometry:
    """Compute screen coordinates from logical board positions.

    La ligne 0 est dessinée en haut, comme dans le rendu console.
    """

    def __init__(self, cell_size: float, margin: float) -> None:
        """Initialize geometry calculator.

        Args:
            cell_size: Side of a square cell in pixels
            margin: Margin around the board in pixels
        """
        self.cell_size = cell_size
        self.margin = margin

    def cell_origin(self, position: Position) -> Tuple[float, float]:
        """Top-left corner (x, y) of a cell in pixels."""
        return (
            self.margin + position.col * self.cell_size,
            self.margin + position.row * self.cell_size,
        )

    def cell_center(self, position: Position) -> Tuple[float, float]:
        x, y = self.cell_origin(position)
        half = self.cell_size / 2
        return (x + half, y + half)

    def position_at(self, point: Tuple[float, float]) -> Optional[Position]:
        """Case contenant le point, ou None en dehors du damier."""
        x, y = point
        if x < self.margin or y < self.margin:
            return None
        col = int((x - self.margin) // self.cell_size)
        row = int((y - self.margin) // self.cell_size)
        position = Position(row, col)
        return position if position.is_on_board() else None

    @property
    def surface_size(self) -> Tuple[float, float]:
        """Get the required surface size to contain the board.

        Returns:
            (width, height) in pixels
        """
        side = BOARD_SIZE * self.cell_size + 2 * self.margin
        return (side, side)


__all__ = ["BoardGeometry"]
