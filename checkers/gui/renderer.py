"""BoardRenderer: rendu pygame du damier et des pièces.

Responsabilités:
- Dessiner les 64 cases (claires / sombres) et les indices de lignes/colonnes
- Dessiner pions (disques) et dames (disques avec couronne)
- Gérer les surbrillances contextuelles (pièce sélectionnée, cases d'arrivée)
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame

from checkers.engine.board import Player, Position
from checkers.engine.rules import BOARD_SIZE
from checkers.engine.state import BoardSnapshot
from checkers.gui.geometry import BoardGeometry

# Constantes écran
CELL_SIZE = 72
BOARD_MARGIN = 40
STATUS_HEIGHT = 48
SCREEN_WIDTH = BOARD_SIZE * CELL_SIZE + 2 * BOARD_MARGIN
SCREEN_HEIGHT = SCREEN_WIDTH + STATUS_HEIGHT

# Couleurs
COLOR_BG = (40, 40, 40)
COLOR_LIGHT_SQUARE = (235, 215, 180)
COLOR_DARK_SQUARE = (120, 80, 50)
COLOR_LABEL = (220, 220, 220)
COLOR_RED_PIECE = (200, 40, 40)
COLOR_BLACK_PIECE = (25, 25, 25)
COLOR_PIECE_OUTLINE = (240, 240, 240)
COLOR_CROWN = (240, 200, 60)

# Couleurs pour la surbrillance
COLOR_HIGHLIGHT_SELECTED = (100, 200, 255, 140)
COLOR_HIGHLIGHT_TARGET = (100, 255, 100, 120)
COLOR_HIGHLIGHT_FORCED = (255, 160, 60, 140)

# Tailles pièces
PIECE_RADIUS_RATIO = 0.38
CROWN_RADIUS_RATIO = 0.16


class BoardRenderer:
    """Rendu du damier et des pièces."""

    _PLAYER_COLORS: Dict[Player, Tuple[int, int, int]] = {
        Player.RED: COLOR_RED_PIECE,
        Player.BLACK: COLOR_BLACK_PIECE,
    }

    def __init__(self, screen: pygame.Surface, geometry: BoardGeometry | None = None) -> None:
        """Initialize renderer with pygame surface.

        Args:
            screen: pygame surface to draw on
            geometry: cell layout (défaut: CELL_SIZE / BOARD_MARGIN)
        """
        self.screen = screen
        self.geometry = geometry or BoardGeometry(CELL_SIZE, BOARD_MARGIN)

        # Font for labels (lazy init on first render)
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> pygame.font.Font:
        """Lazy init font."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont("Arial", 18, bold=True)
        return self._font

    def _cell_rect(self, position: Position) -> pygame.Rect:
        x, y = self.geometry.cell_origin(position)
        size = int(self.geometry.cell_size)
        return pygame.Rect(int(x), int(y), size, size)

    def render_board(self) -> None:
        """Render the squares and the row/column indices."""
        font = self._ensure_font()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                position = Position(row, col)
                color = COLOR_DARK_SQUARE if position.is_dark() else COLOR_LIGHT_SQUARE
                pygame.draw.rect(self.screen, color, self._cell_rect(position))

        half_margin = self.geometry.margin / 2
        for index in range(BOARD_SIZE):
            col_x, _ = self.geometry.cell_center(Position(0, index))
            _, row_y = self.geometry.cell_center(Position(index, 0))
            label = font.render(str(index), True, COLOR_LABEL)
            self.screen.blit(label, label.get_rect(center=(col_x, half_margin)))
            self.screen.blit(label, label.get_rect(center=(half_margin, row_y)))

    def render_pieces(self, snapshot: BoardSnapshot) -> None:
        """Render every piece of the snapshot."""
        radius = int(self.geometry.cell_size * PIECE_RADIUS_RATIO)
        crown_radius = int(self.geometry.cell_size * CROWN_RADIUS_RATIO)
        for position, piece in snapshot.pieces():
            center = tuple(int(v) for v in self.geometry.cell_center(position))
            pygame.draw.circle(self.screen, self._PLAYER_COLORS[piece.player], center, radius)
            pygame.draw.circle(self.screen, COLOR_PIECE_OUTLINE, center, radius, width=2)
            if piece.is_king:
                pygame.draw.circle(self.screen, COLOR_CROWN, center, crown_radius)

    def render_highlighted_cells(
        self,
        positions: Iterable[Position],
        color: Tuple[int, int, int, int] = COLOR_HIGHLIGHT_TARGET,
    ) -> None:
        """Overlay semi-transparent sur les cases données."""
        size = int(self.geometry.cell_size)
        overlay = pygame.Surface((size, size), pygame.SRCALPHA)
        overlay.fill(color)
        for position in positions:
            rect = self._cell_rect(position)
            self.screen.blit(overlay, rect.topleft)

    def render_status(self, text: str) -> None:
        """Ligne d'état sous le damier."""
        font = self._ensure_font()
        surface = font.render(text, True, COLOR_LABEL)
        _, board_height = self.geometry.surface_size
        self.screen.blit(surface, (self.geometry.margin, board_height))

    def get_position_at(self, pos: Tuple[int, int]) -> Optional[Position]:
        return self.geometry.position_at(pos)


__all__ = [
    "BoardRenderer",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "COLOR_BG",
    "COLOR_HIGHLIGHT_SELECTED",
    "COLOR_HIGHLIGHT_TARGET",
    "COLOR_HIGHLIGHT_FORCED",
]
