"""Tests smoke GUI: rendu headless pygame.

Objectif: valider que le rendu pygame peut être construit et exécuté en mode
headless (SDL_VIDEODRIVER=dummy). Pas de validation pixel-perfect.
"""

import os

import pytest

# Force headless mode
os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame

from checkers.engine.board import Position
from checkers.engine.state import CheckersGame
from checkers.gui.renderer import (
    COLOR_DARK_SQUARE,
    COLOR_HIGHLIGHT_TARGET,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BoardRenderer,
)


@pytest.fixture
def headless_pygame():
    """Initialize pygame in headless mode."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def screen(headless_pygame):
    return pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))


def test_screen_surface_creation(screen):
    assert screen.get_width() == SCREEN_WIDTH
    assert screen.get_height() == SCREEN_HEIGHT


def test_render_board_draws_dark_squares(screen):
    renderer = BoardRenderer(screen)
    renderer.render_board()

    # Coin supérieur gauche de la case sombre (0, 1)
    x, y = renderer.geometry.cell_origin(Position(0, 1))
    assert tuple(screen.get_at((int(x) + 2, int(y) + 2)))[:3] == COLOR_DARK_SQUARE


def test_render_pieces_highlights_and_status_no_crash(screen):
    renderer = BoardRenderer(screen)
    game = CheckersGame()

    renderer.render_board()
    renderer.render_highlighted_cells([Position(3, 0), Position(3, 2)], COLOR_HIGHLIGHT_TARGET)
    renderer.render_pieces(game.snapshot())
    renderer.render_status("Rouge: choisissez une pièce")


def test_get_position_at_uses_geometry(screen):
    renderer = BoardRenderer(screen)
    center = renderer.geometry.cell_center(Position(5, 2))

    assert renderer.get_position_at((int(center[0]), int(center[1]))) == Position(5, 2)
