#!/usr/bin/env python3
"""Lance la GUI de dames anglaises (deux joueurs humains, pygame).

Un coup se joue en deux clics: la pièce puis la case d'arrivée.

Raccourcis clavier:
- N   : nouvelle partie
- ESC : annuler la sélection ou quitter si aucune sélection
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import pygame

from checkers.app.game_service import GameService
from checkers.cli import add_log_level_argument
from checkers.gui.board_controller import BoardController
from checkers.gui.renderer import (
    COLOR_BG,
    COLOR_HIGHLIGHT_FORCED,
    COLOR_HIGHLIGHT_SELECTED,
    COLOR_HIGHLIGHT_TARGET,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BoardRenderer,
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dames anglaises, GUI pygame")
    add_log_level_argument(parser)
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Dames anglaises")

    service = GameService()
    service.start_new_game()
    controller = BoardController(service)
    renderer = BoardRenderer(screen)

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if not controller.cancel_selection():
                        running = False
                elif event.key == pygame.K_n:
                    service.start_new_game()
                    controller = BoardController(service)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                position = renderer.get_position_at(event.pos)
                if position is not None:
                    controller.handle_cell_click(position)

        screen.fill(COLOR_BG)
        renderer.render_board()

        forced = service.game.must_continue
        if forced is not None:
            renderer.render_highlighted_cells([forced], COLOR_HIGHLIGHT_FORCED)
        elif controller.selected is not None:
            renderer.render_highlighted_cells([controller.selected], COLOR_HIGHLIGHT_SELECTED)
        renderer.render_highlighted_cells(controller.get_target_positions(), COLOR_HIGHLIGHT_TARGET)

        renderer.render_pieces(service.snapshot())
        renderer.render_status(controller.get_instructions())

        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
