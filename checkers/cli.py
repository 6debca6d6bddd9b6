"""Partie de dames en console.

Boucle de jeu textuelle: affiche le damier, lit quatre entiers
`ligne colonne ligne colonne` et transmet le coup au GameService. `q` (ou la
fin de l'entrée standard) quitte la partie.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from checkers.app.game_service import GameService
from checkers.engine.actions import Move
from checkers.engine.board import Player
from checkers.engine.serialize import render_text
from checkers.engine.state import CheckersGame

PROMPT = "Enter move (e.g., '2 3 3 4') or 'q' to quit: "
QUIT_COMMAND = "q"
CLEAR_LINES = 50

_WINNER_LABELS = {Player.RED: "Red", Player.BLACK: "Black"}

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_move(text: str) -> Optional[Move]:
    """Convertit `"r1 c1 r2 c2"` en Move, ou None si la saisie est mal formée."""

    tokens = text.split()
    if len(tokens) != 4:
        return None
    try:
        from_row, from_col, to_row, to_col = (int(token) for token in tokens)
    except ValueError:
        return None
    return Move.from_coords(from_row, from_col, to_row, to_col)


def clear_console(output: OutputFn) -> None:
    output("\n" * (CLEAR_LINES - 1))


def run(
    service: GameService,
    *,
    game: CheckersGame | None = None,
    input_fn: InputFn = input,
    output: OutputFn = print,
    clear: bool = True,
) -> Optional[Player]:
    """Joue une partie jusqu'à la victoire ou l'abandon.

    Args:
        game: position de départ (défaut: mise en place standard)

    Returns:
        Le vainqueur, ou None si la partie a été quittée
    """

    service.start_new_game(game)

    while True:
        output(render_text(service.snapshot()))

        winner = service.game.winner
        if winner is not None:
            output(f"Game over! {_WINNER_LABELS[winner]} wins!")
            return winner

        try:
            line = input_fn(PROMPT).strip()
        except EOFError:
            return None
        if line == QUIT_COMMAND:
            return None

        move = parse_move(line)
        if clear:
            clear_console(output)
        if move is None:
            output("Invalid input format.")
        elif service.dispatch(move):
            output("Move successful!")
        else:
            output("Invalid move, try again.")


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Option `--log-level` commune aux points d'entrée console et GUI."""
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Niveau de journalisation (défaut: WARNING)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Partie de dames anglaises en console")
    add_log_level_argument(parser)
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Ne pas effacer la console entre deux coups",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run(GameService(), clear=not args.no_clear)
    return 0


if __name__ == "__main__":
    sys.exit(main())
