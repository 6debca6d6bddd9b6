"""Vues textuelles et JSON-friendly d'un BoardSnapshot.

Ces conversions servent uniquement à l'affichage (console, journaux, tests):
aucune fonction ne reconstruit de partie à partir d'un snapshot.

Conventions d'affichage:
- pion: initiale minuscule du camp (`r`, `b`)
- dame: initiale majuscule (`R`, `B`)
- case vide: `.`
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from checkers.engine.board import Piece, Player
from checkers.engine.rules import BOARD_SIZE
from checkers.engine.state import BoardSnapshot

EMPTY_GLYPH = "."

_PLAYER_INITIALS: Dict[Player, str] = {Player.RED: "r", Player.BLACK: "b"}


def piece_glyph(piece: Optional[Piece]) -> str:
    """Caractère représentant une case."""

    if piece is None:
        return EMPTY_GLYPH
    initial = _PLAYER_INITIALS[piece.player]
    return initial.upper() if piece.is_king else initial


def snapshot_to_rows(snapshot: BoardSnapshot) -> List[str]:
    """Une chaîne de 8 caractères par ligne, de la ligne 0 à la ligne 7."""

    return ["".join(piece_glyph(piece) for piece in row) for row in snapshot.cells]


def render_text(snapshot: BoardSnapshot) -> str:
    """Rendu console: joueur au trait, en-tête de colonnes puis la grille."""

    lines = [
        f"Current Player: {snapshot.current_player.value}",
        "  " + " ".join(str(col) for col in range(BOARD_SIZE)),
    ]
    for index, row in enumerate(snapshot_to_rows(snapshot)):
        lines.append(f"{index} " + " ".join(row))
    return "\n".join(lines)


def snapshot_to_dict(snapshot: BoardSnapshot) -> Dict[str, Any]:
    """Convertit un BoardSnapshot en dictionnaire JSON-friendly."""

    must_continue = snapshot.must_continue
    return {
        "current_player": snapshot.current_player.value,
        "must_continue": (
            [must_continue.row, must_continue.col] if must_continue is not None else None
        ),
        "rows": snapshot_to_rows(snapshot),
        "pieces": [
            {
                "row": position.row,
                "col": position.col,
                "player": piece.player.value,
                "rank": piece.rank.value,
            }
            for position, piece in snapshot.pieces()
        ],
    }


__all__ = [
    "EMPTY_GLYPH",
    "piece_glyph",
    "snapshot_to_rows",
    "render_text",
    "snapshot_to_dict",
]
