"""Règles et constantes des dames anglaises (plateau 8x8).

Ce module expose le contrat minimal attendu par les tests:
- dimensions du plateau (`BOARD_SIZE`)
- mise en place (`HOME_ROW_COUNT`, `PIECES_PER_PLAYER`)
- déplacements élémentaires (`STEP_OFFSETS`, `JUMP_OFFSETS`)
"""

BOARD_SIZE: int = 8

# Mise en place: trois rangées par camp, une case sombre sur deux
HOME_ROW_COUNT: int = 3
PIECES_PER_PLAYER: int = HOME_ROW_COUNT * BOARD_SIZE // 2

# Distances autorisées (pas simple / saut avec prise)
STEP_DISTANCE: int = 1
JUMP_DISTANCE: int = 2

STEP_OFFSETS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
JUMP_OFFSETS: tuple[tuple[int, int], ...] = ((-2, -2), (-2, 2), (2, -2), (2, 2))
ALL_OFFSETS: tuple[tuple[int, int], ...] = STEP_OFFSETS + JUMP_OFFSETS

__all__ = [
    "BOARD_SIZE",
    "HOME_ROW_COUNT",
    "PIECES_PER_PLAYER",
    "STEP_DISTANCE",
    "JUMP_DISTANCE",
    "STEP_OFFSETS",
    "JUMP_OFFSETS",
    "ALL_OFFSETS",
]
