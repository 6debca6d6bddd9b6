"""Boucle headless pour le moteur de dames.

Ce module expose un environnement minimaliste pour piloter le moteur via une
API `reset()` / `step()` et fournir un masque de coups aligné sur un catalogue
stable. Il ne contient aucune politique de jeu: l'appelant choisit les coups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from checkers.engine.actions import Move
from checkers.engine.board import Player, Position
from checkers.engine.rules import ALL_OFFSETS, BOARD_SIZE
from checkers.engine.state import BoardSnapshot, CheckersGame


class ActionSpace:
    """Maintient un catalogue de coups unique et fournit des masques."""

    def __init__(self, initial_moves: Sequence[Move] | None = None) -> None:
        self._catalog: List[Move] = []
        self._index: Dict[Move, int] = {}
        if initial_moves:
            self.register(initial_moves)

    @property
    def catalog(self) -> List[Move]:
        """Retourne une copie du catalogue courant."""

        return list(self._catalog)

    def __len__(self) -> int:
        return len(self._catalog)

    def index_of(self, move: Move) -> int:
        return self._index[move]

    def register(self, moves: Iterable[Move]) -> None:
        """Ajoute les coups au catalogue s'ils n'y figurent pas déjà."""

        for move in moves:
            if move in self._index:
                continue
            self._index[move] = len(self._catalog)
            self._catalog.append(move)

    def mask(self, legal_moves: Iterable[Move]) -> List[bool]:
        """Construit le masque booléen aligné sur le catalogue courant."""

        legal = set(legal_moves)
        return [move in legal for move in self._catalog]


def build_default_move_catalog() -> List[Move]:
    """Tous les pas et sauts diagonaux entre cases sombres, ligne par ligne."""

    catalog: List[Move] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            source = Position(row, col)
            if not source.is_dark():
                continue
            for row_delta, col_delta in ALL_OFFSETS:
                target = source.offset(row_delta, col_delta)
                if target.is_on_board():
                    catalog.append(Move(source, target))
    return catalog


@dataclass(frozen=True)
class StepResult:
    """Résultat d'un appel à HeadlessEnv.step()."""

    snapshot: BoardSnapshot
    reward: Tuple[float, ...]
    done: bool
    info: Dict[str, Any]


class HeadlessEnv:
    """Environnement headless léger pour le moteur de dames.

    Les récompenses sont indexées dans l'ordre (RED, BLACK): +1 pour le
    vainqueur, -1 pour le perdant, 0 tant que la partie continue.
    """

    PLAYER_ORDER: Tuple[Player, ...] = (Player.RED, Player.BLACK)

    def __init__(self, *, max_steps: int | None = None) -> None:
        self._max_steps = max_steps
        self._game: CheckersGame | None = None
        self._steps = 0
        self._action_space = ActionSpace(build_default_move_catalog())

    @property
    def game(self) -> CheckersGame:
        """Retourne la partie courante (reset doit avoir été appelé)."""

        if self._game is None:
            raise RuntimeError("reset() doit être appelé avant d'accéder à la partie")
        return self._game

    @property
    def action_catalog(self) -> List[Move]:
        return self._action_space.catalog

    @property
    def steps(self) -> int:
        return self._steps

    def reset(self, *, game: CheckersGame | None = None) -> BoardSnapshot:
        """Réinitialise l'environnement et renvoie le snapshot initial."""

        self._game = game if game is not None else CheckersGame()
        self._steps = 0
        return self._game.snapshot()

    def legal_moves(self) -> List[Move]:
        return self.game.legal_moves()

    def legal_moves_mask(self) -> List[bool]:
        """Retourne un masque booléen aligné sur le catalogue courant."""

        legal = self.game.legal_moves()
        # Positions personnalisées: pièces éventuelles hors cases sombres
        self._action_space.register(legal)
        return self._action_space.mask(legal)

    def step(self, move: Move) -> StepResult:
        """Applique un coup légal et renvoie le résultat."""

        game = self.game
        player = game.current_player
        if not game.play(move):
            raise ValueError(f"Coup illégal: {move}")
        self._steps += 1

        winner = game.winner
        truncated = (
            winner is None
            and self._max_steps is not None
            and self._steps >= self._max_steps
        )
        if winner is None:
            reward = tuple(0.0 for _ in self.PLAYER_ORDER)
        else:
            reward = tuple(1.0 if p is winner else -1.0 for p in self.PLAYER_ORDER)

        info: Dict[str, Any] = {
            "last_move": move,
            "player": player,
            "winner": winner,
            "truncated": truncated,
        }
        return StepResult(
            snapshot=game.snapshot(),
            reward=reward,
            done=winner is not None or truncated,
            info=info,
        )
