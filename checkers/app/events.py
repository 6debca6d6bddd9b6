"""Évènements publiés par la couche application (`checkers.app`)."""

from __future__ import annotations

from dataclasses import dataclass

from checkers.engine.actions import Move, MoveRejection
from checkers.engine.board import Player
from checkers.engine.state import BoardSnapshot


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle partie est initialisée."""

    snapshot: BoardSnapshot


@dataclass(frozen=True)
class MoveAppliedEvent:
    """Émis après qu'un coup légal a été appliqué."""

    move: Move
    player: Player
    previous: BoardSnapshot
    current: BoardSnapshot

    @property
    def continues_jump(self) -> bool:
        """True si le même joueur doit poursuivre une prise multiple."""
        return self.current.must_continue is not None


@dataclass(frozen=True)
class MoveRejectedEvent:
    """Émis quand un coup est refusé; l'état de la partie est inchangé."""

    move: Move
    reason: MoveRejection
    snapshot: BoardSnapshot


@dataclass(frozen=True)
class GameEndedEvent:
    """Émis quand le joueur au trait n'a plus aucun coup légal."""

    snapshot: BoardSnapshot
    winner: Player
