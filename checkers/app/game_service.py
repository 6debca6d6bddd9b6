"""Service d'orchestration pour une partie de dames."""

from __future__ import annotations

import logging
from typing import List

from checkers.app.event_bus import EventBus
from checkers.app.events import (
    GameEndedEvent,
    GameStartedEvent,
    MoveAppliedEvent,
    MoveRejectedEvent,
)
from checkers.engine.actions import Move
from checkers.engine.board import Player, Position
from checkers.engine.state import BoardSnapshot, CheckersGame

logger = logging.getLogger(__name__)


class GameService:
    """Wrappe `CheckersGame` et publie les évènements nécessaires à la GUI/console."""

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus or EventBus()
        self._game: CheckersGame | None = None

    @property
    def event_bus(self) -> EventBus:
        """Retourne le bus d'évènements utilisé par le service."""

        return self._event_bus

    @property
    def game(self) -> CheckersGame:
        """Partie courante (erreur si aucune partie lancée)."""

        if self._game is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._game

    @property
    def current_player(self) -> Player:
        return self.game.current_player

    def snapshot(self) -> BoardSnapshot:
        return self.game.snapshot()

    def start_new_game(self, game: CheckersGame | None = None) -> BoardSnapshot:
        """Initialise une nouvelle partie et publie l'évènement associé.

        Args:
            game: position de départ personnalisée (par défaut la mise en place standard)
        """

        self._game = game if game is not None else CheckersGame()
        snapshot = self._game.snapshot()
        logger.info("Nouvelle partie, %s au trait", snapshot.current_player.value)
        self._event_bus.publish(GameStartedEvent(snapshot=snapshot))
        self._publish_game_over_if_needed()
        return snapshot

    def legal_moves(self) -> List[Move]:
        """Retourne les coups légaux pour le joueur au trait."""

        return self.game.legal_moves()

    def legal_moves_from(self, position: Position) -> List[Move]:
        return self.game.legal_moves_from(position)

    def is_game_over(self) -> bool:
        return self.game.is_game_over()

    def attempt_move(self, source: Position, target: Position) -> bool:
        return self.dispatch(Move(source, target))

    def dispatch(self, move: Move) -> bool:
        """Valide et applique un coup, puis notifie les observateurs.

        Returns:
            True si le coup a été appliqué; un refus publie `MoveRejectedEvent`
        """

        game = self.game
        rejection = game.check_move(move.source, move.target)
        if rejection is not None:
            logger.debug("Coup refusé %s: %s", move, rejection.value)
            self._event_bus.publish(
                MoveRejectedEvent(move=move, reason=rejection, snapshot=game.snapshot())
            )
            return False

        player = game.current_player
        previous = game.snapshot()
        game.play(move)
        current = game.snapshot()
        logger.debug("%s joue %s", player.value, move)

        self._event_bus.publish(
            MoveAppliedEvent(move=move, player=player, previous=previous, current=current)
        )
        self._publish_game_over_if_needed()
        return True

    def _publish_game_over_if_needed(self) -> None:
        game = self.game
        winner = game.winner
        if winner is None:
            return
        logger.info("Partie terminée, victoire de %s", winner.value)
        self._event_bus.publish(GameEndedEvent(snapshot=game.snapshot(), winner=winner))
