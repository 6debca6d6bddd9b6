"""Contrôleur de sélection pour le damier GUI.

Un coup se joue en deux clics: la pièce, puis la case d'arrivée. Pendant une
prise multiple, la pièce qui doit continuer reste sélectionnée d'office.

Responsabilités:
- Exposer les cases sélectionnables et les cases d'arrivée légales
- Transmettre le coup choisi au GameService
- Fournir les instructions contextuelles pour l'UI
"""

from __future__ import annotations

from typing import List, Optional, Set

from checkers.app.game_service import GameService
from checkers.engine.actions import Move
from checkers.engine.board import Player, Position

_PLAYER_LABELS = {Player.RED: "Rouge", Player.BLACK: "Noir"}


class BoardController:
    """Contrôleur pour la saisie des coups à la souris."""

    def __init__(self, game_service: GameService) -> None:
        """Initialize board controller.

        Args:
            game_service: Service de jeu orchestrant la partie
        """
        self.game_service = game_service
        self.selected: Optional[Position] = None

        # Cache for legal moves to avoid recomputation
        self._legal_moves_cache: Optional[List[Move]] = None
        self.refresh_state()

    def refresh_state(self) -> None:
        """Resynchronise la sélection avec la partie.

        Doit être appelé après chaque coup joué en dehors du contrôleur.
        """
        self._legal_moves_cache = None
        forced = self.game_service.game.must_continue
        if forced is not None:
            self.selected = forced

    def _get_legal_moves(self) -> List[Move]:
        if self._legal_moves_cache is None:
            self._legal_moves_cache = self.game_service.legal_moves()
        return self._legal_moves_cache

    def get_selectable_positions(self) -> Set[Position]:
        """Cases des pièces pouvant jouer maintenant."""
        return {move.source for move in self._get_legal_moves()}

    def get_target_positions(self) -> Set[Position]:
        """Cases d'arrivée légales pour la pièce sélectionnée."""
        if self.selected is None:
            return set()
        return {
            move.target
            for move in self._get_legal_moves()
            if move.source == self.selected
        }

    def handle_cell_click(self, position: Position) -> bool:
        """Handle user click on a cell.

        Returns:
            True si la sélection a changé ou si un coup a été joué
        """
        if self.game_service.is_game_over():
            return False

        if self.selected is not None and position in self.get_target_positions():
            applied = self.game_service.dispatch(Move(self.selected, position))
            self.selected = None
            self.refresh_state()
            return applied

        if self.game_service.game.must_continue is not None:
            # La pièce en cours de prise reste sélectionnée
            return False

        if position in self.get_selectable_positions():
            self.selected = position
            return True

        if self.selected is not None:
            self.selected = None
            return True
        return False

    def cancel_selection(self) -> bool:
        """Annule la sélection (impossible pendant une prise multiple)."""
        if self.selected is None or self.game_service.game.must_continue is not None:
            return False
        self.selected = None
        return True

    def get_instructions(self) -> str:
        game = self.game_service.game
        winner = game.winner
        if winner is not None:
            return f"Partie terminée, victoire de {_PLAYER_LABELS[winner]}"

        player_label = _PLAYER_LABELS[game.current_player]
        if game.must_continue is not None:
            return f"{player_label}: poursuivez la prise"
        if self.selected is None:
            return f"{player_label}: choisissez une pièce"
        return f"{player_label}: choisissez la case d'arrivée"


__all__ = ["BoardController"]
