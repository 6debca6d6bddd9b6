"""État d'une partie et logique de transition.

`CheckersGame` possède la grille, le joueur au trait et la case éventuelle
d'une prise multiple en cours. Toute mutation passe par `attempt_move`, qui
valide entièrement le coup avant de modifier la grille: entre deux appels,
l'état est soit entièrement avant, soit entièrement après le coup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Tuple

from checkers.engine.actions import Move, MoveRejection
from checkers.engine.board import Board, Piece, Player, Position
from checkers.engine.rules import ALL_OFFSETS, JUMP_DISTANCE, JUMP_OFFSETS, STEP_DISTANCE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    """Vue en lecture seule d'une partie, consommée par les rendus et évènements."""

    cells: Tuple[Tuple[Optional[Piece], ...], ...]
    current_player: Player
    must_continue: Optional[Position] = None

    def piece_at(self, position: Position) -> Optional[Piece]:
        return self.cells[position.row][position.col]

    def pieces(self, player: Player | None = None) -> Iterator[Tuple[Position, Piece]]:
        for row, cells in enumerate(self.cells):
            for col, piece in enumerate(cells):
                if piece is None:
                    continue
                if player is not None and piece.player is not player:
                    continue
                yield Position(row, col), piece


class CheckersGame:
    """Moteur de règles: mise en place, validation et application des coups."""

    def __init__(self) -> None:
        self._board = Board()
        self._current_player = Player.RED
        self._must_continue: Position | None = None
        self.initialize()

    @classmethod
    def from_pieces(
        cls,
        pieces: Mapping[Position, Piece],
        *,
        current_player: Player = Player.RED,
        must_continue: Position | None = None,
    ) -> "CheckersGame":
        """Crée une partie à partir d'une position arbitraire (tests, problèmes).

        Args:
            pieces: occupation des cases; les cases absentes sont vides
            current_player: joueur au trait
            must_continue: case de la pièce devant poursuivre sa prise

        Raises:
            ValueError: si une case est hors plateau
        """

        game = cls()
        game._board.clear()
        for position, piece in pieces.items():
            if not position.is_on_board():
                raise ValueError(f"Case hors plateau: {position}")
            game._board[position] = piece
        game._current_player = current_player
        game._must_continue = must_continue
        return game

    def initialize(self) -> None:
        """Remet la partie dans sa position de départ, RED au trait."""
        self._board.setup()
        self._current_player = Player.RED
        self._must_continue = None

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def must_continue(self) -> Optional[Position]:
        """Case de la pièce qui doit poursuivre une prise multiple, sinon None."""
        return self._must_continue

    def piece_at(self, position: Position) -> Optional[Piece]:
        if not position.is_on_board():
            return None
        return self._board[position]

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            cells=self._board.rows(),
            current_player=self._current_player,
            must_continue=self._must_continue,
        )

    # === Validation ===

    def check_move(self, source: Position, target: Position) -> Optional[MoveRejection]:
        """Vérifie un coup pour le joueur au trait.

        Returns:
            None si le coup est légal, sinon le motif du premier contrôle échoué
        """
        if not (source.is_on_board() and target.is_on_board()):
            return MoveRejection.OFF_BOARD

        piece = self._board[source]
        if piece is None:
            return MoveRejection.EMPTY_ORIGIN
        if piece.player is not self._current_player:
            return MoveRejection.WRONG_PLAYER
        if self._must_continue is not None and source != self._must_continue:
            return MoveRejection.NOT_CONTINUING_PIECE

        return self._check_geometry(Move(source, target), piece)

    def _check_geometry(self, move: Move, piece: Piece) -> Optional[MoveRejection]:
        # `move.target` doit être sur le plateau
        row_delta = move.row_delta
        distance = abs(row_delta)

        if distance != abs(move.col_delta):
            return MoveRejection.NOT_DIAGONAL
        if distance not in (STEP_DISTANCE, JUMP_DISTANCE):
            return MoveRejection.WRONG_DISTANCE
        if self._board[move.target] is not None:
            return MoveRejection.DESTINATION_OCCUPIED

        # Les pions n'avancent que vers l'avant, mais peuvent prendre en arrière
        if not piece.is_king and distance == STEP_DISTANCE and row_delta != piece.player.forward:
            return MoveRejection.WRONG_DIRECTION

        captured_position = move.captured_position
        if captured_position is not None:
            captured = self._board[captured_position]
            if captured is None or captured.player is piece.player:
                return MoveRejection.NO_CAPTURE_TARGET

        return None

    def is_move_legal(self, source: Position, target: Position) -> bool:
        return self.check_move(source, target) is None

    # === Transition ===

    def attempt_move(self, source: Position, target: Position) -> bool:
        """Joue un coup s'il est légal.

        Un coup refusé ne modifie rien. Après une prise, si la pièce peut encore
        prendre depuis sa case d'arrivée, le même joueur garde le trait et seule
        cette pièce peut jouer.

        Returns:
            True si le coup a été appliqué
        """
        rejection = self.check_move(source, target)
        if rejection is not None:
            logger.debug("Coup refusé %s -> %s: %s", source, target, rejection.value)
            return False

        self._apply(Move(source, target))
        return True

    def play(self, move: Move) -> bool:
        return self.attempt_move(move.source, move.target)

    def _apply(self, move: Move) -> None:
        piece = self._board[move.source]
        assert piece is not None

        captured_position = move.captured_position
        if captured_position is not None:
            self._board[captured_position] = None

        self._board[move.source] = None

        # Promotion avant la recherche d'une prise supplémentaire
        if not piece.is_king and move.target.row == piece.player.promotion_row:
            piece = piece.promoted()
            logger.debug("Promotion %s en %s", piece.player.value, move.target)

        self._board[move.target] = piece

        if captured_position is not None and self._has_jump(move.target, piece):
            self._must_continue = move.target
            logger.debug("Prise multiple: %s doit continuer depuis %s", piece.player.value, move.target)
        else:
            self._must_continue = None
            self._current_player = self._current_player.opponent

    # === Fin de partie ===

    def _reachable_targets(
        self,
        position: Position,
        piece: Piece,
        offsets: Tuple[Tuple[int, int], ...],
    ) -> Iterator[Position]:
        for row_delta, col_delta in offsets:
            target = position.offset(row_delta, col_delta)
            if not target.is_on_board():
                continue
            if self._check_geometry(Move(position, target), piece) is None:
                yield target

    def _has_jump(self, position: Position, piece: Piece) -> bool:
        return any(True for _ in self._reachable_targets(position, piece, JUMP_OFFSETS))

    def _has_any_move(self, position: Position, piece: Piece) -> bool:
        return any(True for _ in self._reachable_targets(position, piece, ALL_OFFSETS))

    def is_game_over(self) -> bool:
        """True si aucune pièce du joueur au trait ne peut jouer."""
        return not any(
            self._has_any_move(position, piece)
            for position, piece in self._board.pieces(self._current_player)
        )

    @property
    def winner(self) -> Optional[Player]:
        """Adversaire du joueur bloqué, None tant que la partie continue."""
        if not self.is_game_over():
            return None
        return self._current_player.opponent

    # === Coups légaux ===

    def legal_moves_from(self, position: Position) -> List[Move]:
        """Coups jouables maintenant depuis une case (vide si la case ne peut pas jouer)."""
        if not position.is_on_board():
            return []
        piece = self._board[position]
        if piece is None or piece.player is not self._current_player:
            return []
        if self._must_continue is not None and position != self._must_continue:
            return []
        return [
            Move(position, target)
            for target in self._reachable_targets(position, piece, ALL_OFFSETS)
        ]

    def legal_moves(self) -> List[Move]:
        """Retourne la liste des coups légaux pour le joueur au trait."""
        if self._must_continue is not None:
            return self.legal_moves_from(self._must_continue)

        moves: List[Move] = []
        for position, _ in self._board.pieces(self._current_player):
            moves.extend(self.legal_moves_from(position))
        return moves


__all__ = ["BoardSnapshot", "CheckersGame"]
