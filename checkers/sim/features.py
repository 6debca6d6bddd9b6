"""Encodage numpy d'un BoardSnapshot pour les scripts de simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from checkers.engine.actions import Move
from checkers.engine.board import Player
from checkers.engine.rules import BOARD_SIZE
from checkers.engine.state import BoardSnapshot
from checkers.sim.runner import ActionSpace

# Ordre des plans du tenseur `pieces`
PLANE_OWN_NORMAL = 0
PLANE_OWN_KING = 1
PLANE_OPPONENT_NORMAL = 2
PLANE_OPPONENT_KING = 3
PIECE_PLANES = 4


@dataclass(frozen=True)
class ObservationTensor:
    """Tenseurs décrivant une position du point de vue du joueur au trait."""

    pieces: np.ndarray
    must_continue: np.ndarray
    metadata: np.ndarray
    legal_moves_mask: np.ndarray


def build_observation(
    snapshot: BoardSnapshot,
    *,
    action_space: ActionSpace | None = None,
    legal_moves: Iterable[Move] | None = None,
) -> ObservationTensor:
    """Construit un ObservationTensor à partir d'un BoardSnapshot.

    L'encodage est ego-centré: les plans 0 et 1 contiennent toujours les
    pièces du joueur au trait, les plans 2 et 3 celles de l'adversaire. Les
    coordonnées ne sont pas retournées pour BLACK.

    Args:
        snapshot: position à encoder.
        action_space: catalogue utilisé pour aligner le masque (optionnel).
        legal_moves: coups légaux de la position, requis avec `action_space`.

    Returns:
        ObservationTensor; `legal_moves_mask` est vide sans catalogue.
    """

    return ObservationTensor(
        pieces=_encode_pieces(snapshot),
        must_continue=_encode_must_continue(snapshot),
        metadata=_encode_metadata(snapshot),
        legal_moves_mask=_encode_legal_moves(action_space, legal_moves),
    )


def _encode_pieces(snapshot: BoardSnapshot) -> np.ndarray:
    planes = np.zeros((PIECE_PLANES, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    mover = snapshot.current_player
    for position, piece in snapshot.pieces():
        if piece.player is mover:
            plane = PLANE_OWN_KING if piece.is_king else PLANE_OWN_NORMAL
        else:
            plane = PLANE_OPPONENT_KING if piece.is_king else PLANE_OPPONENT_NORMAL
        planes[plane, position.row, position.col] = 1.0
    return planes


def _encode_must_continue(snapshot: BoardSnapshot) -> np.ndarray:
    plane = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    if snapshot.must_continue is not None:
        plane[snapshot.must_continue.row, snapshot.must_continue.col] = 1.0
    return plane


def _encode_metadata(snapshot: BoardSnapshot) -> np.ndarray:
    return np.array(
        [
            1.0 if snapshot.current_player is Player.RED else 0.0,
            1.0 if snapshot.must_continue is not None else 0.0,
        ],
        dtype=np.float32,
    )


def _encode_legal_moves(
    action_space: ActionSpace | None,
    legal_moves: Iterable[Move] | None,
) -> np.ndarray:
    if action_space is None:
        return np.zeros((0,), dtype=np.bool_)
    if legal_moves is None:
        raise ValueError("legal_moves est requis pour encoder le masque")
    moves: Sequence[Move] = tuple(legal_moves)
    action_space.register(moves)
    return np.array(action_space.mask(moves), dtype=np.bool_)


__all__ = [
    "ObservationTensor",
    "build_observation",
    "PIECE_PLANES",
    "PLANE_OWN_NORMAL",
    "PLANE_OWN_KING",
    "PLANE_OPPONENT_NORMAL",
    "PLANE_OPPONENT_KING",
]
