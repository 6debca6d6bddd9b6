"""Tests pour l'encodage ObservationTensor."""

from __future__ import annotations

import numpy as np
import pytest

from checkers.engine.board import Piece, Player, Position, Rank
from checkers.engine.state import CheckersGame
from checkers.sim.features import (
    PLANE_OPPONENT_KING,
    PLANE_OPPONENT_NORMAL,
    PLANE_OWN_KING,
    PLANE_OWN_NORMAL,
    ObservationTensor,
    build_observation,
)
from checkers.sim.runner import ActionSpace, build_default_move_catalog


class TestObservationBuilder:
    def test_initial_shapes_and_counts(self):
        observation = build_observation(CheckersGame().snapshot())

        assert isinstance(observation, ObservationTensor)
        assert observation.pieces.shape == (4, 8, 8)
        assert observation.pieces.dtype == np.float32
        assert observation.must_continue.shape == (8, 8)
        assert observation.metadata.tolist() == [1.0, 0.0]
        assert observation.legal_moves_mask.shape == (0,)

        assert observation.pieces[PLANE_OWN_NORMAL].sum() == 12
        assert observation.pieces[PLANE_OPPONENT_NORMAL].sum() == 12
        assert observation.pieces[PLANE_OWN_NORMAL, 0, 1] == 1.0
        assert observation.pieces[PLANE_OPPONENT_NORMAL, 7, 0] == 1.0

    def test_perspective_follows_player_to_move(self):
        game = CheckersGame()
        game.attempt_move(Position(2, 1), Position(3, 2))

        observation = build_observation(game.snapshot())

        assert observation.metadata[0] == 0.0
        assert observation.pieces[PLANE_OWN_NORMAL, 7, 0] == 1.0
        assert observation.pieces[PLANE_OPPONENT_NORMAL, 3, 2] == 1.0

    def test_kings_and_forced_continuation(self):
        game = CheckersGame.from_pieces(
            {
                Position(4, 3): Piece(Player.RED, Rank.KING),
                Position(5, 4): Piece(Player.BLACK, Rank.KING),
            },
            must_continue=Position(4, 3),
        )

        observation = build_observation(game.snapshot())

        assert observation.pieces[PLANE_OWN_KING, 4, 3] == 1.0
        assert observation.pieces[PLANE_OPPONENT_KING, 5, 4] == 1.0
        assert observation.pieces[PLANE_OWN_NORMAL].sum() == 0
        assert observation.must_continue[4, 3] == 1.0
        assert observation.must_continue.sum() == 1.0
        assert observation.metadata[1] == 1.0

    def test_legal_moves_mask_aligned_with_action_space(self):
        game = CheckersGame()
        space = ActionSpace(build_default_move_catalog())

        observation = build_observation(
            game.snapshot(), action_space=space, legal_moves=game.legal_moves()
        )

        assert observation.legal_moves_mask.dtype == np.bool_
        assert observation.legal_moves_mask.shape == (len(space),)
        assert int(observation.legal_moves_mask.sum()) == 7

    def test_mask_requires_legal_moves(self):
        space = ActionSpace(build_default_move_catalog())

        with pytest.raises(ValueError):
            build_observation(CheckersGame().snapshot(), action_space=space)
