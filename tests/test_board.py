"""Tests du plateau: joueurs, positions, pièces et mise en place."""

import pytest

from checkers.engine.board import Board, Piece, Player, Position, Rank
from checkers.engine.rules import BOARD_SIZE, PIECES_PER_PLAYER


class TestPlayer:
    def test_opponent(self):
        assert Player.RED.opponent is Player.BLACK
        assert Player.BLACK.opponent is Player.RED

    def test_forward_and_promotion_row(self):
        assert Player.RED.forward == 1
        assert Player.BLACK.forward == -1
        assert Player.RED.promotion_row == 7
        assert Player.BLACK.promotion_row == 0

    def test_home_rows(self):
        assert list(Player.RED.home_rows) == [0, 1, 2]
        assert list(Player.BLACK.home_rows) == [5, 6, 7]


class TestPosition:
    def test_equality_by_both_fields(self):
        assert Position(2, 1) == Position(2, 1)
        assert Position(2, 1) != Position(1, 2)
        assert len({Position(2, 1), Position(2, 1)}) == 1

    @pytest.mark.parametrize(
        "row, col, expected",
        [(0, 0, True), (7, 7, True), (-1, 0, False), (0, 8, False), (8, 3, False)],
    )
    def test_is_on_board(self, row, col, expected):
        assert Position(row, col).is_on_board() is expected

    def test_dark_squares(self):
        assert Position(0, 1).is_dark()
        assert Position(1, 0).is_dark()
        assert not Position(0, 0).is_dark()
        dark = [
            Position(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if Position(row, col).is_dark()
        ]
        assert len(dark) == 32

    def test_offset(self):
        assert Position(3, 2).offset(1, -1) == Position(4, 1)


class TestPiece:
    def test_default_rank_is_normal(self):
        piece = Piece(Player.RED)
        assert piece.rank is Rank.NORMAL
        assert not piece.is_king

    def test_promoted_returns_king_of_same_player(self):
        king = Piece(Player.BLACK).promoted()
        assert king.is_king
        assert king.player is Player.BLACK

    def test_promoting_a_king_is_a_no_op(self):
        king = Piece(Player.RED, Rank.KING)
        assert king.promoted() is king


class TestBoardSetup:
    @pytest.fixture
    def board(self) -> Board:
        return Board.standard()

    def test_twelve_pieces_per_player(self, board):
        assert board.count(Player.RED) == PIECES_PER_PLAYER
        assert board.count(Player.BLACK) == PIECES_PER_PLAYER

    def test_all_pieces_normal_on_dark_home_squares(self, board):
        for position, piece in board.pieces():
            assert piece.rank is Rank.NORMAL
            assert position.is_dark()
            assert position.row in piece.player.home_rows

    def test_other_cells_empty(self, board):
        for row in range(3, 5):
            for col in range(BOARD_SIZE):
                assert board[Position(row, col)] is None

    def test_first_rows_layout(self, board):
        assert board[Position(0, 1)] == Piece(Player.RED)
        assert board[Position(0, 0)] is None
        assert board[Position(7, 0)] == Piece(Player.BLACK)
        assert board[Position(7, 1)] is None

    def test_setup_clears_previous_content(self, board):
        board[Position(3, 0)] = Piece(Player.BLACK, Rank.KING)
        board.setup()
        assert board[Position(3, 0)] is None
        assert board.count(Player.BLACK) == PIECES_PER_PLAYER

    def test_rows_is_an_immutable_copy(self, board):
        rows = board.rows()
        board.clear()
        assert rows[0][1] == Piece(Player.RED)
        assert board[Position(0, 1)] is None
