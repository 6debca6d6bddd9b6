import json

from checkers.engine.board import Piece, Player, Position, Rank
from checkers.engine.serialize import (
    EMPTY_GLYPH,
    piece_glyph,
    render_text,
    snapshot_to_dict,
    snapshot_to_rows,
)
from checkers.engine.state import CheckersGame

INITIAL_RENDER = """Current Player: RED
  0 1 2 3 4 5 6 7
0 . r . r . r . r
1 r . r . r . r .
2 . r . r . r . r
3 . . . . . . . .
4 . . . . . . . .
5 b . b . b . b .
6 . b . b . b . b
7 b . b . b . b ."""


def test_piece_glyphs():
    assert piece_glyph(None) == EMPTY_GLYPH == "."
    assert piece_glyph(Piece(Player.RED)) == "r"
    assert piece_glyph(Piece(Player.BLACK)) == "b"
    assert piece_glyph(Piece(Player.RED, Rank.KING)) == "R"
    assert piece_glyph(Piece(Player.BLACK, Rank.KING)) == "B"


def test_render_initial_board():
    assert render_text(CheckersGame().snapshot()) == INITIAL_RENDER


def test_render_after_move_shows_next_player():
    game = CheckersGame()
    game.attempt_move(Position(2, 1), Position(3, 2))

    lines = render_text(game.snapshot()).splitlines()

    assert lines[0] == "Current Player: BLACK"
    assert lines[4] == "2 . . . r . r . r"
    assert lines[5] == "3 . . r . . . . ."


def test_rows_show_kings_in_uppercase():
    game = CheckersGame.from_pieces(
        {
            Position(0, 1): Piece(Player.BLACK, Rank.KING),
            Position(7, 6): Piece(Player.RED, Rank.KING),
        }
    )

    rows = snapshot_to_rows(game.snapshot())

    assert rows[0] == ".B......"
    assert rows[7] == "......R."


def test_snapshot_dict_is_json_friendly():
    game = CheckersGame.from_pieces(
        {
            Position(2, 1): Piece(Player.RED),
            Position(3, 2): Piece(Player.BLACK),
            Position(5, 4): Piece(Player.BLACK),
        },
        must_continue=Position(2, 1),
    )

    data = snapshot_to_dict(game.snapshot())

    assert json.loads(json.dumps(data)) == data
    assert data["current_player"] == "RED"
    assert data["must_continue"] == [2, 1]
    assert data["pieces"][0] == {"row": 2, "col": 1, "player": "RED", "rank": "NORMAL"}
    assert len(data["pieces"]) == 3
    assert len(data["rows"]) == 8
