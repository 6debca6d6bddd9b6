from checkers.engine import rules


def test_board_constants_defined():
    assert rules.BOARD_SIZE == 8
    assert rules.HOME_ROW_COUNT == 3
    assert rules.PIECES_PER_PLAYER == 12


def test_offsets_cover_the_four_diagonals():
    assert set(rules.STEP_OFFSETS) == {(-1, -1), (-1, 1), (1, -1), (1, 1)}
    assert set(rules.JUMP_OFFSETS) == {(-2, -2), (-2, 2), (2, -2), (2, 2)}
    assert len(rules.ALL_OFFSETS) == 8
