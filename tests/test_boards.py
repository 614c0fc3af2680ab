"""
tests/test_boards.py

"""

import pytest

from sudokugen.boards import (
    assert_solvable_board,
    assert_valid_board,
    board_grid_to_string,
    board_string_to_grid,
    count_distinct_digits,
    count_givens,
    format_board,
    parse_board_text,
    validate_board,
)
from sudokugen.common import BLANK_BOARD, BoardValidationError, TooFewGivens
from sudokugen.sudoku import DEMO_SUDOKU_1

from sample_boards import GRID1, GRID2, SOLUTION1


def test_validate_board_accepts_good_boards():
    for board in (GRID1, GRID2, SOLUTION1, BLANK_BOARD):
        assert validate_board(board) is None


def test_validate_board_reasons():
    empty = validate_board("")
    assert empty == "Empty board"
    assert validate_board(None) == empty

    short = validate_board(GRID1[:80])
    assert short == "Invalid board size. Board must be exactly 81 squares."
    assert validate_board(GRID1 + ".") == short

    bad_char = validate_board("0" + GRID1[1:])
    assert bad_char == "Invalid board character encountered at index 0: 0"
    assert validate_board(GRID1[:40] + "x" + GRID1[41:]) == (
        "Invalid board character encountered at index 40: x")

    assert len({empty, short, bad_char}) == 3


def test_assert_valid_board():
    assert_valid_board(GRID1)
    with pytest.raises(BoardValidationError) as excinfo:
        assert_valid_board("123")
    assert excinfo.value.reason == validate_board("123")
    assert isinstance(excinfo.value, ValueError)


def test_givens():
    assert count_givens(BLANK_BOARD) == 0
    assert count_givens(SOLUTION1) == 81
    assert count_givens(GRID1) == 32
    assert count_distinct_digits(GRID2) == 8
    assert_solvable_board(GRID1)
    with pytest.raises(TooFewGivens) as excinfo:
        assert_solvable_board(SOLUTION1[:16] + "." * 65)
    assert excinfo.value.n_givens == 16


def test_grid_round_trip():
    for board in (GRID1, GRID2, SOLUTION1, BLANK_BOARD):
        grid = board_string_to_grid(board)
        assert len(grid) == 9
        assert all(len(row) == 9 for row in grid)
        assert board_grid_to_string(grid) == board
        assert board_string_to_grid(board_grid_to_string(grid)) == grid


def test_grid_is_row_major():
    grid = board_string_to_grid(SOLUTION1)
    assert "".join(grid[0]) == SOLUTION1[:9]
    assert grid[1][0] == SOLUTION1[9]


def test_parse_board_text():
    board = parse_board_text(DEMO_SUDOKU_1)
    assert len(board) == 81
    assert board[:18] == "." * 9 + "..23.145."
    assert parse_board_text(GRID1) == GRID1
    assert parse_board_text(f"  {GRID1}\n") == GRID1
    with pytest.raises(BoardValidationError):
        parse_board_text("# nothing here\n")


def test_format_board_round_trips_through_parser():
    text = format_board(GRID1)
    lines = text.split("\n")
    assert len(lines) == 11
    assert lines[0] == "..3 .2. 6.."
    assert lines[3] == ""
    assert parse_board_text(text) == GRID1
