#!/usr/bin/env python

"""
sudokugen/boards.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

Board strings: validation, conversion and display.

A board is an 81-character string, read row by row from the top left, in
which each character is a digit ``1``-``9`` or the blank marker ``.``.

"""

from typing import List, Optional

from sudokugen.common import (
    BLANK,
    BoardValidationError,
    DIGITS,
    HASH,
    MIN_GIVENS,
    N,
    NEWLINE,
    NR_SQUARES,
    RANK,
    SPACE,
    TooFewGivens,
)

REASON_EMPTY = "Empty board"
REASON_SIZE = (
    f"Invalid board size. Board must be exactly {NR_SQUARES} squares.")


# =============================================================================
# Validation
# =============================================================================

def validate_board(board: Optional[str]) -> Optional[str]:
    """
    Checks a board.

    Returns:
        ``None`` if the board is valid, or a string giving the reason why it
        isn't.
    """
    if not board:
        return REASON_EMPTY
    if len(board) != NR_SQUARES:
        return REASON_SIZE
    for i, char in enumerate(board):
        if char not in DIGITS and char != BLANK:
            return (
                f"Invalid board character encountered at index {i}: {char}")
    return None


def assert_valid_board(board: Optional[str]) -> None:
    """
    Raises :exc:`BoardValidationError` unless the board is valid.
    """
    reason = validate_board(board)
    if reason is not None:
        raise BoardValidationError(reason)


def count_givens(board: str) -> int:
    """
    Number of known (non-blank) cells.
    """
    return sum(1 for char in board if char in DIGITS)


def count_distinct_digits(board: str) -> int:
    """
    Number of different digits among the givens.
    """
    return len(set(char for char in board if char in DIGITS))


def assert_solvable_board(board: str) -> None:
    """
    Checks a board that is about to be solved: it must be valid and have at
    least :data:`MIN_GIVENS` givens.
    """
    assert_valid_board(board)
    n_givens = count_givens(board)
    if n_givens < MIN_GIVENS:
        raise TooFewGivens(n_givens)


# =============================================================================
# Conversions
# =============================================================================

def board_string_to_grid(board: str) -> List[List[str]]:
    """
    Converts a board string to a 9x9 list (rows) of lists (cells).
    """
    return [list(board[row_zb * N:(row_zb + 1) * N]) for row_zb in range(N)]


def board_grid_to_string(grid: List[List[str]]) -> str:
    """
    Converts a 9x9 grid, as from :func:`board_string_to_grid`, to a board
    string.
    """
    return "".join(grid[row_zb][col_zb]
                   for row_zb in range(N)
                   for col_zb in range(N))


def parse_board_text(string_version: str) -> str:
    """
    Reads a board from text, and returns a validated board string.

    - Lines starting with ``#`` are comments.
    - All whitespace is ignored, so this accepts a plain 81-character string
      or a box-spaced layout such as:

    .. code-block:: none

        # Coton 54, Coton Community News Dec 2019-Jan 2020

        ... ... ...
        ..2 3.1 45.
        .1. ... .6.

        .47 .5. 38.
        ... 7.3 ...
        .36 ... 14.

        .7. ... .9.
        .91 4.5 6..
        ... ..9 ...
    """
    lines = [line for line in string_version.splitlines()
             if not line.lstrip().startswith(HASH)]
    board = "".join("".join(line.split()) for line in lines)
    assert_valid_board(board)
    return board


# =============================================================================
# Display
# =============================================================================

def format_board(board: str) -> str:
    """
    Human-readable version of a board: a space between boxes horizontally
    and a blank line between boxes vertically. This is the same layout that
    :func:`parse_board_text` reads.
    """
    assert_valid_board(board)
    x = ""
    for row_zb in range(N):
        for col_zb in range(N):
            x += board[row_zb * N + col_zb]
            if col_zb % RANK == RANK - 1 and col_zb < N - 1:
                x += SPACE
        if row_zb < N - 1:
            x += NEWLINE
            if row_zb % RANK == RANK - 1:
                x += NEWLINE
    return x
