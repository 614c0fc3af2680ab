"""
tests/sample_boards.py

Puzzles and checks shared by the tests.

"""

from sudokugen.common import BLANK, DIGITS
from sudokugen.topology import SQUARES, UNITS

# Project Euler 96, grid 01. Solved by propagation alone.
GRID1 = (
    "..3.2.6..9..3.5..1..18.64....81.29..7.......8..67.82....26.95..8..2.3..9..5.1.3.."
)
SOLUTION1 = (
    "483921657967345821251876493548132976729564138136798245372689514814253769695417382"
)
# Needs search as well as propagation.
GRID2 = (
    "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"
)


def two_solution_board() -> str:
    """
    SOLUTION1 with an 8/6 rectangle (A2, A7, B2, B7) blanked out; those
    digits can go either way round.
    """
    board = list(SOLUTION1)
    for i in (1, 6, 10, 15):
        board[i] = BLANK
    return "".join(board)


def check_solution(puzzle: str, solution: str) -> None:
    """
    Asserts that ``solution`` is a complete, valid grid agreeing with every
    given in ``puzzle``.
    """
    assert len(solution) == len(SQUARES)
    values = dict(zip(SQUARES, solution))
    for unit in UNITS:
        assert sorted(values[s] for s in unit) == list(DIGITS), unit
    for given, answer in zip(puzzle, solution):
        if given != BLANK:
            assert given == answer
