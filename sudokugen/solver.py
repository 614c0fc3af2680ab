#!/usr/bin/env python

"""
sudokugen/solver.py

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

Solving boards by constraint propagation and search.

"""

import logging
from typing import List, Optional

from sudokugen.boards import assert_solvable_board, assert_valid_board
from sudokugen.candidates import CandidateMap
from sudokugen.common import Contradiction
from sudokugen.search import search

log = logging.getLogger(__name__)


def solve_candidates(board: str, reverse: bool = False,
                     record_working: bool = False) -> Optional[CandidateMap]:
    """
    As for :func:`solve`, but returns the solved :class:`CandidateMap`, which
    carries the working if ``record_working`` is set.
    """
    assert_solvable_board(board)
    try:
        candidates = CandidateMap.from_board(board,
                                             record_working=record_working)
    except Contradiction as e:
        log.debug(f"Givens are inconsistent: {e}")
        return None
    return search(candidates, reverse=reverse)


def solve(board: str, reverse: bool = False) -> Optional[str]:
    """
    Solves a board.

    Args:
        board:
            81-character board string, with at least 17 givens
        reverse:
            search candidates in reverse order

    Returns:
        the solved board string, or ``None`` if there's no solution

    Raises:
        :exc:`BoardValidationError` for an invalid board;
        :exc:`TooFewGivens` if there are fewer than 17 givens
    """
    result = solve_candidates(board, reverse=reverse)
    if result is None:
        return None
    return result.to_board()


def get_candidates(board: str) -> Optional[List[List[str]]]:
    """
    Returns the candidates for each cell, after propagation from the givens,
    as a 9x9 grid of candidate strings (e.g. ``"1479"``), or ``None`` if the
    givens contradict each other.
    """
    assert_valid_board(board)
    try:
        candidates = CandidateMap.from_board(board)
    except Contradiction as e:
        log.debug(f"Givens are inconsistent: {e}")
        return None
    return candidates.as_grid()


def has_unique_solution(board: str) -> bool:
    """
    Does this board have exactly one solution?

    Forward and reverse searches explore the same tree, in mirror-image
    order, so they find the same solution only if there's just one.
    """
    forward = solve(board)
    if forward is None:
        return False
    return solve(board, reverse=True) == forward
