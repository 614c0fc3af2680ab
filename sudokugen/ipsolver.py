#!/usr/bin/env python

"""
sudokugen/ipsolver.py

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

**Solves boards by integer programming.**

This is close to magic. You say "here are my constraints; go" and a few
milliseconds later you have a valid answer. It shares nothing with the
propagation engine, so it makes a good independent check on it.

"""

import logging
from typing import Optional

from mip import BINARY, Model, xsum

from sudokugen.boards import assert_solvable_board
from sudokugen.common import (
    ALMOST_ONE,
    BLANK,
    debug_model_constraints,
    debug_model_vars,
    DIGITS,
    N,
    RANK,
)

log = logging.getLogger(__name__)


def solve_ip(board: str) -> Optional[str]:
    """
    Solves a board via integer programming.

    Returns:
        the solved board string, or ``None`` if there's no solution

    Raises:
        :exc:`BoardValidationError` for an invalid board;
        :exc:`TooFewGivens` if there are fewer than 17 givens
    """
    assert_solvable_board(board)
    m = Model("Sudoku solver")
    m.verbose = 1 if log.isEnabledFor(logging.DEBUG) else 0

    # -------------------------------------------------------------------------
    # Variables
    # -------------------------------------------------------------------------
    x = [
        [
            [
                m.add_var(f"x(row={r + 1}, col={c + 1}, digit={d + 1})",
                          var_type=BINARY)
                for d in range(N)
            ] for c in range(N)
        ] for r in range(N)
    ]  # index as: x[row_zb][col_zb][digit_zb]

    # -------------------------------------------------------------------------
    # Constraints
    # -------------------------------------------------------------------------
    # One digit per cell
    for r in range(N):
        for c in range(N):
            m += xsum(x[r][c][d] for d in range(N)) == 1, f"cell(r={r},c={c})"
    for d in range(N):
        # One of each digit per row
        for r in range(N):
            m += xsum(x[r][c][d] for c in range(N)) == 1, f"row(r={r},d={d})"
        # One of each digit per column
        for c in range(N):
            m += xsum(x[r][c][d] for r in range(N)) == 1, f"col(c={c},d={d})"
        # One of each digit in each 3x3 box
        for box_row in range(RANK):
            for box_col in range(RANK):
                row_base = box_row * RANK
                col_base = box_col * RANK
                m += xsum(
                    x[row_base + row_offset][col_base + col_offset][d]
                    for row_offset in range(RANK)
                    for col_offset in range(RANK)
                ) == 1, f"box(br={box_row},bc={box_col},d={d})"
    # Starting values
    for i, char in enumerate(board):
        if char != BLANK:
            r, c = divmod(i, N)
            m += x[r][c][DIGITS.index(char)] == 1, f"given(r={r},c={c})"

    # -------------------------------------------------------------------------
    # Solve
    # -------------------------------------------------------------------------
    debug_model_constraints(m)
    m.optimize()

    # -------------------------------------------------------------------------
    # Read out answers
    # -------------------------------------------------------------------------
    if not m.num_solutions:
        log.debug("Integer programming found no solution")
        return None
    debug_model_vars(m)
    solution = []
    for r in range(N):
        for c in range(N):
            for d_zb in range(N):
                if x[r][c][d_zb].x > ALMOST_ONE:
                    solution.append(DIGITS[d_zb])
                    break
    return "".join(solution)
