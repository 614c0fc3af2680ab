#!/usr/bin/env python

"""
sudokugen/common.py

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

Common constants, exceptions and functions for the Sudoku generator/solver.

"""

import logging
import sys
import traceback
from typing import Callable

from mip import Constr, Model, Var

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

BLANK = "."
NEWLINE = "\n"
SPACE = " "
HASH = "#"
DISPLAY_INITIAL = "♦"
DISPLAY_UNKNOWN = "·"
DISPLAY_SOLVED = "■"
ALMOST_ONE = 0.99

RANK = 3  # 3x3 boxes
N = RANK ** 2  # 9 rows, 9 columns, 9 digits
NR_SQUARES = N * N  # 81

DIGITS = "123456789"
ROWS = "ABCDEFGHI"  # row labels
COLS = DIGITS  # column labels

MIN_GIVENS = 17
# http://pi.math.cornell.edu/~mec/Summer2009/Mahmood/More.html
# A well-formed Sudoku needs at least (N - 1) distinct given digits.
MIN_DISTINCT_GIVEN_DIGITS = N - 1

BLANK_BOARD = BLANK * NR_SQUARES

EXIT_FAILURE = 1
EXIT_SUCCESS = 0


# =============================================================================
# Exceptions
# =============================================================================

class SudokuError(Exception):
    """
    Base class for our exceptions.
    """
    pass


class BoardValidationError(SudokuError, ValueError):
    """
    A board string is empty, the wrong length, or contains a character that
    is neither a digit 1-9 nor the blank marker.
    """
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TooFewGivens(SudokuError, ValueError):
    """
    A board has too few givens to be solved.
    """
    def __init__(self, n_givens: int) -> None:
        super().__init__(
            f"Too few givens ({n_givens}). Minimum givens is {MIN_GIVENS}")
        self.n_givens = n_givens


class Contradiction(SudokuError):
    """
    Constraint propagation found a cell with no candidates left, or a digit
    with nowhere to go in some unit.
    """
    pass


class GenerationFailure(SudokuError):
    """
    The generator used up its permitted number of attempts.
    """
    pass


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
