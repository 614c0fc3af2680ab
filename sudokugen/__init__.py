#!/usr/bin/env python

"""
sudokugen/__init__.py

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

Sudoku generation and solving, by constraint propagation and search.

"""

from sudokugen.boards import (  # noqa: F401
    board_grid_to_string,
    board_string_to_grid,
    count_givens,
    format_board,
    parse_board_text,
    validate_board,
)
from sudokugen.common import (  # noqa: F401
    BLANK,
    BLANK_BOARD,
    BoardValidationError,
    Contradiction,
    GenerationFailure,
    SudokuError,
    TooFewGivens,
)
from sudokugen.generator import DIFFICULTY, generate  # noqa: F401
from sudokugen.solver import (  # noqa: F401
    get_candidates,
    has_unique_solution,
    solve,
)

__version__ = "1.0.0"
