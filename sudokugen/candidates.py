#!/usr/bin/env python

"""
sudokugen/candidates.py

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

**Candidate digits per cell, and constraint propagation.**

The digits still possible for each cell are held as a 9-bit mask: bit
``d - 1`` is set if digit ``d`` is still possible. A cell with one candidate
is solved; a cell with none means the puzzle, as it stands, is impossible.

Two mutually recursive operations do the work:

- :meth:`CandidateMap.eliminate` removes a digit from a cell, and then

  - if that leaves the cell with one candidate, eliminates that candidate
    from all the cell's peers ("Naked Singles");

  - if that leaves only one place for the digit in one of the cell's units,
    assigns the digit there ("Hidden Singles").

- :meth:`CandidateMap.assign` eliminates every other digit from a cell.

Both modify the map in place. A contradiction raises :exc:`Contradiction`,
after which the map is junk; anyone who wants to recover (e.g. the search
engine) must work on a :meth:`CandidateMap.clone`.

"""

import logging
from typing import Dict, FrozenSet, List, Optional, Tuple

from sudokugen.boards import assert_valid_board
from sudokugen.common import (
    BLANK,
    Contradiction,
    DIGITS,
    DISPLAY_INITIAL,
    DISPLAY_SOLVED,
    DISPLAY_UNKNOWN,
    N,
    RANK,
    SPACE,
)
from sudokugen.topology import (
    cell_name,
    SQUARE_PEERS_MAP,
    SQUARE_UNITS_MAP,
    SQUARES,
    UNIT_DESCRIPTIONS,
)

log = logging.getLogger(__name__)


# =============================================================================
# Digit masks
# =============================================================================

ALL_DIGITS_MASK = (1 << N) - 1  # 0b111111111
DIGIT_BITS = {d: 1 << i for i, d in enumerate(DIGITS)}
# Lookup tables, indexed by mask:
MASK_DIGITS = tuple(
    "".join(d for i, d in enumerate(DIGITS) if mask & (1 << i))
    for mask in range(ALL_DIGITS_MASK + 1)
)  # e.g. MASK_DIGITS[0b101] == "13"
MASK_COUNT = tuple(len(digits) for digits in MASK_DIGITS)


# =============================================================================
# CandidateMap
# =============================================================================

class CandidateMap(object):
    """
    Maps each cell to the digits still possible there.
    """
    def __init__(self, other: "CandidateMap" = None,
                 record_working: bool = False) -> None:
        """
        Initialize with "everything is possible", or copy from another.

        Args:
            other:
                other object to copy
            record_working:
                keep a human-readable note of each deduction, in
                :attr:`working`?
        """
        if other is not None:
            # The masks are immutable ints, so a new dict is a full copy.
            self.possible = dict(other.possible)
            self.initial_cells = other.initial_cells
            self.guess_level = other.guess_level
            self.record_working = other.record_working
            self.working = list(other.working)
        else:
            self.possible = {
                s: ALL_DIGITS_MASK for s in SQUARES
            }  # type: Dict[str, int]
            self.initial_cells = frozenset()  # type: FrozenSet[str]
            self.guess_level = 0
            self.record_working = record_working
            self.working = []  # type: List[str]

    def clone(self) -> "CandidateMap":
        return self.__class__(other=self)

    @classmethod
    def from_board(cls, board: str,
                   record_working: bool = False) -> "CandidateMap":
        """
        Builds a candidate map from a board: starts with every digit possible
        everywhere, then assigns each given digit (in board order) and
        propagates.

        Raises:
            :exc:`BoardValidationError` if the board is invalid
            :exc:`Contradiction` if the givens are inconsistent
        """
        assert_valid_board(board)
        candidates = cls(record_working=record_working)
        candidates.initial_cells = frozenset(
            s for s, char in zip(SQUARES, board) if char in DIGITS)
        for square, char in zip(SQUARES, board):
            if char in DIGITS:
                candidates.assign(square, char, source="Starting value")
        return candidates

    # -------------------------------------------------------------------------
    # Show your working
    # -------------------------------------------------------------------------

    def note(self, msg: str) -> None:
        """
        Save some working.
        """
        self.working.append(msg)
        log.debug(msg)

    # -------------------------------------------------------------------------
    # Information
    # -------------------------------------------------------------------------

    def digits(self, cell: str) -> str:
        """
        The possible digits for a cell, as a string, in ascending order.
        """
        return MASK_DIGITS[self.possible[cell]]

    def n_possibilities(self, cell: str) -> int:
        """
        Number of possible digits for a cell.
        """
        return MASK_COUNT[self.possible[cell]]

    def is_possible(self, cell: str, digit: str) -> bool:
        return bool(self.possible[cell] & DIGIT_BITS[digit])

    def n_unknown_cells(self) -> int:
        """
        Number of unsolved cells. Maximum is 81.
        """
        return sum(1 for mask in self.possible.values()
                   if MASK_COUNT[mask] != 1)

    def n_possibilities_overall(self) -> int:
        """
        Number of cell/digit possibilities overall.
        Minimum is 81 (solved). Maximum is 729.
        """
        return sum(MASK_COUNT[mask] for mask in self.possible.values())

    def solved_cells(self) -> List[str]:
        """
        Cells with exactly one candidate, in cell order.
        """
        return [s for s in SQUARES if MASK_COUNT[self.possible[s]] == 1]

    def solved(self) -> bool:
        """
        Are we there yet?
        """
        return all(MASK_COUNT[mask] == 1 for mask in self.possible.values())

    def most_constrained_cell(self) -> Optional[str]:
        """
        The unsolved cell with the fewest candidates (the first such, in cell
        order, if there is a tie), or ``None`` if every cell is solved.
        """
        best = None  # type: Optional[str]
        best_n = N + 1
        for s in SQUARES:
            n = MASK_COUNT[self.possible[s]]
            if 1 < n < best_n:
                best = s
                best_n = n
                if n == 2:  # can't do better
                    break
        return best

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def as_grid(self) -> List[List[str]]:
        """
        The candidates as a 9x9 list (rows) of lists of candidate strings.
        """
        return [
            [self.digits(cell_name(r, c)) for c in range(N)]
            for r in range(N)
        ]

    def to_board(self) -> str:
        """
        Board string with the solved cells filled in and everything else
        blank.
        """
        return "".join(
            MASK_DIGITS[mask] if MASK_COUNT[mask] == 1 else BLANK
            for mask in (self.possible[s] for s in SQUARES)
        )

    # -------------------------------------------------------------------------
    # Visuals
    # -------------------------------------------------------------------------

    @staticmethod
    def _pstr_row_col(row_zb: int, col_zb: int, digit_zb: int) \
            -> Tuple[int, int]:
        """
        For __str__(): ``row, col`` (``y, x``) coordinates.
        """
        t = RANK
        x_base = col_zb * (t + 1)
        y_base = row_zb * (t + 1)
        x_offset = digit_zb % t
        y_offset = digit_zb // t
        return (y_base + y_offset), (x_base + x_offset)

    def __str__(self) -> str:
        """
        Returns a visual representation of possibilities.
        """
        pn = N * 4 - 1
        t = RANK

        # Create grid of characters
        strings = [[SPACE for _ in range(pn)] for _ in range(pn)]

        # Prettify
        cell_boundaries = ((t + 1) * t - 1, (t + 1) * (t * 2) - 1)
        for r in cell_boundaries:
            for i in range(pn):
                strings[r][i] = "-"
        for c in cell_boundaries:
            for i in range(pn):
                strings[i][c] = "|"
        for r in cell_boundaries:
            for c in cell_boundaries:
                strings[r][c] = "+"

        # Data
        for r in range(N):
            for c in range(N):
                cell = cell_name(r, c)
                initial_value = cell in self.initial_cells
                cell_solved = self.n_possibilities(cell) == 1
                for d_zb, digit in enumerate(DIGITS):
                    y, x = self._pstr_row_col(r, c, d_zb)
                    if self.is_possible(cell, digit):
                        txt = digit
                    elif initial_value:
                        txt = DISPLAY_INITIAL
                    elif cell_solved:
                        txt = DISPLAY_SOLVED
                    else:
                        txt = DISPLAY_UNKNOWN
                    strings[y][x] = txt
        return "\n".join("".join(line) for line in strings)

    # -------------------------------------------------------------------------
    # Propagation
    # -------------------------------------------------------------------------

    def assign(self, cell: str, digit: str, source: str = "?") -> bool:
        """
        Assign a digit to a cell, by eliminating all the other digits still
        possible there, and propagate.

        Returns: improved?

        Raises:
            :exc:`Contradiction`
        """
        bit = DIGIT_BITS[digit]
        if not self.possible[cell] & bit:
            raise Contradiction(
                f"{source}: Assigning digit {digit} to {cell} "
                f"where that is known to be impossible")
        improved = False
        for other_digit in MASK_DIGITS[self.possible[cell] & ~bit]:
            improved = self.eliminate(cell, other_digit,
                                      source=source) or improved
        if improved and self.record_working:
            self.note(f"{source}: Assigning digit {digit} to {cell}")
        return improved

    def eliminate(self, cell: str, digit: str, source: str = "?") -> bool:
        """
        Eliminates a digit as a possibility from a cell, and propagate.
        Eliminating a digit that's already gone does nothing.

        Returns: improved?

        Raises:
            :exc:`Contradiction`
        """
        bit = DIGIT_BITS[digit]
        mask = self.possible[cell]
        if not mask & bit:
            return False
        mask &= ~bit
        self.possible[cell] = mask
        n = MASK_COUNT[mask]
        if n == 0:
            raise Contradiction(f"{source}: No digits left for {cell}")
        if n == 1:
            # Naked single: the peers can't have this cell's digit.
            remaining = MASK_DIGITS[mask]
            if self.record_working:
                self.note(f"{source}: {cell} must be {remaining}")
            for peer in SQUARE_PEERS_MAP[cell]:
                self.eliminate(peer, remaining, source=source)
        for unit in SQUARE_UNITS_MAP[cell]:
            places = [s for s in unit if self.possible[s] & bit]
            if not places:
                raise Contradiction(
                    f"{source}: Nowhere for digit {digit} in "
                    f"{UNIT_DESCRIPTIONS[unit]}")
            if len(places) == 1:
                # Hidden single: the only place for this digit in the unit.
                if self.record_working and self.n_possibilities(
                        places[0]) > 1:
                    self.note(
                        f"{source}: Only possibility for digit {digit} in "
                        f"{UNIT_DESCRIPTIONS[unit]} is {places[0]}")
                self.assign(places[0], digit, source=source)
        return True
