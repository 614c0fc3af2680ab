#!/usr/bin/env python

"""
sudokugen/generator.py

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

**Generates Sudoku puzzles.**

Method:

- Start with nothing known. Visit the cells in random order, assigning each a
  random digit from those still possible there, and propagating.

- Once enough cells are determined (the difficulty) using enough different
  digits, take those cells as the givens, blanking any excess at random.

- Check that it solves. If anything goes wrong, start again.

Puzzles are *not* guaranteed to have a unique solution.

"""

import logging
import random
from typing import Optional, Union

from sudokugen.boards import count_distinct_digits, count_givens
from sudokugen.candidates import CandidateMap
from sudokugen.common import (
    BLANK,
    Contradiction,
    GenerationFailure,
    MIN_DISTINCT_GIVEN_DIGITS,
    MIN_GIVENS,
    NR_SQUARES,
)
from sudokugen.solver import solve
from sudokugen.topology import SQUARES

log = logging.getLogger(__name__)


# =============================================================================
# Difficulty
# =============================================================================

DIFFICULTY_EASY = "easy"
DIFFICULTY = {
    DIFFICULTY_EASY: 62,
    "medium": 53,
    "hard": 44,
    "very-hard": 35,
    "insane": 26,
    "inhuman": 17,
}  # number of givens

Difficulty = Union[str, int, None]


def force_range(nr: int, minimum: int, maximum: int) -> int:
    """
    Clamps ``nr`` to the range ``minimum`` to ``maximum`` inclusive.
    """
    return max(minimum, min(nr, maximum))


def resolve_difficulty(difficulty: Difficulty = None) -> int:
    """
    Converts a difficulty to the number of givens wanted.

    Args:
        difficulty:
            a name from :data:`DIFFICULTY`, or a number of givens, or
            ``None`` for "easy". Numbers are forced into the range 17-81.
            Unknown names mean "easy".
    """
    if difficulty is None:
        difficulty = DIFFICULTY_EASY
    if isinstance(difficulty, str):
        if difficulty not in DIFFICULTY:
            log.warning(f"Unknown difficulty {difficulty!r}; "
                        f"using {DIFFICULTY_EASY!r}")
            difficulty = DIFFICULTY_EASY
        difficulty = DIFFICULTY[difficulty]
    return force_range(int(difficulty), MIN_GIVENS, NR_SQUARES)


# =============================================================================
# SudokuGenerator
# =============================================================================

class SudokuGenerator(object):
    """
    Makes puzzles.
    """
    def __init__(self, rng: random.Random = None,
                 max_attempts: int = None) -> None:
        """
        Args:
            rng:
                source of randomness; pass a seeded :class:`random.Random` for
                reproducible puzzles
            max_attempts:
                give up after this many attempts (``None`` for never)
        """
        assert max_attempts is None or max_attempts > 0
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.n_attempts = 0

    def rand_range(self, n: int) -> int:
        """
        Random integer from 0 (inclusive) to ``n`` (exclusive).
        """
        return self.rng.randrange(n)

    def generate(self, difficulty: Difficulty = None) -> str:
        """
        Generates a puzzle.

        Args:
            difficulty: see :func:`resolve_difficulty`

        Returns:
            a board string with exactly the requested number of givens

        Raises:
            :exc:`GenerationFailure` if we run out of attempts
        """
        n_givens = resolve_difficulty(difficulty)
        self.n_attempts = 0
        while self.max_attempts is None or self.n_attempts < self.max_attempts:
            self.n_attempts += 1
            board = self._attempt(n_givens)
            if board is not None:
                log.debug(f"Generated puzzle with {n_givens} givens after "
                          f"{self.n_attempts} attempt(s)")
                return board
        raise GenerationFailure(
            f"Failed to generate a puzzle with {n_givens} givens in "
            f"{self.max_attempts} attempt(s)")

    def _attempt(self, n_givens: int) -> Optional[str]:
        """
        One go at generating a puzzle. Returns the board, or ``None`` if we
        need to start again.
        """
        candidates = CandidateMap()
        squares = list(SQUARES)
        self.rng.shuffle(squares)
        for square in squares:
            digits = candidates.digits(square)
            digit = digits[self.rand_range(len(digits))]
            try:
                candidates.assign(square, digit, source="Generator")
            except Contradiction as e:
                log.debug(f"Attempt {self.n_attempts} abandoned: {e}")
                return None

            solved_cells = candidates.solved_cells()
            if len(solved_cells) < n_givens:
                continue
            n_distinct = len(set(candidates.digits(s) for s in solved_cells))
            if n_distinct < MIN_DISTINCT_GIVEN_DIGITS:
                continue

            board = self._make_board(candidates, n_givens)
            if count_distinct_digits(board) < MIN_DISTINCT_GIVEN_DIGITS:
                log.debug(f"Attempt {self.n_attempts} abandoned: "
                          f"too few distinct digits left after blanking")
                return None
            if solve(board) is None:
                log.debug(f"Attempt {self.n_attempts} abandoned: "
                          f"board doesn't solve")
                return None
            return board
        return None  # not reached: a full grid passes both tests

    def _make_board(self, candidates: CandidateMap, n_givens: int) -> str:
        """
        Board from the solved cells, with excess givens removed at random.
        """
        board = list(candidates.to_board())
        givens_idxs = [i for i, char in enumerate(board) if char != BLANK]
        n_excess = len(givens_idxs) - n_givens
        if n_excess > 0:
            for i in self.rng.sample(givens_idxs, n_excess):
                board[i] = BLANK
        result = "".join(board)
        assert count_givens(result) == n_givens
        return result


def generate(difficulty: Difficulty = None,
             rng: random.Random = None,
             max_attempts: int = None) -> str:
    """
    Generates a new puzzle. See :class:`SudokuGenerator`.
    """
    return SudokuGenerator(rng=rng, max_attempts=max_attempts).generate(
        difficulty)
