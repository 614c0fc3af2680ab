#!/usr/bin/env python

"""
sudokugen/search.py

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

Depth-first search ("guessing") over a candidate map, when propagation alone
can't finish the job.

Strategy:

1.  If every cell has exactly one candidate, that's the answer.

2.  Otherwise, pick the unsolved cell with fewest candidates, and for each of
    its candidates in turn, assign it to a copy of the map (propagating), and
    search from there. The first branch to succeed wins; if none does, there
    is no solution from here.

"""

import logging
from typing import Optional

from sudokugen.candidates import CandidateMap
from sudokugen.common import Contradiction

log = logging.getLogger(__name__)


def search(candidates: CandidateMap,
           reverse: bool = False) -> Optional[CandidateMap]:
    """
    Searches for a solution.

    Args:
        candidates:
            the starting point; not modified
        reverse:
            try each cell's candidates in descending, not ascending, order?
            If the forward and reverse searches find the same answer, it is
            the only answer.

    Returns:
        a solved :class:`CandidateMap`, or ``None`` if there is no solution
    """
    if candidates.solved():
        return candidates
    if log.isEnabledFor(logging.DEBUG):
        log.debug(f"Search at guess level {candidates.guess_level}: "
                  f"{candidates.n_unknown_cells()} unknown cells, "
                  f"{candidates.n_possibilities_overall()} possibilities")
    cell = candidates.most_constrained_cell()
    digits = candidates.digits(cell)
    if reverse:
        digits = digits[::-1]
    guess_level = candidates.guess_level + 1
    for digit in digits:
        p = candidates.clone()
        p.guess_level = guess_level
        source = f"Guess level {guess_level}, {cell}={digit}"
        log.debug(f"Guessing: {source} (of {digits})")
        try:
            p.assign(cell, digit, source=source)
        except Contradiction as e:
            log.debug(f"Bad guess at level {guess_level}; moving on: {e}")
            continue
        result = search(p, reverse=reverse)
        if result is not None:
            return result
    return None
