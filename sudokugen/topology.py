#!/usr/bin/env python

"""
sudokugen/topology.py

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

**The fixed structure of a 9x9 Sudoku grid.**

Cells ("squares") are named by a row label and a column label, e.g. ``A1``
(top left) to ``I9`` (bottom right). A *unit* is a row, a column, or a 3x3
box; every unit must contain each digit exactly once. A cell's *peers* are
all the other cells that share a unit with it.

All of this is computed once, at import, and never modified.

"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from sudokugen.common import COLS, N, RANK, ROWS

Unit = Tuple[str, ...]


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a 3x3 box within the Sudoku grid.
    """
    def __init__(self, box_zb: int, rank: int = RANK) -> None:
        """
        Boxes are numbered 0 to N - 1, left to right and then top to bottom.
        For a standard 9x9 (rank 3) Sudoku, with 3x3 boxes, they are numbered
        0-8.

        Args:
            box_zb: box number, as above; zero-based
        """
        assert 0 <= box_zb < rank ** 2, (
            f"box_zb was {box_zb}; must be in range 0 to {rank ** 2 - 1} "
            f"inclusive"
        )
        self.rank = rank
        self.box_zb = box_zb

    def __str__(self) -> str:
        """
        Coordinate-based description for a 3x3 box.
        """
        return f"{{{self.boxrow + 1},{self.boxcol + 1}}}"

    @property
    def boxrow(self) -> int:
        """
        Zero-based row number of the box (not its cells).
        """
        return self.box_zb // self.rank

    @property
    def boxcol(self) -> int:
        """
        Zero-based column number of the box (not its cells).
        """
        return self.box_zb % self.rank

    def top_left_cell(self) -> Tuple[int, int]:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the 3x3 box
        (numbered from 0 to N - 1).
        """
        t = self.rank
        return self.boxrow * t, self.boxcol * t

    def extremes(self) -> Tuple[int, int, int, int]:
        """
        Defines the boundaries of the 3x3 box, numbered from 0 to (N - 1).

        Returns ``row_min, row_max, col_min, col_max``.
        """
        row_min, col_min = self.top_left_cell()
        row_max = row_min + self.rank - 1
        col_max = col_min + self.rank - 1
        return row_min, row_max, col_min, col_max

    def row_labels(self, rows: str = ROWS) -> str:
        row_min, row_max, _, _ = self.extremes()
        return rows[row_min:row_max + 1]

    def col_labels(self, cols: str = COLS) -> str:
        _, _, col_min, col_max = self.extremes()
        return cols[col_min:col_max + 1]


# =============================================================================
# Cells and units
# =============================================================================

def cross(a: Sequence[str], b: Sequence[str]) -> List[str]:
    """
    Cross product of all elements in ``a`` and ``b``, ``a``-major, e.g.

    .. code-block:: python

        cross("abc", "123")
        # ['a1', 'a2', 'a3', 'b1', 'b2', 'b3', 'c1', 'c2', 'c3']
    """
    return [x + y for x in a for y in b]


def cell_name(row_zb: int, col_zb: int) -> str:
    """
    Name of the cell at zero-based ``row_zb``, ``col_zb``; e.g. ``(0, 0)`` is
    ``A1``.
    """
    return ROWS[row_zb] + COLS[col_zb]


def build_units(rows: str = ROWS, cols: str = COLS) -> List[Unit]:
    """
    Returns all 27 units, in a fixed order: the 9 rows (top to bottom), then
    the 9 columns (left to right), then the 9 boxes (left to right within
    each band of three rows, top band first).
    """
    units = []  # type: List[Unit]
    # Rows
    for r in rows:
        units.append(tuple(cross(r, cols)))
    # Columns
    for c in cols:
        units.append(tuple(cross(rows, c)))
    # Boxes
    for b in range(len(rows)):
        box = Box(b)
        units.append(tuple(cross(box.row_labels(rows), box.col_labels(cols))))
    return units


def build_square_units_map(squares: Sequence[str],
                           units: Sequence[Unit]) -> Dict[str, Tuple[Unit, ...]]:
    """
    Maps each cell to the units containing it (row, column, box; in that
    order).
    """
    return {
        s: tuple(u for u in units if s in u)
        for s in squares
    }


def build_square_peers_map(
        squares: Sequence[str],
        units_map: Mapping[str, Tuple[Unit, ...]]) -> Dict[str, Tuple[str, ...]]:
    """
    Maps each cell to its peers: every other cell sharing a unit with it.
    Peers are listed once each, in the order first met scanning the cell's
    units, so that propagation visits them in a reproducible order.
    """
    peers_map = {}  # type: Dict[str, Tuple[str, ...]]
    for s in squares:
        peers = []  # type: List[str]
        for u in units_map[s]:
            for p in u:
                if p != s and p not in peers:
                    peers.append(p)
        peers_map[s] = tuple(peers)
    return peers_map


SQUARES = tuple(cross(ROWS, COLS))  # type: Tuple[str, ...]
UNITS = tuple(build_units(ROWS, COLS))  # type: Tuple[Unit, ...]
SQUARE_UNITS_MAP = MappingProxyType(
    build_square_units_map(SQUARES, UNITS)
)  # type: Mapping[str, Tuple[Unit, ...]]
SQUARE_PEERS_MAP = MappingProxyType(
    build_square_peers_map(SQUARES, SQUARE_UNITS_MAP)
)  # type: Mapping[str, Tuple[str, ...]]

assert len(SQUARES) == N * N
assert len(UNITS) == 3 * N

UNIT_DESCRIPTIONS = MappingProxyType(dict(
    [(UNITS[i], f"row {ROWS[i]}") for i in range(N)] +
    [(UNITS[N + i], f"column {COLS[i]}") for i in range(N)] +
    [(UNITS[2 * N + i], f"box {Box(i)}") for i in range(N)]
))  # type: Mapping[Unit, str]


def units_of(cell: str) -> Tuple[Unit, ...]:
    """
    The three units (row, column, box) containing a cell.
    """
    return SQUARE_UNITS_MAP[cell]


def peers_of(cell: str) -> Tuple[str, ...]:
    """
    The 20 peers of a cell.
    """
    return SQUARE_PEERS_MAP[cell]
