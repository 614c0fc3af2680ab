"""
tests/test_topology.py

"""

from sudokugen.topology import (
    Box,
    build_units,
    cell_name,
    cross,
    peers_of,
    SQUARE_PEERS_MAP,
    SQUARES,
    UNIT_DESCRIPTIONS,
    UNITS,
    units_of,
)


def test_cross_is_a_major():
    assert cross("abc", "12") == ["a1", "a2", "b1", "b2", "c1", "c2"]


def test_squares_row_major():
    assert len(SQUARES) == 81
    assert len(set(SQUARES)) == 81
    assert SQUARES[:3] == ("A1", "A2", "A3")
    assert SQUARES[9] == "B1"
    assert SQUARES[-1] == "I9"


def test_unit_order():
    assert len(UNITS) == 27
    assert UNITS[0] == tuple(cross("A", "123456789"))
    assert UNITS[9] == tuple(cross("ABCDEFGHI", "1"))
    assert UNITS[18] == ("A1", "A2", "A3", "B1", "B2", "B3", "C1", "C2", "C3")
    assert UNITS[19] == ("A4", "A5", "A6", "B4", "B5", "B6", "C4", "C5", "C6")
    assert UNITS[21] == ("D1", "D2", "D3", "E1", "E2", "E3", "F1", "F2", "F3")
    assert UNITS[26][-1] == "I9"
    assert tuple(build_units()) == UNITS


def test_every_unit_has_nine_distinct_cells():
    for unit in UNITS:
        assert len(unit) == 9
        assert len(set(unit)) == 9


def test_units_of():
    for s in SQUARES:
        units = units_of(s)
        assert len(units) == 3
        assert all(s in u for u in units)
    assert units_of("E5") == (UNITS[4], UNITS[13], UNITS[22])


def test_peers():
    for s in SQUARES:
        peers = peers_of(s)
        assert len(peers) == 20
        assert len(set(peers)) == 20
        assert s not in peers
        expected = set(p for u in units_of(s) for p in u) - {s}
        assert set(peers) == expected


def test_peers_are_symmetric():
    for s, peers in SQUARE_PEERS_MAP.items():
        for p in peers:
            assert s in SQUARE_PEERS_MAP[p]


def test_cell_names():
    assert cell_name(0, 0) == "A1"
    assert cell_name(8, 4) == "I5"


def test_box():
    box = Box(5)
    assert (box.boxrow, box.boxcol) == (1, 2)
    assert box.extremes() == (3, 5, 6, 8)
    assert box.row_labels() == "DEF"
    assert box.col_labels() == "789"
    assert str(box) == "{2,3}"


def test_unit_descriptions():
    assert UNIT_DESCRIPTIONS[UNITS[0]] == "row A"
    assert UNIT_DESCRIPTIONS[UNITS[9]] == "column 1"
    assert UNIT_DESCRIPTIONS[UNITS[26]] == "box {3,3}"
