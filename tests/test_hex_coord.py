"""
Testy dla systemu współrzędnych hexagonalnych.

Testuje:
- Konwersje offset <-> cube dla obu orientacji
- Odległość cube i nierówność trójkąta
- Sąsiadów i kierunki
- cube_round
- Projekcję kierunkową (knockback)
"""

import pytest
from hypothesis import given, strategies as st

from hexduel.core.hex_coord import (
    HexCoord,
    Orientation,
    HEX_DIRECTIONS,
    offset_to_cube,
    cube_to_offset,
    cube_round,
    directional_projection,
)


coords = st.builds(HexCoord, st.integers(-30, 30), st.integers(-30, 30))
orientations = st.sampled_from(list(Orientation))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: KONWERSJE
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("col,row,expected", [
    (0, 0, HexCoord(0, 0)),
    (0, 1, HexCoord(0, 1)),
    (1, 2, HexCoord(0, 2)),
    (3, 3, HexCoord(2, 3)),
])
def test_offset_to_cube_pointy_top(col, row, expected):
    """POINTY_TOP: q = col - (row - (row&1)) // 2, r = row."""
    assert offset_to_cube(col, row, Orientation.POINTY_TOP) == expected


@pytest.mark.parametrize("col,row,expected", [
    (0, 0, HexCoord(0, 0)),
    (1, 0, HexCoord(1, 0)),
    (2, 3, HexCoord(2, 2)),
    (3, 1, HexCoord(3, 0)),
])
def test_offset_to_cube_flat_top(col, row, expected):
    """FLAT_TOP: q = col, r = row - (col - (col&1)) // 2."""
    assert offset_to_cube(col, row, Orientation.FLAT_TOP) == expected


@given(st.integers(-50, 50), st.integers(-50, 50), orientations)
def test_offset_round_trip(col, row, orientation):
    """offset -> cube -> offset wraca dokładnie do punktu startu."""
    coord = offset_to_cube(col, row, orientation)
    assert coord.q + coord.r + coord.s == 0
    assert cube_to_offset(coord, orientation) == (col, row)


def test_from_cube_rejects_nonzero_sum():
    """q + r + s != 0 to błąd."""
    with pytest.raises(ValueError):
        HexCoord.from_cube(1, 1, 1)
    assert HexCoord.from_cube(1, -3, 2) == HexCoord(1, -3)


def test_orientation_from_string():
    assert Orientation.from_string("pointy_top") is Orientation.POINTY_TOP
    assert Orientation.from_string("FlatTop") is Orientation.FLAT_TOP
    with pytest.raises(ValueError):
        Orientation.from_string("diagonal")


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ODLEGŁOŚĆ I SĄSIEDZI
# ═══════════════════════════════════════════════════════════════════════════

def test_distance_known_values():
    origin = HexCoord(0, 0)
    assert origin.distance(origin) == 0
    assert origin.distance(HexCoord(2, 1)) == 3
    assert origin.distance(HexCoord(-2, 2)) == 2


@given(coords, coords, coords)
def test_distance_triangle_inequality(a, b, c):
    """d(a, c) <= d(a, b) + d(b, c)."""
    assert a.distance(c) <= a.distance(b) + b.distance(c)


@given(coords, coords)
def test_distance_symmetric(a, b):
    assert a.distance(b) == b.distance(a)


def test_neighbors_order_and_distance():
    """6 różnych sąsiadów, w kolejności HEX_DIRECTIONS, każdy 1 krok dalej."""
    center = HexCoord(2, -1)
    neighbors = center.neighbors()

    assert len(set(neighbors)) == 6
    for i, (dq, dr, ds) in enumerate(HEX_DIRECTIONS):
        assert dq + dr + ds == 0
        assert neighbors[i] == HexCoord(center.q + dq, center.r + dr)
        assert center.neighbor(i) == neighbors[i]
        assert center.distance(neighbors[i]) == 1
        assert center.is_neighbor(neighbors[i])


def test_arithmetic():
    a = HexCoord(1, 2)
    b = HexCoord(-3, 1)
    assert a + b == HexCoord(-2, 3)
    assert a - b == HexCoord(4, 1)
    assert a * 3 == HexCoord(3, 6)
    assert -a == HexCoord(-1, -2)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ZAOKRĄGLANIE
# ═══════════════════════════════════════════════════════════════════════════

def test_cube_round_fixes_largest_error():
    """Oś z największym błędem jest wyliczana z pozostałych."""
    assert cube_round(1.1, -0.4, -0.7) == HexCoord(1, 0)


@given(
    st.floats(-20, 20, allow_nan=False, allow_infinity=False),
    st.floats(-20, 20, allow_nan=False, allow_infinity=False),
)
def test_cube_round_always_valid(q, r):
    rounded = cube_round(q, r, -q - r)
    assert rounded.q + rounded.r + rounded.s == 0
    assert abs(rounded.q - q) <= 1.0 + 1e-9
    assert abs(rounded.r - r) <= 1.0 + 1e-9


# ═══════════════════════════════════════════════════════════════════════════
# TEST: PROJEKCJA KIERUNKOWA
# ═══════════════════════════════════════════════════════════════════════════

def test_projection_pushes_along_line():
    assert directional_projection(HexCoord(1, 0), HexCoord(0, 0), 2) == HexCoord(3, 0)
    assert directional_projection(HexCoord(1, -1), HexCoord(0, 0), 2) == HexCoord(3, -3)


def test_projection_from_distance_two():
    """Wektor kierunku jest normalizowany długością hex."""
    assert directional_projection(HexCoord(2, 0), HexCoord(0, 0), 2) == HexCoord(4, 0)


def test_projection_same_cell_returns_start():
    start = HexCoord(2, 2)
    assert directional_projection(start, start, 3) == start


@given(coords, st.integers(0, 5), st.integers(0, 6))
def test_projection_from_neighbor_is_exact(reference, direction, distance):
    """Dla sąsiadów wynik leży dokładnie distance pól dalej, na tej samej prostej."""
    start = reference.neighbor(direction)
    target = directional_projection(start, reference, distance)
    assert start.distance(target) == distance
    assert reference.distance(target) == distance + 1
