"""
Testy dla planszy hexagonalnej i geometrii.

Testuje:
- Konstrukcję i błędy konfiguracji
- Graf sąsiedztwa (symetria, pola brzegowe)
- find_cell_in_direction (knockback, ring-out)
- Pola wolne i izolowane
- Sloty na znajdźki
- hex_metrics i get_closest_cell
"""

import math

import pytest

from hexduel.core.errors import ConfigurationError, InvariantViolation
from hexduel.core.hex_board import HexBoard
from hexduel.core.hex_coord import HexCoord, Orientation, offset_to_cube
from hexduel.core import hex_metrics
from hexduel.core.rng import GameRNG
from hexduel.collectibles.collectible import Collectible, CollectibleDefinition, CollectibleType


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def board():
    """Plansza 5x5 POINTY_TOP."""
    return HexBoard(5, 5, Orientation.POINTY_TOP)


def at(board, col, row):
    """Helper: współrzędna cube pola offset (col, row)."""
    return board.get_cell_at_offset(col, row).coord


def create_collectible(kind=CollectibleType.HEALTH, base=20):
    return Collectible(CollectibleDefinition(kind, base))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: KONSTRUKCJA
# ═══════════════════════════════════════════════════════════════════════════

def test_board_has_width_times_height_cells(board):
    assert len(board) == 25
    assert board.get_cell_at_offset(4, 4) is not None
    assert board.get_cell_at_offset(5, 0) is None
    assert board.get_cell_at_offset(0, -1) is None


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(ConfigurationError):
        HexBoard(width, height)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        HexBoard(0, 0)


def test_cell_offsets_match_coords(board):
    for cell in board:
        col, row = cell.offset
        assert cell.coord == offset_to_cube(col, row, board.orientation)
        assert board.to_offset(cell.coord) == (col, row)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SĄSIEDZTWO
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("orientation", list(Orientation))
def test_adjacency_is_symmetric(orientation):
    board = HexBoard(6, 4, orientation)
    board.validate()
    for cell in board:
        for n in cell.neighbors:
            assert board.is_adjacent(n, cell.coord)
            assert cell.coord.distance(n) == 1


def test_corner_and_interior_neighbor_counts(board):
    assert len(board.neighbors_of(at(board, 0, 0))) == 2
    assert len(board.neighbors_of(at(board, 2, 2))) == 6


def test_is_adjacent_off_board_is_false(board):
    origin = at(board, 0, 0)
    assert not board.is_adjacent(origin, HexCoord(-1, 0))
    assert not board.is_adjacent(HexCoord(-1, 0), origin)
    assert not board.is_adjacent(origin, origin)


def test_require_cell_missing_raises(board):
    with pytest.raises(InvariantViolation):
        board.require_cell(HexCoord(40, 40))
    assert board.get_cell(HexCoord(40, 40)) is None


def test_validate_detects_asymmetry(board):
    cell = board.get_cell(at(board, 2, 2))
    cell.neighbors = cell.neighbors + (HexCoord(40, 40),)
    with pytest.raises(InvariantViolation):
        board.validate()


# ═══════════════════════════════════════════════════════════════════════════
# TEST: KIERUNEK I RING-OUT
# ═══════════════════════════════════════════════════════════════════════════

def test_find_cell_in_direction_on_board(board):
    cell = board.find_cell_in_direction(at(board, 1, 0), at(board, 0, 0), 2)
    assert cell is not None
    assert cell.offset == (3, 0)


def test_find_cell_in_direction_off_board_is_none(board):
    """Rzut poza planszę = ring-out."""
    assert board.find_cell_in_direction(at(board, 4, 0), at(board, 3, 0), 2) is None


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ZAJĘTOŚĆ
# ═══════════════════════════════════════════════════════════════════════════

def test_occupied_or_adjacent(board):
    occupied = {at(board, 2, 2)}
    assert board.is_occupied_or_adjacent(at(board, 2, 2), occupied)
    for n in board.require_cell(at(board, 2, 2)).neighbors:
        assert board.is_occupied_or_adjacent(n, occupied)
    assert not board.is_occupied_or_adjacent(at(board, 0, 0), occupied)


def test_free_isolated_cells(board):
    occupied = {at(board, 2, 2)}
    free = board.get_free_isolated_cells(occupied)
    assert len(free) == 25 - 7
    for cell in free:
        assert not board.is_occupied_or_adjacent(cell.coord, occupied)


def test_random_cell_is_deterministic(board):
    picks_a = [board.get_random_cell(GameRNG(7)).coord for _ in range(3)]
    picks_b = [board.get_random_cell(GameRNG(7)).coord for _ in range(3)]
    assert picks_a == picks_b
    assert all(board.contains(c) for c in picks_a)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ZNAJDŹKI
# ═══════════════════════════════════════════════════════════════════════════

def test_collectible_slot(board):
    coord = at(board, 1, 1)
    potion = create_collectible()

    board.place_collectible(coord, potion)
    assert board.get_collectible(coord) is potion
    assert board.collectible_count() == 1

    with pytest.raises(InvariantViolation):
        board.place_collectible(coord, create_collectible())

    assert board.remove_collectible(coord) is potion
    assert board.remove_collectible(coord) is None
    assert board.collectible_count() == 0


def test_clear_collectibles(board):
    for col in range(3):
        board.place_collectible(at(board, col, 0), create_collectible())
    assert board.clear_collectibles() == 3
    assert board.collectible_count() == 0


# ═══════════════════════════════════════════════════════════════════════════
# TEST: GEOMETRIA
# ═══════════════════════════════════════════════════════════════════════════

def test_corners_lie_on_outer_radius():
    for orientation in Orientation:
        for x, z in hex_metrics.corners(2.0, orientation):
            assert math.hypot(x, z) == pytest.approx(2.0)
    assert hex_metrics.inner_radius(2.0) == pytest.approx(math.sqrt(3))


@pytest.mark.parametrize("orientation", list(Orientation))
def test_point_to_cube_inverts_center(orientation):
    board = HexBoard(5, 5, orientation)
    for cell in board:
        x, z = hex_metrics.center(1.5, orientation, *cell.offset)
        assert hex_metrics.point_to_cube(x, z, 1.5, orientation) == cell.coord


def test_point_to_cube_rejects_bad_size():
    with pytest.raises(ValueError):
        hex_metrics.point_to_cube(0, 0, 0, Orientation.POINTY_TOP)


def test_closest_cell(board):
    x, z = hex_metrics.center(1.0, board.orientation, 3, 2)
    assert board.get_closest_cell((x + 0.1, z - 0.1)).offset == (3, 2)
    assert board.get_closest_cell((-100.0, -100.0)).offset == (0, 0)
