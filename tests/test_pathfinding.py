"""
Testy A* na planszy hex (używane przez auto-gracza).
"""

from hexduel.core.hex_board import HexBoard
from hexduel.core.hex_coord import HexCoord
from hexduel.core.pathfinding import find_path, find_path_next_step, get_hexes_in_range


def test_straight_path():
    board = HexBoard(5, 5)
    path = find_path(board, HexCoord(0, 0), HexCoord(3, 0))
    assert path == [HexCoord(0, 0), HexCoord(1, 0), HexCoord(2, 0), HexCoord(3, 0)]


def test_blocked_goal_stops_next_to_it():
    board = HexBoard(5, 5)
    goal = HexCoord(3, 0)
    path = find_path(board, HexCoord(0, 0), goal, blocked={goal})

    assert path[-1].distance(goal) == 1
    assert goal not in path
    assert find_path_next_step(board, HexCoord(0, 0), goal, blocked={goal}) == HexCoord(1, 0)


def test_path_avoids_blocked_cells():
    board = HexBoard(5, 5)
    wall = {HexCoord(1, 0), HexCoord(0, 1)}
    assert find_path(board, HexCoord(0, 0), HexCoord(3, 0), blocked=wall) == []

    path = find_path(board, HexCoord(0, 2), HexCoord(3, 0), blocked={HexCoord(1, 1)})
    assert path[0] == HexCoord(0, 2)
    assert path[-1] == HexCoord(3, 0)
    assert HexCoord(1, 1) not in path
    for a, b in zip(path, path[1:]):
        assert board.is_adjacent(a, b)


def test_edge_cases():
    board = HexBoard(3, 3)
    origin = HexCoord(0, 0)
    assert find_path(board, origin, origin) == [origin]
    assert find_path(board, origin, HexCoord(40, 40)) == []
    assert find_path_next_step(board, origin, origin) is None


def test_hexes_in_range():
    assert len(get_hexes_in_range(HexCoord(0, 0), 1)) == 7
    assert len(get_hexes_in_range(HexCoord(0, 0), 2)) == 19

    board = HexBoard(5, 5)
    on_board = get_hexes_in_range(HexCoord(0, 0), 1, board)
    assert set(on_board) == {HexCoord(0, 0), HexCoord(1, 0), HexCoord(0, 1)}
