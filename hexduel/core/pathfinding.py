"""
A* po planszy hexagonalnej.

Silnik reguł sam nie szuka ścieżek - ruch to zawsze jeden krok na
sąsiednie pole. A* służy auto-graczowi (match/autoplay.py), który
musi zdecydować, w którą stronę iść do przeciwnika albo znajdźki.

    f = g + h
    g: liczba kroków od startu
    h: HexCoord.distance do celu (dopuszczalna - nie przeszacowuje)

Krok na sąsiednie pole kosztuje 1. Pola z `blocked` są
nieprzechodnie (tam stoi jakiś pionek).

Edge cases:
    - start == goal: [start]
    - start lub goal poza planszą: []
    - goal zablokowany: ścieżka kończy się na najbliższym wolnym
      sąsiedzie celu (podejście do przeciwnika, nie wejście na niego)
    - brak ścieżki: []
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Set
from dataclasses import dataclass, field
import heapq

from .hex_coord import HexCoord
from .hex_board import HexBoard


@dataclass(order=True)
class _PathNode:
    """Węzeł kolejki A*, sortowany wyłącznie po f_cost."""
    f_cost: int
    g_cost: int = field(compare=False)
    position: HexCoord = field(compare=False)


def find_path(
    board: HexBoard,
    start: HexCoord,
    goal: HexCoord,
    blocked: Optional[Iterable[HexCoord]] = None,
    max_iterations: int = 1000,
) -> List[HexCoord]:
    """
    Najkrótsza ścieżka start -> goal.

    Args:
        board: Plansza (dostarcza graf sąsiedztwa)
        start: Pozycja startowa (nie musi być wolna)
        goal: Cel
        blocked: Zajęte pola
        max_iterations: Bezpiecznik na liczbę zdjęć z kolejki

    Returns:
        List[HexCoord]: Ścieżka włącznie z oboma końcami; [] gdy brak
    """
    walls: Set[HexCoord] = set(blocked or ())
    walls.discard(start)

    if not board.contains(start) or not board.contains(goal):
        return []

    if start == goal:
        return [start]

    if goal in walls:
        approaches = [
            n for n in board.require_cell(goal).neighbors
            if n not in walls
        ]
        if not approaches:
            return []
        if start in approaches:
            return [start]
        approaches.sort(key=lambda pos: (start.distance(pos), pos.q, pos.r))
        goal = approaches[0]

    open_set: List[_PathNode] = []
    g_costs: Dict[HexCoord, int] = {start: 0}
    parents: Dict[HexCoord, HexCoord] = {}
    closed_set: Set[HexCoord] = set()

    heapq.heappush(open_set, _PathNode(f_cost=start.distance(goal), g_cost=0, position=start))

    iterations = 0
    while open_set and iterations < max_iterations:
        iterations += 1
        current = heapq.heappop(open_set)

        if current.position in closed_set:
            continue
        closed_set.add(current.position)

        if current.position == goal:
            return _reconstruct_path(parents, start, goal)

        for neighbor in board.require_cell(current.position).neighbors:
            if neighbor in closed_set or neighbor in walls:
                continue

            tentative_g = current.g_cost + 1
            if neighbor not in g_costs or tentative_g < g_costs[neighbor]:
                g_costs[neighbor] = tentative_g
                parents[neighbor] = current.position
                heapq.heappush(
                    open_set,
                    _PathNode(
                        f_cost=tentative_g + neighbor.distance(goal),
                        g_cost=tentative_g,
                        position=neighbor,
                    ),
                )

    return []


def _reconstruct_path(
    parents: Dict[HexCoord, HexCoord],
    start: HexCoord,
    goal: HexCoord,
) -> List[HexCoord]:
    """Cofa się po mapie rodziców od goal do start."""
    path = [goal]
    current = goal
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


def find_path_next_step(
    board: HexBoard,
    start: HexCoord,
    goal: HexCoord,
    blocked: Optional[Iterable[HexCoord]] = None,
) -> Optional[HexCoord]:
    """
    Tylko pierwszy krok ścieżki.

    Returns:
        Optional[HexCoord]: Następne pole lub None (brak ścieżki / już u celu)
    """
    path = find_path(board, start, goal, blocked)
    if len(path) < 2:
        return None
    return path[1]


def get_hexes_in_range(
    center: HexCoord,
    range_: int,
    board: Optional[HexBoard] = None,
) -> List[HexCoord]:
    """
    Wszystkie hexy w odległości <= range_ od centrum (włącznie z nim).

    Dla range_=1 to 7 hexów; z `board` tylko te, które istnieją.
    """
    result = []
    for dq in range(-range_, range_ + 1):
        for dr in range(max(-range_, -dq - range_), min(range_, -dq + range_) + 1):
            pos = HexCoord(center.q + dq, center.r + dr)
            if board is None or board.contains(pos):
                result.append(pos)
    return result
