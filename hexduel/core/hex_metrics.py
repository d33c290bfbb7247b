"""
Geometria hexów sprowadzona do algebry współrzędnych.

Silnik nie renderuje niczego, ale warstwa prezentacji pyta o
"najbliższe pole do punktu" (np. upuszczenie pionka przeciągniętego
myszką). Do tego potrzebne są środki hexów i odwrotna projekcja.

Układ płaszczyzny: (x, z), y jest pomijane.

    OUTER_RADIUS = size
    INNER_RADIUS = size * √3 / 2

    POINTY_TOP:
        x = (col + row * 0.5 - row // 2) * 2 * inner
        z = row * 1.5 * outer

    FLAT_TOP:
        x = col * 1.5 * outer
        z = (row + col * 0.5 - col // 2) * 2 * inner

Odwrotność (punkt -> cube) liczona jest w axial i zaokrąglana
przez cube_round, więc zawsze trafia w istniejący hex płaszczyzny.
"""

from __future__ import annotations
import math
from typing import List, Tuple

from .hex_coord import HexCoord, Orientation, cube_round

Point = Tuple[float, float]

SQRT3 = math.sqrt(3.0)


def outer_radius(hex_size: float) -> float:
    """Promień opisany (środek -> wierzchołek)."""
    return hex_size


def inner_radius(hex_size: float) -> float:
    """Promień wpisany (środek -> środek krawędzi)."""
    return hex_size * SQRT3 / 2


def corner(hex_size: float, index: int, orientation: Orientation) -> Point:
    """Wierzchołek o indeksie 0-5 względem środka hexa."""
    angle = 60.0 * index
    if orientation == Orientation.POINTY_TOP:
        angle += 30.0
    rad = math.radians(angle)
    return (hex_size * math.cos(rad), hex_size * math.sin(rad))


def corners(hex_size: float, orientation: Orientation) -> List[Point]:
    """Wszystkie 6 wierzchołków."""
    return [corner(hex_size, i, orientation) for i in range(6)]


def center(hex_size: float, orientation: Orientation, col: int, row: int) -> Point:
    """
    Środek hexa (col, row) na płaszczyźnie.

    Args:
        hex_size: Promień opisany
        orientation: Orientacja siatki
        col, row: Współrzędne offset

    Returns:
        Point: (x, z)
    """
    if orientation == Orientation.POINTY_TOP:
        x = (col + row * 0.5 - row // 2) * (inner_radius(hex_size) * 2)
        z = row * (outer_radius(hex_size) * 1.5)
    else:
        x = col * (outer_radius(hex_size) * 1.5)
        z = (row + col * 0.5 - col // 2) * (inner_radius(hex_size) * 2)
    return (x, z)


def point_to_cube(x: float, z: float, hex_size: float, orientation: Orientation) -> HexCoord:
    """
    Hex płaszczyzny zawierający punkt (x, z).

    Returns:
        HexCoord: Zaokrąglona współrzędna (może leżeć poza planszą)
    """
    if hex_size <= 0:
        raise ValueError(f"hex_size must be positive, got {hex_size}")

    if orientation == Orientation.POINTY_TOP:
        q = (SQRT3 / 3 * x - 1.0 / 3 * z) / hex_size
        r = (2.0 / 3 * z) / hex_size
    else:
        q = (2.0 / 3 * x) / hex_size
        r = (-1.0 / 3 * x + SQRT3 / 3 * z) / hex_size
    return cube_round(q, r, -q - r)
