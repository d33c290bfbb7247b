"""
System współrzędnych hexagonalnych (Cube / Axial / Offset).

Przechowujemy współrzędne axial (q, r); trzecia oś cube jest wyliczana:
    s = -q - r
    Cube: (q, r, s) gdzie q + r + s = 0

Współrzędne offset (col, row) to tylko wygoda zapisu prostokątnej
planszy. Konwersja zależy od orientacji całej siatki:

    POINTY_TOP ("odd-r"):
        q = col - (row - (row & 1)) // 2
        r = row

    FLAT_TOP ("odd-q"):
        q = col
        r = row - (col - (col & 1)) // 2

Obie konwersje są dokładnie odwracalne dla liczb całkowitych.

Kierunki sąsiadów (wektory cube, w tej kolejności):
    Indeks   (dq, dr, ds)
    ─────────────────────
    0        (+1,  0, -1)
    1        (+1, -1,  0)
    2        ( 0, -1, +1)
    3        (-1,  0, +1)
    4        (-1, +1,  0)
    5        ( 0, +1, -1)

Odległość między hexami:
    distance = max(|dq|, |dr|, |ds|)

Projekcja kierunkowa (knockback):
    Przesuwa punkt `start` o `distance` kroków dalej od `reference`
    wzdłuż prostej reference -> start. Wektor kierunku jest dzielony
    przez jego długość hex, mnożony przez dystans i zaokrąglany
    w przestrzeni cube (cube_round), więc q + r + s = 0 zawsze.

Przykład użycia:
    >>> a = HexCoord(0, 0)
    >>> b = HexCoord(2, 1)
    >>> a.distance(b)
    3
    >>> directional_projection(HexCoord(1, 0), HexCoord(0, 0), 2)
    HexCoord(q=3, r=0)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Orientation(Enum):
    """Orientacja hexów na całej planszy."""
    FLAT_TOP = "flat_top"
    POINTY_TOP = "pointy_top"

    @classmethod
    def from_string(cls, value: str) -> "Orientation":
        """Konwertuje string z YAML ("pointy_top", "FlatTop", ...) na enum."""
        normalized = value.strip().lower().replace("-", "_")
        aliases = {
            "pointy_top": cls.POINTY_TOP,
            "pointytop": cls.POINTY_TOP,
            "flat_top": cls.FLAT_TOP,
            "flattop": cls.FLAT_TOP,
        }
        if normalized not in aliases:
            raise ValueError(f"Unknown hex orientation: '{value}'")
        return aliases[normalized]


# Wektory kierunków w układzie cube (dq, dr, ds)
HEX_DIRECTIONS: List[Tuple[int, int, int]] = [
    (+1, 0, -1),
    (+1, -1, 0),
    (0, -1, +1),
    (-1, 0, +1),
    (-1, +1, 0),
    (0, +1, -1),
]


@dataclass(frozen=True)
class HexCoord:
    """
    Współrzędna hexagonalna w systemie axial (q, r).

    Klasa jest niemutowalna (frozen=True), więc może być kluczem
    w słowniku planszy lub elementem zbioru.

    Attributes:
        q (int): Oś q
        r (int): Oś r

    Note:
        Współrzędna s jest wyliczana: s = -q - r
    """
    q: int
    r: int

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def s(self) -> int:
        """Trzecia współrzędna cube (q + r + s = 0)."""
        return -self.q - self.r

    @property
    def cube(self) -> Tuple[int, int, int]:
        """Krotka (q, r, s)."""
        return (self.q, self.r, self.s)

    @property
    def axial(self) -> Tuple[int, int]:
        """Krotka (q, r)."""
        return (self.q, self.r)

    @classmethod
    def from_cube(cls, q: int, r: int, s: int) -> "HexCoord":
        """
        Tworzy HexCoord z pełnych współrzędnych cube.

        Raises:
            ValueError: Jeśli q + r + s != 0
        """
        if q + r + s != 0:
            raise ValueError(f"Invalid cube coordinates: {q} + {r} + {s} != 0")
        return cls(q, r)

    # ─────────────────────────────────────────────────────────────────────────
    # ODLEGŁOŚĆ I SĄSIEDZI
    # ─────────────────────────────────────────────────────────────────────────

    def distance(self, other: HexCoord) -> int:
        """
        Odległość cube: minimalna liczba kroków między hexami
        na nieograniczonej płaszczyźnie.

        Example:
            >>> HexCoord(0, 0).distance(HexCoord(2, 1))
            3
        """
        return max(
            abs(self.q - other.q),
            abs(self.r - other.r),
            abs(self.s - other.s),
        )

    def neighbors(self) -> List[HexCoord]:
        """Zwraca 6 sąsiadów w kolejności HEX_DIRECTIONS."""
        return [
            HexCoord(self.q + dq, self.r + dr)
            for dq, dr, _ in HEX_DIRECTIONS
        ]

    def neighbor(self, direction: int) -> HexCoord:
        """
        Sąsiad w kierunku o indeksie 0-5.

        Raises:
            IndexError: Jeśli direction nie jest w zakresie 0-5
        """
        dq, dr, _ = HEX_DIRECTIONS[direction]
        return HexCoord(self.q + dq, self.r + dr)

    def is_neighbor(self, other: HexCoord) -> bool:
        """True jeśli other leży dokładnie 1 krok dalej."""
        return self.distance(other) == 1

    # ─────────────────────────────────────────────────────────────────────────
    # OPERATORY ARYTMETYCZNE
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q - other.q, self.r - other.r)

    def __mul__(self, scalar: int) -> HexCoord:
        return HexCoord(self.q * scalar, self.r * scalar)

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.q, -self.r)

    def __repr__(self) -> str:
        return f"HexCoord(q={self.q}, r={self.r})"

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.s})"


# ─────────────────────────────────────────────────────────────────────────────
# KONWERSJE OFFSET <-> CUBE
# ─────────────────────────────────────────────────────────────────────────────

def offset_to_cube(col: int, row: int, orientation: Orientation) -> HexCoord:
    """
    Konwertuje offset (col, row) na współrzędne cube.

    Args:
        col: Kolumna na prostokątnej planszy
        row: Wiersz na prostokątnej planszy
        orientation: Orientacja siatki

    Returns:
        HexCoord: Współrzędna (q, r), s wyliczane
    """
    if orientation == Orientation.POINTY_TOP:
        q = col - (row - (row & 1)) // 2
        r = row
    else:
        q = col
        r = row - (col - (col & 1)) // 2
    return HexCoord(q, r)


def cube_to_offset(coord: HexCoord, orientation: Orientation) -> Tuple[int, int]:
    """
    Dokładna odwrotność offset_to_cube.

    Returns:
        Tuple[int, int]: (col, row)
    """
    if orientation == Orientation.POINTY_TOP:
        col = coord.q + (coord.r - (coord.r & 1)) // 2
        row = coord.r
    else:
        col = coord.q
        row = coord.r + (coord.q - (coord.q & 1)) // 2
    return (col, row)


# ─────────────────────────────────────────────────────────────────────────────
# ZAOKRĄGLANIE I PROJEKCJA
# ─────────────────────────────────────────────────────────────────────────────

def cube_round(q: float, r: float, s: float) -> HexCoord:
    """
    Zaokrągla współrzędne cube do najbliższego hexa.

    Algorytm:
    1. Zaokrąglij każdą współrzędną do najbliższej int
    2. Znajdź współrzędną z największym błędem zaokrąglenia
    3. Wylicz ją z dwóch pozostałych, żeby q + r + s = 0
    """
    rq = round(q)
    rr = round(r)
    rs = round(s)

    dq = abs(rq - q)
    dr = abs(rr - r)
    ds = abs(rs - s)

    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    # else: rs = -rq - rr (s nie jest przechowywane)

    return HexCoord(int(rq), int(rr))


def directional_projection(
    start: HexCoord,
    reference: HexCoord,
    distance: int,
) -> HexCoord:
    """
    Rzutuje `start` o `distance` kroków dalej od `reference`.

    Wzór:
        start + cube_round(normalize(start - reference) * distance)

    normalize dzieli wektor przez jego długość hex, więc dla sąsiadujących
    pionków wynik leży dokładnie `distance` pól dalej na tej samej prostej.

    Args:
        start: Pozycja odpychanego pionka
        reference: Pozycja źródła odrzutu
        distance: Liczba kroków odrzutu

    Returns:
        HexCoord: Pozycja docelowa (może leżeć poza planszą)

    Note:
        Gdy start == reference kierunek jest nieokreślony - zwracamy start.
    """
    length = reference.distance(start)
    if length == 0:
        return start

    delta = start - reference
    scale = distance / length
    offset = cube_round(delta.q * scale, delta.r * scale, delta.s * scale)
    return start + offset
