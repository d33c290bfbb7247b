"""
Plansza hexagonalna (HexBoard) - zbiór pól i graf sąsiedztwa.

HexBoard zarządza przestrzenią gry:
- Tworzy width x height pól na prostokątnej siatce offset
- Kluczem pola jest współrzędna cube (HexCoord)
- Raz, przy konstrukcji, łączy sąsiadów przez lookup po cube
- Przechowuje sloty na znajdźki (jedna na pole)

Układ siatki (POINTY_TOP, "odd-r"):

    row=0:  (0,0) (1,0) (2,0) (3,0) ...
    row=1:   (0,1) (1,1) (2,1) (3,1) ...  <- przesunięte o 0.5 wizualnie
    row=2:  (0,2) (1,2) (2,2) (3,2) ...

Pola brzegowe mają mniej niż 6 sąsiadów - brakujący sąsiad to po
prostu brak wpisu w słowniku. Na tym opiera się ring-out:
find_cell_in_direction zwraca None, gdy rzut wypada poza planszę.

ZAJĘTOŚĆ:
═══════════════════════════════════════════════════════════════════

    Plansza NIE pamięta, kto stoi na polu. Jedynym źródłem prawdy są
    pozycje walczących w MatchController. Metody pytające o zajętość
    przyjmują zbiór zajętych współrzędnych od wywołującego.

Przykład użycia:
    >>> board = HexBoard(width=5, height=5, orientation=Orientation.POINTY_TOP)
    >>> len(board)
    25
    >>> a = board.get_cell_at_offset(0, 0)
    >>> b = board.get_cell_at_offset(1, 0)
    >>> board.is_adjacent(a.coord, b.coord)
    True
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple, TYPE_CHECKING

from .errors import ConfigurationError, InvariantViolation
from .hex_coord import (
    HexCoord,
    Orientation,
    cube_to_offset,
    directional_projection,
    offset_to_cube,
)
from . import hex_metrics

if TYPE_CHECKING:
    from .rng import GameRNG
    from ..collectibles.collectible import Collectible


@dataclass(eq=False)
class HexCell:
    """
    Pojedyncze pole planszy.

    Attributes:
        coord (HexCoord): Klucz pola (cube)
        offset (Tuple[int, int]): (col, row) na prostokątnej siatce
        neighbors (Tuple[HexCoord, ...]): Sąsiedzi istniejący na planszy
        collectible (Optional[Collectible]): Znajdźka leżąca na polu

    Note:
        Pola są porównywane i hashowane po `coord`.
        `neighbors` ustawia wyłącznie HexBoard przy konstrukcji.
    """
    coord: HexCoord
    offset: Tuple[int, int]
    neighbors: Tuple[HexCoord, ...] = field(default_factory=tuple)
    collectible: Optional["Collectible"] = field(default=None, repr=False)

    @property
    def has_collectible(self) -> bool:
        return self.collectible is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexCell):
            return NotImplemented
        return self.coord == other.coord

    def __hash__(self) -> int:
        return hash(self.coord)


class HexBoard:
    """
    Prostokątna plansza hexagonalna.

    Attributes:
        width (int): Liczba kolumn
        height (int): Liczba wierszy
        orientation (Orientation): Orientacja hexów
        cells (Dict[HexCoord, HexCell]): Mapa cube -> pole

    Raises:
        ConfigurationError: Jeśli width <= 0 lub height <= 0
    """

    def __init__(
        self,
        width: int,
        height: int,
        orientation: Orientation = Orientation.POINTY_TOP,
    ):
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Board dimensions must be positive, got {width}x{height}"
            )

        self.width = width
        self.height = height
        self.orientation = orientation
        self.cells: Dict[HexCoord, HexCell] = {}

        for row in range(height):
            for col in range(width):
                coord = offset_to_cube(col, row, orientation)
                self.cells[coord] = HexCell(coord=coord, offset=(col, row))

        self._wire_neighbors()

    def _wire_neighbors(self) -> None:
        """Jedno przejście: każde pole dostaje istniejących sąsiadów."""
        for cell in self.cells.values():
            cell.neighbors = tuple(
                n for n in cell.coord.neighbors() if n in self.cells
            )

    # ─────────────────────────────────────────────────────────────────────────
    # LOOKUP
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[HexCell]:
        return iter(self.cells.values())

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def contains(self, coord: HexCoord) -> bool:
        """True jeśli współrzędna należy do planszy."""
        return coord in self.cells

    def get_cell(self, coord: HexCoord) -> Optional[HexCell]:
        """Pole o danej współrzędnej lub None."""
        return self.cells.get(coord)

    def require_cell(self, coord: HexCoord) -> HexCell:
        """
        Pole, które MUSI istnieć.

        Raises:
            InvariantViolation: Jeśli współrzędnej nie ma na planszy
        """
        cell = self.cells.get(coord)
        if cell is None:
            raise InvariantViolation(f"Cell {coord} does not exist on the board")
        return cell

    def get_cell_at_offset(self, col: int, row: int) -> Optional[HexCell]:
        """Pole wskazane współrzędnymi offset."""
        return self.cells.get(offset_to_cube(col, row, self.orientation))

    def to_offset(self, coord: HexCoord) -> Tuple[int, int]:
        """Konwersja cube -> offset w orientacji planszy."""
        return cube_to_offset(coord, self.orientation)

    def neighbors_of(self, coord: HexCoord) -> List[HexCell]:
        """Istniejące sąsiednie pola."""
        return [self.cells[n] for n in self.require_cell(coord).neighbors]

    # ─────────────────────────────────────────────────────────────────────────
    # SĄSIEDZTWO I ODLEGŁOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def is_adjacent(self, a: HexCoord, b: HexCoord) -> bool:
        """
        True jeśli b jest na liście sąsiadów a.

        Dla współrzędnych spoza planszy zawsze False.
        """
        cell = self.cells.get(a)
        if cell is None:
            return False
        return b in cell.neighbors

    def distance(self, a: HexCoord, b: HexCoord) -> int:
        """Odległość cube (deleguje do HexCoord)."""
        return a.distance(b)

    def find_cell_in_direction(
        self,
        start: HexCoord,
        reference: HexCoord,
        distance: int,
    ) -> Optional[HexCell]:
        """
        Pole `distance` kroków od `start`, w kierunku od `reference`.

        Returns:
            Optional[HexCell]: Pole docelowe; None = rzut poza planszę (ring-out)
        """
        target = directional_projection(start, reference, distance)
        return self.cells.get(target)

    def get_closest_cell(
        self,
        point: Tuple[float, float],
        hex_size: float = 1.0,
    ) -> Optional[HexCell]:
        """
        Pole zawierające punkt (x, z) płaszczyzny.

        Gdy punkt wypada poza planszę, zwraca pole o najbliższym środku.
        """
        coord = hex_metrics.point_to_cube(point[0], point[1], hex_size, self.orientation)
        cell = self.cells.get(coord)
        if cell is not None:
            return cell

        x, z = point

        def squared_distance(candidate: HexCell) -> float:
            cx, cz = hex_metrics.center(hex_size, self.orientation, *candidate.offset)
            return (cx - x) ** 2 + (cz - z) ** 2

        return min(self.cells.values(), key=squared_distance, default=None)

    # ─────────────────────────────────────────────────────────────────────────
    # LOSOWANIE I ZAJĘTOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def get_random_cell(self, rng: "GameRNG") -> HexCell:
        """Jednostajnie losowe pole planszy."""
        return rng.choice(list(self.cells.values()))

    def is_occupied_or_adjacent(self, coord: HexCoord, occupied: Iterable[HexCoord]) -> bool:
        """
        True jeśli pole jest zajęte albo sąsiaduje z zajętym.

        Args:
            coord: Sprawdzane pole
            occupied: Autorytatywny zbiór zajętych pól (od MatchController)
        """
        blocked: Set[HexCoord] = set(occupied)
        if coord in blocked:
            return True
        return any(n in blocked for n in self.require_cell(coord).neighbors)

    def get_free_isolated_cells(self, occupied: Iterable[HexCoord]) -> List[HexCell]:
        """
        Pola ani nie zajęte, ani nie sąsiadujące z zajętymi.

        Kolejność = kolejność konstrukcji (deterministyczna).
        """
        blocked = set(occupied)
        return [
            cell for cell in self.cells.values()
            if cell.coord not in blocked
            and not any(n in blocked for n in cell.neighbors)
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # ZNAJDŹKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_collectible(self, coord: HexCoord) -> Optional["Collectible"]:
        return self.require_cell(coord).collectible

    def place_collectible(self, coord: HexCoord, collectible: "Collectible") -> None:
        """
        Kładzie znajdźkę na polu.

        Raises:
            InvariantViolation: Jeśli pole już ma znajdźkę
        """
        cell = self.require_cell(coord)
        if cell.collectible is not None:
            raise InvariantViolation(f"Cell {coord} already holds a collectible")
        cell.collectible = collectible

    def remove_collectible(self, coord: HexCoord) -> Optional["Collectible"]:
        """Zdejmuje i zwraca znajdźkę (None jeśli pole było puste)."""
        cell = self.require_cell(coord)
        collectible = cell.collectible
        cell.collectible = None
        return collectible

    def clear_collectibles(self) -> int:
        """Usuwa wszystkie znajdźki. Zwraca liczbę usuniętych."""
        removed = 0
        for cell in self.cells.values():
            if cell.collectible is not None:
                cell.collectible = None
                removed += 1
        return removed

    def collectible_count(self) -> int:
        return sum(1 for cell in self.cells.values() if cell.collectible is not None)

    # ─────────────────────────────────────────────────────────────────────────
    # WALIDACJA
    # ─────────────────────────────────────────────────────────────────────────

    def validate(self) -> None:
        """
        Sprawdza niezmienniki grafu sąsiedztwa.

        - każdy sąsiad istnieje na planszy
        - sąsiedztwo jest symetryczne

        Raises:
            InvariantViolation: Przy pierwszym złamanym niezmienniku
        """
        for cell in self.cells.values():
            for n in cell.neighbors:
                other = self.cells.get(n)
                if other is None:
                    raise InvariantViolation(f"{cell.coord} lists missing neighbor {n}")
                if cell.coord not in other.neighbors:
                    raise InvariantViolation(f"Asymmetric adjacency {cell.coord} <-> {n}")

    # ─────────────────────────────────────────────────────────────────────────
    # DEBUG / VISUALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def debug_print(self, marks: Optional[Dict[HexCoord, str]] = None) -> str:
        """
        Tekstowa reprezentacja planszy (wiersze offset).

        Legenda:
            . = puste pole
            * = znajdźka
            inne = znaki z `marks` (np. "1", "2" dla pionków)
        """
        marks = marks or {}
        lines = []
        for row in range(self.height):
            indent = " " if row % 2 == 1 and self.orientation == Orientation.POINTY_TOP else ""
            symbols = []
            for col in range(self.width):
                cell = self.cells[offset_to_cube(col, row, self.orientation)]
                if cell.coord in marks:
                    symbols.append(marks[cell.coord])
                elif cell.collectible is not None:
                    symbols.append("*")
                else:
                    symbols.append(".")
            lines.append(indent + " ".join(symbols))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"HexBoard({self.width}x{self.height}, {self.orientation.name})"
