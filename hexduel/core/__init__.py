"""
Core module - podstawowe komponenty silnika.

Zawiera:
- HexCoord / Orientation: System współrzędnych hexagonalnych
- hex_metrics: Środki, wierzchołki, punkt -> hex
- HexBoard / HexCell: Plansza z grafem sąsiedztwa i slotami na znajdźki
- pathfinding: Algorytm A* dla auto-gracza
- GameRNG: Deterministyczny generator losowości
- ConfigLoader: Wczytywanie konfiguracji z defaults
- errors: Wyjątki konfiguracji i niezmienników
"""

from .hex_coord import (
    HexCoord,
    Orientation,
    HEX_DIRECTIONS,
    offset_to_cube,
    cube_to_offset,
    cube_round,
    directional_projection,
)
from .hex_board import HexBoard, HexCell
from .pathfinding import find_path, find_path_next_step
from .rng import GameRNG
from .config_loader import ConfigLoader, DEFAULT_DATA_PATH
from .errors import HexDuelError, ConfigurationError, InvariantViolation

__all__ = [
    "HexCoord", "Orientation", "HEX_DIRECTIONS",
    "offset_to_cube", "cube_to_offset", "cube_round", "directional_projection",
    "HexBoard", "HexCell", "find_path", "find_path_next_step",
    "GameRNG", "ConfigLoader", "DEFAULT_DATA_PATH",
    "HexDuelError", "ConfigurationError", "InvariantViolation",
]
