"""
Snapshoty planszy dla warstwy prezentacji.

Prezentacja (rendering, UI, replay) NIGDY nie dotyka stanu meczu.
Dostaje niemutowalną kopię zbudowaną przez
MatchController.get_board_snapshot() i z niej rysuje.

Modele pydantic są zamrożone; model_dump() daje gotowy do JSON słownik.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════
# MODELE
# ═══════════════════════════════════════════════════════════════════════════

class CollectibleSnapshot(BaseModel):
    """Znajdźka na polu."""
    model_config = ConfigDict(frozen=True)

    type: str
    tier: str
    value: int
    name: str = ""


class CellSnapshot(BaseModel):
    """Pojedyncze pole."""
    model_config = ConfigDict(frozen=True)

    q: int
    r: int
    col: int
    row: int
    occupant: Optional[str] = Field(None, description="'p1' / 'p2' gdy pole zajęte")
    collectible: Optional[CollectibleSnapshot] = None


class CombatantSnapshot(BaseModel):
    """Pionek gracza."""
    model_config = ConfigDict(frozen=True)

    slot: str
    name: str
    variant: str
    q: int
    r: int
    health: int = Field(..., ge=0)
    max_health: int
    movement: int
    total_attack: int
    bonus_attack: int
    rerolls: int
    pending_moves: int
    wins: int


class BoardSnapshot(BaseModel):
    """Pełny obraz meczu w jednej chwili."""
    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    orientation: str
    phase: str
    round_number: int
    turn_number: int
    current_player: str
    remaining_moves: int
    scores: Tuple[int, int]
    match_winner: Optional[str] = None
    cells: List[CellSnapshot]
    combatants: List[CombatantSnapshot]

    def cell_at(self, q: int, r: int) -> Optional[CellSnapshot]:
        """Pole o współrzędnych (q, r) albo None."""
        for cell in self.cells:
            if cell.q == q and cell.r == r:
                return cell
        return None
