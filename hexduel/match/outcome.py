"""
Wyniki operacji MatchController zwracane jako wartości.

Logika meczu niczego nie animuje i na nic nie czeka. Każda intencja
ruchu kończy się jednym MoveOutcome, z którego warstwa prezentacji
odtwarza, co się stało (ruch, podniesienia, bitwa, odrzut, koniec
rundy).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional

from ..core.hex_coord import HexCoord
from ..collectibles.collectible import Collectible
from ..combat.battle import BattleResult
from ..units.player import PlayerSlot


class MoveOutcomeKind(Enum):
    """Rodzaj wyniku intencji ruchu."""
    REJECTED = auto()
    MOVED = auto()
    MOVED_AND_BATTLED = auto()
    ROUND_OVER = auto()
    MATCH_OVER = auto()


@dataclass(frozen=True)
class PickupResult:
    """Podniesiona znajdźka i komu przypadła."""
    slot: PlayerSlot
    at: HexCoord
    collectible: Collectible
    applied: int

    def to_dict(self) -> Dict[str, Any]:
        data = self.collectible.to_dict()
        data.update({"slot": self.slot.label, "at": [self.at.q, self.at.r], "applied": self.applied})
        return data


@dataclass(frozen=True)
class KnockbackResult:
    """
    Wynik odrzutu.

    Attributes:
        slot (PlayerSlot): Odrzucony pionek
        source (PlayerSlot): Źródło odrzutu
        origin (HexCoord): Pole przed odrzutem
        destination (Optional[HexCoord]): Pole po odrzucie; None = ring-out
        distance (int): Odległość odrzutu
        battle (Optional[BattleResult]): Wynik skrótu ring-out
        pickups (List[PickupResult]): Znajdźki z pola docelowego
    """
    slot: PlayerSlot
    source: PlayerSlot
    origin: HexCoord
    destination: Optional[HexCoord]
    distance: int
    battle: Optional[BattleResult] = None
    pickups: List[PickupResult] = field(default_factory=list)

    @property
    def ring_out(self) -> bool:
        return self.destination is None


@dataclass
class MoveOutcome:
    """
    Wynik try_move.

    Attributes:
        kind (MoveOutcomeKind): Co się stało
        battle (Optional[BattleResult]): Bitwa wywołana ruchem
        knockback (Optional[KnockbackResult]): Odrzut po bitwie
        turn_start_knockback (Optional[KnockbackResult]): Odrzut ze startu
            tury przeciwnika, gdy ruch wyczerpał przydział
        pickups (List[PickupResult]): Podniesione znajdźki
        winner (Optional[PlayerSlot]): Zwycięzca rundy / meczu
        reason (Optional[str]): Powód odrzucenia
    """
    kind: MoveOutcomeKind
    battle: Optional[BattleResult] = None
    knockback: Optional[KnockbackResult] = None
    turn_start_knockback: Optional[KnockbackResult] = None
    pickups: List[PickupResult] = field(default_factory=list)
    winner: Optional[PlayerSlot] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.kind is not MoveOutcomeKind.REJECTED

    @classmethod
    def rejected(cls, reason: str) -> "MoveOutcome":
        return cls(kind=MoveOutcomeKind.REJECTED, reason=reason)
