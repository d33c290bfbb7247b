"""
Player - uczestnik meczu i licznik wygranych rund.

Gracz przeżywa wiele rund. Walczący (Combatant) jest tworzony od nowa
na każdą rundę, a zwycięstwa zostają na graczu, dopóki nie
wystartuje nowy mecz.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .variant import Variant, VariantProfile, get_profile

if TYPE_CHECKING:
    from ..core.config_loader import ConfigLoader


class PlayerSlot(Enum):
    """Stała tożsamość miejsca przy planszy."""
    PLAYER1 = 0
    PLAYER2 = 1

    @property
    def other(self) -> "PlayerSlot":
        return PlayerSlot.PLAYER2 if self is PlayerSlot.PLAYER1 else PlayerSlot.PLAYER1

    @property
    def label(self) -> str:
        return "p1" if self is PlayerSlot.PLAYER1 else "p2"


@dataclass
class Player:
    """
    Gracz.

    Attributes:
        name (str): Nazwa wyświetlana
        variant (Variant): Wybrany wariant postaci
        profile (VariantProfile): Statystyki wariantu
        wins (int): Wygrane rundy w bieżącym meczu
    """
    name: str
    variant: Variant = Variant.DEFAULT
    profile: Optional[VariantProfile] = None
    wins: int = field(default=0)

    def __post_init__(self):
        if self.profile is None:
            self.profile = get_profile(self.variant)

    @classmethod
    def with_variant(
        cls,
        name: str,
        variant: Variant,
        loader: Optional["ConfigLoader"] = None,
    ) -> "Player":
        """Gracz z profilem z YAML (loader) lub wbudowanym."""
        return cls(name=name, variant=variant, profile=get_profile(variant, loader))

    def add_win(self) -> int:
        """Dolicza wygraną rundę. Zwraca nowy licznik."""
        self.wins += 1
        return self.wins

    def reset_wins(self) -> None:
        self.wins = 0

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {self.variant.name}, wins={self.wins})"
