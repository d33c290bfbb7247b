"""
Units module - gracze i ich pionki.

Zawiera:
- Variant / VariantProfile: Profile statystyk wariantów postaci
- Player / PlayerSlot: Gracz i jego stałe miejsce przy planszy
- Combatant: Pionek na planszy w bieżącej rundzie
"""

from .variant import Variant, VariantProfile, BUILTIN_PROFILES, get_profile
from .player import Player, PlayerSlot
from .combatant import Combatant

__all__ = [
    "Variant", "VariantProfile", "BUILTIN_PROFILES", "get_profile",
    "Player", "PlayerSlot", "Combatant",
]
