"""
Combat module - rozstrzyganie bitew kośćmi.

Zawiera:
- BattleResult: Wynik bitwy (zwycięzca, rzuty, obrażenia)
- resolve_battle: Bitwa albo skrót ring-out
- roll_battle_dice / compare_rolls: Rzuty i porównanie par
"""

from .battle import (
    BattleResult,
    resolve_battle,
    roll_battle_dice,
    compare_rolls,
    DICE_SIDES,
    BASE_DICE_COUNT,
    RING_OUT_DAMAGE,
)

__all__ = [
    "BattleResult", "resolve_battle", "roll_battle_dice", "compare_rolls",
    "DICE_SIDES", "BASE_DICE_COUNT", "RING_OUT_DAMAGE",
]
