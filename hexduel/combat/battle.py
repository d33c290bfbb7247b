"""
Rozstrzyganie bitwy kośćmi (BattleResolver).

Bitwa wybucha, gdy pionek po ruchu stoi obok przeciwnika.
Wynik zależy wyłącznie od kości i aktualnego ataku zwycięzcy.

KOŚCI:
═══════════════════════════════════════════════════════════════════

    Każda strona rzuca BASE_DICE_COUNT + rerolls kośćmi k20.
    Wyniki są sortowane malejąco i parowane według pozycji:

        atakujący:  [18, 12, 7]
        obrońca:    [15, 13, 6]
                     ──  ──  ─
        para:        A   O   A     -> atakujący 2 : 1

    Par jest tyle, ile kości ma słabsza strona (min(len)).
    Remis w parze wygrywa ATAKUJĄCY (a >= d).
    Bitwę wygrywa atakujący tylko przy ściśle większej liczbie
    wygranych par. Równy podział par wygrywa obrońca.

OBRAŻENIA:
═══════════════════════════════════════════════════════════════════

    damage = zwycięzca.total_attack  (power + bonus_attack)

    Resolver NIE zadaje obrażeń i NIE przesuwa pionków - tylko
    zwraca wynik. Zużywa jedynie RNG.

RING-OUT:
═══════════════════════════════════════════════════════════════════

    is_ring_out=True: zwycięzcą jest atakujący, damage =
    RING_OUT_DAMAGE, żadnych rzutów (puste listy).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..units.combatant import Combatant
    from ..core.rng import GameRNG


DICE_SIDES = 20
BASE_DICE_COUNT = 3
RING_OUT_DAMAGE = 999


@dataclass(frozen=True)
class BattleResult:
    """
    Wynik bitwy.

    Attributes:
        winner (Combatant): Zwycięzca
        loser (Combatant): Przegrany
        attacker_rolls (Tuple[int, ...]): Rzuty atakującego (malejąco)
        defender_rolls (Tuple[int, ...]): Rzuty obrońcy (malejąco)
        damage (int): Obrażenia dla przegranego
        is_ring_out (bool): Czy to wypchnięcie z planszy
        attacker_pairs (int): Pary wygrane przez atakującego
        defender_pairs (int): Pary wygrane przez obrońcę
    """
    winner: "Combatant"
    loser: "Combatant"
    attacker_rolls: Tuple[int, ...]
    defender_rolls: Tuple[int, ...]
    damage: int
    is_ring_out: bool = False
    attacker_pairs: int = 0
    defender_pairs: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje wynik do słownika (log zdarzeń)."""
        return {
            "winner": self.winner.id,
            "loser": self.loser.id,
            "attacker_rolls": list(self.attacker_rolls),
            "defender_rolls": list(self.defender_rolls),
            "pairs": [self.attacker_pairs, self.defender_pairs],
            "damage": self.damage,
            "is_ring_out": self.is_ring_out,
        }


def roll_battle_dice(rng: "GameRNG", rerolls: int = 0) -> List[int]:
    """
    Rzut kośćmi jednej strony.

    Returns:
        List[int]: BASE_DICE_COUNT + rerolls wyników k20, malejąco
    """
    count = BASE_DICE_COUNT + max(0, rerolls)
    return sorted(rng.roll_dice(count, DICE_SIDES), reverse=True)


def compare_rolls(attacker_rolls: Sequence[int], defender_rolls: Sequence[int]) -> Tuple[int, int]:
    """
    Porównuje posortowane rzuty parami.

    Returns:
        Tuple[int, int]: (pary atakującego, pary obrońcy)

    Example:
        >>> compare_rolls([18, 12, 7], [15, 13, 6])
        (2, 1)
        >>> compare_rolls([10], [10])
        (1, 0)
    """
    attacker_wins = 0
    defender_wins = 0
    for a, d in zip(attacker_rolls, defender_rolls):
        if a >= d:
            attacker_wins += 1
        else:
            defender_wins += 1
    return attacker_wins, defender_wins


def resolve_battle(
    attacker: "Combatant",
    defender: "Combatant",
    rng: "GameRNG",
    is_ring_out: bool = False,
) -> BattleResult:
    """
    Rozstrzyga bitwę między dwoma pionkami.

    Args:
        attacker: Pionek, który wszedł w sąsiedztwo (lub źródło odrzutu)
        defender: Drugi pionek
        rng: Jedyne źródło losowości meczu
        is_ring_out: Skrót dla wypchnięcia poza planszę

    Returns:
        BattleResult: Zwycięzca, rzuty i obrażenia
    """
    if is_ring_out:
        return BattleResult(
            winner=attacker,
            loser=defender,
            attacker_rolls=(),
            defender_rolls=(),
            damage=RING_OUT_DAMAGE,
            is_ring_out=True,
        )

    attacker_rolls = roll_battle_dice(rng, attacker.rerolls)
    defender_rolls = roll_battle_dice(rng, defender.rerolls)
    attacker_pairs, defender_pairs = compare_rolls(attacker_rolls, defender_rolls)

    if attacker_pairs > defender_pairs:
        winner, loser = attacker, defender
    else:
        winner, loser = defender, attacker

    return BattleResult(
        winner=winner,
        loser=loser,
        attacker_rolls=tuple(attacker_rolls),
        defender_rolls=tuple(defender_rolls),
        damage=winner.total_attack,
        is_ring_out=False,
        attacker_pairs=attacker_pairs,
        defender_pairs=defender_pairs,
    )
