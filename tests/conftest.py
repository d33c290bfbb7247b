"""
Wspólne fixtures dla testów silnika Hex Duel.
"""

import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Dodaj katalog projektu do path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexduel.core.rng import GameRNG


class ScriptedRNG(GameRNG):
    """
    GameRNG z zaplanowanymi wynikami kości.

    Kolejne roll_die zwracają wartości z `dice`; po ich wyczerpaniu
    RNG wraca do zwykłego losowania. Pozostałe metody (wybór pól,
    spawn znajdziek) działają normalnie.
    """

    def __init__(self, dice: Iterable[int] = (), seed: int = 12345):
        super().__init__(seed)
        self.dice: List[int] = list(dice)

    def queue(self, *values: int) -> None:
        self.dice.extend(values)

    def roll_die(self, sides: int) -> int:
        if self.dice:
            return self.dice.pop(0)
        return super().roll_die(sides)


@pytest.fixture
def rng():
    """Deterministyczny RNG."""
    return GameRNG(seed=12345)


@pytest.fixture
def scripted_rng():
    """RNG z kolejką rzutów (dokładanie przez .queue())."""
    return ScriptedRNG()
