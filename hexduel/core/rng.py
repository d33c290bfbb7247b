"""
Deterministyczny generator liczb losowych (RNG).

Silnik musi być deterministyczny - ten sam seed daje zawsze ten sam
przebieg meczu. To pozwala na:
- Replay/odtwarzanie meczów
- Debugowanie
- Testy jednostkowe bez renderowania i timingu

GameRNG opakowuje Pythonowy random.Random. Z jednej instancji
korzystają WSZYSTKIE losowe decyzje meczu:
    - rzuty kośćmi w walce
    - losowanie pól startowych
    - spawn znajdziek (typ, tier, pole)

Przykład użycia:
    >>> rng = GameRNG(seed=12345)
    >>> first = rng.roll_die(20)         # zawsze to samo dla seed=12345
    >>> rolls = rng.roll_dice(3, 20)     # lista 3 wyników z [1, 20]

Ważne:
    NIGDY nie używaj random.random() bezpośrednio w logice meczu!
    Zawsze używaj instancji GameRNG przekazanej do MatchController.
"""

from __future__ import annotations
import random
from typing import List, TypeVar, Sequence

T = TypeVar('T')


class GameRNG:
    """
    Deterministyczny generator losowości dla meczu.

    Attributes:
        seed (int): Ziarno użyte do inicjalizacji
        _rng (random.Random): Wewnętrzny generator

    Example:
        >>> rng1 = GameRNG(42)
        >>> rng2 = GameRNG(42)
        >>> rng1.roll_dice(3, 20) == rng2.roll_dice(3, 20)
        True
    """

    def __init__(self, seed: int = 0):
        """
        Args:
            seed: Ziarno losowości. Ten sam seed = te same wyniki.
        """
        self.seed = seed
        self._rng = random.Random(seed)

    # ─────────────────────────────────────────────────────────────────────────
    # PODSTAWOWE METODY
    # ─────────────────────────────────────────────────────────────────────────

    def random(self) -> float:
        """Liczba z przedziału [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Liczba całkowita z przedziału [a, b] (włącznie)."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """
        Wybiera losowy element z sekwencji.

        Raises:
            IndexError: Jeśli sekwencja jest pusta
        """
        return self._rng.choice(seq)

    def sample(self, seq: Sequence[T], k: int) -> List[T]:
        """
        Wybiera k unikalnych elementów.

        Raises:
            ValueError: Jeśli k > len(seq)
        """
        return self._rng.sample(list(seq), k)

    def shuffle(self, seq: List[T]) -> None:
        """Tasuje listę w miejscu."""
        self._rng.shuffle(seq)

    def weighted_choice(
        self,
        options: Sequence[T],
        weights: Sequence[float]
    ) -> T:
        """
        Wybiera element z wagami (nie muszą sumować się do 1).

        Example:
            >>> rng.weighted_choice(['small', 'medium', 'large'], [50, 35, 15])
            'small'  # najczęściej
        """
        return self._rng.choices(list(options), weights=list(weights), k=1)[0]

    # ─────────────────────────────────────────────────────────────────────────
    # KOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    def roll_die(self, sides: int) -> int:
        """
        Rzut jedną kością.

        Args:
            sides: Liczba ścian (np. 20)

        Returns:
            int: Wynik z przedziału [1, sides]
        """
        return self.randint(1, sides)

    def roll_dice(self, count: int, sides: int) -> List[int]:
        """
        Rzut `count` niezależnymi kośćmi.

        Kolejność wyników = kolejność rzutów (bez sortowania).
        """
        return [self.roll_die(sides) for _ in range(count)]

    # ─────────────────────────────────────────────────────────────────────────
    # STAN
    # ─────────────────────────────────────────────────────────────────────────

    def get_state(self) -> tuple:
        """Stan wewnętrzny generatora (do zapamiętania/odtworzenia)."""
        return self._rng.getstate()

    def set_state(self, state: tuple) -> None:
        """Odtwarza stan z get_state()."""
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"GameRNG(seed={self.seed})"
