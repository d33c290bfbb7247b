"""
Combatant - pionek gracza na planszy w bieżącej rundzie.

Stan walczącego:
─────────────────────────────────────────────────────────────────
position       | Pole, na którym stoi (relacja, nie własność)
health         | 0..max_health
bonus_attack   | Z ExtraAttack, zerowany na końcu własnej tury
rerolls        | Z ExtraDice, dodatkowe kości, zerowane jak wyżej
pending_moves  | ExtraMove podniesiony poza własną turą
─────────────────────────────────────────────────────────────────

Wzór ataku:
    total_attack = power + bonus_attack

Combatant nie wie nic o planszy ani o przeciwniku - przesuwa go
wyłącznie MatchController.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.hex_coord import HexCoord
from .player import Player, PlayerSlot


@dataclass
class Combatant:
    """
    Pionek gracza.

    Attributes:
        slot (PlayerSlot): Tożsamość (PLAYER1 / PLAYER2)
        player (Player): Właściciel (profil wariantu, wygrane)
        position (HexCoord): Zajmowane pole
        health (int): Aktualne zdrowie
        bonus_attack (int): Premia do ataku na tę turę
        rerolls (int): Dodatkowe kości na tę turę
        pending_moves (int): Ruchy do doliczenia na starcie własnej tury

    Example:
        >>> c = Combatant(PlayerSlot.PLAYER1, Player("Ala"), HexCoord(0, 0))
        >>> c.health, c.total_attack
        (50, 10)
        >>> c.take_damage(60)
        0
        >>> c.is_alive()
        False
    """
    slot: PlayerSlot
    player: Player
    position: HexCoord
    health: int = field(default=-1)
    bonus_attack: int = 0
    rerolls: int = 0
    pending_moves: int = 0

    def __post_init__(self):
        if self.health < 0:
            self.health = self.max_health

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI WARIANTU
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def id(self) -> str:
        """ID w logu zdarzeń."""
        return self.slot.label

    @property
    def movement(self) -> int:
        return self.player.profile.movement

    @property
    def power(self) -> int:
        return self.player.profile.power

    @property
    def max_health(self) -> int:
        return self.player.profile.max_health

    @property
    def total_attack(self) -> int:
        return self.power + self.bonus_attack

    def is_alive(self) -> bool:
        return self.health > 0

    # ─────────────────────────────────────────────────────────────────────────
    # MUTACJE
    # ─────────────────────────────────────────────────────────────────────────

    def move_to(self, coord: HexCoord) -> HexCoord:
        """Przestawia pionek. Zwraca poprzednią pozycję."""
        previous = self.position
        self.position = coord
        return previous

    def take_damage(self, amount: int) -> int:
        """
        Odejmuje zdrowie (nie schodzi poniżej 0).

        Returns:
            int: Zdrowie po obrażeniach
        """
        self.health = max(0, self.health - max(0, amount))
        return self.health

    def heal(self, amount: int) -> int:
        """
        Dodaje zdrowie (nie przekracza max_health).

        Returns:
            int: Faktycznie wyleczona wartość
        """
        before = self.health
        self.health = min(self.max_health, self.health + max(0, amount))
        return self.health - before

    def add_bonus_attack(self, amount: int) -> None:
        self.bonus_attack += amount

    def add_rerolls(self, amount: int) -> None:
        self.rerolls += amount

    def add_pending_moves(self, amount: int) -> None:
        self.pending_moves += amount

    def take_pending_moves(self) -> int:
        """Zwraca i zeruje odłożone ruchy."""
        moves, self.pending_moves = self.pending_moves, 0
        return moves

    def reset_turn_bonuses(self) -> None:
        """Koniec własnej tury: premie do ataku i kości przepadają."""
        self.bonus_attack = 0
        self.rerolls = 0

    def reset_for_round(self, position: HexCoord) -> None:
        """Nowa runda: pełne zdrowie, brak premii, nowe pole."""
        self.position = position
        self.health = self.max_health
        self.bonus_attack = 0
        self.rerolls = 0
        self.pending_moves = 0

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot do logu zdarzeń."""
        return {
            "id": self.id,
            "name": self.player.name,
            "variant": self.player.variant.value,
            "position": [self.position.q, self.position.r],
            "health": self.health,
            "max_health": self.max_health,
            "total_attack": self.total_attack,
            "rerolls": self.rerolls,
        }

    def __repr__(self) -> str:
        return (
            f"Combatant({self.slot.label}, {self.position}, "
            f"hp={self.health}/{self.max_health}, atk={self.total_attack})"
        )
