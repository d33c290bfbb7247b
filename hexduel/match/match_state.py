"""
Stan meczu i jego konfiguracja.

Mecz ma JEDNĄ aktualną fazę. Fazy zmienia wyłącznie MatchController.

FAZY:
═══════════════════════════════════════════════════════════════════

    AWAITING_MOVE
    ─────────────────────────────────────────────────────────────
    Aktywny gracz ma przydział ruchów i czeka na intencję ruchu.

    Wyjście:
        -> RESOLVING_BATTLE (po ruchu pionki sąsiadują)
        -> ROUND_OVER (ring-out przy sprawdzeniu startu tury)

    RESOLVING_BATTLE
    ─────────────────────────────────────────────────────────────
    Kości, odrzut, obrażenia. Trwa w obrębie jednego wywołania.

    Wyjście:
        -> AWAITING_MOVE (przegrany przeżył)
        -> ROUND_OVER (ring-out albo zdrowie <= 0)

    ROUND_OVER
    ─────────────────────────────────────────────────────────────
    Zwycięzca rundy dostał punkt. Przejściowa.

    Wyjście:
        -> AWAITING_MOVE (nowa runda)
        -> MATCH_OVER (ktoś osiągnął wins_to_win_match)

    MATCH_OVER
    ─────────────────────────────────────────────────────────────
    Terminalna. Każda intencja ruchu jest odrzucana. Wyjście tylko
    przez reset_match().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional

from ..core.errors import ConfigurationError
from ..core.hex_coord import Orientation
from ..collectibles.collectible import Tier
from ..collectibles.collectible_manager import DEFAULT_TIER_WEIGHTS
from ..units.player import PlayerSlot


class MatchPhase(Enum):
    """Faza meczu."""
    AWAITING_MOVE = auto()
    RESOLVING_BATTLE = auto()
    ROUND_OVER = auto()
    MATCH_OVER = auto()

    def is_terminal(self) -> bool:
        return self is MatchPhase.MATCH_OVER

    def __str__(self) -> str:
        return self.name


# Dozwolone przejścia (z -> do)
_TRANSITIONS = {
    MatchPhase.AWAITING_MOVE: {MatchPhase.RESOLVING_BATTLE, MatchPhase.ROUND_OVER},
    MatchPhase.RESOLVING_BATTLE: {MatchPhase.AWAITING_MOVE, MatchPhase.ROUND_OVER},
    MatchPhase.ROUND_OVER: {MatchPhase.AWAITING_MOVE, MatchPhase.MATCH_OVER},
    MatchPhase.MATCH_OVER: set(),
}


@dataclass
class MatchState:
    """
    Mutowalny stan meczu.

    Attributes:
        phase (MatchPhase): Aktualna faza
        current (PlayerSlot): Czyja jest tura
        remaining_moves (int): Pozostały przydział ruchów
        round_number (int): Numer rundy (od 1)
        turn_number (int): Globalny licznik tur w meczu
        match_winner (Optional[PlayerSlot]): Zwycięzca po MATCH_OVER

    Note:
        Wygrane rundy trzyma Player.wins - jedno źródło prawdy.
    """
    phase: MatchPhase = MatchPhase.ROUND_OVER
    current: PlayerSlot = PlayerSlot.PLAYER1
    remaining_moves: int = 0
    round_number: int = 0
    turn_number: int = 0
    match_winner: Optional[PlayerSlot] = None

    def transition_to(self, new_phase: MatchPhase) -> bool:
        """
        Zmienia fazę, jeśli przejście jest dozwolone.

        Returns:
            bool: True jeśli zmieniono fazę
        """
        if new_phase == self.phase:
            return True
        if new_phase not in _TRANSITIONS[self.phase]:
            return False
        self.phase = new_phase
        return True

    def reset_for_round(self) -> None:
        """Nowa runda: tura wraca do PLAYER1."""
        self.current = PlayerSlot.PLAYER1
        self.remaining_moves = 0
        self.round_number += 1

    def reset(self) -> None:
        """Nowy mecz: wszystko od zera."""
        self.phase = MatchPhase.ROUND_OVER
        self.current = PlayerSlot.PLAYER1
        self.remaining_moves = 0
        self.round_number = 0
        self.turn_number = 0
        self.match_winner = None

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal()


@dataclass
class MatchConfig:
    """
    Konfiguracja meczu.

    Attributes:
        board_width (int): Liczba kolumn planszy
        board_height (int): Liczba wierszy planszy
        orientation (Orientation): Orientacja hexów
        wins_to_win_match (int): Wygrane rundy potrzebne do wygrania meczu
        refill_threshold (float): Próg uzupełnienia znajdziek
        collectible_density (float): Docelowy ułamek pól ze znajdźką
        turn_start_knockback (int): Odrzut przy sąsiedztwie na starcie tury
        battle_knockback (int): Odrzut przegranego po bitwie
        tier_weights (Dict[Tier, float]): Wagi losowania tieru
    """
    board_width: int = 7
    board_height: int = 7
    orientation: Orientation = Orientation.POINTY_TOP
    wins_to_win_match: int = 2
    refill_threshold: float = 0.10
    collectible_density: float = 0.20
    turn_start_knockback: int = 2
    battle_knockback: int = 2
    tier_weights: Dict[Tier, float] = field(default_factory=lambda: dict(DEFAULT_TIER_WEIGHTS))

    def validate(self) -> None:
        """
        Raises:
            ConfigurationError: Przy pierwszej błędnej wartości
        """
        if self.board_width <= 0 or self.board_height <= 0:
            raise ConfigurationError(
                f"Board dimensions must be positive, got {self.board_width}x{self.board_height}"
            )
        if self.wins_to_win_match <= 0:
            raise ConfigurationError(f"wins_to_win_match must be positive, got {self.wins_to_win_match}")
        if self.turn_start_knockback < 0 or self.battle_knockback < 0:
            raise ConfigurationError("Knockback distances must be >= 0")
        for name in ("refill_threshold", "collectible_density"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {value}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        """
        Tworzy konfigurację z płaskiego słownika (YAML).

        Nieznane klucze są ignorowane, brakujące biorą wartości domyślne.
        """
        config = cls()
        for key in (
            "board_width", "board_height", "wins_to_win_match",
            "turn_start_knockback", "battle_knockback",
        ):
            if key in data:
                setattr(config, key, int(data[key]))
        for key in ("refill_threshold", "collectible_density"):
            if key in data:
                setattr(config, key, float(data[key]))

        orientation = data.get("orientation")
        if isinstance(orientation, Orientation):
            config.orientation = orientation
        elif orientation is not None:
            try:
                config.orientation = Orientation.from_string(str(orientation))
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

        weights = data.get("tier_weights")
        if weights:
            config.tier_weights = {
                (k if isinstance(k, Tier) else Tier.from_string(str(k))): float(v)
                for k, v in weights.items()
            }

        config.validate()
        return config
