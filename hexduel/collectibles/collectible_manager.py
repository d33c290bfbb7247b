"""
CollectibleManager - spawn, podnoszenie i uzupełnianie znajdziek.

ODPOWIEDZIALNOŚCI:
═══════════════════════════════════════════════════════════════════════════

    1. Docelowa liczba znajdziek: int(liczba_pól * density)
    2. Spawn na polach wolnych i NIE sąsiadujących z pionkami
    3. Losowanie: typ jednostajnie z katalogu, tier z wagami
    4. Podniesienie: zdjęcie z pola + zmniejszenie licznika
    5. Uzupełnienie, gdy żywych <= refill_threshold * liczba_pól

FLOW:
═══════════════════════════════════════════════════════════════════════════

    start rundy:
        reset(board) -> spawn(board, occupied, rng)

    ruch na pole ze znajdźką:
        pick_up(board, coord)
        if needs_refill(board): spawn(board, occupied, rng)

Menedżer nie aplikuje efektów - to robi MatchController, który wie,
czyja jest tura.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, TYPE_CHECKING

from ..core.errors import ConfigurationError
from ..core.hex_coord import HexCoord
from .collectible import Collectible, CollectibleDefinition, Tier

if TYPE_CHECKING:
    from ..core.hex_board import HexBoard
    from ..core.rng import GameRNG


DEFAULT_TIER_WEIGHTS: Dict[Tier, float] = {
    Tier.SMALL: 50,
    Tier.MEDIUM: 35,
    Tier.LARGE: 15,
}


class CollectibleManager:
    """
    Zarządza znajdźkami na planszy.

    Attributes:
        catalog (List[CollectibleDefinition]): Dostępne definicje
        tier_weights (Dict[Tier, float]): Wagi losowania tieru
        refill_threshold (float): Próg uzupełnienia (ułamek pól)
        target_density (float): Docelowy ułamek pól ze znajdźką
        live_count (int): Ile znajdziek leży na planszy

    Raises:
        ConfigurationError: Pusty katalog, wagi <= 0, progi spoza [0, 1]
    """

    def __init__(
        self,
        catalog: Sequence[CollectibleDefinition],
        tier_weights: Optional[Mapping[Tier, float]] = None,
        refill_threshold: float = 0.10,
        target_density: float = 0.20,
    ):
        if not catalog:
            raise ConfigurationError("CollectibleManager needs a non-empty catalog")
        if not 0.0 <= refill_threshold <= 1.0 or not 0.0 <= target_density <= 1.0:
            raise ConfigurationError(
                f"Thresholds must be in [0, 1]: refill={refill_threshold}, density={target_density}"
            )

        weights = dict(tier_weights or DEFAULT_TIER_WEIGHTS)
        if any(w < 0 for w in weights.values()) or sum(weights.values()) <= 0:
            raise ConfigurationError(f"Invalid tier weights: {weights}")

        self.catalog: List[CollectibleDefinition] = list(catalog)
        self.tier_weights: Dict[Tier, float] = weights
        self.refill_threshold = refill_threshold
        self.target_density = target_density
        self.live_count = 0

    # ─────────────────────────────────────────────────────────────────────────
    # PROGI
    # ─────────────────────────────────────────────────────────────────────────

    def target_count(self, board: "HexBoard") -> int:
        """Docelowa liczba znajdziek na planszy."""
        return int(len(board) * self.target_density)

    def needs_refill(self, board: "HexBoard") -> bool:
        """True gdy żywych znajdziek jest <= refill_threshold pól."""
        return self.live_count / len(board) <= self.refill_threshold

    # ─────────────────────────────────────────────────────────────────────────
    # LOSOWANIE
    # ─────────────────────────────────────────────────────────────────────────

    def roll_collectible(self, rng: "GameRNG") -> Collectible:
        """Typ jednostajnie z katalogu, tier ważony."""
        definition = rng.choice(self.catalog)
        tiers = list(self.tier_weights.keys())
        tier = rng.weighted_choice(tiers, [self.tier_weights[t] for t in tiers])
        return Collectible(definition=definition, tier=tier)

    def spawn(
        self,
        board: "HexBoard",
        occupied: Iterable[HexCoord],
        rng: "GameRNG",
    ) -> List[HexCoord]:
        """
        Dokłada znajdźki aż do target_count.

        Kandydaci: pola bez znajdźki, nie zajęte i nie sąsiadujące
        z zajętymi. Gdy kandydatów brakuje, spawnuje tyle, ile się da.

        Returns:
            List[HexCoord]: Pola, na których pojawiły się znajdźki
        """
        missing = self.target_count(board) - self.live_count
        if missing <= 0:
            return []

        candidates = [
            cell.coord for cell in board.get_free_isolated_cells(occupied)
            if cell.collectible is None
        ]
        chosen = rng.sample(candidates, min(missing, len(candidates)))

        for coord in chosen:
            board.place_collectible(coord, self.roll_collectible(rng))
            self.live_count += 1
        return chosen

    def place(self, board: "HexBoard", coord: HexCoord, collectible: Collectible) -> None:
        """Kładzie konkretną znajdźkę (ustawienia scenariuszy)."""
        board.place_collectible(coord, collectible)
        self.live_count += 1

    # ─────────────────────────────────────────────────────────────────────────
    # PODNOSZENIE / RESET
    # ─────────────────────────────────────────────────────────────────────────

    def pick_up(self, board: "HexBoard", coord: HexCoord) -> Optional[Collectible]:
        """Zdejmuje znajdźkę z pola (None jeśli go nie było)."""
        collectible = board.remove_collectible(coord)
        if collectible is not None:
            self.live_count -= 1
        return collectible

    def reset(self, board: "HexBoard") -> None:
        """Czyści wszystkie znajdźki z planszy."""
        board.clear_collectibles()
        self.live_count = 0

    def __repr__(self) -> str:
        return f"CollectibleManager(catalog={len(self.catalog)}, live={self.live_count})"
