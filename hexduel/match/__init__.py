"""
Match module - maszyna stanów meczu.

Zawiera:
- MatchController: Tury, legalność ruchów, bitwy, odrzut, rundy
- MatchState / MatchPhase / MatchConfig: Stan i zasady meczu
- MoveOutcome / MoveOutcomeKind / KnockbackResult / PickupResult: Wyniki
- BoardSnapshot i pochodne: Niemutowalne obrazy dla prezentacji
- choose_move / play_match: Auto-gracz
"""

from .match_state import MatchConfig, MatchPhase, MatchState
from .outcome import KnockbackResult, MoveOutcome, MoveOutcomeKind, PickupResult
from .snapshot import BoardSnapshot, CellSnapshot, CollectibleSnapshot, CombatantSnapshot
from .match_controller import MatchController
from .autoplay import choose_move, play_match

__all__ = [
    "MatchConfig", "MatchPhase", "MatchState",
    "KnockbackResult", "MoveOutcome", "MoveOutcomeKind", "PickupResult",
    "BoardSnapshot", "CellSnapshot", "CollectibleSnapshot", "CombatantSnapshot",
    "MatchController", "choose_move", "play_match",
]
