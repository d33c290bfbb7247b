"""
Strukturalny log zdarzeń meczu.

Każda zmiana stanu meczu (ruch, podniesienie znajdźki, bitwa,
odrzut, koniec rundy...) trafia do logu z pełnym kontekstem.
Warstwa prezentacji może z niego odtworzyć przebieg meczu krok
po kroku. Odrzucone ruchy NIE są logowane - to zwykłe wejście.

TYPY ZDARZEŃ:
═══════════════════════════════════════════════════════════════════

    MATCH_START / MATCH_END
    ─────────────────────────────────────────────────────────────
    Data: players / winner, scores

    ROUND_START / ROUND_END
    ─────────────────────────────────────────────────────────────
    Data: round, combatants / winner, scores, reason

    TURN_START / TURN_END
    ─────────────────────────────────────────────────────────────
    Data: moves (przydział ruchów)

    UNIT_SPAWN
    ─────────────────────────────────────────────────────────────
    Pionek postawiony na polu startowym rundy.
    Data: snapshot pionka

    UNIT_MOVE
    ─────────────────────────────────────────────────────────────
    Data: from [q, r], to [q, r], remaining

    COLLECTIBLE_SPAWN / COLLECTIBLE_PICKUP
    ─────────────────────────────────────────────────────────────
    Data: cells / type, tier, value, at

    BATTLE
    ─────────────────────────────────────────────────────────────
    Data: BattleResult.to_dict()

    KNOCKBACK / RING_OUT
    ─────────────────────────────────────────────────────────────
    Data: from, to (albo brak dla ring-out), distance

    UNIT_DAMAGE / UNIT_HEAL
    ─────────────────────────────────────────────────────────────
    Data: amount, health_after

FORMAT:
═══════════════════════════════════════════════════════════════════

{
    "metadata": {"version": "1.0", "seed": 12345, "board": {...}},
    "events": [
        {"turn": 1, "type": "UNIT_MOVE", "unit_id": "p1",
         "data": {"from": [0, 0], "to": [1, 0], "remaining": 2}},
        ...
    ],
    "final_state": {"winner": "p1", "scores": [2, 1]}
}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional
from datetime import datetime
import json


class EventType(Enum):
    """Typ zdarzenia meczu."""

    # Mecz i rundy
    MATCH_START = auto()
    MATCH_END = auto()
    ROUND_START = auto()
    ROUND_END = auto()
    TURN_START = auto()
    TURN_END = auto()

    # Pionki
    UNIT_SPAWN = auto()
    UNIT_MOVE = auto()
    UNIT_DAMAGE = auto()
    UNIT_HEAL = auto()

    # Znajdźki
    COLLECTIBLE_SPAWN = auto()
    COLLECTIBLE_PICKUP = auto()

    # Walka
    BATTLE = auto()
    KNOCKBACK = auto()
    RING_OUT = auto()


@dataclass
class GameEvent:
    """
    Pojedyncze zdarzenie meczu.

    Attributes:
        turn (int): Numer tury (globalny w meczu)
        event_type (EventType): Typ zdarzenia
        unit_id (Optional[str]): Pionek, którego dotyczy ("p1" / "p2")
        target_id (Optional[str]): Drugi pionek (bitwa, odrzut)
        data (Dict): Dane specyficzne dla typu
    """
    turn: int
    event_type: EventType
    unit_id: Optional[str] = None
    target_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje zdarzenie do słownika."""
        result: Dict[str, Any] = {
            "turn": self.turn,
            "type": self.event_type.name,
        }
        if self.unit_id:
            result["unit_id"] = self.unit_id
        if self.target_id:
            result["target_id"] = self.target_id
        if self.data:
            result["data"] = self.data
        return result


class EventLogger:
    """
    Logger zdarzeń meczu (w pamięci).

    Attributes:
        events (List[GameEvent]): Wszystkie zdarzenia w kolejności
        metadata (Dict): Seed, wymiary planszy, znacznik czasu
        final_state (Dict): Zwycięzca i wynik po MATCH_END

    Example:
        >>> logger = EventLogger(seed=12345, board_width=7, board_height=7)
        >>> logger.log_move(1, "p1", (0, 0), (1, 0), remaining=2)
        >>> logger.get_event_count()
        1
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        board_width: int = 7,
        board_height: int = 7,
    ):
        self.events: List[GameEvent] = []
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "seed": seed,
            "board": {"width": board_width, "height": board_height},
            "timestamp": datetime.now().isoformat(),
        }
        self.final_state: Dict[str, Any] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE OGÓLNE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, event: GameEvent) -> None:
        self.events.append(event)

    def log_event(
        self,
        turn: int,
        event_type: EventType,
        unit_id: Optional[str] = None,
        target_id: Optional[str] = None,
        **data: Any,
    ) -> GameEvent:
        """Tworzy i loguje zdarzenie."""
        event = GameEvent(
            turn=turn,
            event_type=event_type,
            unit_id=unit_id,
            target_id=target_id,
            data=dict(data),
        )
        self.log(event)
        return event

    # ─────────────────────────────────────────────────────────────────────────
    # POMOCNICZE METODY LOGOWANIA
    # ─────────────────────────────────────────────────────────────────────────

    def log_match_start(self, turn: int, players: List[Dict[str, Any]]) -> None:
        self.log_event(turn, EventType.MATCH_START, players=players)

    def log_match_end(self, turn: int, winner_id: Optional[str], scores: List[int]) -> None:
        """Loguje koniec meczu i zapisuje stan końcowy."""
        self.final_state = {"winner": winner_id, "scores": list(scores), "total_turns": turn}
        self.log_event(turn, EventType.MATCH_END, unit_id=winner_id, scores=list(scores))

    def log_round_start(self, turn: int, round_number: int, combatants: List[Dict[str, Any]]) -> None:
        self.log_event(turn, EventType.ROUND_START, round=round_number, combatants=combatants)

    def log_round_end(
        self,
        turn: int,
        round_number: int,
        winner_id: str,
        scores: List[int],
        reason: str,
    ) -> None:
        self.log_event(
            turn,
            EventType.ROUND_END,
            unit_id=winner_id,
            round=round_number,
            scores=list(scores),
            reason=reason,
        )

    def log_turn_start(self, turn: int, unit_id: str, moves: int) -> None:
        self.log_event(turn, EventType.TURN_START, unit_id=unit_id, moves=moves)

    def log_turn_end(self, turn: int, unit_id: str) -> None:
        self.log_event(turn, EventType.TURN_END, unit_id=unit_id)

    def log_spawn(self, turn: int, unit_id: str, snapshot: Dict[str, Any]) -> None:
        self.log_event(turn, EventType.UNIT_SPAWN, unit_id=unit_id, **snapshot)

    def log_move(
        self,
        turn: int,
        unit_id: str,
        from_pos: tuple,
        to_pos: tuple,
        remaining: int,
    ) -> None:
        """Loguje ruch pionka (pozycje jako (q, r))."""
        self.log_event(
            turn,
            EventType.UNIT_MOVE,
            unit_id=unit_id,
            remaining=remaining,
            **{"from": list(from_pos), "to": list(to_pos)},
        )

    def log_collectible_spawn(self, turn: int, cells: List[tuple]) -> None:
        self.log_event(turn, EventType.COLLECTIBLE_SPAWN, cells=[list(c) for c in cells])

    def log_pickup(self, turn: int, unit_id: str, at: tuple, collectible: Dict[str, Any]) -> None:
        self.log_event(turn, EventType.COLLECTIBLE_PICKUP, unit_id=unit_id, at=list(at), **collectible)

    def log_battle(self, turn: int, attacker_id: str, defender_id: str, result: Dict[str, Any]) -> None:
        self.log_event(turn, EventType.BATTLE, unit_id=attacker_id, target_id=defender_id, **result)

    def log_knockback(
        self,
        turn: int,
        unit_id: str,
        source_id: str,
        from_pos: tuple,
        to_pos: Optional[tuple],
        distance: int,
    ) -> None:
        """Odrzut; to_pos=None oznacza ring-out."""
        if to_pos is None:
            self.log_event(
                turn,
                EventType.RING_OUT,
                unit_id=unit_id,
                target_id=source_id,
                distance=distance,
                **{"from": list(from_pos)},
            )
            return
        self.log_event(
            turn,
            EventType.KNOCKBACK,
            unit_id=unit_id,
            target_id=source_id,
            distance=distance,
            **{"from": list(from_pos), "to": list(to_pos)},
        )

    def log_damage(self, turn: int, unit_id: str, source_id: str, amount: int, health_after: int) -> None:
        self.log_event(
            turn,
            EventType.UNIT_DAMAGE,
            unit_id=unit_id,
            target_id=source_id,
            amount=amount,
            health_after=health_after,
        )

    def log_heal(self, turn: int, unit_id: str, amount: int, health_after: int) -> None:
        self.log_event(turn, EventType.UNIT_HEAL, unit_id=unit_id, amount=amount, health_after=health_after)

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Cały log jako słownik gotowy do JSON."""
        return {
            "metadata": self.metadata,
            "events": [e.to_dict() for e in self.events],
            "final_state": self.final_state,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Log jako string JSON (indent=None -> compact)."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def clear(self) -> None:
        """Czyści zdarzenia (nowy mecz)."""
        self.events.clear()
        self.final_state = {}

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_event_count(self) -> int:
        return len(self.events)

    def get_events_by_type(self, event_type: EventType) -> List[GameEvent]:
        """Filtruje zdarzenia po typie."""
        return [e for e in self.events if e.event_type == event_type]

    def get_events_for_unit(self, unit_id: str) -> List[GameEvent]:
        """Filtruje zdarzenia dla pionka."""
        return [e for e in self.events if e.unit_id == unit_id]

    def get_events_in_turn(self, turn: int) -> List[GameEvent]:
        """Filtruje zdarzenia w turze."""
        return [e for e in self.events if e.turn == turn]
