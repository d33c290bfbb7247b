"""
MatchController - maszyna stanów meczu.

Controller jest jedynym właścicielem planszy, pionków i znajdziek.
Warstwa prezentacji czyta snapshoty i wyniki, a zmiany zgłasza
wyłącznie jako intencje (try_move, end_turn).

PRZEBIEG TURY:
═══════════════════════════════════════════════════════════════════

    1. BEGIN_TURN
       ─────────────────────────────────────────────────────────
       • Jeśli aktywny pionek sąsiaduje z przeciwnikiem:
         odrzut przeciwnika o turn_start_knockback
         (ring-out -> aktywny wygrywa rundę)
       • Przydział: movement + pending_moves

    2. TRY_MOVE (powtarzane)
       ─────────────────────────────────────────────────────────
       • Walidacja PRZED jakąkolwiek zmianą:
         cel istnieje, to nie własne pole, sąsiaduje, nie jest zajęty
       • Przesunięcie, -1 ruch, podniesienie znajdźki
       • Sąsiedztwo z przeciwnikiem -> BITWA (obowiązkowa)

    3. BITWA
       ─────────────────────────────────────────────────────────
       • resolve_battle(mover, opponent)
       • Odrzut przegranego o battle_knockback od zwycięzcy
         - poza planszę -> ring-out, zwycięzca wygrywa rundę,
           BEZ obrażeń
         - na planszy -> przegrany dostaje damage;
           zdrowie <= 0 -> zwycięzca wygrywa rundę

    4. END_TURN
       ─────────────────────────────────────────────────────────
       • Przydział wyczerpany (albo jawne spasowanie)
       • Premie aktywnego pionka (bonus_attack, rerolls) -> 0
       • Tura przechodzi na przeciwnika -> BEGIN_TURN

KONIEC RUNDY:
═══════════════════════════════════════════════════════════════════

    • Zwycięzca: Player.add_win()
    • wins >= wins_to_win_match -> MATCH_OVER
    • inaczej nowa runda: pełne zdrowie, nowe pola startowe
      (nie zajęte i nie sąsiadujące), znajdźki od nowa, tura PLAYER1

ZAJĘTOŚĆ:
═══════════════════════════════════════════════════════════════════

    Liczona skanem po dwóch pionkach - nie ma osobnej flagi na polu,
    więc nie może się rozjechać z pozycjami.

Przykład użycia:
    >>> controller = MatchController(
    ...     Player("Ala", Variant.DEFAULT),
    ...     Player("Ola", Variant.STRONG_ATTACK),
    ...     rng=GameRNG(12345),
    ... )
    >>> target = next(iter(controller.get_legal_destinations()))
    >>> controller.try_move(target.coord).accepted
    True
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from ..core.config_loader import ConfigLoader
from ..core.errors import ConfigurationError, InvariantViolation
from ..core.hex_board import HexBoard, HexCell
from ..core.hex_coord import HexCoord
from ..core.rng import GameRNG
from ..collectibles.collectible import CollectibleDefinition, CollectibleType, load_catalog
from ..collectibles.collectible_manager import CollectibleManager
from ..combat.battle import BattleResult, resolve_battle
from ..events.event_logger import EventLogger
from ..units.combatant import Combatant
from ..units.player import Player, PlayerSlot
from .match_state import MatchConfig, MatchPhase, MatchState
from .outcome import KnockbackResult, MoveOutcome, MoveOutcomeKind, PickupResult
from .snapshot import BoardSnapshot, CellSnapshot, CollectibleSnapshot, CombatantSnapshot


Target = Union[HexCoord, HexCell, None]


class MatchController:
    """
    Silnik reguł jednego meczu dwóch graczy.

    Attributes:
        config (MatchConfig): Zasady meczu
        rng (GameRNG): Jedyne źródło losowości
        logger (EventLogger): Log zdarzeń
        board (HexBoard): Plansza
        players (Tuple[Player, Player]): Gracze (PLAYER1, PLAYER2)
        combatants (Dict[PlayerSlot, Combatant]): Pionki bieżącej rundy
        collectibles (CollectibleManager): Znajdźki
        state (MatchState): Faza, tura, przydział ruchów

    Raises:
        ConfigurationError: Zła plansza, pusty katalog, ten sam gracz dwa razy
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        config: Optional[MatchConfig] = None,
        rng: Optional[GameRNG] = None,
        catalog: Optional[Sequence[CollectibleDefinition]] = None,
        logger: Optional[EventLogger] = None,
    ):
        if player1 is None or player2 is None or player1 is player2:
            raise ConfigurationError("A match needs exactly two distinct players")

        self.config = config or MatchConfig()
        self.config.validate()
        self.rng = rng or GameRNG(0)
        self.logger = logger or EventLogger(
            seed=self.rng.seed,
            board_width=self.config.board_width,
            board_height=self.config.board_height,
        )

        self.board = HexBoard(
            self.config.board_width,
            self.config.board_height,
            self.config.orientation,
        )
        if catalog is None:
            catalog = load_catalog(ConfigLoader().load_collectible_catalog())
        self.collectibles = CollectibleManager(
            catalog,
            tier_weights=self.config.tier_weights,
            refill_threshold=self.config.refill_threshold,
            target_density=self.config.collectible_density,
        )

        self.players: Tuple[Player, Player] = (player1, player2)
        self.combatants: Dict[PlayerSlot, Combatant] = {}
        self.state = MatchState()
        self.last_round_winner: Optional[PlayerSlot] = None
        self.last_turn_start_knockback: Optional[KnockbackResult] = None

        self._start_match()

    @classmethod
    def from_config(
        cls,
        players: Sequence[Player],
        loader: Optional[ConfigLoader] = None,
        seed: int = 0,
        logger: Optional[EventLogger] = None,
    ) -> "MatchController":
        """
        Składa mecz z plików YAML.

        Args:
            players: Dokładnie dwóch graczy
            loader: Źródło konfiguracji (domyślnie pakietowe data/)
            seed: Ziarno GameRNG

        Raises:
            ConfigurationError: Jeśli graczy nie jest dwóch
        """
        if len(players) != 2:
            raise ConfigurationError(f"A match needs exactly two players, got {len(players)}")
        loader = loader or ConfigLoader()
        config = MatchConfig.from_dict(loader.get_match_config_dict())
        catalog = load_catalog(loader.load_collectible_catalog())
        return cls(
            players[0],
            players[1],
            config=config,
            rng=GameRNG(seed),
            catalog=catalog,
            logger=logger,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def phase(self) -> MatchPhase:
        return self.state.phase

    @property
    def current_combatant(self) -> Combatant:
        return self.combatants[self.state.current]

    def opponent_of(self, slot: PlayerSlot) -> Combatant:
        return self.combatants[slot.other]

    def player_of(self, slot: PlayerSlot) -> Player:
        return self.players[slot.value]

    def occupied_cells(self) -> Set[HexCoord]:
        return {c.position for c in self.combatants.values()}

    def is_cell_occupied(self, coord: HexCoord) -> bool:
        """Skan po pionkach - jedyne źródło prawdy o zajętości."""
        return any(c.position == coord for c in self.combatants.values())

    def get_scores(self) -> Tuple[int, int]:
        """(wygrane PLAYER1, wygrane PLAYER2)."""
        return (self.players[0].wins, self.players[1].wins)

    def is_valid_move(self, target: Target) -> bool:
        """True jeśli aktywny pionek może wejść na `target`."""
        return self._rejection_reason(target) is None

    def get_legal_destinations(self, combatant: Optional[Combatant] = None) -> Set[HexCell]:
        """
        Pola, na które pionek może teraz wejść.

        Dla pionka spoza tury albo poza AWAITING_MOVE - pusty zbiór.
        """
        combatant = combatant or self.current_combatant
        if self.state.phase != MatchPhase.AWAITING_MOVE or combatant.slot != self.state.current:
            return set()
        if self.state.remaining_moves <= 0:
            return set()
        return {
            cell for cell in self.board.neighbors_of(combatant.position)
            if not self.is_cell_occupied(cell.coord)
        }

    def _rejection_reason(self, target: Target) -> Optional[str]:
        if self.state.phase == MatchPhase.MATCH_OVER:
            return "match_over"
        if self.state.phase != MatchPhase.AWAITING_MOVE:
            return "not_awaiting_move"
        if self.state.remaining_moves <= 0:
            return "no_moves_left"

        coord = _as_coord(target)
        if coord is None or not self.board.contains(coord):
            return "no_target"

        mover = self.current_combatant
        if coord == mover.position:
            return "own_cell"
        if not self.board.is_adjacent(mover.position, coord):
            return "not_adjacent"
        if self.is_cell_occupied(coord):
            return "occupied"
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # INTENCJE
    # ─────────────────────────────────────────────────────────────────────────

    def try_move(self, target: Target, slot: Optional[PlayerSlot] = None) -> MoveOutcome:
        """
        Próba ruchu aktywnego pionka na sąsiednie pole.

        Odrzucenie niczego nie zmienia i nie jest logowane.

        Args:
            target: Pole docelowe
            slot: Kto zgłasza ruch (None = aktywny gracz)

        Returns:
            MoveOutcome: Co się stało (z powodem przy REJECTED)
        """
        if slot is not None and slot != self.state.current and not self.state.is_over:
            return MoveOutcome.rejected("not_your_turn")
        reason = self._rejection_reason(target)
        if reason is not None:
            return MoveOutcome.rejected(reason)

        coord = _as_coord(target)
        mover = self.current_combatant
        round_before = self.state.round_number

        previous = mover.move_to(coord)
        self.state.remaining_moves -= 1
        self.logger.log_move(
            self.state.turn_number, mover.id, previous.axial, coord.axial,
            remaining=self.state.remaining_moves,
        )
        self._check_occupancy()

        outcome = MoveOutcome(kind=MoveOutcomeKind.MOVED)
        pickup = self._collect(mover, coord)
        if pickup is not None:
            outcome.pickups.append(pickup)

        opponent = self.opponent_of(mover.slot)
        if self.board.is_adjacent(mover.position, opponent.position):
            outcome.kind = MoveOutcomeKind.MOVED_AND_BATTLED
            outcome.battle, outcome.knockback = self._run_battle(mover, opponent)
            outcome.pickups.extend(outcome.knockback.pickups)

        if self.state.round_number == round_before and not self.state.is_over:
            if self.end_turn_if_exhausted():
                outcome.turn_start_knockback = self.last_turn_start_knockback
                if outcome.turn_start_knockback is not None:
                    outcome.pickups.extend(outcome.turn_start_knockback.pickups)

        return self._finish_outcome(outcome, round_before)

    def end_turn_if_exhausted(self) -> bool:
        """
        Kończy turę, jeśli przydział ruchów się wyczerpał.

        Returns:
            bool: True jeśli tura została zakończona
        """
        if self.state.phase != MatchPhase.AWAITING_MOVE or self.state.remaining_moves > 0:
            return False
        self.end_turn()
        return True

    def end_turn(self) -> bool:
        """
        Kończy turę aktywnego gracza (także jako jawne spasowanie).

        Returns:
            bool: False jeśli mecz jest zakończony
        """
        if self.state.phase != MatchPhase.AWAITING_MOVE:
            return False

        acting = self.current_combatant
        acting.reset_turn_bonuses()
        self.state.remaining_moves = 0
        self.logger.log_turn_end(self.state.turn_number, acting.id)

        self.state.current = self.state.current.other
        self._begin_turn()
        return True

    def _begin_turn(self) -> Optional[KnockbackResult]:
        """
        Start tury aktywnego gracza.

        Sprawdza sąsiedztwo (odrzut przeciwnika), potem przyznaje ruchy.
        Wołane tylko z end_turn i _start_round - nie może odnowić
        przydziału w środku tury.

        Returns:
            Optional[KnockbackResult]: Odrzut ze sprawdzenia startu tury
        """
        if self.state.phase != MatchPhase.AWAITING_MOVE:
            return None

        self.state.turn_number += 1
        acting = self.current_combatant
        opponent = self.opponent_of(acting.slot)

        knockback = None
        if self.board.is_adjacent(acting.position, opponent.position):
            knockback = self.apply_knockback(opponent, acting, self.config.turn_start_knockback)
            if knockback.ring_out:
                self.resolve_round(acting.slot, reason="ring_out")
                # nowa runda startuje z niesąsiednich pól, więc jej start niczego nie odrzuca
                self.last_turn_start_knockback = knockback
                return knockback

        self.last_turn_start_knockback = knockback
        self.state.remaining_moves = acting.movement + acting.take_pending_moves()
        self.logger.log_turn_start(self.state.turn_number, acting.id, self.state.remaining_moves)
        return knockback

    # ─────────────────────────────────────────────────────────────────────────
    # BITWA I ODRZUT
    # ─────────────────────────────────────────────────────────────────────────

    def _run_battle(
        self,
        attacker: Combatant,
        defender: Combatant,
    ) -> Tuple[BattleResult, KnockbackResult]:
        """Bitwa -> odrzut -> obrażenia -> ewentualny koniec rundy."""
        self._set_phase(MatchPhase.RESOLVING_BATTLE)

        result = resolve_battle(attacker, defender, self.rng)
        self.logger.log_battle(self.state.turn_number, attacker.id, defender.id, result.to_dict())

        winner, loser = result.winner, result.loser
        knockback = self.apply_knockback(loser, winner, self.config.battle_knockback)

        if knockback.ring_out:
            self.resolve_round(winner.slot, reason="ring_out")
            return result, knockback

        health = loser.take_damage(result.damage)
        self.logger.log_damage(self.state.turn_number, loser.id, winner.id, result.damage, health)

        if not loser.is_alive():
            self.resolve_round(winner.slot, reason="knockout")
        else:
            self._set_phase(MatchPhase.AWAITING_MOVE)
        return result, knockback

    def apply_knockback(
        self,
        loser: Combatant,
        winner: Combatant,
        distance: int,
    ) -> KnockbackResult:
        """
        Odpycha `loser` o `distance` pól od `winner`.

        Rzut poza planszę to ring-out: wynik niesie skrót bitwy
        (resolve_battle z is_ring_out=True), pionek zostaje na miejscu,
        obrażeń nie ma. Rozstrzygnięcie rundy należy do wywołującego.

        Returns:
            KnockbackResult: Skąd, dokąd (None = ring-out), podniesienia
        """
        origin = loser.position
        cell = self.board.find_cell_in_direction(origin, winner.position, distance)

        if cell is None:
            self.logger.log_knockback(
                self.state.turn_number, loser.id, winner.id, origin.axial, None, distance,
            )
            return KnockbackResult(
                slot=loser.slot,
                source=winner.slot,
                origin=origin,
                destination=None,
                distance=distance,
                battle=resolve_battle(winner, loser, self.rng, is_ring_out=True),
            )

        loser.move_to(cell.coord)
        self._check_occupancy()
        self.logger.log_knockback(
            self.state.turn_number, loser.id, winner.id, origin.axial, cell.coord.axial, distance,
        )

        pickups = []
        pickup = self._collect(loser, cell.coord)
        if pickup is not None:
            pickups.append(pickup)

        return KnockbackResult(
            slot=loser.slot,
            source=winner.slot,
            origin=origin,
            destination=cell.coord,
            distance=distance,
            pickups=pickups,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # ZNAJDŹKI
    # ─────────────────────────────────────────────────────────────────────────

    def _collect(self, combatant: Combatant, coord: HexCoord) -> Optional[PickupResult]:
        """Podnosi znajdźkę z pola i aplikuje efekt."""
        collectible = self.collectibles.pick_up(self.board, coord)
        if collectible is None:
            return None

        turn = self.state.turn_number
        value = collectible.value
        applied = value

        if collectible.type is CollectibleType.EXTRA_MOVE:
            if combatant.slot == self.state.current:
                self.state.remaining_moves += value
            else:
                combatant.add_pending_moves(value)
        elif collectible.type is CollectibleType.EXTRA_ATTACK:
            combatant.add_bonus_attack(value)
        elif collectible.type is CollectibleType.HEALTH:
            applied = combatant.heal(value)
            self.logger.log_heal(turn, combatant.id, applied, combatant.health)
        elif collectible.type is CollectibleType.EXTRA_DICE:
            combatant.add_rerolls(value)

        pickup = PickupResult(slot=combatant.slot, at=coord, collectible=collectible, applied=applied)
        self.logger.log_pickup(turn, combatant.id, coord.axial, collectible.to_dict())

        if self.collectibles.needs_refill(self.board):
            self._spawn_collectibles()
        return pickup

    def _spawn_collectibles(self) -> List[HexCoord]:
        spawned = self.collectibles.spawn(self.board, self.occupied_cells(), self.rng)
        if spawned:
            self.logger.log_collectible_spawn(self.state.turn_number, [c.axial for c in spawned])
        return spawned

    # ─────────────────────────────────────────────────────────────────────────
    # RUNDY I MECZ
    # ─────────────────────────────────────────────────────────────────────────

    def resolve_round(
        self,
        winner: Union[PlayerSlot, Combatant],
        reason: str = "knockout",
    ) -> MoveOutcomeKind:
        """
        Przyznaje rundę i sprawdza koniec meczu.

        Returns:
            MoveOutcomeKind: ROUND_OVER (nowa runda ruszyła) albo MATCH_OVER
        """
        if self.state.is_over:
            return MoveOutcomeKind.MATCH_OVER

        slot = winner.slot if isinstance(winner, Combatant) else winner
        self._set_phase(MatchPhase.ROUND_OVER)

        self.last_round_winner = slot
        wins = self.player_of(slot).add_win()
        self.logger.log_round_end(
            self.state.turn_number, self.state.round_number, slot.label,
            list(self.get_scores()), reason,
        )

        if wins >= self.config.wins_to_win_match:
            self._set_phase(MatchPhase.MATCH_OVER)
            self.state.match_winner = slot
            self.state.remaining_moves = 0
            self.logger.log_match_end(self.state.turn_number, slot.label, list(self.get_scores()))
            return MoveOutcomeKind.MATCH_OVER

        self._start_round()
        return MoveOutcomeKind.ROUND_OVER

    def reset_match(self) -> None:
        """Nowy mecz z tymi samymi graczami: wygrane od zera."""
        self.logger.clear()
        self._start_match()

    def _start_match(self) -> None:
        for player in self.players:
            player.reset_wins()
        self.state.reset()
        self.last_round_winner = None
        self.last_turn_start_knockback = None
        self.logger.log_match_start(
            0,
            [{"slot": s.label, "name": p.name, "variant": p.variant.value}
             for s, p in zip(PlayerSlot, self.players)],
        )
        self._start_round()

    def _start_round(self) -> None:
        """Pola startowe, pełne zdrowie, znajdźki, tura PLAYER1."""
        self.state.reset_for_round()
        self.collectibles.reset(self.board)

        first, second = self._pick_start_cells()
        for slot, position in ((PlayerSlot.PLAYER1, first), (PlayerSlot.PLAYER2, second)):
            combatant = self.combatants.get(slot)
            if combatant is None:
                combatant = Combatant(slot=slot, player=self.player_of(slot), position=position)
                self.combatants[slot] = combatant
            else:
                combatant.reset_for_round(position)
            self.logger.log_spawn(self.state.turn_number, combatant.id, combatant.to_dict())

        self._spawn_collectibles()
        self.logger.log_round_start(
            self.state.turn_number,
            self.state.round_number,
            [c.to_dict() for c in self.combatants.values()],
        )

        self._set_phase(MatchPhase.AWAITING_MOVE)
        self._begin_turn()

    def _pick_start_cells(self) -> Tuple[HexCoord, HexCoord]:
        """
        Dwa losowe pola, które nie są sąsiednie.

        Raises:
            ConfigurationError: Gdy plansza nie ma takiej pary
        """
        first = self.board.get_random_cell(self.rng).coord
        candidates = [
            cell.coord for cell in self.board
            if not self.board.is_occupied_or_adjacent(cell.coord, {first})
        ]
        if not candidates:
            raise ConfigurationError(
                f"{self.board!r} has no two non-adjacent cells for the start of a round"
            )
        return first, self.rng.choice(candidates)

    # ─────────────────────────────────────────────────────────────────────────
    # USTAWIENIA WYMUSZONE (scenariusze / testy)
    # ─────────────────────────────────────────────────────────────────────────

    def place_combatant(self, slot: PlayerSlot, coord: HexCoord) -> None:
        """
        Stawia pionek na polu bez ruchu, podniesień i bitwy.

        Raises:
            InvariantViolation: Pole nie istnieje albo stoi tam przeciwnik
        """
        self.board.require_cell(coord)
        if self.opponent_of(slot).position == coord:
            raise InvariantViolation(f"Cell {coord} is occupied by {slot.other.label}")
        self.combatants[slot].move_to(coord)

    def place_combatants(self, player1_at: HexCoord, player2_at: HexCoord) -> None:
        """Stawia oba pionki naraz (kolejność nie ma znaczenia)."""
        if player1_at == player2_at:
            raise InvariantViolation(f"Both combatants cannot stand on {player1_at}")
        self.board.require_cell(player1_at)
        self.board.require_cell(player2_at)
        self.combatants[PlayerSlot.PLAYER1].move_to(player1_at)
        self.combatants[PlayerSlot.PLAYER2].move_to(player2_at)

    # ─────────────────────────────────────────────────────────────────────────
    # SNAPSHOT
    # ─────────────────────────────────────────────────────────────────────────

    def get_board_snapshot(self) -> BoardSnapshot:
        """Niemutowalny obraz meczu dla warstwy prezentacji."""
        occupants = {c.position: c.id for c in self.combatants.values()}

        cells = []
        for cell in self.board:
            collectible = None
            if cell.collectible is not None:
                collectible = CollectibleSnapshot(**cell.collectible.to_dict())
            col, row = cell.offset
            cells.append(CellSnapshot(
                q=cell.coord.q,
                r=cell.coord.r,
                col=col,
                row=row,
                occupant=occupants.get(cell.coord),
                collectible=collectible,
            ))

        combatants = [
            CombatantSnapshot(
                slot=c.id,
                name=c.player.name,
                variant=c.player.variant.value,
                q=c.position.q,
                r=c.position.r,
                health=c.health,
                max_health=c.max_health,
                movement=c.movement,
                total_attack=c.total_attack,
                bonus_attack=c.bonus_attack,
                rerolls=c.rerolls,
                pending_moves=c.pending_moves,
                wins=c.player.wins,
            )
            for c in self.combatants.values()
        ]

        winner = self.state.match_winner
        return BoardSnapshot(
            width=self.board.width,
            height=self.board.height,
            orientation=self.board.orientation.value,
            phase=self.state.phase.name,
            round_number=self.state.round_number,
            turn_number=self.state.turn_number,
            current_player=self.state.current.label,
            remaining_moves=self.state.remaining_moves,
            scores=self.get_scores(),
            match_winner=winner.label if winner is not None else None,
            cells=cells,
            combatants=combatants,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    def _set_phase(self, phase: MatchPhase) -> None:
        if not self.state.transition_to(phase):
            raise InvariantViolation(f"Illegal phase change {self.state.phase} -> {phase}")

    def _check_occupancy(self) -> None:
        p1 = self.combatants[PlayerSlot.PLAYER1].position
        p2 = self.combatants[PlayerSlot.PLAYER2].position
        if p1 == p2:
            raise InvariantViolation(f"Both combatants occupy {p1}")

    def _finish_outcome(self, outcome: MoveOutcome, round_before: int) -> MoveOutcome:
        if self.state.is_over:
            outcome.kind = MoveOutcomeKind.MATCH_OVER
            outcome.winner = self.state.match_winner
        elif self.state.round_number != round_before:
            outcome.kind = MoveOutcomeKind.ROUND_OVER
            outcome.winner = self.last_round_winner
        return outcome

    def debug_print(self) -> str:
        """Plansza tekstowo: 1/2 = pionki, * = znajdźki."""
        marks = {c.position: str(c.slot.value + 1) for c in self.combatants.values()}
        return self.board.debug_print(marks)

    def __repr__(self) -> str:
        return (
            f"MatchController(round={self.state.round_number}, turn={self.state.turn_number}, "
            f"phase={self.state.phase}, scores={self.get_scores()})"
        )


def _as_coord(target: Target) -> Optional[HexCoord]:
    if isinstance(target, HexCell):
        return target.coord
    return target
