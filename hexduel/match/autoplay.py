"""
Auto-gracz - prosta polityka do dema i testów integracyjnych.

Polityka (zachłanna, deterministyczna):
    1. Znajdźka na legalnym sąsiednim polu -> bierz ją
    2. Znajdźka w zasięgu przydziału, bliżej przeciwnika niż pionek
       -> krok A* w jej stronę
    3. Inaczej pierwszy krok A* w stronę przeciwnika
    4. Brak kroku -> pierwsze legalne pole (stała kolejność)
    5. Brak legalnych pól -> None (gracz pasuje)

Auto-gracz NIE zmienia stanu poza publicznymi intencjami
MatchController (try_move, end_turn).
"""

from __future__ import annotations
from typing import Optional

from ..core.hex_coord import HexCoord
from ..core.pathfinding import find_path_next_step, get_hexes_in_range
from ..units.player import PlayerSlot
from .match_controller import MatchController
from .outcome import MoveOutcomeKind


def choose_move(controller: MatchController) -> Optional[HexCoord]:
    """
    Wybiera następne pole dla aktywnego gracza.

    Returns:
        Optional[HexCoord]: Legalne pole albo None (brak ruchu)
    """
    legal = sorted(
        controller.get_legal_destinations(),
        key=lambda cell: (cell.coord.q, cell.coord.r),
    )
    if not legal:
        return None

    for cell in legal:
        if cell.collectible is not None:
            return cell.coord

    mover = controller.current_combatant
    opponent = controller.opponent_of(mover.slot)
    occupied = controller.occupied_cells()

    lure = _nearest_collectible_toward(controller, mover.position, opponent.position)
    if lure is not None:
        step = find_path_next_step(controller.board, mover.position, lure, blocked=occupied)
        if step is not None and controller.is_valid_move(step):
            return step

    step = find_path_next_step(
        controller.board,
        mover.position,
        opponent.position,
        blocked=occupied,
    )
    if step is not None and controller.is_valid_move(step):
        return step

    return legal[0].coord


def _nearest_collectible_toward(
    controller: MatchController,
    position: HexCoord,
    opponent: HexCoord,
) -> Optional[HexCoord]:
    """Najbliższa znajdźka w zasięgu przydziału, leżąca bliżej przeciwnika niż pionek."""
    reach = controller.state.remaining_moves
    ahead = position.distance(opponent)
    candidates = [
        coord for coord in get_hexes_in_range(position, reach, controller.board)
        if coord != position
        and controller.board.get_cell(coord).collectible is not None
        and not controller.is_cell_occupied(coord)
        and coord.distance(opponent) < ahead
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda coord: (position.distance(coord), coord.q, coord.r))


def play_match(controller: MatchController, max_turns: int = 500) -> Optional[PlayerSlot]:
    """
    Rozgrywa mecz do końca (albo do limitu tur).

    Args:
        controller: Mecz w toku
        max_turns: Bezpiecznik na liczbę tur

    Returns:
        Optional[PlayerSlot]: Zwycięzca meczu; None gdy skończył się limit
    """
    # ExtraMove wydłuża turę - osobny limit decyzji
    decisions_left = max_turns * 20
    while not controller.state.is_over and controller.state.turn_number <= max_turns:
        decisions_left -= 1
        if decisions_left < 0:
            break
        target = choose_move(controller)
        if target is None:
            controller.end_turn()
            continue
        outcome = controller.try_move(target)
        if outcome.kind is MoveOutcomeKind.REJECTED:
            controller.end_turn()
    return controller.state.match_winner
