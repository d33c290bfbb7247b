"""
Testy integracyjne - pełne mecze auto-graczy.
"""

import pytest

from hexduel.core.config_loader import ConfigLoader
from hexduel.core.hex_coord import HexCoord
from hexduel.core.rng import GameRNG
from hexduel.collectibles import Collectible, CollectibleDefinition, CollectibleType
from hexduel.events.event_logger import EventType
from hexduel.match import MatchConfig, MatchController, MatchPhase, choose_move, play_match
from hexduel.units import Player, PlayerSlot, Variant


@pytest.mark.parametrize("seed", [1, 42, 12345])
def test_full_match_has_winner(seed):
    loader = ConfigLoader()
    controller = MatchController.from_config(
        [
            Player.with_variant("A", Variant.STRONG_ATTACK, loader),
            Player.with_variant("B", Variant.HIGH_HEALTH, loader),
        ],
        loader=loader,
        seed=seed,
    )

    winner = play_match(controller, max_turns=2000)

    assert winner is not None
    assert controller.phase is MatchPhase.MATCH_OVER
    assert max(controller.get_scores()) == 2
    assert controller.player_of(winner).wins == 2

    rounds = controller.logger.get_events_by_type(EventType.ROUND_END)
    assert 2 <= len(rounds) <= 3
    assert controller.logger.final_state["winner"] == winner.label


def test_positions_stay_distinct_through_match():
    controller = MatchController(Player("A"), Player("B"), rng=GameRNG(7))
    for _ in range(300):
        if controller.state.is_over:
            break
        target = choose_move(controller)
        if target is None:
            controller.end_turn()
            continue
        assert controller.try_move(target).accepted
        p1 = controller.combatants[PlayerSlot.PLAYER1]
        p2 = controller.combatants[PlayerSlot.PLAYER2]
        assert p1.position != p2.position
        assert controller.board.contains(p1.position)
        assert controller.board.contains(p2.position)


def test_choose_move_prefers_collectible(scripted_rng):
    controller = MatchController(
        Player("A"),
        Player("B"),
        config=MatchConfig(board_width=5, board_height=5, collectible_density=0.0),
        rng=scripted_rng,
    )
    controller.place_combatants(HexCoord(0, 0), HexCoord(2, 4))
    potion = Collectible(CollectibleDefinition(CollectibleType.HEALTH, 20))
    controller.collectibles.place(controller.board, HexCoord(0, 1), potion)

    assert choose_move(controller) == HexCoord(0, 1)


def test_choose_move_steps_toward_collectible_in_reach(scripted_rng):
    controller = MatchController(
        Player("A"),
        Player("B"),
        config=MatchConfig(board_width=5, board_height=5, collectible_density=0.0),
        rng=scripted_rng,
    )
    controller.place_combatants(HexCoord(0, 0), HexCoord(2, 4))
    blade = Collectible(CollectibleDefinition(CollectibleType.EXTRA_ATTACK, 10))
    controller.collectibles.place(controller.board, HexCoord(1, 1), blade)

    step = choose_move(controller)
    assert step.distance(HexCoord(1, 1)) == 1
    assert controller.is_valid_move(step)


def test_choose_move_ignores_collectible_behind(scripted_rng):
    controller = MatchController(
        Player("A"),
        Player("B"),
        config=MatchConfig(board_width=5, board_height=5, collectible_density=0.0),
        rng=scripted_rng,
    )
    controller.place_combatants(HexCoord(2, 0), HexCoord(2, 4))
    potion = Collectible(CollectibleDefinition(CollectibleType.HEALTH, 20))
    controller.collectibles.place(controller.board, HexCoord(0, 0), potion)

    step = choose_move(controller)
    assert step.distance(HexCoord(2, 4)) == 3


def test_choose_move_without_moves(scripted_rng):
    controller = MatchController(Player("A"), Player("B"), rng=scripted_rng)
    controller.state.remaining_moves = 0
    assert choose_move(controller) is None
