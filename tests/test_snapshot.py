"""
Testy snapshotów planszy (pydantic).
"""

import pytest
from pydantic import ValidationError

from hexduel.core.hex_coord import HexCoord
from hexduel.collectibles import Collectible, CollectibleDefinition, CollectibleType, Tier
from hexduel.match import MatchConfig, MatchController
from hexduel.match.snapshot import CombatantSnapshot
from hexduel.units import Player, Variant


@pytest.fixture
def controller(scripted_rng):
    controller = MatchController(
        Player("Ala"),
        Player("Ola", Variant.HIGH_HEALTH),
        config=MatchConfig(board_width=5, board_height=5, collectible_density=0.0),
        rng=scripted_rng,
    )
    controller.place_combatants(HexCoord(0, 0), HexCoord(2, 4))
    return controller


def test_snapshot_mirrors_state(controller):
    snap = controller.get_board_snapshot()

    assert (snap.width, snap.height) == (5, 5)
    assert snap.orientation == "pointy_top"
    assert snap.phase == "AWAITING_MOVE"
    assert snap.current_player == "p1"
    assert snap.remaining_moves == 3
    assert snap.scores == (0, 0)
    assert snap.match_winner is None
    assert len(snap.cells) == 25

    assert snap.cell_at(0, 0).occupant == "p1"
    assert snap.cell_at(2, 4).occupant == "p2"
    assert snap.cell_at(2, 4).col == 4
    assert snap.cell_at(40, 40) is None

    p2 = next(c for c in snap.combatants if c.slot == "p2")
    assert (p2.health, p2.max_health, p2.variant) == (80, 80, "high_health")


def test_snapshot_shows_collectibles(controller):
    blade = Collectible(CollectibleDefinition(CollectibleType.EXTRA_ATTACK, 10, "Ostrze"), Tier.SMALL)
    controller.collectibles.place(controller.board, HexCoord(1, 0), blade)

    cell = controller.get_board_snapshot().cell_at(1, 0)
    assert cell.collectible.type == "extra_attack"
    assert cell.collectible.value == 5
    assert cell.occupant is None


def test_snapshot_is_frozen_and_detached(controller):
    snap = controller.get_board_snapshot()
    with pytest.raises(ValidationError):
        snap.remaining_moves = 99

    controller.try_move(HexCoord(1, 0))
    assert snap.cell_at(0, 0).occupant == "p1"
    assert controller.get_board_snapshot().cell_at(0, 0).occupant is None


def test_snapshot_serializes(controller):
    data = controller.get_board_snapshot().model_dump()
    assert data["scores"] == (0, 0)
    assert len(data["combatants"]) == 2


def test_negative_health_rejected():
    with pytest.raises(ValidationError):
        CombatantSnapshot(
            slot="p1", name="x", variant="default", q=0, r=0, health=-1,
            max_health=50, movement=3, total_attack=10, bonus_attack=0,
            rerolls=0, pending_moves=0, wins=0,
        )
