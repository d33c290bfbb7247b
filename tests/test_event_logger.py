"""
Testy strukturalnego logu zdarzeń.
"""

import json

from hexduel.events.event_logger import EventLogger, EventType, GameEvent


def test_log_move_format():
    logger = EventLogger(seed=1, board_width=5, board_height=5)
    logger.log_move(3, "p1", (0, 0), (1, 0), remaining=2)

    event = logger.events[0]
    assert event.event_type is EventType.UNIT_MOVE
    assert event.to_dict() == {
        "turn": 3,
        "type": "UNIT_MOVE",
        "unit_id": "p1",
        "data": {"from": [0, 0], "to": [1, 0], "remaining": 2},
    }
    assert logger.metadata["board"] == {"width": 5, "height": 5}


def test_knockback_without_target_is_ring_out():
    logger = EventLogger()
    logger.log_knockback(1, "p2", "p1", (4, 0), None, 2)
    logger.log_knockback(2, "p1", "p2", (1, 0), (3, 0), 2)

    ring_out, knockback = logger.events
    assert ring_out.event_type is EventType.RING_OUT
    assert "to" not in ring_out.data
    assert knockback.event_type is EventType.KNOCKBACK
    assert knockback.data["to"] == [3, 0]
    assert knockback.target_id == "p2"


def test_empty_fields_are_omitted():
    assert GameEvent(1, EventType.TURN_END).to_dict() == {"turn": 1, "type": "TURN_END"}


def test_match_end_sets_final_state():
    logger = EventLogger(seed=7)
    logger.log_match_end(40, "p2", [1, 2])
    assert logger.final_state == {"winner": "p2", "scores": [1, 2], "total_turns": 40}


def test_filters():
    logger = EventLogger()
    logger.log_turn_start(1, "p1", moves=3)
    logger.log_damage(1, "p2", "p1", amount=10, health_after=40)
    logger.log_heal(2, "p2", amount=5, health_after=45)
    logger.log_turn_end(2, "p1")

    assert logger.get_event_count() == 4
    assert len(logger.get_events_by_type(EventType.UNIT_HEAL)) == 1
    assert len(logger.get_events_for_unit("p2")) == 2
    assert len(logger.get_events_in_turn(2)) == 2


def test_json_round_trip_and_clear():
    logger = EventLogger(seed=99)
    logger.log_round_end(12, 1, "p1", [1, 0], "ring_out")
    logger.log_match_end(12, "p1", [2, 0])

    data = json.loads(logger.to_json())
    assert data["metadata"]["seed"] == 99
    assert data["events"][0]["data"]["reason"] == "ring_out"
    assert data["final_state"]["winner"] == "p1"

    logger.clear()
    assert logger.get_event_count() == 0
    assert logger.final_state == {}
