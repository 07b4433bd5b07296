import logging

import numpy as np
import pytest

from snake_sim.grid import Direction, GridPosition
from snake_sim.organism import Collision
from snake_sim.session import GameSession, Snapshot


@pytest.fixture
def session(fixed_rng):
    # Initial food at (20, 20), later relocations at (1, 2) then (3, 4)
    return GameSession(rng=fixed_rng([20, 20, 1, 2, 3, 4]), now=0)


def test_start_layout(session):
    snapshot = session.snapshot()
    assert snapshot == Snapshot(
        head_position=GridPosition(6, 12),
        body_positions=(GridPosition(5, 12),),
        food_position=GridPosition(20, 20),
        is_game_over=False,
    )
    assert session.frame_interval == 125.0


def test_scenario_plain_move_then_reverse_ignored(session):
    assert session.tick(125)
    snapshot = session.snapshot()
    assert snapshot.head_position == (7, 12)
    assert snapshot.body_positions == ((6, 12),)
    assert session.organism.pending_collision is Collision.NONE

    session.set_direction_intent(Direction.LEFT)
    assert session.organism.facing is Direction.RIGHT


def test_scenario_eat_food_relocates_it(session):
    session.food.position = GridPosition(7, 12)
    session.tick(125)

    snapshot = session.snapshot()
    assert session.organism.pending_collision is Collision.ATE_FOOD
    assert snapshot.body_positions == ((6, 12), (5, 12))
    assert snapshot.food_position == (1, 2)
    assert not snapshot.is_game_over


def test_ticks_inside_interval_are_coalesced(session):
    assert not session.tick(100)
    assert session.snapshot().head_position == (6, 12)

    assert session.tick(125)
    assert not session.tick(249)
    assert session.tick(250)
    assert session.snapshot().head_position == (8, 12)
    assert session.tick_count == 2


def test_coalesced_tick_does_not_move_timestamp(session):
    session.tick(100)
    assert session.last_tick_timestamp == 0
    session.tick(130)
    assert session.last_tick_timestamp == 130


def test_last_intent_before_tick_wins(session):
    session.set_direction_intent(Direction.UP)
    session.set_direction_intent(Direction.DOWN)
    session.tick(125)
    assert session.snapshot().head_position == (6, 13)


def test_none_intent_is_ignored(session):
    session.set_direction_intent(None)
    assert session.organism.facing is Direction.RIGHT


def test_hit_self_sets_game_over_then_restarts(session, caplog):
    session.set_direction_intent(Direction.UP)
    session.tick(125)
    session.organism.facing = Direction.DOWN

    with caplog.at_level(logging.INFO, logger="snake_sim.session"):
        session.tick(250)
    assert session.organism.pending_collision is Collision.HIT_SELF
    assert session.snapshot().is_game_over
    assert "Game over" in caplog.text

    # Still over until the next eligible tick
    assert not session.tick(300)
    assert session.snapshot().is_game_over

    assert session.tick(375)
    snapshot = session.snapshot()
    assert not snapshot.is_game_over
    assert snapshot.head_position == (6, 12)
    assert snapshot.body_positions == ((5, 12),)
    assert snapshot.food_position == (1, 2)
    assert session.organism.facing is Direction.RIGHT
    assert session.tick_count == 0


def test_reset_tick_does_not_move(session):
    session.game_over = True
    session.tick(125)
    assert session.snapshot().head_position == (6, 12)
    session.tick(250)
    assert session.snapshot().head_position == (7, 12)


def test_custom_grid_and_rate():
    session = GameSession(rng=np.random.default_rng(0), grid_width=8, grid_height=6, frames_per_second=4)
    assert session.start_position == (2, 3)
    assert session.frame_interval == 250.0
    food = session.snapshot().food_position
    assert 0 <= food.x < 8 and 0 <= food.y < 6


def test_wraps_across_many_ticks():
    session = GameSession(rng=np.random.default_rng(1), grid_width=5, grid_height=5)
    session.food.position = GridPosition(0, 0)
    for i in range(1, 6):
        session.tick(i * 125)
    # Five moves right on a 5-wide grid return the head to its start
    assert session.snapshot().head_position == (1, 2)


@pytest.mark.parametrize("kwargs", [
    {"grid_width": 0},
    {"grid_height": -3},
    {"frames_per_second": 0},
])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        GameSession(**kwargs)


def test_food_may_spawn_under_the_body(fixed_rng):
    # Documents existing behavior: placement ignores occupied cells
    session = GameSession(rng=fixed_rng([5, 12]), now=0)
    snapshot = session.snapshot()
    assert snapshot.food_position in snapshot.body_positions
