"""
Tests for services/game_session.py - the host-facing session.
"""

import os
import random
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameConfig, Phase, UP, DOWN, LEFT, RIGHT
from services.game_session import GameSession


def drive_into_wall(session):
    """Run the snake straight right until it hits the wall."""
    for _ in range(50):
        if session.phase is Phase.OVER:
            return
        session.on_frame_pulse(session.state.tick_interval_ms)
    raise AssertionError("snake never reached the wall")


@pytest.fixture
def session():
    return GameSession(rng=random.Random(42))


class TestStart:

    def test_new_session_waits_for_start(self, session):
        assert session.phase is Phase.NOT_STARTED
        assert session.on_frame_pulse(1000) is False
        assert session.snapshot().snake == ((10, 10), (9, 10), (8, 10))

    def test_start_request_starts(self, session):
        assert session.on_start_or_restart_request() is Phase.RUNNING

    def test_accepted_direction_starts(self, session):
        result = session.on_direction_input(UP)

        assert result.accepted is True
        assert session.phase is Phase.RUNNING
        assert session.state.pending_direction is UP

    def test_rejected_direction_does_not_start(self, session):
        session.on_direction_input(LEFT)
        assert session.phase is Phase.NOT_STARTED

    def test_start_request_ignored_while_running(self, session):
        session.on_start_or_restart_request()
        state = session.state

        assert session.on_start_or_restart_request() is Phase.RUNNING
        assert session.state is state


class TestPlay:

    def test_tick_moves_snake(self, session):
        session.on_start_or_restart_request()

        assert session.on_frame_pulse(140) is True
        assert session.snapshot().head == (11, 10)

    def test_turn_applies_on_next_tick(self, session):
        session.on_start_or_restart_request()
        session.on_direction_input("down")

        assert session.snapshot().direction is RIGHT
        session.on_frame_pulse(140)

        snapshot = session.snapshot()
        assert snapshot.direction is DOWN
        assert snapshot.head == (10, 11)

    def test_malformed_input_is_ignored(self, session):
        session.on_start_or_restart_request()
        session.on_direction_input({"key": "ArrowUp"})
        session.on_frame_pulse(140)

        assert session.snapshot().direction is RIGHT

    def test_wall_ends_game(self, session):
        session.on_start_or_restart_request()
        drive_into_wall(session)

        snapshot = session.snapshot()
        assert snapshot.phase is Phase.OVER
        assert snapshot.death_reason == "wall"
        assert snapshot.head == (19, 10)

    def test_frames_after_game_over_change_nothing(self, session):
        session.on_start_or_restart_request()
        drive_into_wall(session)
        before = session.snapshot()

        for _ in range(10):
            assert session.on_frame_pulse(1000) is False
        session.on_direction_input(UP)

        assert session.snapshot() == before


class TestRestart:

    def test_restart_after_game_over_resets_everything(self, session):
        session.on_start_or_restart_request()
        session.state.score = 50
        session.state.tick_interval_ms = 125
        drive_into_wall(session)
        old_state = session.state

        assert session.on_start_or_restart_request() is Phase.NOT_STARTED

        snapshot = session.snapshot()
        assert session.state is not old_state
        assert snapshot.score == 0
        assert snapshot.snake == ((10, 10), (9, 10), (8, 10))
        assert snapshot.phase is Phase.NOT_STARTED
        assert snapshot.tick_interval_ms == 140
        assert snapshot.direction is RIGHT
        assert snapshot.death_reason is None
        assert snapshot.food not in snapshot.snake
        assert session.scheduler.accumulator_ms == 0

    def test_restart_ignored_unless_over(self, session):
        state = session.state
        session.restart()
        assert session.state is state

        session.start()
        session.restart()
        assert session.state is state

    def test_restarted_game_can_be_played(self, session):
        session.on_start_or_restart_request()
        drive_into_wall(session)
        session.on_start_or_restart_request()
        session.on_start_or_restart_request()

        assert session.on_frame_pulse(140) is True
        assert session.snapshot().head == (11, 10)


class TestConfiguredSession:

    def test_custom_config_is_used(self):
        config = GameConfig(grid_size=10, initial_interval_ms=200, min_interval_ms=100)
        session = GameSession(config=config, rng=random.Random(0))
        session.on_start_or_restart_request()

        assert session.on_frame_pulse(140) is False
        assert session.on_frame_pulse(60) is True
        snapshot = session.snapshot()
        assert snapshot.grid_size == 10
        assert snapshot.head == (6, 5)
