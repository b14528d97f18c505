"""
Tests for the players package.
"""

import os
import random
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameSnapshot, Phase, UP, DOWN, LEFT, RIGHT
from players import AutopilotPlayer, Player


def make_snapshot(snake, direction=RIGHT, food=(0, 0), grid_size=20):
    return GameSnapshot(
        snake=tuple(snake),
        food=food,
        score=0,
        phase=Phase.RUNNING,
        direction=direction,
        grid_size=grid_size,
        tick_interval_ms=140,
    )


class TestPlayer:

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_snapshot([(5, 5)]))


class TestAutopilotPlayer:

    def test_never_reverses(self):
        player = AutopilotPlayer(random.Random(0))
        snapshot = make_snapshot([(10, 10), (9, 10), (8, 10)], food=(0, 10))

        for _ in range(50):
            assert player.get_move(snapshot) is not LEFT

    def test_avoids_wall(self):
        player = AutopilotPlayer(random.Random(0))
        snapshot = make_snapshot([(19, 10), (18, 10), (17, 10)], food=(19, 19))

        for _ in range(50):
            assert player.get_move(snapshot) in (UP, DOWN)

    def test_avoids_tail_cell(self):
        """The tail is fatal to step on, so it is not a way out."""
        player = AutopilotPlayer(random.Random(0))
        # Moving left with the tail directly below the head
        snapshot = make_snapshot([(5, 5), (6, 5), (6, 6), (5, 6)], direction=LEFT, food=(5, 9))

        for _ in range(50):
            assert player.get_move(snapshot) in (UP, LEFT)

    def test_heads_for_food(self):
        player = AutopilotPlayer(random.Random(0))
        snapshot = make_snapshot([(10, 10), (9, 10), (8, 10)], food=(10, 2))

        for _ in range(20):
            assert player.get_move(snapshot) is UP

    def test_trapped_keeps_direction(self):
        # Corner, facing the wall, body blocking the only other way
        snapshot = make_snapshot([(0, 0), (1, 0), (1, 1), (0, 1)], direction=UP, grid_size=4)
        assert AutopilotPlayer(random.Random(0)).get_move(snapshot) is UP

    def test_no_food_still_moves_safely(self):
        """With the food cleared the autopilot just picks a safe move."""
        player = AutopilotPlayer(random.Random(0))
        snapshot = make_snapshot([(19, 10), (18, 10), (17, 10)], food=None)

        assert player.get_move(snapshot) in (UP, DOWN)
