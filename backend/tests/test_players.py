"""
Tests for input translation and the autopilot player.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.game_state import GameState
from players import Player, RandomPlayer, direction_for_key, direction_for_swipe


def make_state(snake_positions, direction=RIGHT, width=200, height=200):
    return GameState(
        tick_number=0,
        snake_positions=snake_positions,
        food=None,
        score=0,
        high_score=0,
        game_speed=150,
        direction=direction,
        pending_direction=direction,
        running=True,
        width=width,
        height=height,
        grid_size=20,
    )


class TestDirectionForKey:

    @pytest.mark.parametrize("key,expected", [
        (37, LEFT), (38, UP), (39, RIGHT), (40, DOWN),
        ("38", UP),
        ("ArrowDown", DOWN), ("ArrowLeft", LEFT),
        ("w", UP), ("A", LEFT), ("s", DOWN), ("d", RIGHT),
    ])
    def test_steering_keys(self, key, expected):
        assert direction_for_key(key) == expected

    @pytest.mark.parametrize("key", [13, 32, "Enter", "x", "", None])
    def test_other_keys_ignored(self, key):
        assert direction_for_key(key) is None


class TestDirectionForSwipe:

    def test_horizontal_swipes(self):
        assert direction_for_swipe(50, 10) == RIGHT
        assert direction_for_swipe(-50, 10) == LEFT

    def test_vertical_swipes(self):
        assert direction_for_swipe(5, 40) == DOWN
        assert direction_for_swipe(5, -40) == UP

    def test_tie_goes_vertical(self):
        assert direction_for_swipe(30, 30) == DOWN
        assert direction_for_swipe(-30, -30) == UP

    def test_zero_swipe_ignored(self):
        assert direction_for_swipe(0, 0) is None


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(100, 100), (80, 100), (60, 100)]))

    def test_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(1))
        move = player.get_move(make_state([(100, 100), (80, 100), (60, 100)]))
        assert move in VALID_MOVES

    def test_never_reverses(self):
        player = RandomPlayer(rng=random.Random(2))
        state = make_state([(100, 100), (80, 100), (60, 100)])
        for _ in range(50):
            assert player.get_move(state) != LEFT

    def test_avoids_walls_in_corner(self):
        player = RandomPlayer(rng=random.Random(3))
        # Head in the top-right corner heading right: only down is safe
        state = make_state([(180, 0), (160, 0), (140, 0)])
        for _ in range(20):
            assert player.get_move(state) == DOWN

    def test_avoids_own_body(self):
        player = RandomPlayer(rng=random.Random(4))
        # Heading down: left and down are body, up is a reversal, right is free
        state = make_state(
            [(100, 100), (100, 80), (80, 80), (80, 100), (80, 120), (100, 120), (120, 120)],
            direction=DOWN,
        )
        for _ in range(20):
            assert player.get_move(state) == RIGHT

    def test_keeps_heading_when_trapped(self):
        player = RandomPlayer(rng=random.Random(5))
        # Right is the wall, up and down are body
        state = make_state(
            [(180, 100), (180, 80), (160, 80), (160, 100), (160, 120), (180, 120), (180, 140)],
            direction=RIGHT,
        )
        assert player.get_move(state) == RIGHT
