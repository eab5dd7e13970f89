"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, timers, rendering, HTTP).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE, DIRECTION_DELTAS,
    GRID_SIZE, INITIAL_SNAKE_LENGTH, INITIAL_GAME_SPEED_MS, SPEED_STEP_MS,
    MIN_GAME_SPEED_MS, SPEEDUP_EVERY, HIGH_SCORE_KEY, opposite,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE', 'DIRECTION_DELTAS',
    'GRID_SIZE', 'INITIAL_SNAKE_LENGTH', 'INITIAL_GAME_SPEED_MS', 'SPEED_STEP_MS',
    'MIN_GAME_SPEED_MS', 'SPEEDUP_EVERY', 'HIGH_SCORE_KEY', 'opposite',
    'Snake',
    'GameState',
]
