"""
Player implementations and input translation for the Snake engine.

Players produce direction intents; the engine decides whether to accept
them.
"""

from .base import Player
from .random_player import RandomPlayer
from .input_mapping import direction_for_key, direction_for_swipe, KEY_DIRECTIONS

__all__ = [
    'Player',
    'RandomPlayer',
    'direction_for_key',
    'direction_for_swipe',
    'KEY_DIRECTIONS',
]
