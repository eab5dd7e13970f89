"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, VALID_MOVES, opposite
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, self-collisions
    and turning straight back.
    """

    def __init__(self, name: str = "random", rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        step = game_state.grid_size
        reverse = opposite(game_state.direction) if game_state.direction else None

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == reverse:
                continue
            dx, dy = DIRECTION_DELTAS[move]
            new_x, new_y = head_x + dx * step, head_y + dy * step

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                    new_y < 0 or new_y >= game_state.height):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction or self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
