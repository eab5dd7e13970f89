"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for anything that steers the snake.

    Each player returns a direction intent given the current game state;
    the caller forwards it to the engine's set_pending_direction().
    """

    def __init__(self, name: str = "player"):
        self.name = name

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "up", "down", "left", "right", or None to keep going
        """
        raise NotImplementedError
