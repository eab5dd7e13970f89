"""
Base presenter interface for the game engine.
"""

from typing import Iterable, Optional, Tuple

Cell = Tuple[int, int]


class Presenter:
    """
    Base class/interface for everything the player sees.

    The engine calls render() after every applied tick and the screen
    transitions around a session; the sizing collaborator calls
    measure_board() before starting or resizing a session.
    """

    def render(self, snake: Iterable[Cell], food: Optional[Cell]) -> None:
        raise NotImplementedError

    def show_start(self) -> None:
        raise NotImplementedError

    def show_playing(self) -> None:
        raise NotImplementedError

    def show_game_over(self, final_score: int) -> None:
        raise NotImplementedError

    def show_score(self, score: int) -> None:
        """Update the running score read-out."""

    def show_high_score(self, high_score: int) -> None:
        """Update the high score read-out."""

    def measure_board(self) -> Tuple[int, int]:
        """
        Return the available drawing area in pixels.

        Returns:
            (width, height), not yet rounded to the grid
        """
        raise NotImplementedError
