"""
Terminal presenter - prints the board to stdout.
"""

from typing import Iterable, Optional, Tuple

from domain.game_state import GameState
from .base import Presenter, Cell


class TerminalPresenter(Presenter):
    """
    Prints screen transitions and, when verbose, the board after each tick.
    """

    def __init__(self, width: int, height: int, grid_size: int, verbose: bool = True):
        self.width = width
        self.height = height
        self.grid_size = grid_size
        self.verbose = verbose
        self.score = 0
        self.high_score = 0
        self.frames_rendered = 0

    def render(self, snake: Iterable[Cell], food: Optional[Cell]) -> None:
        self.frames_rendered += 1
        if not self.verbose:
            return
        state = GameState(
            tick_number=self.frames_rendered,
            snake_positions=list(snake),
            food=food,
            score=self.score,
            high_score=self.high_score,
            game_speed=0,
            direction="",
            pending_direction="",
            running=True,
            width=self.width,
            height=self.height,
            grid_size=self.grid_size,
        )
        print("\n" + state.print_board() + "\n")

    def show_start(self) -> None:
        print(f"Snake - high score: {self.high_score}")

    def show_playing(self) -> None:
        print("Game started.")

    def show_game_over(self, final_score: int) -> None:
        print(f"Game Over! Final score: {final_score} (high score: {self.high_score})")

    def show_score(self, score: int) -> None:
        self.score = score
        if self.verbose:
            print(f"Score: {score}")

    def show_high_score(self, high_score: int) -> None:
        self.high_score = high_score

    def measure_board(self) -> Tuple[int, int]:
        return self.width, self.height
