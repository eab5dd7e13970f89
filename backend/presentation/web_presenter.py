"""
Web presenter - holds what the browser client should currently show.

The browser polls the API; this object is the server-side view model
that the engine writes into.
"""

from typing import Iterable, Optional, Tuple, List, Dict, Any

from .base import Presenter, Cell

SCREEN_START = "start"
SCREEN_PLAYING = "playing"
SCREEN_GAME_OVER = "game_over"


class WebPresenter(Presenter):

    def __init__(self, default_size: Tuple[int, int] = (400, 400)):
        self.screen = SCREEN_START
        self.snake: List[Cell] = []
        self.food: Optional[Cell] = None
        self.score = 0
        self.high_score = 0
        self.final_score: Optional[int] = None
        self.frame_id = 0
        self._container_size = default_size

    def render(self, snake: Iterable[Cell], food: Optional[Cell]) -> None:
        self.snake = list(snake)
        self.food = food
        self.frame_id += 1

    def show_start(self) -> None:
        self.screen = SCREEN_START

    def show_playing(self) -> None:
        self.screen = SCREEN_PLAYING
        self.final_score = None

    def show_game_over(self, final_score: int) -> None:
        self.screen = SCREEN_GAME_OVER
        self.final_score = final_score

    def show_score(self, score: int) -> None:
        self.score = score

    def show_high_score(self, high_score: int) -> None:
        self.high_score = high_score

    def report_container(self, width: int, height: int) -> None:
        """Record the drawing area the client measured."""
        self._container_size = (int(width), int(height))

    def measure_board(self) -> Tuple[int, int]:
        return self._container_size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "screen": self.screen,
            "score": self.score,
            "high_score": self.high_score,
            "final_score": self.final_score,
            "frame_id": self.frame_id,
        }
