"""
Hosts one Snake game for the browser client.

The engine is ticked by a ThreadedScheduler while HTTP requests arrive on
other threads; every engine call here holds the scheduler's lock so the
engine itself stays single-threaded.
"""

import logging
import random
import threading
from typing import Any, Dict, Optional

from data_access.score_store import ScoreStore
from domain.constants import GRID_SIZE, INITIAL_SNAKE_LENGTH
from game_engine import SnakeGame, fit_board_to_grid
from players.input_mapping import direction_for_key, direction_for_swipe
from presentation.web_presenter import WebPresenter
from services.frame_renderer import FrameRenderer
from services.scheduler import Scheduler, ThreadedScheduler

logger = logging.getLogger(__name__)

# Head plus body must land on x >= 0 when centered
MIN_BOARD_COLUMNS = INITIAL_SNAKE_LENGTH + 1


class GameService:

    def __init__(
        self,
        score_store: ScoreStore,
        scheduler: Optional[Scheduler] = None,
        presenter: Optional[WebPresenter] = None,
        rng: Optional[random.Random] = None,
        grid_size: int = GRID_SIZE,
    ):
        self.scheduler = scheduler or ThreadedScheduler()
        self.lock = getattr(self.scheduler, "lock", None) or threading.RLock()
        self.presenter = presenter or WebPresenter()
        self.grid_size = grid_size
        self.renderer = FrameRenderer(grid_size)
        self.engine = SnakeGame(self.presenter, score_store, self.scheduler, rng=rng)
        self.scheduler.on_error = self._abort_session
        self.presenter.show_start()

    def _abort_session(self, error: Exception) -> None:
        """End a session whose tick failed so the client reaches game over."""
        with self.lock:
            logger.error(f"Ending session {self.engine.session_id} after tick failure: {error}")
            self.engine.end_session()

    def start(self, width: Optional[int] = None, height: Optional[int] = None) -> Dict[str, Any]:
        """
        Start (or restart) a session on the client's measured container.

        Raises:
            ValueError: if the board is too small for the starting snake
        """
        with self.lock:
            measured = (width, height) if width is not None and height is not None else self.presenter.measure_board()
            board_width, board_height = fit_board_to_grid(*measured, self.grid_size)
            if board_width < MIN_BOARD_COLUMNS * self.grid_size or board_height < self.grid_size:
                raise ValueError(f"{board_width}x{board_height} cannot fit the starting snake")
            self.presenter.report_container(*measured)
            self.presenter.show_playing()
            self.engine.init_session(self.grid_size, board_width, board_height)
            return self.snapshot()

    def steer(
        self,
        direction: Optional[str] = None,
        key: Any = None,
        dx: Optional[float] = None,
        dy: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Forward one input event to the engine.

        Exactly one of direction, key, or the (dx, dy) swipe is used, in
        that order. Keys and swipes that do not steer are ignored.

        Raises:
            ValueError: if an explicit direction is not a known direction
        """
        if isinstance(direction, str):
            direction = direction.strip().lower()
        if direction is None:
            if key is not None:
                direction = direction_for_key(key)
            elif dx is not None or dy is not None:
                direction = direction_for_swipe(float(dx or 0), float(dy or 0))

        with self.lock:
            if direction is not None:
                self.engine.set_pending_direction(direction)
            return self.snapshot()

    def resize(self, width: int, height: int) -> Dict[str, Any]:
        """
        Refit the board after the client's container changed size.

        The timer is paused around the change and re-armed at the current
        speed when a session is running.
        """
        with self.lock:
            self.presenter.report_container(width, height)
            board_width, board_height = fit_board_to_grid(width, height, self.grid_size)
            logger.info(f"Board resized to {board_width}x{board_height}")
            if self.engine.running:
                self.scheduler.cancel()
                self.engine.resize(board_width, board_height)
                self.scheduler.start(self.engine.game_speed, self.engine.tick)
            else:
                self.engine.resize(board_width, board_height)
            return self.snapshot()

    def snapshot(self) -> Dict[str, Any]:
        with self.lock:
            state = self.engine.get_current_state().to_dict()
            state.update(self.presenter.to_dict())
            return state

    def frame_png(self) -> bytes:
        with self.lock:
            state = self.engine.get_current_state()
        return self.renderer.render_png(state.width, state.height, state.snake_positions, state.food)

    def shutdown(self) -> None:
        with self.lock:
            self.scheduler.cancel()
