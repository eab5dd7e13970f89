"""
Snake game engine.

SnakeGame owns one session's mutable state (snake, food, directions,
score, speed) and advances it one tick at a time. Timing, randomness,
drawing and high score storage are injected collaborators.
"""

import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Any

import config
from data_access.score_store import ScoreStore
from domain.constants import (
    RIGHT,
    VALID_MOVES,
    DIRECTION_DELTAS,
    INITIAL_SNAKE_LENGTH,
    INITIAL_GAME_SPEED_MS,
    SPEED_STEP_MS,
    MIN_GAME_SPEED_MS,
    SPEEDUP_EVERY,
    opposite,
)
from domain.game_state import GameState
from domain.snake import Snake
from presentation.base import Presenter
from services.scheduler import Scheduler

logger = logging.getLogger(__name__)

# Rejected food samples before falling back to picking among free cells
MAX_FOOD_ATTEMPTS = 1000


def fit_board_to_grid(width: int, height: int, grid_size: int) -> Tuple[int, int]:
    """Round a measured drawing area down to whole grid cells."""
    return (int(width) // grid_size) * grid_size, (int(height) // grid_size) * grid_size


class SnakeGame:
    """
    Manages:
      - Board (width, height, grid unit)
      - The snake and the food
      - Committed and pending direction
      - Score, high score and tick interval
      - History for replay
    """

    def __init__(
        self,
        presenter: Presenter,
        score_store: ScoreStore,
        scheduler: Scheduler,
        rng: Optional[random.Random] = None,
        record_history: bool = False,
    ):
        self.presenter = presenter
        self.score_store = score_store
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.recording = record_history

        self.grid_size = 0
        self.width = 0
        self.height = 0

        self.snake: Optional[Snake] = None
        self.food: Optional[Tuple[int, int]] = None
        self.direction = RIGHT
        self.pending_direction = RIGHT
        self.score = 0
        self.game_speed = INITIAL_GAME_SPEED_MS
        self.running = False
        self.tick_number = 0

        self.session_id: Optional[str] = None
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.history: List[GameState] = []

        self.high_score = self.score_store.load()
        self.presenter.show_high_score(self.high_score)

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def init_session(self, grid_size: int, board_width: int, board_height: int) -> None:
        """
        Start a new session on a board already sized to whole grid cells.
        """
        self.scheduler.cancel()

        self.grid_size = grid_size
        self.width = board_width
        self.height = board_height

        # Create initial snake at the center, extending left
        center_x = (board_width // (2 * grid_size)) * grid_size
        center_y = (board_height // (2 * grid_size)) * grid_size
        self.snake = Snake([
            (center_x - i * grid_size, center_y) for i in range(INITIAL_SNAKE_LENGTH)
        ])

        # Reset game state
        self.direction = RIGHT
        self.pending_direction = RIGHT
        self.score = 0
        self.game_speed = INITIAL_GAME_SPEED_MS
        self.tick_number = 0
        self.presenter.show_score(self.score)

        self.session_id = str(uuid.uuid4())
        self.start_time = time.time()
        self.end_time = None
        self.history = []

        self.food = self._random_free_cell()

        self.running = True
        self.scheduler.start(self.game_speed, self.tick)

        logger.info(
            f"Session {self.session_id} started on {board_width}x{board_height} "
            f"(grid {grid_size}), food at {self.food}"
        )
        if self.recording:
            self.record_history()

    def set_pending_direction(self, requested: str) -> None:
        """
        Latch a direction for the next tick.

        Reversing the committed direction is ignored; the latest accepted
        request before a tick wins.
        """
        if requested not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{requested}'. Expected one of {sorted(VALID_MOVES)}")
        if not self.running:
            return
        if requested == opposite(self.direction):
            return
        self.pending_direction = requested

    def tick(self) -> None:
        """
        Execute one step:
          1) Commit the pending direction
          2) Compute the prospective head
          3) End the session on collision
          4) Prepend the head
          5) Eat food (score, new food, maybe speed up) or drop the tail
          6) Render
        """
        if not self.running:
            return

        self.direction = self.pending_direction

        hx, hy = self.snake.head
        dx, dy = DIRECTION_DELTAS[self.direction]
        head = (hx + dx * self.grid_size, hy + dy * self.grid_size)

        reason = self.check_collision(head)
        if reason is not None:
            self.snake.alive = False
            self.snake.death_reason = reason
            self.snake.death_tick = self.tick_number
            logger.info(f"Snake hit {reason} at {head} on tick {self.tick_number}")
            self.end_session()
            return

        self.snake.positions.appendleft(head)

        if head == self.food:
            self.score += 1
            self.presenter.show_score(self.score)
            self.food = self._random_free_cell()

            # Speed up the game slightly every few points
            if self.score % SPEEDUP_EVERY == 0 and self.game_speed > MIN_GAME_SPEED_MS:
                self.game_speed = max(self.game_speed - SPEED_STEP_MS, MIN_GAME_SPEED_MS)
                self.scheduler.cancel()
                self.scheduler.start(self.game_speed, self.tick)
                logger.debug(f"Speed increased: tick every {self.game_speed}ms")
        else:
            self.snake.positions.pop()

        self.tick_number += 1
        self.presenter.render(list(self.snake.positions), self.food)

        if self.recording:
            self.record_history()

    def end_session(self) -> None:
        """
        Stop the session, persist a new high score, and show the final score.
        """
        if not self.running:
            return

        self.running = False
        self.scheduler.cancel()
        self.end_time = time.time()

        if self.score > self.high_score:
            self.high_score = self.score
            self.score_store.save(self.high_score)
            self.presenter.show_high_score(self.high_score)
            logger.info(f"New high score: {self.high_score}")

        logger.info(f"Session {self.session_id} over with score {self.score} after {self.tick_number} ticks")
        if self.recording:
            self.record_history()
        self.presenter.show_game_over(self.score)

    def resize(self, board_width: int, board_height: int) -> None:
        """Update the bounds used by the wall check. Snake and food stay put."""
        self.width = board_width
        self.height = board_height

    # -------------------------------
    # Rules
    # -------------------------------

    def check_collision(self, head: Tuple[int, int]) -> Optional[str]:
        """
        Test a prospective head before it is committed.

        Returns:
            'wall', 'self', or None when the move is safe
        """
        x, y = head
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return "wall"

        # The tail moves out of the way unless this step eats
        body = list(self.snake.positions)
        if head != self.food:
            body = body[:-1]
        if head in body:
            return "self"
        return None

    def _random_free_cell(self) -> Optional[Tuple[int, int]]:
        """
        Return a random grid-aligned cell not occupied by the snake.

        Samples the same range the browser client does (the last column
        and row are never chosen). After MAX_FOOD_ATTEMPTS rejections it
        picks among the free cells directly; None when there are none.
        """
        g = self.grid_size
        max_x = max(self.width // g - 1, 1)
        max_y = max(self.height // g - 1, 1)
        occupied = set(self.snake.positions) if self.snake else set()

        for _ in range(MAX_FOOD_ATTEMPTS):
            cell = (self.rng.randrange(max_x) * g, self.rng.randrange(max_y) * g)
            if cell not in occupied:
                return cell

        free = [
            (x * g, y * g)
            for y in range(max_y)
            for x in range(max_x)
            if (x * g, y * g) not in occupied
        ]
        if not free:
            logger.warning("No free cell left for food")
            return None
        return self.rng.choice(free)

    # -------------------------------
    # Snapshots and replay
    # -------------------------------

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=list(self.snake.positions) if self.snake else [],
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            game_speed=self.game_speed,
            direction=self.direction,
            pending_direction=self.pending_direction,
            running=self.running,
            width=self.width,
            height=self.height,
            grid_size=self.grid_size,
        )

    def record_history(self) -> None:
        self.history.append(self.get_current_state())

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded GameState objects to JSON-serializable dicts.
        """
        return [state.to_dict() for state in self.history]

    def build_replay(self) -> Dict[str, Any]:
        """Assemble replay metadata and rounds for the current session."""

        def iso(ts):
            return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat() if ts else None

        death_info = None
        if self.snake is not None and not self.snake.alive:
            death_info = {"reason": self.snake.death_reason, "tick": self.snake.death_tick}

        metadata = {
            "session_id": self.session_id,
            "start_time": iso(self.start_time),
            "end_time": iso(self.end_time),
            "final_score": self.score,
            "high_score": self.high_score,
            "death_info": death_info,
            "actual_ticks": self.tick_number,
            "final_game_speed": self.game_speed,
            "board": {"width": self.width, "height": self.height, "grid_size": self.grid_size},
        }
        return {"metadata": metadata, "rounds": self.serialize_history()}

    def save_history_to_json(self, filename: Optional[str] = None, directory: Optional[str] = None) -> str:
        """
        Write the replay to ``<directory>/snake_game_<session_id>.json``.

        Returns:
            Path of the written file
        """
        if filename is None:
            filename = f"snake_game_{self.session_id}.json"
        directory = directory or config.REPLAY_DIR

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "w") as f:
            json.dump(self.build_replay(), f, indent=2)
        logger.info(f"Saved replay to {path}")
        return path

    def __repr__(self):
        return (
            f"<SnakeGame session={self.session_id} running={self.running} "
            f"score={self.score} speed={self.game_speed}ms>"
        )
