"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional, Dict, Any


class GameState:
    """
    A snapshot of one session at a specific tick.

    Attributes:
        tick_number: how many ticks have been applied (0-based)
        snake_positions: list of (x, y) pixel cells, head first
        food: (x, y) of the food, or None when the board is full
        score, high_score: current score and best persisted score
        game_speed: tick interval in milliseconds
        direction, pending_direction: committed and latched directions
        running: whether the session is still active
        width, height: board dimensions in pixels
        grid_size: pixel size of one cell
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        high_score: int,
        game_speed: int,
        direction: str,
        pending_direction: str,
        running: bool,
        width: int,
        height: int,
        grid_size: int,
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.food = food
        self.score = score
        self.high_score = high_score
        self.game_speed = game_speed
        self.direction = direction
        self.pending_direction = pending_direction
        self.running = running
        self.width = width
        self.height = height
        self.grid_size = grid_size

    @property
    def columns(self) -> int:
        return self.width // self.grid_size if self.grid_size else 0

    @property
    def rows(self) -> int:
        return self.height // self.grid_size if self.grid_size else 0

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        T = snake body
        Rows run top to bottom, matching screen coordinates.
        """
        board = [['.' for _ in range(self.columns)] for _ in range(self.rows)]

        def place(cell, mark):
            col, row = cell[0] // self.grid_size, cell[1] // self.grid_size
            if 0 <= col < self.columns and 0 <= row < self.rows:
                board[row][col] = mark

        if self.food is not None:
            place(self.food, 'F')

        for idx, cell in enumerate(self.snake_positions):
            place(cell, 'H' if idx == 0 else 'T')

        result = [f"{row:2d} {' '.join(board[row])}" for row in range(self.rows)]
        result.append("   " + " ".join(str(col % 10) for col in range(self.columns)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(cell) for cell in self.snake_positions],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "game_speed": self.game_speed,
            "direction": self.direction,
            "pending_direction": self.pending_direction,
            "running": self.running,
            "width": self.width,
            "height": self.height,
            "grid_size": self.grid_size,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
