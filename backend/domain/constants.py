"""
Game constants for the Snake engine.
"""

# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Unit step per direction; y grows downward like a canvas
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Game settings
GRID_SIZE = 20
INITIAL_SNAKE_LENGTH = 3
INITIAL_GAME_SPEED_MS = 150
SPEED_STEP_MS = 10
MIN_GAME_SPEED_MS = 70
SPEEDUP_EVERY = 5

HIGH_SCORE_KEY = "snakeHighScore"


def opposite(direction: str) -> str:
    """Return the direction pointing the other way."""
    return OPPOSITE[direction]
