"""
Translate raw keyboard and touch input into direction intents.
"""

from typing import Optional, Union

from domain.constants import UP, DOWN, LEFT, RIGHT

# Legacy DOM keyCodes, DOM key names and WASD
KEY_DIRECTIONS = {
    37: LEFT,
    38: UP,
    39: RIGHT,
    40: DOWN,
    "ArrowLeft": LEFT,
    "ArrowUp": UP,
    "ArrowRight": RIGHT,
    "ArrowDown": DOWN,
    "a": LEFT,
    "w": UP,
    "d": RIGHT,
    "s": DOWN,
}


def direction_for_key(key: Union[int, str, None]) -> Optional[str]:
    """
    Map a key code or key name to a direction.

    Returns None for keys that do not steer.
    """
    if isinstance(key, str):
        if key.isdigit():
            key = int(key)
        elif len(key) == 1:
            key = key.lower()
    return KEY_DIRECTIONS.get(key)


def direction_for_swipe(dx: float, dy: float) -> Optional[str]:
    """
    Interpret a swipe from its displacement in screen coordinates.

    The axis with the larger absolute displacement wins (ties count as
    vertical); the sign picks the direction. A zero swipe is ignored.
    """
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    if dy > 0:
        return DOWN
    if dy < 0:
        return UP
    return None
