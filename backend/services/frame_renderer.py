"""
Render a Snake board to an image with Pillow.

Colors match the browser client: bright green head, darker green body
with a white outline, and a round red food.
"""

import io
from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

Cell = Tuple[int, int]


class ColorScheme:
    """Color configuration matching the browser canvas"""

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#F0F0F0"
    SNAKE_HEAD = "#2ecc71"
    SNAKE_BODY = "#27ae60"
    SEGMENT_BORDER = "#FFFFFF"
    FOOD = "#e74c3c"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class FrameRenderer:
    """Draws one board state; coordinates are pixels on the board."""

    def __init__(self, grid_size: int, draw_grid: bool = False):
        self.grid_size = grid_size
        self.draw_grid = draw_grid

    def render(
        self,
        width: int,
        height: int,
        snake: Iterable[Cell],
        food: Optional[Cell],
    ) -> Image.Image:
        # A zero-sized board still yields a 1x1 image
        img = Image.new('RGB', (max(width, 1), max(height, 1)), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)
        g = self.grid_size

        if self.draw_grid:
            for x in range(0, width + 1, g):
                draw.line([x, 0, x, height], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
            for y in range(0, height + 1, g):
                draw.line([0, y, width, y], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

        for index, (x, y) in enumerate(snake):
            color = ColorScheme.SNAKE_HEAD if index == 0 else ColorScheme.SNAKE_BODY
            draw.rectangle(
                [x, y, x + g - 1, y + g - 1],
                fill=hex_to_rgb(color),
                outline=hex_to_rgb(ColorScheme.SEGMENT_BORDER),
            )

        if food is not None:
            fx, fy = food
            radius = g / 2 - 2
            cx, cy = fx + g / 2, fy + g / 2
            draw.ellipse(
                [cx - radius, cy - radius, cx + radius, cy + radius],
                fill=hex_to_rgb(ColorScheme.FOOD),
            )

        return img

    def render_state(self, state) -> Image.Image:
        """Render a GameState, or a replay round dict with the same keys."""
        if isinstance(state, dict):
            food = state.get("food")
            return self.render(
                state["width"],
                state["height"],
                [tuple(cell) for cell in state["snake_positions"]],
                tuple(food) if food is not None else None,
            )
        return self.render(state.width, state.height, state.snake_positions, state.food)

    def render_png(self, width: int, height: int, snake: Iterable[Cell], food: Optional[Cell]) -> bytes:
        buffer = io.BytesIO()
        self.render(width, height, snake, food).save(buffer, format="PNG")
        return buffer.getvalue()
