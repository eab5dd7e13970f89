"""
Tests for the Pillow board renderer.
"""

import io
import os
import sys

from PIL import Image

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState
from services.frame_renderer import FrameRenderer, ColorScheme, hex_to_rgb


def test_hex_to_rgb():
    assert hex_to_rgb("#2ecc71") == (46, 204, 113)


def test_render_colors_head_body_and_food():
    renderer = FrameRenderer(20)
    img = renderer.render(200, 100, [(100, 40), (80, 40), (60, 40)], (20, 20))

    assert img.size == (200, 100)
    assert img.getpixel((110, 50)) == hex_to_rgb(ColorScheme.SNAKE_HEAD)
    assert img.getpixel((90, 50)) == hex_to_rgb(ColorScheme.SNAKE_BODY)
    # Segment outline is white
    assert img.getpixel((80, 40)) == hex_to_rgb(ColorScheme.SEGMENT_BORDER)
    assert img.getpixel((30, 30)) == hex_to_rgb(ColorScheme.FOOD)
    assert img.getpixel((5, 5)) == hex_to_rgb(ColorScheme.BACKGROUND)


def test_render_without_food():
    img = FrameRenderer(20).render(100, 100, [(40, 40)], None)
    assert img.getpixel((10, 10)) == hex_to_rgb(ColorScheme.BACKGROUND)


def test_render_state_accepts_snapshot_and_replay_round():
    renderer = FrameRenderer(20)
    state = GameState(
        tick_number=0,
        snake_positions=[(40, 40), (20, 40), (0, 40)],
        food=(60, 0),
        score=0,
        high_score=0,
        game_speed=150,
        direction="right",
        pending_direction="right",
        running=True,
        width=100,
        height=80,
        grid_size=20,
    )
    from_state = renderer.render_state(state)
    from_dict = renderer.render_state(state.to_dict())

    assert from_state.size == (100, 80)
    assert list(from_state.getdata()) == list(from_dict.getdata())


def test_render_png_bytes():
    data = FrameRenderer(20).render_png(60, 40, [(0, 0)], (20, 20))
    img = Image.open(io.BytesIO(data))
    assert img.format == "PNG"
    assert img.size == (60, 40)
