"""
Video Generation Service for Snake session replays

This service generates MP4 videos from replay JSON files by:
1. Rendering each recorded tick with FrameRenderer (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg
3. Saving the video next to the replays
"""

import os
import json
import logging
import tempfile
from typing import Dict, Any, List, Tuple, Optional

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

import config
from domain.constants import GRID_SIZE
from services.frame_renderer import FrameRenderer

logger = logging.getLogger(__name__)

# Playback roughly at the starting game speed (150ms per tick)
DEFAULT_FPS = 7


class SnakeVideoGenerator:
    """Generate MP4 videos from Snake session replays"""

    def __init__(self, fps: int = DEFAULT_FPS, scale: int = 1):
        self.fps = fps
        self.scale = scale

    def _split_replay(self, replay_data: Dict[str, Any]) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """Return (metadata, rounds) and reject replays with nothing to draw."""
        metadata = replay_data.get("metadata", {}) or {}
        rounds = replay_data.get("rounds", []) or []
        if not rounds:
            raise ValueError(f"Replay {metadata.get('session_id')} has no recorded rounds")
        return metadata, rounds

    def render_frame(self, round_data: Dict[str, Any]) -> Image.Image:
        """Render a single recorded tick"""
        renderer = FrameRenderer(round_data.get("grid_size") or GRID_SIZE, draw_grid=True)
        img = renderer.render_state(round_data)
        if self.scale != 1:
            img = img.resize((img.width * self.scale, img.height * self.scale), Image.Resampling.NEAREST)
        # libx264 needs even dimensions
        even = (max(2, img.width - img.width % 2), max(2, img.height - img.height % 2))
        if even != img.size:
            img = img.crop((0, 0, even[0], even[1]))
        return img

    def render_frames(self, replay_data: Dict[str, Any]) -> List[np.ndarray]:
        _, rounds = self._split_replay(replay_data)
        frames = []
        for i, round_data in enumerate(rounds):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(rounds)}")
            frames.append(np.array(self.render_frame(round_data)))
        return frames

    def generate_video(
        self,
        replay_data: Dict[str, Any],
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate a video from a session replay

        Args:
            replay_data: Parsed replay ({"metadata": ..., "rounds": [...]})
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        metadata, rounds = self._split_replay(replay_data)
        session_id = metadata.get("session_id") or "session"
        logger.info(f"Starting video generation for session {session_id} ({len(rounds)} frames)")

        frames = self.render_frames(replay_data)

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{session_id}_replay.mp4")

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def generate_from_file(self, replay_path: str, output_dir: Optional[str] = None) -> str:
        """
        Load a replay JSON and write ``<session_id>_replay.mp4`` into output_dir.
        """
        if not os.path.exists(replay_path):
            raise FileNotFoundError(f"Replay file not found: {replay_path}")
        with open(replay_path, 'r') as f:
            replay_data = json.load(f)

        output_dir = output_dir or config.REPLAY_DIR
        os.makedirs(output_dir, exist_ok=True)
        session_id = replay_data.get("metadata", {}).get("session_id") or "session"
        output_path = os.path.join(output_dir, f"{session_id}_replay.mp4")
        return self.generate_video(replay_data, output_path=output_path)
