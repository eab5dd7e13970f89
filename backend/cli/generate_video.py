#!/usr/bin/env python3
"""
CLI tool to generate videos from Snake session replays

Usage:
    python generate_video.py <path_to_replay.json>

Examples:
    # Write <session_id>_replay.mp4 next to the other replays
    python generate_video.py completed_games/snake_game_abc.json

    # Custom output path and playback speed
    python generate_video.py completed_games/snake_game_abc.json --output ./my_video.mp4 --fps 10
"""

import os
import sys
import json
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.video_generator import SnakeVideoGenerator, DEFAULT_FPS  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Generate MP4 videos from Snake session replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('replay', type=str, help='Path to a replay JSON file')
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: <session_id>_replay.mp4 in the replay directory)'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--scale',
        type=int,
        default=1,
        help='Integer upscaling factor for each frame (default: 1)'
    )

    args = parser.parse_args()

    try:
        generator = SnakeVideoGenerator(fps=args.fps, scale=args.scale)
        if args.output:
            with open(args.replay, 'r') as f:
                replay_data = json.load(f)
            video_path = generator.generate_video(replay_data, output_path=args.output)
        else:
            video_path = generator.generate_from_file(
                args.replay, output_dir=os.path.dirname(os.path.abspath(args.replay))
            )
        logger.info(f"[OK] Video generated successfully: {video_path}")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
