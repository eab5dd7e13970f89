#!/usr/bin/env python3
"""
Play one Snake session without a browser.

An autopilot player steers, ticks are stepped synchronously, the board is
printed to the terminal, and the session is saved as a replay (and
optionally an MP4).

Usage:
    python play_headless.py --width 400 --height 400 --seed 7
    python play_headless.py --max-ticks 500 --quiet --video
"""

import os
import sys
import json
import argparse
import logging
import random
from typing import Dict, Any

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from data_access.score_store import SqliteScoreStore, InMemoryScoreStore  # noqa: E402
from domain.constants import GRID_SIZE  # noqa: E402
from game_engine import SnakeGame, fit_board_to_grid  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402
from presentation.terminal_presenter import TerminalPresenter  # noqa: E402
from services.scheduler import ManualScheduler  # noqa: E402


def run_session(game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs a single headless session with the autopilot.

    Args:
        game_params: An object (like argparse.Namespace) containing
                     width, height, grid_size, max_ticks, seed, quiet,
                     db_path, no_persist, replay_dir.

    Returns:
        A dictionary summarizing the session.
    """
    rng = random.Random(game_params.seed)
    grid_size = game_params.grid_size
    board_width, board_height = fit_board_to_grid(game_params.width, game_params.height, grid_size)

    presenter = TerminalPresenter(board_width, board_height, grid_size, verbose=not game_params.quiet)
    if game_params.no_persist:
        store = InMemoryScoreStore()
    else:
        store = SqliteScoreStore(game_params.db_path)
    scheduler = ManualScheduler()

    game = SnakeGame(presenter, store, scheduler, rng=rng, record_history=True)
    player = RandomPlayer(rng=random.Random(rng.random()))

    presenter.show_start()
    presenter.show_playing()
    game.init_session(grid_size, *presenter.measure_board())

    while game.running:
        if game_params.max_ticks and game.tick_number >= game_params.max_ticks:
            print(f"Reached max ticks ({game_params.max_ticks}).")
            game.end_session()
            break
        move = player.get_move(game.get_current_state())
        if move is not None:
            game.set_pending_direction(move)
        scheduler.fire()

    replay_path = game.save_history_to_json(directory=game_params.replay_dir)
    return {
        "session_id": game.session_id,
        "final_score": game.score,
        "high_score": game.high_score,
        "ticks": game.tick_number,
        "death_reason": game.snake.death_reason,
        "final_game_speed": game.game_speed,
        "replay_path": replay_path,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Play a Snake session with the autopilot and save a replay."
    )
    parser.add_argument("--width", type=int, default=400,
                        help="Board width in pixels (rounded down to the grid)")
    parser.add_argument("--height", type=int, default=400,
                        help="Board height in pixels (rounded down to the grid)")
    parser.add_argument("--grid-size", dest="grid_size", type=int, default=GRID_SIZE,
                        help="Pixel size of one cell")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=0,
                        help="Stop after this many ticks (0 = until the snake dies)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot")
    parser.add_argument("--db-path", dest="db_path", type=str, default=None,
                        help="SQLite file for the high score (default: SNAKE_DB_PATH or backend/snake.db)")
    parser.add_argument("--no-persist", dest="no_persist", action="store_true",
                        help="Keep the high score in memory only")
    parser.add_argument("--replay-dir", dest="replay_dir", type=str, default=config.REPLAY_DIR,
                        help="Directory for the replay JSON")
    parser.add_argument("--video", action="store_true",
                        help="Also render the replay to MP4")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board every tick")

    args = parser.parse_args()
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(message)s")

    if args.grid_size <= 0:
        raise ValueError("--grid-size must be positive")
    if args.width < 4 * args.grid_size or args.height < args.grid_size:
        raise ValueError("Board must fit the starting snake (at least 4 cells wide)")

    result = run_session(args)

    if args.video:
        from services.video_generator import SnakeVideoGenerator
        result["video_path"] = SnakeVideoGenerator().generate_from_file(
            result["replay_path"], output_dir=args.replay_dir
        )

    print("\nSession Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
