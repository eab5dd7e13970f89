"""
Runtime configuration for the Snake backend.

Values come from the environment (a local .env file is loaded first).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BACKEND_DIR = Path(__file__).parent

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "5000"))
REPLAY_DIR = os.getenv("REPLAY_DIR", "completed_games")


def get_allowed_origins():
    """Origins allowed to call /api/* (comma-separated CORS_ALLOWED_ORIGINS)."""
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    # sensible defaults for local dev
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
