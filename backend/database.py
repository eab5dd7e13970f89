"""
Database configuration and schema management for the Snake backend.

This module provides SQLite connection management with environment-aware
path selection (Railway vs local) and schema initialization. The only
persisted state is the high score table.
"""

import os
import sqlite3
from typing import Optional

import config


def get_database_path() -> str:
    """
    Determine the appropriate database path based on environment.

    Returns:
        Path to the SQLite database file.
        - SNAKE_DB_PATH when set
        - Railway (production): /data/snake.db
        - Local (development): backend/snake.db
    """
    explicit = os.getenv('SNAKE_DB_PATH')
    if explicit:
        return explicit

    if os.getenv('RAILWAY_ENVIRONMENT'):
        # Production: use volume-mounted path
        os.makedirs('/data', exist_ok=True)
        return '/data/snake.db'

    return str(config.BACKEND_DIR / 'snake.db')


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with row access by column name.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the schema. Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS high_scores (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    init_database()
    print(f"Database ready at: {get_database_path()}")
