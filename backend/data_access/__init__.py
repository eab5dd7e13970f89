"""
Data access layer for the Snake backend.

The only persisted state is the high score.
"""

from .score_store import ScoreStore, InMemoryScoreStore, SqliteScoreStore

__all__ = [
    'ScoreStore',
    'InMemoryScoreStore',
    'SqliteScoreStore',
]
