"""
High score persistence.

The store holds one scalar keyed by a fixed name. Persistence is a
convenience: read failures fall back to 0 and write failures are dropped,
both logged as warnings.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Generator, Optional

from database import get_connection, init_database
from domain.constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)

# Opening the file can fail before sqlite does (e.g. the volume directory)
STORE_ERRORS = (sqlite3.Error, OSError)


class ScoreStore:
    """
    Base class/interface for high score storage.
    """

    def load(self) -> int:
        """Return the persisted high score, 0 if none exists."""
        raise NotImplementedError

    def save(self, value: int) -> None:
        """Persist a new high score."""
        raise NotImplementedError


class InMemoryScoreStore(ScoreStore):
    """Keeps the high score for the lifetime of the process."""

    def __init__(self, initial: int = 0):
        self.value = initial

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value


class SqliteScoreStore(ScoreStore):
    """
    Stores the high score in the ``high_scores`` table under a fixed key.
    """

    def __init__(self, db_path: Optional[str] = None, key: str = HIGH_SCORE_KEY):
        self.db_path = db_path
        self.key = key
        self._initialized = False

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Yields (connection, cursor); commits on success, rolls back on failure.
        """
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def _ensure_schema(self) -> None:
        if not self._initialized:
            init_database(self.db_path)
            self._initialized = True

    def load(self) -> int:
        try:
            self._ensure_schema()
            with self.connection(auto_commit=False) as (conn, cursor):
                cursor.execute("SELECT value FROM high_scores WHERE key = ?", (self.key,))
                row = cursor.fetchone()
            if row is None:
                return 0
            return max(0, int(row["value"]))
        except STORE_ERRORS + (TypeError, ValueError) as e:
            logger.warning(f"Could not load high score '{self.key}': {e}")
            return 0

    def save(self, value: int) -> None:
        try:
            self._ensure_schema()
            with self.connection() as (conn, cursor):
                cursor.execute(
                    """
                    INSERT INTO high_scores (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (self.key, int(value)),
                )
            logger.info(f"Saved high score {value} under '{self.key}'")
        except STORE_ERRORS as e:
            logger.warning(f"Could not save high score '{self.key}': {e}")
