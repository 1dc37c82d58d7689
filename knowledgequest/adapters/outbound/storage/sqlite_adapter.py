"""SQLite adapter storing key-value entries in a single table."""

import logging
import sqlite3
from pathlib import Path

from ....core.domain.exceptions import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class SQLiteStorageAdapter:
    """Key-value storage backed by an SQLite database file."""

    def __init__(self, db_path: str | Path = "data/knowledgequest.db") -> None:
        """Initialize the SQLite adapter.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_db()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _init_db(self) -> None:
        """Initialize the database schema."""
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                """)
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to initialize database: {e}")
            raise StorageWriteError(
                "Failed to initialize storage database",
                cause=e,
                context={"db_path": str(self.db_path)},
            ) from e

    def get_item(self, key: str) -> str | None:
        try:
            with sqlite3.connect(self.db_path) as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read key {key}: {e}")
            raise StorageReadError(
                f"Failed to read storage entry '{key}'",
                cause=e,
                context={"db_path": str(self.db_path)},
            ) from e
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value),
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to write key {key}: {e}")
            raise StorageWriteError(
                f"Failed to write storage entry '{key}'",
                cause=e,
                context={"db_path": str(self.db_path)},
            ) from e
