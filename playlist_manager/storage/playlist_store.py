"""Durable key-value store for user playlists, backed by SQLite.

Each user identity maps to one JSON snapshot. Every call runs in its own
transaction, so a snapshot is either fully written or not at all.
"""

import json
import sqlite3
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from playlist_manager.config.settings import STORE_TABLE, STORE_TIMEOUT_SECONDS
from playlist_manager.exceptions import StorageError


class PlaylistStore:
    """
    SQLite-backed snapshot store keyed by user identity.

    Opened at construction and closed explicitly (or by leaving the
    ``with`` block).

    Attributes:
        db_path: Path to the SQLite database file.
        conn: Active database connection, or None once closed.
    """

    def __init__(self, db_path: Path) -> None:
        """
        Open the store.

        Args:
            db_path: Path to the SQLite database file. Created if missing.

        Raises:
            StorageError: If the database cannot be opened.
        """
        self.db_path = db_path
        self.conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()
        self._connect()

    def _connect(self) -> None:
        """Establish the connection and create the table."""
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(
                self.db_path,
                timeout=STORE_TIMEOUT_SECONDS,
                isolation_level=None,
                check_same_thread=False,
            )
            self.conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {STORE_TABLE} (
                    user_id TEXT PRIMARY KEY,
                    snapshot TEXT NOT NULL,
                    updated_at INTEGER
                )
            """)
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Unable to open playlist store {self.db_path}: {e}")
            raise StorageError(f"Unable to open playlist store {self.db_path}") from e

    def _require_conn(self) -> sqlite3.Connection:
        if self.conn is None:
            raise StorageError("Playlist store is closed")
        return self.conn

    def write(self, key: str, value: Dict[str, Any]) -> None:
        """
        Persist a snapshot, replacing any previous one for ``key``.

        Args:
            key: User identity.
            value: JSON-serializable snapshot.

        Raises:
            StorageError: If the transaction fails. Nothing is written then.
        """
        payload = json.dumps(value)
        with self._lock:
            conn = self._require_conn()
            try:
                conn.execute("BEGIN IMMEDIATE")
                conn.execute(
                    f"""INSERT OR REPLACE INTO {STORE_TABLE}
                        (user_id, snapshot, updated_at) VALUES (?, ?, ?)""",
                    (key, payload, int(time.time()))
                )
                conn.execute("COMMIT")
            except sqlite3.Error as e:
                logger.error(f"Unable to save playlists of user {key}: {e}")
                if conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise StorageError(f"Unable to save playlists of user {key}") from e
        logger.debug(f"Saved playlists of user {key}")

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Load the snapshot stored for ``key``.

        Returns:
            The decoded snapshot, or None if nothing was ever written.

        Raises:
            StorageError: If the row cannot be read or decoded.
        """
        with self._lock:
            conn = self._require_conn()
            try:
                row = conn.execute(
                    f"SELECT snapshot FROM {STORE_TABLE} WHERE user_id = ?",
                    (key,)
                ).fetchone()
            except sqlite3.Error as e:
                logger.error(f"Unable to read playlists of user {key}: {e}")
                raise StorageError(f"Unable to read playlists of user {key}") from e

        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            logger.error(f"Corrupted playlist snapshot for user {key}: {e}")
            raise StorageError(f"Corrupted playlist snapshot for user {key}") from e

    def exists(self, key: str) -> bool:
        """Check if a snapshot was ever written for ``key``."""
        with self._lock:
            conn = self._require_conn()
            try:
                row = conn.execute(
                    f"SELECT 1 FROM {STORE_TABLE} WHERE user_id = ?",
                    (key,)
                ).fetchone()
            except sqlite3.Error as e:
                logger.error(f"Unable to query playlist store: {e}")
                raise StorageError("Unable to query playlist store") from e
        return row is not None

    def close(self) -> None:
        """Close the database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> "PlaylistStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
