"""
Session token storage.

Holds at most one bearer token under a fixed key. The API client only
reads it (through a token provider); the application writes it after a
successful login and clears it on logout.
"""
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from clinic_client.config import settings

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class SessionStore:
    """Interface for session token storage."""

    def get_token(self) -> Optional[str]:
        raise NotImplementedError

    def set_token(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Process-local store. Nothing survives a restart."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get_token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class SQLiteSessionStore(SessionStore):
    """SQLite-backed key/value store, persistent across process restarts."""

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize the store.

        Args:
            db_path: Path to SQLite database file. Defaults to settings.session_db_path.
        """
        self.db_path = db_path or settings.session_db_path

        # Ensure database directory exists
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_db(self) -> None:
        """Initialize schema if it doesn't exist."""
        conn = self._connect()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS session (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get_token(self) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT value FROM session WHERE key = ?", (TOKEN_KEY,)
            ).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def set_token(self, token: str) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO session (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (TOKEN_KEY, token),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Session token stored", extra={"db_path": self.db_path})

    def clear(self) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM session WHERE key = ?", (TOKEN_KEY,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Session cleared", extra={"db_path": self.db_path})


# Global store instance
_store_instance: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get or create the process-wide session store."""
    global _store_instance
    if _store_instance is None:
        _store_instance = SQLiteSessionStore()
    return _store_instance


def set_session_store(store: Optional[SessionStore]) -> None:
    """Replace the process-wide session store (None resets to the default)."""
    global _store_instance
    _store_instance = store
