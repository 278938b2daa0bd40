"""
Ordered key-value stores backing the entity collections.

Each collection (services, reviews, users) is a mapping from an opaque
string key to a JSON-compatible record, enumerated in key order.  Two
implementations share the same interface:

``SqliteStore``
    Persists every collection in one SQLite file, so records survive a
    process restart.  Each call opens its own connection and commits
    immediately; there is no caching layer, so every read sees the
    latest committed write.

``MemoryStore``
    A dict held by the instance, used by tests and throwaway runs.

The schema is applied by ``init_db`` through a small versioned
migration list stored in the ``migrations`` table.  To change the
schema, append a migration with an incremented version number.
"""

import json
import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Protocol

from .config import settings


logger = logging.getLogger(__name__)

Record = Dict[str, Any]


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: one table for all collections, keyed by (collection, key)
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS records (
            collection TEXT NOT NULL,
            key TEXT NOT NULL,
            value TEXT NOT NULL,
            PRIMARY KEY (collection, key)
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root (the directory containing ``service_hub_api``).
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection with dict-like rows."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits and closes the connection."""
    conn = get_connection(db_path)
    try:
        cursor = conn.cursor()
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Create the ``migrations`` table and apply pending migrations."""
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current = row["version"] or 0
        for version, script in MIGRATIONS:
            if version <= current:
                continue
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            logger.info("Applied migration %s to %s", version, db_path)


class KeyValueStore(Protocol):
    """Interface the repositories expect from a collection store."""

    def insert(self, key: str, value: Record) -> None: ...

    def get(self, key: str) -> Optional[Record]: ...

    def remove(self, key: str) -> Optional[Record]: ...

    def contains(self, key: str) -> bool: ...

    def values(self) -> List[Record]: ...

    def __len__(self) -> int: ...


class SqliteStore:
    """One collection inside a SQLite database file."""

    def __init__(self, db_path: str, collection: str) -> None:
        self.db_path = db_path
        self.collection = collection
        init_db(db_path)

    def insert(self, key: str, value: Record) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO records (collection, key, value) VALUES (?, ?, ?)",
                (self.collection, key, json.dumps(value)),
            )

    def get(self, key: str) -> Optional[Record]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT value FROM records WHERE collection = ? AND key = ?",
                (self.collection, key),
            ).fetchone()
        return json.loads(row["value"]) if row else None

    def remove(self, key: str) -> Optional[Record]:
        """Delete ``key`` and return the value it held, or ``None``."""
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT value FROM records WHERE collection = ? AND key = ?",
                (self.collection, key),
            ).fetchone()
            if not row:
                return None
            cursor.execute(
                "DELETE FROM records WHERE collection = ? AND key = ?",
                (self.collection, key),
            )
        return json.loads(row["value"])

    def contains(self, key: str) -> bool:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM records WHERE collection = ? AND key = ?",
                (self.collection, key),
            ).fetchone()
        return row is not None

    def values(self) -> List[Record]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT value FROM records WHERE collection = ? ORDER BY key",
                (self.collection,),
            ).fetchall()
        return [json.loads(row["value"]) for row in rows]

    def __len__(self) -> int:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT COUNT(*) AS count FROM records WHERE collection = ?",
                (self.collection,),
            ).fetchone()
        return row["count"]


class MemoryStore:
    """Dict-backed store enumerating values in sorted key order."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    # Values are stored as JSON text; callers never get the stored object.
    def insert(self, key: str, value: Record) -> None:
        self._data[key] = json.dumps(value)

    def get(self, key: str) -> Optional[Record]:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def remove(self, key: str) -> Optional[Record]:
        raw = self._data.pop(key, None)
        return json.loads(raw) if raw is not None else None

    def contains(self, key: str) -> bool:
        return key in self._data

    def values(self) -> List[Record]:
        return [json.loads(self._data[key]) for key in sorted(self._data)]

    def __len__(self) -> int:
        return len(self._data)
