# filepath: src/infra/db/conn.py
from __future__ import annotations

import sqlite3
from pathlib import Path

from app.settings import get_settings
from core.errors import StorageError


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def register_functions(conn: sqlite3.Connection) -> None:
    """Add the SQL functions the repositories rely on.

    SQLite's built-in LOWER() only folds ASCII, so name searches go through
    Python's str.casefold instead.
    """
    conn.create_function("casefold", 1, _casefold, deterministic=True)


def get_conn(db_path: str | Path | None = None) -> sqlite3.Connection:
    """
    Open a sqlite3 connection with row_factory set to Row so results
    behave like dicts. Defaults to the configured database path.
    """
    if db_path is None:
        db_path = get_settings().db_path
    try:
        conn = sqlite3.connect(str(db_path), timeout=30)
    except sqlite3.Error as exc:
        raise StorageError(f"Cannot open database {db_path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON;")
    conn.execute("PRAGMA busy_timeout=30000;")
    register_functions(conn)
    return conn
