from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from contextlib import closing
from datetime import UTC, datetime
from typing import Any

from core.errors import InvalidSearchInputError, StorageError

logger = logging.getLogger(__name__)

# Metacharacters of the SQL LIKE pattern language.
LIKE_WILDCARDS = ("%", "_")


def to_timestamp(at: datetime) -> str:
    """Normalise to a UTC ISO string so stored timestamps sort lexically."""
    at = at.replace(tzinfo=UTC) if at.tzinfo is None else at.astimezone(UTC)
    return at.isoformat(timespec="seconds")


def name_filter(fragment: str, case_insensitive: bool = True) -> tuple[str, list[Any]]:
    """Build a substring WHERE clause on ``name`` for a user-supplied fragment.

    Raises InvalidSearchInputError before any SQL is issued when the fragment
    carries LIKE wildcards.
    """
    bad = [c for c in LIKE_WILDCARDS if c in fragment]
    if bad:
        raise InvalidSearchInputError(
            f"Search text may not contain {' or '.join(repr(c) for c in bad)}"
        )
    if case_insensitive:
        return "casefold(name) LIKE ?", [f"%{fragment.casefold()}%"]
    return "instr(name, ?) > 0", [fragment]


class BaseRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _execute(self, sql: str, params: Sequence[Any] | None = None) -> sqlite3.Cursor:
        try:
            return self.conn.execute(sql, params or [])
        except sqlite3.Error as exc:
            logger.error("Statement failed: %s", exc)
            raise StorageError(str(exc)) from exc

    def _one(self, sql: str, params: Sequence[Any] | None = None) -> dict | None:
        with closing(self._execute(sql, params)) as cur:
            return cur.fetchone()

    def _all(self, sql: str, params: Sequence[Any] | None = None) -> list[dict]:
        with closing(self._execute(sql, params)) as cur:
            return cur.fetchall()

    def _write(self, sql: str, params: Sequence[Any] | None = None) -> tuple[int, int | None]:
        """Run a DML statement; return ``(rowcount, lastrowid)``."""
        with closing(self._execute(sql, params)) as cur:
            return cur.rowcount, cur.lastrowid
