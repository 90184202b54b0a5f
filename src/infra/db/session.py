from __future__ import annotations

import logging
import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Protocol

from core.errors import StorageError

logger = logging.getLogger(__name__)


class _ConnLike(Protocol):
    def commit(self) -> Any: ...
    def rollback(self) -> Any: ...


@contextmanager
def transaction(conn: _ConnLike) -> Generator[_ConnLike]:
    """
    Commit on success, roll back and re-raise on any failure. Works with
    sqlite3 connections and anything exposing commit()/rollback().
    """
    try:
        yield conn
        try:
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc
    except Exception:
        logger.debug("Rolling back transaction")
        try:
            conn.rollback()
        finally:
            raise
